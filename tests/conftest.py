"""
Pytest configuration and fixtures for DocumentAtom SDK tests.
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from unittest.mock import Mock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from documentatom.sdk import DocumentAtomSdk


@dataclass
class Reply:
    """Canned server reply."""
    status: int = 200
    body: bytes = b""
    chunks: Optional[List[bytes]] = None
    content_type: str = "application/json"
    delay: float = 0.0


@dataclass
class RecordedRequest:
    """Request as received by the fake server."""
    method: str
    path: str
    query: Dict[str, str]
    headers: Dict[str, str]
    body: bytes


@dataclass
class FakeDocumentAtomServer:
    """In-process stand-in for a DocumentAtom server."""
    url: str = ""
    replies: Dict[Tuple[str, str], Reply] = field(default_factory=dict)
    requests: List[RecordedRequest] = field(default_factory=list)

    def reply(self, method: str, path: str, status: int = 200, json_body=None,
              body: Optional[bytes] = None, chunks: Optional[List[bytes]] = None,
              delay: float = 0.0, content_type: str = "application/json") -> None:
        if json_body is not None:
            body = json.dumps(json_body).encode("utf-8")
        self.replies[(method, path)] = Reply(
            status=status,
            body=body or b"",
            chunks=chunks,
            content_type=content_type,
            delay=delay
        )

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.StreamResponse:
        self.requests.append(RecordedRequest(
            method=request.method,
            path=request.path,
            query=dict(request.query),
            headers=dict(request.headers),
            body=await request.read()
        ))

        reply = self.replies.get((request.method, request.path), Reply(status=404, body=b"Not found"))
        if reply.delay:
            await asyncio.sleep(reply.delay)

        if reply.chunks is not None:
            response = web.StreamResponse(status=reply.status)
            response.content_type = reply.content_type
            response.enable_chunked_encoding()
            await response.prepare(request)
            for chunk in reply.chunks:
                await response.write(chunk)
            await response.write_eof()
            return response

        response = web.Response(status=reply.status, body=reply.body)
        response.headers["Content-Type"] = reply.content_type
        return response


@pytest_asyncio.fixture
async def server():
    """Running fake DocumentAtom server."""
    fake = FakeDocumentAtomServer()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", fake.handle)

    test_server = TestServer(app)
    await test_server.start_server()
    fake.url = str(test_server.make_url("/")).rstrip("/")
    try:
        yield fake
    finally:
        await test_server.close()


@pytest.fixture
def log_sink():
    """Mock (severity, message) sink."""
    return Mock()


@pytest.fixture
def sdk(server, log_sink):
    """SDK pointed at the fake server, with a trailing slash to be stripped."""
    return DocumentAtomSdk(server.url + "/", logger=log_sink)


@pytest.fixture
def text_atom_json():
    return {
        "GUID": "5b7c2d0e-0000-4000-8000-000000000001",
        "Type": "Text",
        "PageNumber": 1,
        "Position": 0,
        "Length": 11,
        "Text": "Hello world",
        "BoundingBox": {"Left": 10, "Top": 20, "Width": 100, "Height": 12},
    }


@pytest.fixture
def table_atom_json():
    return {
        "Type": "Table",
        "Position": 1,
        "Length": 4,
        "Rows": 2,
        "Columns": 2,
        "Table": {
            "Name": "Sheet1",
            "Columns": [{"Name": "A", "Type": "String"}, {"Name": "B", "Type": "String"}],
            "Rows": [{"A": "1", "B": "2"}, {"A": "3", "B": "4"}],
        },
    }


@pytest.fixture
def list_atom_json():
    return {
        "Type": "List",
        "Position": 2,
        "Length": 6,
        "OrderedList": None,
        "UnorderedList": ["one", "two"],
    }


@pytest.fixture
def atoms_json(text_atom_json, table_atom_json, list_atom_json):
    return [text_atom_json, table_atom_json, list_atom_json]


@pytest.fixture
def extraction_json():
    return {
        "TextElements": [
            {"Text": "hi", "Bounds": {"X": 1, "Y": 2, "Width": 30, "Height": 10, "IsEmpty": False}},
            {"Text": "", "Bounds": {"X": 0, "Y": 0, "Width": 0, "Height": 0}},
        ],
        "Tables": [],
        "Lists": [
            {"Items": ["ab", "cd"], "IsOrdered": False, "Bounds": {"X": 5, "Y": 50, "Width": 40, "Height": 20}},
        ],
    }


@pytest.fixture
def sent_messages(log_sink):
    """Messages passed to the mock sink, optionally filtered by severity."""
    def collect(severity=None) -> List[str]:
        return [
            call.args[1] for call in log_sink.call_args_list
            if severity is None or call.args[0] == severity
        ]
    return collect
