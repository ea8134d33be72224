"""
Response body reading for the DocumentAtom SDK.

Bodies sent with chunked transfer encoding are reassembled chunk by chunk
until the final chunk; all other bodies are read and decoded in one go.
"""

import codecs
from contextlib import aclosing
from dataclasses import dataclass
from typing import AsyncIterable, AsyncIterator, Callable, Optional

import aiohttp
from aiohttp import hdrs

from .core.enums import Severity


@dataclass(frozen=True)
class ChunkData:
    """One chunk of a chunked response body."""

    data: bytes = b""
    is_final: bool = False


def is_chunked(response: aiohttp.ClientResponse) -> bool:
    """Whether the response uses chunked transfer encoding."""
    encoding = response.headers.get(hdrs.TRANSFER_ENCODING, "")
    return "chunked" in encoding.lower()


async def read_chunks(chunks: AsyncIterable[ChunkData]) -> str:
    """Join chunk payloads as UTF-8 text, stopping after the final chunk."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    parts = []

    async for chunk in chunks:
        if chunk.data:
            parts.append(decoder.decode(chunk.data))
        if chunk.is_final:
            break

    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)


async def iter_response_chunks(response: aiohttp.ClientResponse) -> AsyncIterator[ChunkData]:
    """Yield the body of a chunked response as ``ChunkData`` items."""
    async for data, _ in response.content.iter_chunks():
        yield ChunkData(data=data, is_final=response.content.at_eof())
    # Stream exhausted without a chunk observed at EOF
    yield ChunkData(is_final=True)


async def read_response(
    response: Optional[aiohttp.ClientResponse],
    url: str,
    log: Optional[Callable[[Severity, str], None]] = None
) -> Optional[str]:
    """Read a response into a single string body."""
    if response is None:
        return None

    if is_chunked(response):
        if log:
            log(Severity.DEBUG, "reading chunked response from " + url)
        async with aclosing(iter_response_chunks(response)) as chunks:
            return await read_chunks(chunks)

    body = await response.read()
    return body.decode("utf-8", errors="replace")
