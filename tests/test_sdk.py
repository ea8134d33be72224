import asyncio
from unittest.mock import Mock

import pytest

from documentatom.config import DocumentAtomSettings
from documentatom.core.enums import AtomFormat, DocumentType, Severity
from documentatom.core.exceptions import ConfigurationError, ValidationError, ResponseDeserializationError
from documentatom.core.models import TypeResult
from documentatom.sdk import DocumentAtomSdk


class TestConstruction:

    def test_trailing_slashes_are_stripped(self):
        sdk = DocumentAtomSdk("http://localhost:8000//")
        assert sdk.endpoint == "http://localhost:8000"
        assert sdk.timeout_ms == 300000
        assert sdk.log_requests is False
        assert sdk.log_responses is False

    def test_empty_endpoint_raises(self):
        with pytest.raises(ConfigurationError, match="endpoint is required"):
            DocumentAtomSdk("")

    def test_endpoint_can_be_changed(self):
        sdk = DocumentAtomSdk("http://a:8000")
        sdk.endpoint = "http://b:9000/"
        assert sdk.endpoint == "http://b:9000"
        assert sdk.atom.build_url(AtomFormat.TEXT) == "http://b:9000/atom/text"

    def test_from_settings(self):
        settings = DocumentAtomSettings(
            endpoint="https://atoms.example.com/",
            access_key="secret",
            timeout_ms=1000,
            log_requests=True,
        )
        sink = Mock()
        sdk = DocumentAtomSdk.from_settings(settings, logger=sink)

        assert sdk.endpoint == "https://atoms.example.com"
        assert sdk.access_key == "secret"
        assert sdk.timeout_ms == 1000
        assert sdk.log_requests is True
        assert sdk.log_responses is False
        assert sdk.logger is sink

    def test_log_without_sink_is_a_no_op(self):
        sdk = DocumentAtomSdk("http://localhost:8000")
        sdk.log(Severity.ERROR, "nobody listens")

    def test_empty_messages_are_not_forwarded(self, log_sink):
        sdk = DocumentAtomSdk("http://localhost:8000", logger=log_sink)
        sdk.log(Severity.INFO, "")
        sdk.log(Severity.INFO, "kept")
        log_sink.assert_called_once_with(Severity.INFO, "kept")


class TestTypedRequests:

    @pytest.mark.asyncio
    async def test_get_deserializes_success_body(self, server, sdk):
        server.reply("GET", "/info", json_body={"MimeType": "text/plain", "Extension": "txt", "Type": "Text"})

        result = await sdk.get(f"{sdk.endpoint}/info", TypeResult)

        assert result == TypeResult(mime_type="text/plain", extension="txt", type=DocumentType.TEXT)

    @pytest.mark.asyncio
    async def test_get_returns_none_on_404(self, server, sdk, sent_messages):
        server.reply("GET", "/info", status=404, json_body={"MimeType": "text/plain"})

        assert await sdk.get(f"{sdk.endpoint}/info", TypeResult) is None
        assert any(m.startswith("Non-success from") for m in sent_messages(Severity.WARN))

    @pytest.mark.asyncio
    async def test_post_sends_octet_stream_without_auth(self, server, sdk):
        server.reply("POST", "/echo", json_body={"Type": "Pdf"})

        result = await sdk.post(f"{sdk.endpoint}/echo", b"%PDF-1.4", TypeResult)

        assert result.type is DocumentType.PDF
        request = server.last_request
        assert request.body == b"%PDF-1.4"
        assert request.headers["Content-Type"] == "application/octet-stream"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_post_sends_bearer_token_when_configured(self, server, sdk):
        server.reply("POST", "/echo", json_body={"Type": "Pdf"})
        sdk.access_key = "s3cret"

        await sdk.post(f"{sdk.endpoint}/echo", b"data", TypeResult)

        assert server.last_request.headers["Authorization"] == "Bearer s3cret"

    @pytest.mark.asyncio
    async def test_post_requires_payload(self, sdk):
        with pytest.raises(ValidationError, match="payload is required"):
            await sdk.post(f"{sdk.endpoint}/echo", None, TypeResult)

    @pytest.mark.asyncio
    async def test_post_requires_url(self, sdk):
        with pytest.raises(ConfigurationError):
            await sdk.post("", b"data", TypeResult)

    @pytest.mark.asyncio
    async def test_empty_success_body_returns_none(self, server, sdk, sent_messages):
        server.reply("POST", "/empty", status=200)

        assert await sdk.post(f"{sdk.endpoint}/empty", b"data", TypeResult) is None
        assert "Empty response body, returning null" in sent_messages(Severity.DEBUG)
        assert sent_messages(Severity.WARN) == []

    @pytest.mark.asyncio
    async def test_deserialization_failure_propagates(self, server, sdk):
        server.reply("POST", "/broken", body=b"{not json")

        with pytest.raises(ResponseDeserializationError) as exc_info:
            await sdk.post(f"{sdk.endpoint}/broken", b"data", TypeResult)

        assert exc_info.value.url == f"{sdk.endpoint}/broken"
        assert exc_info.value.response_body == "{not json"
        assert exc_info.value.error_code == "DESERIALIZATION_ERROR"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"null", b"  null\n"])
    async def test_json_null_body_returns_none(self, server, sdk, sent_messages, body):
        server.reply("POST", "/nothing", body=body)

        assert await sdk.post(f"{sdk.endpoint}/nothing", b"data", TypeResult) is None
        assert "Response body is JSON null, returning null" in sent_messages(Severity.DEBUG)

    @pytest.mark.asyncio
    async def test_chunked_body_is_reassembled(self, server, sdk, sent_messages):
        server.reply("GET", "/chunked", chunks=[b'{"MimeType": "app', b'lication/pdf", "Type": "Pdf"}'])

        result = await sdk.get(f"{sdk.endpoint}/chunked", TypeResult)

        assert result.mime_type == "application/pdf"
        assert result.type is DocumentType.PDF
        assert f"reading chunked response from {sdk.endpoint}/chunked" in sent_messages(Severity.DEBUG)


class TestRawRequests:

    @pytest.mark.asyncio
    async def test_get_text_returns_raw_body(self, server, sdk):
        server.reply("GET", "/", body=b"DocumentAtom server is running")

        assert await sdk.get_text(f"{sdk.endpoint}/") == "DocumentAtom server is running"

    @pytest.mark.asyncio
    async def test_get_text_returns_none_on_failure(self, server, sdk):
        server.reply("GET", "/", status=503, body=b"down")

        assert await sdk.get_text(f"{sdk.endpoint}/") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,expected", [(200, True), (204, True), (500, False), (404, False)])
    async def test_get_success(self, server, sdk, status, expected):
        server.reply("GET", "/", status=status)

        assert await sdk.get_success(f"{sdk.endpoint}/") is expected


class TestTransportFailures:

    @pytest.mark.asyncio
    async def test_unreachable_server_returns_none(self, log_sink, sent_messages):
        sdk = DocumentAtomSdk("http://127.0.0.1:1", logger=log_sink)

        assert await sdk.get_text(f"{sdk.endpoint}/") is None
        assert await sdk.get_success(f"{sdk.endpoint}/") is False
        assert await sdk.post(f"{sdk.endpoint}/atom/text", b"x", TypeResult) is None

        warnings = sent_messages(Severity.WARN)
        assert len(warnings) == 3
        assert all(m.startswith("No response from http://127.0.0.1:1") for m in warnings)

    @pytest.mark.asyncio
    async def test_timeout_returns_none(self, server, sdk, sent_messages):
        server.reply("GET", "/slow", json_body={"Type": "Pdf"}, delay=1.0)
        sdk.timeout_ms = 100

        assert await sdk.get(f"{sdk.endpoint}/slow", TypeResult) is None
        assert any(m.startswith("No response from") for m in sent_messages(Severity.WARN))

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, server, sdk):
        server.reply("GET", "/slow", json_body={"Type": "Pdf"}, delay=1.0)

        task = asyncio.create_task(sdk.get(f"{sdk.endpoint}/slow", TypeResult))
        await asyncio.sleep(0.2)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task


class TestRequestResponseLogging:

    @pytest.mark.asyncio
    async def test_logging_flags_off(self, server, sdk, sent_messages):
        server.reply("POST", "/echo", json_body={"Type": "Pdf"})

        await sdk.post(f"{sdk.endpoint}/echo", b"12345", TypeResult)

        debug = sent_messages(Severity.DEBUG)
        assert not any("request to" in m for m in debug)
        assert not any(m.startswith("Response from") for m in debug)

    @pytest.mark.asyncio
    async def test_logging_flags_on(self, server, sdk, sent_messages):
        server.reply("POST", "/echo", json_body={"Type": "Pdf"})
        sdk.log_requests = True
        sdk.log_responses = True

        await sdk.post(f"{sdk.endpoint}/echo", b"12345", TypeResult)

        debug = sent_messages(Severity.DEBUG)
        assert f"POST request to {sdk.endpoint}/echo with 5 bytes" in debug
        assert f'Response from {sdk.endpoint}/echo (status 200): {{"Type": "Pdf"}}' in debug

    @pytest.mark.asyncio
    async def test_success_probe_logs_status_only(self, server, sdk, sent_messages):
        server.reply("GET", "/", body=b"hello")
        sdk.log_responses = True

        await sdk.get_success(f"{sdk.endpoint}/")

        assert f"Response from {sdk.endpoint}/ (status 200)" in sent_messages(Severity.DEBUG)
