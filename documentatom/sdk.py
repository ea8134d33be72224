"""
DocumentAtom SDK client: transport for the DocumentAtom server.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional, Any, Callable

import aiohttp
from aiohttp import hdrs
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import DocumentAtomSettings, DEFAULT_TIMEOUT_MS
from .core.enums import Severity
from .core.exceptions import ConfigurationError, ValidationError, ResponseDeserializationError
from .methods import AtomMethods, TypeDetectionMethods, HealthMethods
from .reader import read_response

OCTET_STREAM = "application/octet-stream"

LogSink = Callable[[Severity, str], None]


@dataclass
class RawResponse:
    """Status and decoded body of one completed exchange."""

    status: int
    body: Optional[str]
    content_length: Optional[int] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299


class DocumentAtomSdk:
    """Client for the DocumentAtom document atomization server.

    Every call performs a single HTTP exchange in its own session. Transport
    failures (no response, timeouts, non-2xx statuses) are reported through
    the log sink and surface as ``None``/``False``; they are not raised.
    """

    def __init__(
        self,
        endpoint: str,
        access_key: Optional[str] = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        log_requests: bool = False,
        log_responses: bool = False,
        logger: Optional[LogSink] = None
    ):
        self.endpoint = endpoint
        self.access_key = access_key
        self.timeout_ms = timeout_ms
        self.log_requests = log_requests
        self.log_responses = log_responses
        self.logger = logger

        self.atom = AtomMethods(self)
        self.type_detection = TypeDetectionMethods(self)
        self.health = HealthMethods(self)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @endpoint.setter
    def endpoint(self, value: str) -> None:
        if not value:
            raise ConfigurationError("DocumentAtom endpoint is required", config_key="endpoint")
        self._endpoint = value.rstrip("/")

    @classmethod
    def from_settings(cls, settings: DocumentAtomSettings, logger: Optional[LogSink] = None) -> "DocumentAtomSdk":
        """Create a client from loaded settings."""
        return cls(
            endpoint=settings.endpoint,
            access_key=settings.access_key,
            timeout_ms=settings.timeout_ms,
            log_requests=settings.log_requests,
            log_responses=settings.log_responses,
            logger=logger,
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, logger: Optional[LogSink] = None) -> "DocumentAtomSdk":
        """Create a client from ``DOCUMENTATOM_*`` environment variables."""
        return cls.from_settings(DocumentAtomSettings.from_env(env_file), logger=logger)

    def log(self, severity: Severity, message: str) -> None:
        """Forward a message to the configured sink, if any."""
        if message and self.logger is not None:
            self.logger(severity, message)

    def _headers(self, content_type: Optional[str] = None) -> dict:
        headers = {}
        if content_type:
            headers[hdrs.CONTENT_TYPE] = content_type
        if self.access_key:
            headers[hdrs.AUTHORIZATION] = f"Bearer {self.access_key}"
        return headers

    async def send(
        self,
        method: str,
        url: str,
        data: Optional[bytes] = None,
        content_type: Optional[str] = None,
        read_body: bool = True
    ) -> Optional[RawResponse]:
        """Perform one exchange; returns None when no response arrived."""
        if not url:
            raise ConfigurationError("Request URL is required", config_key="url")

        if self.log_requests:
            if data is not None:
                self.log(Severity.DEBUG, f"{method} request to {url} with {len(data)} bytes")
            else:
                self.log(Severity.DEBUG, f"{method} request to {url}")

        timeout = aiohttp.ClientTimeout(total=self.timeout_ms / 1000)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(
                    method,
                    url,
                    data=data,
                    headers=self._headers(content_type)
                ) as response:
                    body = await read_response(response, url, self.log) if read_body else None
                    result = RawResponse(
                        status=response.status,
                        body=body,
                        content_length=response.content_length
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.log(Severity.WARN, f"No response from {url}: {str(e) or type(e).__name__}")
            return None

        if self.log_responses:
            if read_body:
                self.log(Severity.DEBUG, f"Response from {url} (status {result.status}): {result.body}")
            else:
                self.log(Severity.DEBUG, f"Response from {url} (status {result.status})")

        if result.ok:
            self.log(Severity.DEBUG, f"Success from {url}: {result.status}, {result.content_length} bytes")
        else:
            self.log(Severity.WARN, f"Non-success from {url}: {result.status}, {result.content_length} bytes")

        return result

    def deserialize(self, url: str, body: str, model: Any) -> Any:
        """Parse a JSON body into ``model``; raises ResponseDeserializationError.

        A body that is the JSON literal ``null`` yields None.
        """
        target = getattr(model, "__name__", None) or str(model)
        self.log(Severity.DEBUG, "Deserializing response body")
        if body.strip() == "null":
            self.log(Severity.DEBUG, "Response body is JSON null, returning null")
            return None
        try:
            if isinstance(model, type) and issubclass(model, BaseModel):
                return model.model_validate_json(body)
            adapter = model if isinstance(model, TypeAdapter) else TypeAdapter(model)
            return adapter.validate_json(body)
        except PydanticValidationError as e:
            raise ResponseDeserializationError(
                f"Unable to deserialize response from {url} as {target}: {e}",
                url=url,
                response_body=body,
                target=target
            ) from e

    def _typed_result(self, url: str, response: Optional[RawResponse], model: Any) -> Any:
        if response is None or not response.ok:
            return None
        if not response.body:
            self.log(Severity.DEBUG, "Empty response body, returning null")
            return None
        return self.deserialize(url, response.body, model)

    async def post(self, url: str, data: bytes, model: Any) -> Optional[Any]:
        """POST ``data`` as an octet stream and deserialize the reply."""
        if data is None:
            raise ValidationError("Request payload is required", field="data")
        response = await self.send(hdrs.METH_POST, url, data, content_type=OCTET_STREAM)
        return self._typed_result(url, response, model)

    async def get(self, url: str, model: Any) -> Optional[Any]:
        """GET ``url`` and deserialize the reply."""
        response = await self.send(hdrs.METH_GET, url)
        return self._typed_result(url, response, model)

    async def get_text(self, url: str) -> Optional[str]:
        """GET ``url`` and return the raw body."""
        response = await self.send(hdrs.METH_GET, url)
        if response is None or not response.ok:
            return None
        return response.body

    async def get_success(self, url: str) -> bool:
        """GET ``url`` and report whether the status was 2xx."""
        response = await self.send(hdrs.METH_GET, url, read_body=False)
        return response is not None and response.ok
