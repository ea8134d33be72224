"""
Document type detection methods.
"""

import json
from typing import TYPE_CHECKING, Any, Optional

from aiohttp import hdrs

from ..core.enums import DocumentType, Severity
from ..core.exceptions import ResponseDeserializationError, ValidationError
from ..core.interfaces import TypeDetectionInterface
from ..core.models import TypeResult

if TYPE_CHECKING:
    from ..sdk import DocumentAtomSdk


class TypeDetectionMethods(TypeDetectionInterface):
    """Posts documents to ``/typedetect``."""

    def __init__(self, sdk: "DocumentAtomSdk"):
        if sdk is None:
            raise ValueError("sdk is required")
        self._sdk = sdk

    async def detect_type(self, data: bytes, content_type: Optional[str] = None) -> Optional[TypeResult]:
        """Classify ``data``; ``content_type`` overrides the octet-stream default.

        Unlike the atomization calls, a body that cannot be parsed as a
        ``TypeResult`` is logged and reported as None instead of raised.
        """
        if data is None:
            raise ValidationError("Request payload is required", field="data")

        url = f"{self._sdk.endpoint}/typedetect"
        response = await self._sdk.send(
            hdrs.METH_POST,
            url,
            data,
            content_type=content_type or "application/octet-stream"
        )

        if response is None or not response.ok:
            return None

        if not response.body:
            self._sdk.log(Severity.DEBUG, "Empty response body, returning null")
            return None

        try:
            result = self._sdk.deserialize(url, response.body, TypeResult)
        except ResponseDeserializationError as e:
            self._sdk.log(Severity.ERROR, f"JSON deserialization error: {e.__cause__ or e}")
            self._sdk.log(Severity.ERROR, f"Raw response data: {response.body}")
            return None

        declared = _declared_type(response.body)
        if declared is not None and DocumentType.match(declared) is None:
            self._sdk.log(Severity.WARN, f"Unrecognized document type {declared!r}, reporting Unknown")
        return result


def _declared_type(body: str) -> Any:
    """Raw ``Type`` value of an already validated TypeResult body."""
    data = json.loads(body)
    if not isinstance(data, dict):
        return None
    for key, value in data.items():
        if key.lower() == "type":
            return value
    return None
