"""
Server health check methods.
"""

from typing import TYPE_CHECKING, Optional

from ..core.interfaces import HealthInterface

if TYPE_CHECKING:
    from ..sdk import DocumentAtomSdk


class HealthMethods(HealthInterface):
    """Probes the server root."""

    def __init__(self, sdk: "DocumentAtomSdk"):
        if sdk is None:
            raise ValueError("sdk is required")
        self._sdk = sdk

    async def is_healthy(self) -> bool:
        return await self._sdk.get_success(f"{self._sdk.endpoint}/")

    async def get_status(self) -> Optional[str]:
        return await self._sdk.get_text(f"{self._sdk.endpoint}/")
