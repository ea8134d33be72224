"""
Document atomization methods.
"""

from typing import TYPE_CHECKING, Optional, List

from ..core.enums import AtomFormat
from ..core.extraction import ExtractionResult
from ..core.interfaces import AtomMethodsInterface
from ..core.models import Atom, AtomList

if TYPE_CHECKING:
    from ..sdk import DocumentAtomSdk


class AtomMethods(AtomMethodsInterface):
    """Posts documents to ``/atom/<format>`` and returns the extracted atoms."""

    def __init__(self, sdk: "DocumentAtomSdk"):
        if sdk is None:
            raise ValueError("sdk is required")
        self._sdk = sdk

    def build_url(self, fmt: AtomFormat, extract_ocr: bool = False) -> str:
        """URL for a format; the OCR flag is only sent where it is accepted."""
        url = f"{self._sdk.endpoint}/atom/{fmt.value}"
        if extract_ocr and fmt.supports_ocr:
            url += "?ocr=true"
        return url

    async def _process(self, fmt: AtomFormat, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        return await self._sdk.post(self.build_url(fmt, extract_ocr), data, AtomList)

    async def process_csv(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.CSV, data, extract_ocr)

    async def process_excel(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.EXCEL, data, extract_ocr)

    async def process_html(self, data: bytes) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.HTML, data)

    async def process_json(self, data: bytes) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.JSON, data)

    async def process_markdown(self, data: bytes) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.MARKDOWN, data)

    async def process_ocr(self, data: bytes) -> Optional[List[Atom]]:
        """OCR an image; the server's extraction result is reshaped into atoms."""
        extraction = await self._sdk.post(self.build_url(AtomFormat.OCR), data, ExtractionResult)
        if extraction is None:
            return None
        return extraction.to_atoms()

    async def process_pdf(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.PDF, data, extract_ocr)

    async def process_png(self, data: bytes) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.PNG, data)

    async def process_powerpoint(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.POWERPOINT, data, extract_ocr)

    async def process_rtf(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.RTF, data, extract_ocr)

    async def process_text(self, data: bytes) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.TEXT, data)

    async def process_word(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.WORD, data, extract_ocr)

    async def process_xml(self, data: bytes) -> Optional[List[Atom]]:
        return await self._process(AtomFormat.XML, data)
