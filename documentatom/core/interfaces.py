"""
Core interfaces for the DocumentAtom SDK method groups.
"""

from abc import ABC, abstractmethod
from typing import Optional, List

from .models import Atom, TypeResult


class AtomMethodsInterface(ABC):
    """Document atomization, one operation per supported format."""

    @abstractmethod
    async def process_csv(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        """Process a CSV document and extract atoms."""
        pass

    @abstractmethod
    async def process_excel(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        """Process an Excel workbook and extract atoms."""
        pass

    @abstractmethod
    async def process_html(self, data: bytes) -> Optional[List[Atom]]:
        """Process an HTML document and extract atoms."""
        pass

    @abstractmethod
    async def process_json(self, data: bytes) -> Optional[List[Atom]]:
        """Process a JSON document and extract atoms."""
        pass

    @abstractmethod
    async def process_markdown(self, data: bytes) -> Optional[List[Atom]]:
        """Process a Markdown document and extract atoms."""
        pass

    @abstractmethod
    async def process_ocr(self, data: bytes) -> Optional[List[Atom]]:
        """Run OCR over an image and extract atoms."""
        pass

    @abstractmethod
    async def process_pdf(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        """Process a PDF document and extract atoms."""
        pass

    @abstractmethod
    async def process_png(self, data: bytes) -> Optional[List[Atom]]:
        """Process a PNG image and extract atoms."""
        pass

    @abstractmethod
    async def process_powerpoint(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        """Process a PowerPoint presentation and extract atoms."""
        pass

    @abstractmethod
    async def process_rtf(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        """Process an RTF document and extract atoms."""
        pass

    @abstractmethod
    async def process_text(self, data: bytes) -> Optional[List[Atom]]:
        """Process a plain text document and extract atoms."""
        pass

    @abstractmethod
    async def process_word(self, data: bytes, extract_ocr: bool = False) -> Optional[List[Atom]]:
        """Process a Word document and extract atoms."""
        pass

    @abstractmethod
    async def process_xml(self, data: bytes) -> Optional[List[Atom]]:
        """Process an XML document and extract atoms."""
        pass


class TypeDetectionInterface(ABC):
    """Document type detection."""

    @abstractmethod
    async def detect_type(self, data: bytes, content_type: Optional[str] = None) -> Optional[TypeResult]:
        """Detect the MIME type, extension and document type of ``data``."""
        pass


class HealthInterface(ABC):
    """Server health probes."""

    @abstractmethod
    async def is_healthy(self) -> bool:
        """Return True when the server answers with a 2xx status."""
        pass

    @abstractmethod
    async def get_status(self) -> Optional[str]:
        """Return the raw body served at the server root."""
        pass
