"""
Enumerations for the DocumentAtom SDK.
"""

from enum import Enum, IntEnum


class _NamedEnum(Enum):
    """Enum serialized by name and matched case-insensitively on input."""

    @classmethod
    def match(cls, value):
        """Member whose value or name equals ``value`` ignoring case, else None."""
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted or member.name.lower() == wanted:
                    return member
        return None

    @classmethod
    def _missing_(cls, value):
        return cls.match(value)


class Severity(IntEnum):
    """Log message severity passed to the SDK log sink."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    ALERT = 4
    CRITICAL = 5
    EMERGENCY = 6

    def __str__(self) -> str:
        return self.name.capitalize()


class AtomType(_NamedEnum):
    """Kind of content carried by an atom."""
    TEXT = "Text"
    IMAGE = "Image"
    BINARY = "Binary"
    TABLE = "Table"
    LIST = "List"
    HYPERLINK = "Hyperlink"
    CODE = "Code"
    META = "Meta"
    UNKNOWN = "Unknown"


class DocumentType(_NamedEnum):
    """Document classification returned by type detection."""
    UNKNOWN = "Unknown"
    BMP = "Bmp"
    CSV = "Csv"
    DAT = "Dat"
    DOCX = "Docx"
    GIF = "Gif"
    GZIP = "Gzip"
    HTML = "Html"
    ICO = "Ico"
    JPEG = "Jpeg"
    JSON = "Json"
    KEYNOTE = "Keynote"
    MARKDOWN = "Markdown"
    NUMBERS = "Numbers"
    PAGES = "Pages"
    PARQUET = "Parquet"
    PDF = "Pdf"
    PNG = "Png"
    POSTSCRIPT = "PostScript"
    PPTX = "Pptx"
    RTF = "Rtf"
    SQLITE = "Sqlite"
    SVG = "Svg"
    TAR = "Tar"
    TEXT = "Text"
    TIFF = "Tiff"
    TSV = "Tsv"
    WEBP = "WebP"
    XLSX = "Xlsx"
    XML = "Xml"
    ZIP = "Zip"

    @classmethod
    def _missing_(cls, value):
        # Classifications added server-side after this release still parse
        return cls.match(value) or cls.UNKNOWN


class AtomFormat(Enum):
    """Document formats accepted by the atomization endpoints."""
    CSV = "csv"
    EXCEL = "excel"
    HTML = "html"
    JSON = "json"
    MARKDOWN = "markdown"
    OCR = "ocr"
    PDF = "pdf"
    PNG = "png"
    POWERPOINT = "powerpoint"
    RTF = "rtf"
    TEXT = "text"
    WORD = "word"
    XML = "xml"

    @property
    def supports_ocr(self) -> bool:
        """Whether the endpoint accepts the ``ocr=true`` query flag."""
        return self in _OCR_CAPABLE_FORMATS


_OCR_CAPABLE_FORMATS = frozenset({
    AtomFormat.CSV,
    AtomFormat.EXCEL,
    AtomFormat.PDF,
    AtomFormat.POWERPOINT,
    AtomFormat.RTF,
    AtomFormat.WORD,
})
