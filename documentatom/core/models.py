"""
Core data models for the DocumentAtom SDK.

Models mirror the JSON produced by the DocumentAtom server: PascalCase field
names on the wire, matched case-insensitively on input, with enumerators
carried by name. An atom is a tagged union keyed on its ``Type`` so that
each variant only carries the payload that belongs to it.
"""

from typing import Annotated, Any, ClassVar, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_pascal

from .enums import AtomType, DocumentType


def _fold(name: str) -> str:
    return name.replace("_", "").lower()


class AtomModel(BaseModel):
    """Base model applying the server's JSON conventions."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        """Map incoming keys onto field names regardless of case."""
        if not isinstance(data, dict):
            return data

        lookup: Dict[str, str] = {}
        for name, info in cls.model_fields.items():
            lookup[_fold(name)] = name
            if info.alias:
                lookup[_fold(info.alias)] = name

        normalized = {}
        for key, value in data.items():
            if isinstance(key, str) and _fold(key) in lookup:
                normalized[lookup[_fold(key)]] = value
            else:
                normalized[key] = value
        return normalized

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize using the server's field names."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class BoundingBox(AtomModel):
    """Rectangular region locating an element on a page or image."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @classmethod
    def from_rectangle(cls, rect) -> Optional["BoundingBox"]:
        """Build a bounding box from an extraction rectangle."""
        if rect is None:
            return None
        return cls(left=rect.x, top=rect.y, width=rect.width, height=rect.height)


class SerializableColumn(AtomModel):
    """Column definition within a serialized data table."""

    name: str
    type: str = "String"


class SerializableDataTable(AtomModel):
    """Tabular payload of a table atom."""

    name: Optional[str] = None
    columns: List[SerializableColumn] = Field(default_factory=list)
    rows: List[Dict[str, Any]] = Field(default_factory=list)


class AtomBase(AtomModel):
    """Fields shared by every atom variant."""

    guid: Optional[str] = None
    type: AtomType
    page_number: Optional[int] = None
    position: int = 0
    length: int = 0
    md5_hash: Optional[bytes] = Field(None, alias="MD5Hash")
    sha1_hash: Optional[bytes] = Field(None, alias="SHA1Hash")
    sha256_hash: Optional[bytes] = Field(None, alias="SHA256Hash")
    bounding_box: Optional[BoundingBox] = None
    quarks: Optional[List["Atom"]] = None

    allowed_types: ClassVar[frozenset] = frozenset()

    @field_validator("type")
    @classmethod
    def _check_type(cls, v: AtomType) -> AtomType:
        allowed = cls.allowed_types
        if allowed and v not in allowed:
            raise ValueError(f"{cls.__name__} cannot carry atom type {v.value}")
        return v


class TextAtom(AtomBase):
    """Run of text, code, hyperlink or metadata."""

    allowed_types = frozenset({AtomType.TEXT, AtomType.CODE, AtomType.HYPERLINK, AtomType.META})

    type: AtomType = AtomType.TEXT
    text: str = ""
    header_level: Optional[int] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def _none_text(cls, v):
        return "" if v is None else v


class TableAtom(AtomBase):
    """Table with its dimensions and cell data."""

    allowed_types = frozenset({AtomType.TABLE})

    type: AtomType = AtomType.TABLE
    rows: int = 0
    columns: int = 0
    table: Optional[SerializableDataTable] = None


class UnorderedListAtom(AtomBase):
    """Bulleted list."""

    allowed_types = frozenset({AtomType.LIST})

    type: AtomType = AtomType.LIST
    unordered_list: List[str]


class OrderedListAtom(AtomBase):
    """Numbered list."""

    allowed_types = frozenset({AtomType.LIST})

    type: AtomType = AtomType.LIST
    ordered_list: List[str]


class BinaryAtom(AtomBase):
    """Image or opaque binary content."""

    allowed_types = frozenset({AtomType.IMAGE, AtomType.BINARY})

    type: AtomType = AtomType.BINARY
    binary: Optional[bytes] = None
    text: Optional[str] = None


class UnknownAtom(AtomBase):
    """Atom the server could not classify."""

    allowed_types = frozenset({AtomType.UNKNOWN})

    type: AtomType = AtomType.UNKNOWN


_TAG_BY_TYPE = {
    AtomType.TEXT: "text",
    AtomType.CODE: "text",
    AtomType.HYPERLINK: "text",
    AtomType.META: "text",
    AtomType.TABLE: "table",
    AtomType.IMAGE: "binary",
    AtomType.BINARY: "binary",
    AtomType.UNKNOWN: "unknown",
}


def _atom_tag(value: Any) -> Optional[str]:
    """Pick the atom variant for raw JSON data or an existing model."""
    if isinstance(value, UnorderedListAtom):
        return "unordered_list"
    if isinstance(value, OrderedListAtom):
        return "ordered_list"
    if isinstance(value, AtomBase):
        return _TAG_BY_TYPE.get(value.type)
    if not isinstance(value, dict):
        return None

    fields = {_fold(k): v for k, v in value.items() if isinstance(k, str)}
    try:
        atom_type = AtomType(fields.get("type"))
    except ValueError:
        return None

    if atom_type is not AtomType.LIST:
        return _TAG_BY_TYPE.get(atom_type)

    # A list atom carries exactly one of the two item collections
    has_ordered = fields.get("orderedlist") is not None
    has_unordered = fields.get("unorderedlist") is not None
    if has_ordered == has_unordered:
        return None
    return "ordered_list" if has_ordered else "unordered_list"


Atom = Annotated[
    Union[
        Annotated[TextAtom, Tag("text")],
        Annotated[TableAtom, Tag("table")],
        Annotated[UnorderedListAtom, Tag("unordered_list")],
        Annotated[OrderedListAtom, Tag("ordered_list")],
        Annotated[BinaryAtom, Tag("binary")],
        Annotated[UnknownAtom, Tag("unknown")],
    ],
    Discriminator(
        _atom_tag,
        custom_error_type="invalid_atom",
        custom_error_message="Atom type is missing, unknown, or its list payload is ambiguous",
    ),
]

for _model in (AtomBase, TextAtom, TableAtom, UnorderedListAtom, OrderedListAtom, BinaryAtom, UnknownAtom):
    _model.model_rebuild()

AtomList = TypeAdapter(List[Atom])


class TypeResult(AtomModel):
    """Server classification of a document."""

    mime_type: Optional[str] = None
    extension: Optional[str] = None
    type: DocumentType = DocumentType.UNKNOWN
