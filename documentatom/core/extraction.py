"""
OCR extraction result models and their conversion into atoms.

The ``/atom/ocr`` endpoint answers with raw text elements, tables and lists
found in an image rather than with atoms; ``ExtractionResult.to_atoms``
reshapes that payload into the same atom list every other endpoint returns.
"""

from typing import Optional, List

from pydantic import Field

from .enums import AtomType
from .models import (
    Atom,
    AtomModel,
    BoundingBox,
    OrderedListAtom,
    SerializableColumn,
    SerializableDataTable,
    TableAtom,
    TextAtom,
    UnorderedListAtom,
)


class Rectangle(AtomModel):
    """Pixel rectangle as reported by the OCR engine."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class TextElement(AtomModel):
    """Run of recognized text."""

    text: Optional[str] = None
    bounds: Optional[Rectangle] = None
    confidence: Optional[float] = None


class TableStructure(AtomModel):
    """Table recognized in an image, as a grid of cell strings."""

    cells: List[List[Optional[str]]] = Field(default_factory=list)
    bounds: Optional[Rectangle] = None
    rows: Optional[int] = None
    columns: Optional[int] = None

    def to_atom(self) -> Optional[TableAtom]:
        """Convert to a table atom, or None when the grid holds no cells."""
        grid = [row for row in self.cells if row]
        if not grid:
            return None

        column_count = max(len(row) for row in grid)
        column_names = [f"Column{i + 1}" for i in range(column_count)]

        rows = []
        length = 0
        for row in grid:
            values = [cell or "" for cell in row]
            values.extend([""] * (column_count - len(values)))
            length += sum(len(value) for value in values)
            rows.append(dict(zip(column_names, values)))

        return TableAtom(
            rows=len(grid),
            columns=column_count,
            length=length,
            table=SerializableDataTable(
                columns=[SerializableColumn(name=name) for name in column_names],
                rows=rows,
            ),
            bounding_box=BoundingBox.from_rectangle(self.bounds),
        )


class ListStructure(AtomModel):
    """Ordered or unordered list recognized in an image."""

    items: Optional[List[Optional[str]]] = None
    is_ordered: bool = False
    bounds: Optional[Rectangle] = None

    def to_atom(self) -> Optional[Atom]:
        """Convert to a list atom, or None when the list has no items."""
        if not self.items:
            return None

        items = [item or "" for item in self.items]
        common = dict(
            length=sum(len(item) for item in items),
            bounding_box=BoundingBox.from_rectangle(self.bounds),
        )
        if self.is_ordered:
            return OrderedListAtom(ordered_list=items, **common)
        return UnorderedListAtom(unordered_list=items, **common)


class ExtractionResult(AtomModel):
    """Everything the OCR endpoint found in one image."""

    text_elements: Optional[List[TextElement]] = None
    tables: Optional[List[TableStructure]] = None
    lists: Optional[List[ListStructure]] = None

    def to_atoms(self) -> List[Atom]:
        """Build atoms in order: text elements, then tables, then lists.

        Empty text elements, tables without cells and lists without items
        are dropped rather than emitted as empty atoms.
        """
        atoms: List[Atom] = []

        for element in self.text_elements or []:
            if element.text:
                atoms.append(TextAtom(
                    type=AtomType.TEXT,
                    text=element.text,
                    length=len(element.text),
                    bounding_box=BoundingBox.from_rectangle(element.bounds),
                ))

        for table in self.tables or []:
            table_atom = table.to_atom()
            if table_atom is not None:
                atoms.append(table_atom)

        for structure in self.lists or []:
            list_atom = structure.to_atom()
            if list_atom is not None:
                atoms.append(list_atom)

        return atoms
