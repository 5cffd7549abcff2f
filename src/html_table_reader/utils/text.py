"""
Text helpers shared by header detection and row iteration.
"""

from typing import List, Tuple

from bs4 import Tag

CELL_TAGS = ["td", "th"]


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return " ".join(text.split())


def row_cells(tr: Tag) -> List[Tag]:
    """Return the <td>/<th> cells of a row in document order."""
    return tr.find_all(CELL_TAGS, recursive=False)


def cell_text(cell: Tag) -> str:
    return normalize_whitespace(cell.get_text())


def row_texts(tr: Tag) -> Tuple[str, ...]:
    """Extract the normalized text of every cell in a row."""
    return tuple(cell_text(cell) for cell in row_cells(tr))
