"""
Shared utilities (text normalization, HTTP client).
"""

from .text import cell_text, normalize_whitespace, row_cells, row_texts

__all__ = [
    "cell_text",
    "normalize_whitespace",
    "row_cells",
    "row_texts",
]
