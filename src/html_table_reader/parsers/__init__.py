"""
HTML Parsers

This package contains the selector resolution and table parsing logic.
"""

from .html_table import HtmlTableParser, decode_markup, split_header
from .selector import normalize_selector, select_table

__all__ = [
    "HtmlTableParser",
    "decode_markup",
    "split_header",
    "normalize_selector",
    "select_table",
]
