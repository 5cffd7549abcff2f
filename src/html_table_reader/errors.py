"""
Table Reader Errors

This module defines the closed set of failures a TableReader can raise.
Each error carries structured context (source, selector, index, cause)
so callers can branch on the kind of failure instead of parsing messages.
"""

from typing import Optional


class TableReaderError(Exception):
    """Base exception for all table reader errors."""


class MalformedSourceError(TableReaderError):
    """Source location or protocol cannot be understood. Raised before any I/O."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(message)


class TableLoadError(TableReaderError):
    """Fetching or decoding the source failed."""

    def __init__(self, source: str, message: str, cause: Optional[BaseException] = None):
        self.source = source
        self.message = message
        self.cause = cause
        super().__init__(f"Failed to load {source}: {message}")


class SelectorNotFoundError(TableReaderError):
    """Selector and index did not resolve to a table element."""

    def __init__(
        self,
        selector: str,
        index: int,
        message: str,
        match_count: Optional[int] = None,
    ):
        self.selector = selector
        self.index = index
        self.match_count = match_count
        self.message = message
        super().__init__(f"Selector '{selector}' (index {index}): {message}")


class InvalidSelectorError(SelectorNotFoundError):
    """Selector is not valid CSS."""

    def __init__(self, selector: str, index: int, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(selector, index, f"invalid selector syntax: {cause}")


class NotLoadedError(TableReaderError):
    """Headings or rows requested before a successful refresh()."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Table from {source} is not loaded; call refresh() first")
