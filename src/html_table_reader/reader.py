"""
Table Reader

This module provides TableReader, which fetches an HTML source, locates
one table in it and exposes the table's headings and rows.

Construction never performs I/O. refresh() must be called before
headings() or rows() for every kind of source.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Union

from loguru import logger

from .config import ReaderConfig, get_default_config
from .errors import NotLoadedError, TableReaderError
from .models import ParsedTable, Row, RowSequence, SourceDescriptor, TableSpec
from .parsers.html_table import HtmlTableParser
from .providers import SourceProvider, get_provider

SourceLike = Union[SourceDescriptor, str, Path]


class TableReader:
    """
    Reader for one table of an HTML document.

    Usage:
        reader = TableReader("https://example.com/page.html", "table.data", 1)
        reader.refresh()
        reader.headings()      # ['H0', 'H1', ...]
        for row in reader.rows():
            ...
    """

    def __init__(
        self,
        source: SourceLike,
        selector: str = "table",
        index: int = 0,
        *,
        config: Optional[ReaderConfig] = None,
        provider: Optional[SourceProvider] = None,
        parser: Optional[HtmlTableParser] = None,
    ):
        """
        Initialize the reader. No I/O happens here.

        Args:
            source: URL, file path, or SourceDescriptor
            selector: CSS selector of the table (default: first table)
            index: Zero-based index among the selector's matches
            config: Reader configuration (defaults from environment)
            provider: Source provider override
            parser: HTML parser override

        Raises:
            MalformedSourceError: If the source location or protocol is invalid
            pydantic.ValidationError: If the selector is empty or the index
                is negative (a ValueError subclass)
        """
        self.source = SourceDescriptor.parse(source)
        self.spec = TableSpec(selector=selector, index=index)
        self.config = config or get_default_config()
        self.provider = provider or get_provider(self.source, self.config)
        self.parser = parser or HtmlTableParser(self.config.html_parser)
        self._table: Optional[ParsedTable] = None

    @classmethod
    def from_spec(cls, source: SourceLike, spec: TableSpec, **kwargs) -> "TableReader":
        return cls(source, spec.selector, spec.index, **kwargs)

    @property
    def is_loaded(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> Optional[ParsedTable]:
        """Current snapshot, or None before a successful refresh."""
        return self._table

    def refresh(self) -> ParsedTable:
        """
        Fetch, parse and locate the table, replacing any previous snapshot.

        Returns:
            The new ParsedTable

        Raises:
            TableLoadError: If the source cannot be fetched or decoded
            SelectorNotFoundError: If the selector does not resolve to a table
        """
        try:
            raw = self.provider.fetch(self.source)
            table = self.parser.parse(raw, self.spec, charset=self.source.charset)
        except TableReaderError as e:
            self._table = None
            logger.error(f"Refresh failed for {self.source}: {e}")
            raise

        self._table = table
        logger.info(f"Loaded table from {self.source} ({table.row_count} rows)")
        return table

    def _require_table(self) -> ParsedTable:
        table = self._table
        if table is None:
            raise NotLoadedError(self.source.location)
        return table

    def headings(self) -> List[str]:
        """
        Header texts of the table, possibly empty.

        Raises:
            NotLoadedError: If refresh() has not succeeded
        """
        return list(self._require_table().headings)

    def rows(self) -> RowSequence:
        """
        Data rows of the current snapshot.

        The returned sequence can be iterated any number of times and
        stays bound to this snapshot across later refreshes.

        Raises:
            NotLoadedError: If refresh() has not succeeded
        """
        return RowSequence(self._require_table())

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows())

    def close(self) -> None:
        """Release the provider's resources, such as its HTTP session."""
        self.provider.close()

    def __enter__(self) -> "TableReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"TableReader(source={self.source.location!r}, "
            f"selector={self.spec.selector!r}, index={self.spec.index}, "
            f"loaded={self.is_loaded})"
        )
