"""
HTML Table Parser

This module turns raw HTML bytes into a ParsedTable: it decodes the
content, builds a lenient DOM with BeautifulSoup, resolves the selector
and splits the table's rows into a header and data rows.

Header detection cascade (fixed precedence):
1. The table's own <thead> contains a row: that row is the header.
2. Else the first row is made only of <th> cells: that row is the header.
3. Else there is no header and every row is data.

Rows are collected from descendant <tr> elements whether or not they are
wrapped in <thead>/<tbody>. Rows of nested tables are skipped.
"""

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, FeatureNotFound, Tag, UnicodeDammit
from bs4.builder import ParserRejectedMarkup
from loguru import logger

from ..errors import TableLoadError
from ..models import ParsedTable, TableSpec
from ..providers.base import RawContent
from ..utils.text import row_cells, row_texts
from .selector import select_table


def decode_markup(raw: RawContent, charset: Optional[str] = None) -> str:
    """
    Decode fetched bytes to text.

    An explicit charset wins over the one reported by the transport;
    without either, the encoding is detected from the markup.

    Raises:
        TableLoadError: If the bytes cannot be decoded
    """
    encoding = charset or raw.encoding
    if encoding:
        try:
            return raw.content.decode(encoding)
        except LookupError as e:
            raise TableLoadError(raw.location, f"unknown charset: {encoding}", e) from e
        except UnicodeDecodeError as e:
            raise TableLoadError(raw.location, f"content is not valid {encoding}", e) from e

    dammit = UnicodeDammit(raw.content, is_html=True)
    if dammit.unicode_markup is None:
        raise TableLoadError(raw.location, "content could not be decoded as text")
    logger.debug(f"Detected encoding {dammit.original_encoding} for {raw.location}")
    return dammit.unicode_markup


def table_rows(table: Tag) -> List[Tag]:
    """All <tr> elements of table in document order, excluding nested tables' rows."""
    return [tr for tr in table.find_all("tr") if tr.find_parent("table") is table]


def table_thead(table: Tag) -> Optional[Tag]:
    for thead in table.find_all("thead"):
        if thead.find_parent("table") is table:
            return thead
    return None


def is_header_row(tr: Tag) -> bool:
    """True when the row has cells and all of them are <th>."""
    cells = row_cells(tr)
    return bool(cells) and all(cell.name == "th" for cell in cells)


def split_header(table: Tag) -> Tuple[Tuple[str, ...], Tuple[Tag, ...]]:
    """
    Split a table into header texts and data rows.

    Args:
        table: The <table> element

    Returns:
        Tuple of (headings, data rows)
    """
    rows = table_rows(table)

    thead = table_thead(table)
    if thead is not None:
        head_rows = [tr for tr in rows if tr.find_parent("thead") is thead]
        if head_rows:
            logger.debug("Using <thead> row as header")
            head_ids = {id(tr) for tr in head_rows}
            data = tuple(tr for tr in rows if id(tr) not in head_ids)
            return row_texts(head_rows[0]), data

    if rows and is_header_row(rows[0]):
        logger.debug("Using first all-<th> row as header")
        return row_texts(rows[0]), tuple(rows[1:])

    logger.debug("No header row found")
    return (), tuple(rows)


class HtmlTableParser:
    """
    HTML table parser.

    Parses HTML bytes leniently and extracts the table selected by a
    TableSpec.
    """

    def __init__(self, html_parser: str = "lxml"):
        """
        Initialize HTML table parser.

        Args:
            html_parser: BeautifulSoup tree builder ("lxml", "html5lib", "html.parser")
        """
        self.html_parser = html_parser

    def parse_document(self, raw: RawContent, charset: Optional[str] = None) -> BeautifulSoup:
        markup = decode_markup(raw, charset)
        try:
            return BeautifulSoup(markup, self.html_parser)
        except FeatureNotFound as e:
            raise TableLoadError(
                raw.location, f"HTML parser '{self.html_parser}' is not available", e
            ) from e
        except ParserRejectedMarkup as e:
            raise TableLoadError(raw.location, f"markup rejected by parser: {e}", e) from e

    def parse(
        self, raw: RawContent, spec: TableSpec, charset: Optional[str] = None
    ) -> ParsedTable:
        """
        Parse raw HTML into a ParsedTable.

        Args:
            raw: Fetched bytes
            spec: Selector and match index of the table
            charset: Optional encoding override

        Returns:
            ParsedTable snapshot

        Raises:
            TableLoadError: If the content cannot be decoded or parsed
            SelectorNotFoundError: If the selector does not resolve to a table
        """
        soup = self.parse_document(raw, charset)
        table = select_table(soup, spec)
        headings, data_rows = split_header(table)

        logger.debug(
            f"Table from {raw.location}: {len(headings)} heading(s), {len(data_rows)} row(s)"
        )
        return ParsedTable(
            element=table,
            headings=headings,
            data_rows=data_rows,
            source=raw.location,
        )
