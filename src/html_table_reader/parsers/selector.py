"""
Selector Resolution

Resolves a TableSpec against a parsed document. Selectors are CSS as
understood by soupsieve, plus the jsoup ``:eq(n)`` pseudo-class, which is
rewritten to ``:nth-child(n+1)`` (both select by sibling position).
"""

import re

from bs4 import BeautifulSoup, Tag
from loguru import logger
from soupsieve import SelectorSyntaxError

from ..errors import InvalidSelectorError, SelectorNotFoundError
from ..models import TableSpec

_EQ_RE = re.compile(r":eq\(\s*(\d+)\s*\)")


def normalize_selector(selector: str) -> str:
    """Rewrite jsoup-only pseudo-classes into CSS soupsieve understands."""
    return _EQ_RE.sub(lambda m: f":nth-child({int(m.group(1)) + 1})", selector.strip())


def select_table(soup: BeautifulSoup, spec: TableSpec) -> Tag:
    """
    Return the table element selected by spec.

    Args:
        soup: Parsed document
        spec: Selector and match index

    Returns:
        The matched <table> element

    Raises:
        InvalidSelectorError: If the selector is not valid CSS
        SelectorNotFoundError: If the index is out of range or the match is not a table
    """
    css = normalize_selector(spec.selector)
    try:
        matches = soup.select(css)
    except SelectorSyntaxError as e:
        logger.error(f"Invalid selector '{spec.selector}': {e}")
        raise InvalidSelectorError(spec.selector, spec.index, e) from e

    logger.debug(f"Selector '{css}' matched {len(matches)} element(s)")

    if spec.index >= len(matches):
        if not matches:
            message = "no elements matched"
        else:
            message = f"index out of range, {len(matches)} element(s) matched"
        raise SelectorNotFoundError(spec.selector, spec.index, message, len(matches))

    element = matches[spec.index]
    if element.name != "table":
        raise SelectorNotFoundError(
            spec.selector,
            spec.index,
            f"matched <{element.name}>, expected <table>",
            len(matches),
        )
    return element
