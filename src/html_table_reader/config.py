"""
Table Reader Configuration

This module provides the configuration model for fetching and parsing
HTML sources, with environment variable overrides.
"""

import os
from typing import Literal, Optional

from loguru import logger
from pydantic import BaseModel, Field

from . import __version__

HtmlParserName = Literal["html.parser", "lxml", "html5lib"]


class ReaderConfig(BaseModel):
    """Settings shared by the HTTP client and the HTML parser."""

    user_agent: str = Field(
        default=f"html-table-reader/{__version__}",
        description="User-Agent header sent with HTTP requests",
    )
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds (None leaves the client default)",
    )
    html_parser: HtmlParserName = Field(
        default="lxml", description="BeautifulSoup tree builder"
    )
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_default_config() -> ReaderConfig:
    """Get default reader configuration with environment variable overrides.

    Returns:
        ReaderConfig: Defaults, overridden by TABLE_READER_* variables
    """
    overrides = {}

    user_agent = os.getenv("TABLE_READER_USER_AGENT")
    if user_agent:
        overrides["user_agent"] = user_agent

    timeout = os.getenv("TABLE_READER_TIMEOUT")
    if timeout:
        overrides["timeout"] = float(timeout)

    html_parser = os.getenv("TABLE_READER_HTML_PARSER")
    if html_parser:
        overrides["html_parser"] = html_parser

    verify_ssl = os.getenv("TABLE_READER_VERIFY_SSL")
    if verify_ssl:
        overrides["verify_ssl"] = _env_flag(verify_ssl)

    try:
        return ReaderConfig(**overrides)
    except Exception as e:
        logger.error(f"Error loading configuration: {e}")
        raise


def load_config() -> ReaderConfig:
    """Alias for get_default_config."""
    return get_default_config()
