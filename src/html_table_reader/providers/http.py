"""
HTTP Source Provider

Fetches remote HTML over http/https.
"""

from typing import Optional

from loguru import logger

from ..config import ReaderConfig
from ..errors import TableLoadError
from ..models import SourceDescriptor
from ..utils.http import HttpClient, charset_from_content_type
from .base import RawContent


class HttpProvider:
    """Provider for http and https sources."""

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        http_client: Optional[HttpClient] = None,
    ):
        """
        Initialize HTTP provider.

        Args:
            config: Reader configuration (user agent, timeout, TLS)
            http_client: Pre-built client, mainly for tests
        """
        self.http_client = http_client or HttpClient(config)

    @property
    def name(self) -> str:
        return "http"

    def fetch(self, source: SourceDescriptor) -> RawContent:
        if not source.is_remote:
            raise TableLoadError(source.location, "not an http(s) source")

        logger.info(f"Fetching {source.location}")
        response = self.http_client.get(source.location)

        content = response.content
        logger.debug(f"Fetched {len(content)} bytes from {response.url}")
        return RawContent(
            location=source.location,
            content=content,
            encoding=charset_from_content_type(response.headers.get("Content-Type")),
        )

    def close(self) -> None:
        self.http_client.close()
