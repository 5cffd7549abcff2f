"""
HTTP Utilities

This module provides the HTTP client used to fetch remote HTML sources.
Redirects are followed; non-2xx responses and transport failures are
reported as TableLoadError with the underlying requests exception as cause.
"""

import re
from typing import Optional

import requests
from loguru import logger

from ..config import ReaderConfig
from ..errors import TableLoadError

_CHARSET_RE = re.compile(r"charset\s*=\s*[\"']?([\w.:-]+)", re.IGNORECASE)


def charset_from_content_type(content_type: Optional[str]) -> Optional[str]:
    """Return the charset parameter of a Content-Type header, if any."""
    if not content_type:
        return None
    match = _CHARSET_RE.search(content_type)
    return match.group(1) if match else None


class HttpClient:
    """HTTP client wrapping a requests session with browser-like headers."""

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()

        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": self.config.user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.5",
                "Accept-Encoding": "gzip, deflate",
            }
        )

    def get(self, url: str) -> requests.Response:
        """
        GET a URL, following redirects.

        Args:
            url: URL to fetch

        Returns:
            Successful response

        Raises:
            TableLoadError: On transport errors or a non-2xx status
        """
        try:
            logger.debug(f"GET {url}")
            response = self.session.get(
                url,
                timeout=self.config.timeout,
                allow_redirects=True,
                verify=self.config.verify_ssl,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            logger.error(f"Request to {url} returned status {status}")
            raise TableLoadError(url, f"HTTP status {status}", e) from e
        except requests.RequestException as e:
            logger.error(f"Request failed for {url}: {e}")
            raise TableLoadError(url, str(e), e) from e

        if response.history:
            logger.debug(f"Redirected {url} -> {response.url}")
        return response

    def close(self) -> None:
        self.session.close()
