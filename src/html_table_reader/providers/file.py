"""
File Source Provider

Reads HTML from the local filesystem.
"""

from loguru import logger

from ..errors import TableLoadError
from ..models import SourceDescriptor
from .base import RawContent


class FileProvider:
    """Provider for local file sources."""

    @property
    def name(self) -> str:
        return "file"

    def fetch(self, source: SourceDescriptor) -> RawContent:
        if source.is_remote:
            raise TableLoadError(source.location, "not a file source")

        path = source.path
        logger.info(f"Reading {path}")
        try:
            content = path.read_bytes()
        except FileNotFoundError as e:
            logger.error(f"File not found: {path}")
            raise TableLoadError(source.location, "file not found", e) from e
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise TableLoadError(source.location, str(e), e) from e

        return RawContent(location=source.location, content=content)

    def close(self) -> None:
        pass
