"""
Source Providers

This package contains providers that fetch raw HTML bytes from a source.
"""

from typing import Optional

from ..config import ReaderConfig
from ..models import SourceDescriptor
from .base import RawContent, SourceProvider
from .file import FileProvider
from .http import HttpProvider


def get_provider(
    source: SourceDescriptor, config: Optional[ReaderConfig] = None
) -> SourceProvider:
    """Pick the provider matching the source protocol."""
    if source.is_remote:
        return HttpProvider(config)
    return FileProvider()


__all__ = [
    "RawContent",
    "SourceProvider",
    "FileProvider",
    "HttpProvider",
    "get_provider",
]
