"""
Base Source Provider Interface

This module defines the protocol/interface for source providers.
Providers are responsible for fetching raw bytes from a source location.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Optional, Protocol

from ..models import SourceDescriptor


@dataclass(frozen=True)
class RawContent:
    """Undecoded bytes fetched from a source, with any charset the transport reported."""

    location: str
    content: bytes
    encoding: Optional[str] = None


class SourceProvider(Protocol):
    """
    Protocol for source providers.

    Providers turn a SourceDescriptor into raw bytes. They never parse
    the content.
    """

    @abstractmethod
    def fetch(self, source: SourceDescriptor) -> RawContent:
        """
        Fetch the raw content of a source.

        Args:
            source: Descriptor of the URL or file to read

        Returns:
            RawContent with the undecoded bytes

        Raises:
            TableLoadError: If the content cannot be fetched
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging and identification."""
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""
