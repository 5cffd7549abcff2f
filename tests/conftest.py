"""
Pytest configuration for html_table_reader tests.
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from html_table_reader import RawContent


@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def html_provider():
    """Build a mock provider serving the given HTML documents in order."""

    def _build(*documents):
        provider = Mock()
        provider.name = "mock"
        provider.fetch.side_effect = [
            doc
            if isinstance(doc, Exception)
            else RawContent(location="memory://test", content=doc.encode("utf-8"))
            for doc in documents
        ]
        return provider

    return _build
