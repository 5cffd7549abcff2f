"""
HTML Table Reader

Reads one <table> from an HTML page or file and exposes its headings and
rows.

The package is organized as:
- providers/: Source providers (HTTP, local file)
- parsers/: Selector resolution and table parsing
- models.py: SourceDescriptor, TableSpec, ParsedTable, RowSequence
- reader.py: TableReader façade
- config.py: Configuration with environment overrides
- errors.py: Error taxonomy
"""

__version__ = "0.1.0"

from .config import ReaderConfig, get_default_config, load_config
from .errors import (
    InvalidSelectorError,
    MalformedSourceError,
    NotLoadedError,
    SelectorNotFoundError,
    TableLoadError,
    TableReaderError,
)
from .models import (
    ParsedTable,
    Row,
    RowSequence,
    SourceDescriptor,
    SourceProtocol,
    TableSpec,
)
from .parsers import HtmlTableParser
from .providers import FileProvider, HttpProvider, RawContent, get_provider
from .reader import TableReader

__all__ = [
    "__version__",
    # Reader
    "TableReader",
    # Models
    "SourceDescriptor",
    "SourceProtocol",
    "TableSpec",
    "ParsedTable",
    "RowSequence",
    "Row",
    # Components
    "HtmlTableParser",
    "FileProvider",
    "HttpProvider",
    "RawContent",
    "get_provider",
    # Configuration
    "ReaderConfig",
    "get_default_config",
    "load_config",
    # Errors
    "TableReaderError",
    "MalformedSourceError",
    "TableLoadError",
    "SelectorNotFoundError",
    "InvalidSelectorError",
    "NotLoadedError",
]
