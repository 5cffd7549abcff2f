"""
Data models for the table reader.

SourceDescriptor and TableSpec are frozen pydantic models validated at
construction time. ParsedTable is the immutable snapshot produced by a
successful refresh, and RowSequence is a restartable view bound to one
snapshot.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional, Tuple, Union
from urllib.parse import urlsplit
from urllib.request import url2pathname

from bs4 import Tag
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import MalformedSourceError
from .utils.text import row_texts

Row = Tuple[str, ...]

# Single-letter prefixes are Windows drive letters, not schemes
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]+):")


class SourceProtocol(str, Enum):
    """Protocols a source can be fetched with."""

    FILE = "file"
    HTTP = "http"
    HTTPS = "https"


def _coerce_protocol(value: Any, source: str) -> SourceProtocol:
    if isinstance(value, SourceProtocol):
        return value
    try:
        return SourceProtocol(str(value).lower())
    except ValueError:
        raise MalformedSourceError(source, f"unknown protocol: {value}") from None


def _file_url_to_path(url: str) -> str:
    parts = urlsplit(url)
    if parts.netloc not in ("", "localhost"):
        raise MalformedSourceError(url, f"file URL with remote host: {parts.netloc}")
    if not parts.path:
        raise MalformedSourceError(url, f"no path in file URL: {url}")
    return url2pathname(parts.path)


class SourceDescriptor(BaseModel):
    """
    Where to read HTML from.

    The location is either an http(s) URL or a filesystem path. The
    protocol is inferred from the location when not given explicitly.
    Unknown protocols fail here, before any fetch is attempted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    location: str = Field(..., description="URL or filesystem path")
    protocol: SourceProtocol = Field(..., description="file, http or https")
    charset: Optional[str] = Field(
        None, description="Encoding override for the fetched bytes"
    )

    @model_validator(mode="before")
    @classmethod
    def _resolve_location(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        raw = data.get("location")
        if isinstance(raw, Path):
            raw = str(raw)
        if not isinstance(raw, str) or not raw.strip():
            raise MalformedSourceError(str(raw), "source location must be a non-empty string")
        raw = raw.strip()

        declared = data.get("protocol")
        if declared is not None:
            declared = _coerce_protocol(declared, raw)

        match = _SCHEME_RE.match(raw)
        if match:
            scheme = match.group(1)
            protocol = _coerce_protocol(scheme, raw)
            if declared is not None and declared is not protocol:
                raise MalformedSourceError(
                    raw,
                    f"protocol '{declared.value}' does not match location scheme '{scheme}'",
                )
            if protocol is SourceProtocol.FILE:
                location = _file_url_to_path(raw)
            else:
                if not urlsplit(raw).netloc:
                    raise MalformedSourceError(raw, f"no host in URL: {raw}")
                location = raw
        else:
            if declared not in (None, SourceProtocol.FILE):
                raise MalformedSourceError(raw, f"no protocol: {raw}")
            protocol = SourceProtocol.FILE
            location = raw

        return {**data, "location": location, "protocol": protocol}

    @classmethod
    def parse(
        cls, source: Union[str, Path, "SourceDescriptor"], charset: Optional[str] = None
    ) -> "SourceDescriptor":
        """Build a descriptor from a URL string, a path, or an existing descriptor."""
        if isinstance(source, cls):
            return source
        return cls(location=source, charset=charset)

    @classmethod
    def url(cls, url: str, charset: Optional[str] = None) -> "SourceDescriptor":
        """Build a descriptor from a URL. The string must carry a protocol."""
        if not isinstance(url, str) or not _SCHEME_RE.match(url.strip()):
            raise MalformedSourceError(str(url), f"no protocol: {url}")
        return cls(location=url, charset=charset)

    @classmethod
    def file(
        cls,
        path: Union[str, Path],
        base_dir: Optional[Union[str, Path]] = None,
        charset: Optional[str] = None,
    ) -> "SourceDescriptor":
        """Build a descriptor for a local file, resolving relative paths against base_dir."""
        file_path = Path(path)
        if base_dir is not None and not file_path.is_absolute():
            file_path = Path(base_dir) / file_path
        return cls(location=str(file_path), protocol=SourceProtocol.FILE, charset=charset)

    @property
    def is_remote(self) -> bool:
        return self.protocol is not SourceProtocol.FILE

    @property
    def path(self) -> Path:
        """Filesystem path of a file source."""
        if self.is_remote:
            raise ValueError(f"{self.location} is not a file source")
        return Path(self.location)

    def __str__(self) -> str:
        return self.location


class TableSpec(BaseModel):
    """Which element to read: a CSS selector and a zero-based match index."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    selector: str = Field(default="table", min_length=1, description="CSS selector")
    index: int = Field(default=0, ge=0, description="Index among selector matches")


@dataclass(frozen=True)
class ParsedTable:
    """
    Snapshot of a located table.

    Holds the matched <table> element, its header texts and the <tr>
    elements that carry data. Never mutated; a refresh builds a new one.
    """

    element: Tag
    headings: Tuple[str, ...]
    data_rows: Tuple[Tag, ...]
    source: str = ""

    def iter_rows(self) -> Iterator[Row]:
        for tr in self.data_rows:
            yield row_texts(tr)

    @property
    def row_count(self) -> int:
        return len(self.data_rows)


class RowSequence:
    """
    Restartable sequence of rows bound to one ParsedTable.

    Every iteration re-derives the rows from the snapshot, so iterating
    twice yields the same rows, and a later refresh of the reader does
    not affect a sequence that was already handed out.
    """

    def __init__(self, table: ParsedTable):
        self._table = table

    @property
    def table(self) -> ParsedTable:
        return self._table

    def __iter__(self) -> Iterator[Row]:
        return self._table.iter_rows()

    def __len__(self) -> int:
        return self._table.row_count

    def __repr__(self) -> str:
        return f"RowSequence(source={self._table.source!r}, rows={len(self)})"
