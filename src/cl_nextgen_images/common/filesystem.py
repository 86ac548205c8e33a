"""
Filesystem collaborator protocols.

The resolver never touches the disk directly. Everything it knows about
files comes through these interfaces:

- FileReadFactory / FileRead: open a file and inspect it
- FileDriver: writability, parent directories and raw stat
- UrlConvertor: public URL -> filesystem path
- DiagnosticsSink: fire-and-forget debug records
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class FileStat(BaseModel):
    """Point-in-time file metadata. Any field may be missing."""

    size: int | None = Field(None, ge=0, description="File size in bytes")
    mtime: int | None = Field(None, description="Modification time (epoch seconds)")
    ctime: int | None = Field(None, description="Change/creation time (epoch seconds)")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


class FileRead(Protocol):
    """An opened, readable file."""

    def stat(self) -> FileStat: ...

    def read_all(self) -> bytes: ...


@runtime_checkable
class FileReadFactory(Protocol):
    def create(self, path: str, mode: str = "file") -> FileRead:
        """
        Open ``path`` for reading.

        Raises:
            FileSystemError: if the path cannot be opened.
        """
        ...


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


@runtime_checkable
class FileDriver(Protocol):
    def is_writable(self, path: str) -> bool:
        """
        Raises:
            FileSystemError: on unexpected I/O failure.
        """
        ...

    def get_parent_directory(self, path: str) -> str: ...

    def stat(self, path: str) -> FileStat:
        """
        Raises:
            FileSystemError: if the path cannot be stat'ed.
        """
        ...


# ---------------------------------------------------------------------------
# URL mapping / diagnostics
# ---------------------------------------------------------------------------


@runtime_checkable
class UrlConvertor(Protocol):
    def get_filename_from_url(self, uri: str) -> str:
        """
        Raises:
            UrlNotFoundError: if the URL maps to no file.
        """
        ...


@runtime_checkable
class DiagnosticsSink(Protocol):
    def record(self, message: str, context: Mapping[str, object] | None = None) -> None: ...
