"""Common module - collaborator protocols, errors and local implementations."""

from .errors import ConvertorError, FileSystemError, NextGenImagesError, UrlNotFoundError
from .file_storage_impl import LocalFileDriver, LocalFileRead, LocalFileReadFactory
from .filesystem import (
    DiagnosticsSink,
    FileDriver,
    FileRead,
    FileReadFactory,
    FileStat,
    UrlConvertor,
)

__all__ = [
    "ConvertorError",
    "DiagnosticsSink",
    "FileDriver",
    "FileRead",
    "FileReadFactory",
    "FileStat",
    "FileSystemError",
    "LocalFileDriver",
    "LocalFileRead",
    "LocalFileReadFactory",
    "NextGenImagesError",
    "UrlConvertor",
    "UrlNotFoundError",
]
