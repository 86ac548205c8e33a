"""cl_nextgen_images - staleness and resolution checks for next-gen image artifacts."""

from .common.errors import ConvertorError, FileSystemError, NextGenImagesError, UrlNotFoundError
from .common.filesystem import (
    DiagnosticsSink,
    FileDriver,
    FileRead,
    FileReadFactory,
    FileStat,
    UrlConvertor,
)
from .config import NextGenImagesConfig, build_planner, build_resolver
from .image.file import ArtifactStalenessResolver
from .image.planner import ConversionPlan, ConversionPlanner
from .utils.debugger import Debugger
from .utils.url_convertor import PrefixUrlConvertor

__version__ = "0.1.0"

__all__ = [
    "ArtifactStalenessResolver",
    "ConversionPlan",
    "ConversionPlanner",
    "ConvertorError",
    "Debugger",
    "DiagnosticsSink",
    "FileDriver",
    "FileRead",
    "FileReadFactory",
    "FileStat",
    "FileSystemError",
    "NextGenImagesConfig",
    "NextGenImagesError",
    "PrefixUrlConvertor",
    "UrlConvertor",
    "UrlNotFoundError",
    "__version__",
    "build_planner",
    "build_resolver",
]
