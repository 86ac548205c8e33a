"""Test configuration and fixtures for cl_nextgen_images.

Provides:
- A temporary "pub" tree with media/static roots
- Helpers that write real images (Pillow) with fixed modification times
- Resolvers wired to real local collaborators or to mocks
"""

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from cl_nextgen_images.common.file_storage_impl import LocalFileDriver, LocalFileReadFactory
from cl_nextgen_images.image.file import ArtifactStalenessResolver
from cl_nextgen_images.utils.debugger import Debugger
from cl_nextgen_images.utils.url_convertor import PrefixUrlConvertor

MEDIA_URL = "https://shop.example/media/"
STATIC_URL = "https://shop.example/static/"

ImageFactory = Callable[..., Path]


# ============================================================================
# Filesystem fixtures
# ============================================================================


@pytest.fixture
def pub_dir(tmp_path: Path) -> Path:
    """Provide a pub/ tree with media and static roots."""
    pub = tmp_path / "pub"
    (pub / "media").mkdir(parents=True)
    (pub / "static").mkdir(parents=True)
    return pub


@pytest.fixture
def media_dir(pub_dir: Path) -> Path:
    return pub_dir / "media"


@pytest.fixture
def make_image() -> ImageFactory:
    """Write a small real image, optionally pinning its mtime."""

    def _make(path: Path, mtime: int | None = None, fmt: str = "PNG") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", (8, 8), color=(200, 30, 30)).save(path, format=fmt)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def make_empty() -> Callable[[Path], Path]:
    """Write a zero-length placeholder file."""

    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"")
        return path

    return _make


# ============================================================================
# Resolver fixtures
# ============================================================================


@pytest.fixture
def url_convertor(pub_dir: Path) -> PrefixUrlConvertor:
    return PrefixUrlConvertor(
        {
            MEDIA_URL: str(pub_dir / "media"),
            STATIC_URL: str(pub_dir / "static"),
        }
    )


@pytest.fixture
def debugger() -> MagicMock:
    return MagicMock(spec=Debugger)


@pytest.fixture
def resolver(url_convertor: PrefixUrlConvertor, debugger: MagicMock) -> ArtifactStalenessResolver:
    """Resolver backed by the local disk."""
    return ArtifactStalenessResolver(
        file_read_factory=LocalFileReadFactory(),
        file_driver=LocalFileDriver(),
        url_convertor=url_convertor,
        debugger=debugger,
    )


@pytest.fixture
def mock_resolver(debugger: MagicMock) -> ArtifactStalenessResolver:
    """Resolver whose collaborators are all MagicMocks."""
    return ArtifactStalenessResolver(
        file_read_factory=MagicMock(),
        file_driver=MagicMock(),
        url_convertor=MagicMock(),
        debugger=debugger,
    )
