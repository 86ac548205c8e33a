from __future__ import annotations

import os
from os import PathLike
from pathlib import Path
from typing import override

from .errors import FileSystemError
from .filesystem import FileDriver, FileRead, FileReadFactory, FileStat


def _stat_to_model(st: os.stat_result) -> FileStat:
    return FileStat(
        size=st.st_size,
        mtime=int(st.st_mtime),
        ctime=int(st.st_ctime),
    )


class LocalFileRead(FileRead):
    """
    Readable handle over a regular file on local disk.

    Every call goes back to the filesystem; nothing is cached.
    """

    def __init__(self, path: str | PathLike[str]):
        self._path: Path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @override
    def stat(self) -> FileStat:
        try:
            return _stat_to_model(self._path.stat())
        except OSError as exc:
            raise FileSystemError(f"Cannot stat file: {self._path}", str(self._path)) from exc

    @override
    def read_all(self) -> bytes:
        try:
            return self._path.read_bytes()
        except OSError as exc:
            raise FileSystemError(f"Cannot read file: {self._path}", str(self._path)) from exc


class LocalFileReadFactory(FileReadFactory):
    """Opens local files for reading."""

    @override
    def create(self, path: str, mode: str = "file") -> LocalFileRead:
        if mode != "file":
            raise ValueError(f"Unsupported read mode: {mode}")

        target = Path(path).expanduser()
        try:
            is_file = target.is_file()
        except OSError as exc:
            raise FileSystemError(f"Cannot inspect file: {path}", path) from exc
        if not is_file:
            raise FileSystemError(f"File does not exist: {path}", path)

        # Probe readability up front so permission problems surface here
        try:
            with open(target, "rb"):
                pass
        except OSError as exc:
            raise FileSystemError(f"Cannot open file for reading: {path}", path) from exc

        return LocalFileRead(target)


class LocalFileDriver(FileDriver):
    """Local filesystem driver."""

    @override
    def is_writable(self, path: str) -> bool:
        target = Path(path).expanduser()
        try:
            if not target.exists():
                return False
        except OSError as exc:
            raise FileSystemError(f"Cannot inspect path: {path}", path) from exc
        return os.access(target, os.W_OK)

    @override
    def get_parent_directory(self, path: str) -> str:
        return str(Path(path).parent)

    @override
    def stat(self, path: str) -> FileStat:
        try:
            st = Path(path).expanduser().stat()
        except OSError as exc:
            raise FileSystemError(f"Cannot stat path: {path}", path) from exc
        return _stat_to_model(st)
