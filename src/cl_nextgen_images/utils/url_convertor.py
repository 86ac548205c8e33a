"""Map public image URLs to files on disk and back."""

from collections.abc import Mapping
from pathlib import Path
from typing import override
from urllib.parse import urlsplit, urlunsplit

from ..common.errors import UrlNotFoundError
from ..common.filesystem import UrlConvertor


def _strip_query(uri: str) -> str:
    parts = urlsplit(uri)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


class PrefixUrlConvertor(UrlConvertor):
    """
    URL convertor driven by a base-URL -> directory table.

    Example:
        convertor = PrefixUrlConvertor({
            "https://shop.example/media/": "/var/www/pub/media",
            "/static/": "/var/www/pub/static",
        })
        convertor.get_filename_from_url("https://shop.example/media/a/b.png")
        # -> "/var/www/pub/media/a/b.png"

    The longest matching prefix wins.
    """

    def __init__(self, url_mappings: Mapping[str, str]):
        self._mappings: list[tuple[str, Path]] = sorted(
            ((base.rstrip("/") + "/", Path(directory).expanduser()) for base, directory in url_mappings.items()),
            key=lambda item: len(item[0]),
            reverse=True,
        )

    @override
    def get_filename_from_url(self, uri: str) -> str:
        """
        Resolve ``uri`` to an existing file.

        Raises:
            UrlNotFoundError: if no base URL matches or the file is missing.
        """
        cleaned = _strip_query(uri)
        for base_url, directory in self._mappings:
            if not cleaned.startswith(base_url):
                continue

            relative = cleaned[len(base_url):]
            try:
                candidate = (directory / relative).resolve()
                escapes = directory.resolve() not in candidate.parents
                is_file = not escapes and candidate.is_file()
            except OSError as exc:
                raise UrlNotFoundError(uri, f"Cannot inspect file for URL '{uri}': {exc}") from exc

            if escapes:
                raise UrlNotFoundError(uri, f"URL escapes mapped directory: {uri}")
            if not is_file:
                raise UrlNotFoundError(uri, f"File '{candidate}' not found for URL '{uri}'")
            return str(candidate)

        raise UrlNotFoundError(uri, f"No base URL configured for '{uri}'")

    def get_url_from_filename(self, filename: str) -> str:
        """
        Reverse mapping: filesystem path -> public URL.

        Raises:
            UrlNotFoundError: if the path lies under no mapped directory.
        """
        path = Path(filename).expanduser().resolve()
        for base_url, directory in self._mappings:
            root = directory.resolve()
            if root in path.parents:
                return base_url + path.relative_to(root).as_posix()

        raise UrlNotFoundError(filename, f"No base URL configured for file '{filename}'")
