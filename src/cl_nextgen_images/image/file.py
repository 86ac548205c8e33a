"""Existence, resolution and staleness checks for converted image artifacts.

A converted artifact (e.g. ``photo.webp`` next to ``photo.jpg``) is only
worth serving when it exists, is non-empty and is not older than its
source. All filesystem access goes through injected collaborators, and
nothing is cached between calls, so two calls in quick succession can
see different answers if files change concurrently.

Error policy:
    - file_exists / get_modification_time never raise; failures read as
      "missing" / "unknown".
    - resolve / uri_exists raise ConvertorError.
    - is_writable lets FileSystemError through.
"""

import re
import warnings

from ..common.errors import ConvertorError, FileSystemError, UrlNotFoundError
from ..common.filesystem import DiagnosticsSink, FileDriver, FileReadFactory, UrlConvertor

CONVERTIBLE_SUFFIX_PATTERN = re.compile(r"\.(jpg|jpeg|png)", re.IGNORECASE)


class ArtifactStalenessResolver:
    """Decides whether a next-gen image needs to be (re)generated."""

    def __init__(
        self,
        file_read_factory: FileReadFactory,
        file_driver: FileDriver,
        url_convertor: UrlConvertor,
        debugger: DiagnosticsSink,
    ):
        self.file_read_factory: FileReadFactory = file_read_factory
        self.file_driver: FileDriver = file_driver
        self.url_convertor: UrlConvertor = url_convertor
        self.debugger: DiagnosticsSink = debugger

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, uri: str) -> str:
        """Return a filesystem path for ``uri``.

        Real paths are returned unchanged; anything else goes through the
        URL convertor.

        Raises:
            ConvertorError: if the convertor cannot find a file for the URI.
        """
        if self.file_exists(uri):
            return uri

        try:
            return self.url_convertor.get_filename_from_url(uri)
        except UrlNotFoundError as exc:
            raise ConvertorError(str(exc)) from exc

    def uri_exists(self, uri: str) -> bool:
        """
        Raises:
            ConvertorError: if ``uri`` cannot be resolved.
        """
        return self.file_exists(self.resolve(uri))

    def url_exists(self, uri: str) -> bool:
        """Deprecated alias of :meth:`uri_exists`."""
        warnings.warn(
            "url_exists() is deprecated, use uri_exists() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.uri_exists(uri)

    # ------------------------------------------------------------------
    # Existence / writability
    # ------------------------------------------------------------------

    def file_exists(self, file_path: str) -> bool:
        """True if ``file_path`` is a readable file with at least one byte.

        Zero-length files count as missing: they are left behind by failed
        or interrupted conversions.
        """
        try:
            file_read = self.file_read_factory.create(file_path, "file")
            stat = file_read.stat()

            if stat.size is not None:
                return stat.size > 0

            # fallback if the filesystem reports no size
            return bool(file_read.read_all())
        except FileSystemError:
            return False

    def is_writable(self, file_path: str) -> bool:
        """Whether ``file_path`` can be written, or created if it is missing.

        Raises:
            FileSystemError: on unexpected I/O failure.
        """
        if self.file_exists(file_path):
            return self.file_driver.is_writable(file_path)

        return self.file_driver.is_writable(self.file_driver.get_parent_directory(file_path))

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    @staticmethod
    def convert_suffix(source_filename: str, destination_suffix: str) -> str:
        """Swap the first ``.jpg``/``.jpeg``/``.png`` for ``destination_suffix``.

        The match is not anchored to the end of the name, so
        ``a.png.backup/b.gif`` becomes ``a.webp.backup/b.gif``.
        """
        return CONVERTIBLE_SUFFIX_PATTERN.sub(lambda _: destination_suffix, source_filename, count=1)

    # ------------------------------------------------------------------
    # Staleness
    # ------------------------------------------------------------------

    def get_modification_time(self, file_path: str) -> int | None:
        """Modification time in epoch seconds, falling back to ctime.

        Returns None when neither is known or the stat call fails.
        """
        try:
            stat = self.file_driver.stat(file_path)
        except FileSystemError as exc:
            self.debugger.record(str(exc), {"file_path": file_path})
            return None

        if stat.mtime:
            return stat.mtime

        if stat.ctime:
            return stat.ctime

        return None

    def is_newer_than(self, target_file: str, comparison_file: str) -> bool:
        """Whether ``target_file`` was modified strictly after ``comparison_file``.

        An unknown target time is never newer; an unknown comparison time
        always loses to a known target time.
        """
        if not self.file_exists(target_file):
            return False

        target_mtime = self.get_modification_time(target_file)
        if target_mtime is None:
            return False

        comparison_mtime = self.get_modification_time(comparison_file)
        if comparison_mtime is None:
            return True

        return target_mtime > comparison_mtime

    def needs_conversion(self, source_image_filename: str, destination_image_filename: str) -> bool:
        """Whether the destination image should be generated from the source.

        Rules, first match wins:
            1. source missing          -> False
            2. destination exists      -> False
            3. destination is newer    -> False
            4. otherwise               -> True

        Rule 2 fires for any non-empty destination, so a stale destination
        is never reconverted here; callers that want mtime-based
        invalidation must remove the destination first. Rule 3 can only
        see destinations that failed rule 2, which ``is_newer_than``
        already treats as missing.
        """
        if not self.file_exists(source_image_filename):
            return False

        if self.file_exists(destination_image_filename):
            return False

        if self.is_newer_than(destination_image_filename, source_image_filename):
            return False

        return True
