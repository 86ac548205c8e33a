"""Exception hierarchy for next-gen image resolution."""


class NextGenImagesError(Exception):
    """Base class for cl_nextgen_images errors."""


class FileSystemError(NextGenImagesError):
    """Raised by filesystem collaborators on I/O failure."""

    def __init__(self, message: str, path: str | None = None):
        self.path: str | None = path
        super().__init__(message)


class UrlNotFoundError(NextGenImagesError):
    """A URL could not be mapped to a file on disk."""

    def __init__(self, uri: str, message: str | None = None):
        self.uri: str = uri
        super().__init__(message or f"File not found for URL '{uri}'")


class ConvertorError(NextGenImagesError):
    """A URI could not be resolved to a filesystem path."""
