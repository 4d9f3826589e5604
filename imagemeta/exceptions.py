"""
Custom exception hierarchy for imagemeta.

Whole-file failures are raised as one of these types and handled per path
by the batch runner. Field-level problems never become exceptions.
"""


class ImageMetaError(Exception):
    """Base exception for all imagemeta errors."""
    pass


class NotAFileError(ImageMetaError):
    """Raised when a path does not resolve to a regular file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Given path does not correspond to a file: {path}")


class FileAttributeError(ImageMetaError):
    """Raised when filesystem attributes cannot be read."""
    pass


class ContainerError(ImageMetaError):
    """Raised when the tagged metadata container is missing or corrupt."""
    pass


class RecordFormatError(ImageMetaError):
    """Raised when sidecar JSON is malformed or violates the record schema."""
    pass


class SidecarWriteError(ImageMetaError):
    """Raised when a sidecar file cannot be written."""
    pass


class UsageError(ImageMetaError):
    """Raised when the batch runner is invoked without any paths."""
    pass
