from pathlib import Path


class FileSearchError(Exception):
    """Base class for every error raised while finding files."""


class ValidationError(FileSearchError, ValueError):
    """A required callback is missing from the configuration."""


class PathResolutionError(FileSearchError):
    """The search root could not be turned into an absolute path."""


class TraversalError(FileSearchError):
    """
    The filesystem refused to describe or list an entry during the walk.
    The original OSError is available as __cause__.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"failed to walk '{path}' - {reason}")


class HashIOError(FileSearchError):
    """Opening or reading a file for hashing failed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"failed to hash file '{path}' - {reason}")


class CallbackError(FileSearchError):
    """
    Convenience type for found-file callbacks that want to stop the walk.
    Raised errors of any type propagate unchanged; this one is never raised
    by the finder itself.
    """
