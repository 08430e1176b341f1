import hashlib
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Union

from filescout.core.config.settings import settings

from .errors import ValidationError


def relative_to_root(file_path: Path, root: Path) -> str:
    """Path of file_path inside root; a root that is itself a file maps to its name."""
    if file_path == root:
        return file_path.name
    return str(file_path.relative_to(root))


@dataclass(frozen=True)
class StatefulFileInfo:
    """
    Result record handed to the found-file callback.
    Extends the file's stat metadata with its dedup state.
    """
    # Always False when allow_dupes is set
    already_seen: bool
    file_path: Path
    # Relative to the search root; "" unless already_seen
    previous_file_path: str
    parent_dir_path: Path
    # Lowercase hex digest; "" when allow_dupes is set
    hash: str
    info: os.stat_result
    abs_search_dir_path: Path

    @property
    def size_bytes(self) -> int:
        return self.info.st_size

    @property
    def relative_path(self) -> str:
        return relative_to_root(self.file_path, self.abs_search_dir_path)


@dataclass(frozen=True)
class FindUniqueFilesConfig:
    """
    Caller intent for one search.
    The two callbacks are required; validate() enforces it.
    """
    target_dir_path: Union[str, os.PathLike]
    recursive: bool = False
    allow_dupes: bool = False
    # Returns a fresh hashlib-style digest per file
    hasher_fn: Optional[Callable[[], Any]] = None
    include_file_fn: Optional[Callable[[Path], bool]] = None
    found_file_fn: Optional[Callable[[StatefulFileInfo], None]] = None

    def validate(self) -> None:
        if self.include_file_fn is None:
            raise ValidationError("include_file_fn cannot be None")
        if self.found_file_fn is None:
            raise ValidationError("found_file_fn cannot be None")

    def pick_hasher(self):
        """Returns the caller's digest or a new one for the configured default algorithm."""
        if self.hasher_fn is None:
            return hashlib.new(settings.HASH_ALGORITHM)
        return self.hasher_fn()


@dataclass
class WalkEntry:
    """
    One filesystem entry produced by a walk.
    info is lstat metadata, so symbolic links are never followed.
    """
    path: Path
    info: os.stat_result
    pruned: bool = field(default=False, compare=False)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.info.st_mode)

    @property
    def is_regular(self) -> bool:
        return stat.S_ISREG(self.info.st_mode)

    def prune(self) -> None:
        """Tells the walker not to descend into this directory."""
        self.pruned = True


@dataclass
class SearchSummary:
    """
    Report returned after a search completes.
    """
    files_found: int = 0
    files_included: int = 0
    files_ignored: int = 0
    duplicates_found: int = 0
    directories_pruned: int = 0
