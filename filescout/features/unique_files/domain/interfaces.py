from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from .models import WalkEntry


class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.scandir vs anything else that can list a tree.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """
        Yields entries depth-first, root first, in directory listing order.
        A consumer calling entry.prune() before advancing skips that subtree.
        Raises TraversalError on the first entry that cannot be read.
        """
        pass


class IHasher(ABC):
    @abstractmethod
    def calculate(self, file_path: Path, digest) -> str:
        """Streams the file through digest and returns its hex string."""
        pass
