import os
from pathlib import Path
from typing import Iterator, List

from ..domain.errors import TraversalError
from ..domain.interfaces import IFileWalker
from ..domain.models import WalkEntry


class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using os.scandir.
    Uses an explicit stack so deeply nested trees don't hit the recursion limit.
    """

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        try:
            root_info = os.lstat(root)
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte
            raise TraversalError(root, str(e)) from e

        pending = [WalkEntry(path=root, info=root_info)]
        while pending:
            entry = pending.pop()
            yield entry

            # The consumer had its chance to prune while we were suspended
            if entry.is_dir and not entry.pruned:
                # Reversed so the first listed child is popped first
                pending.extend(reversed(self._list_children(entry.path)))

    def _list_children(self, dir_path: Path) -> List[WalkEntry]:
        children = []
        try:
            with os.scandir(dir_path) as it:
                for item in it:
                    child_path = Path(item.path)
                    try:
                        info = item.stat(follow_symlinks=False)
                    except OSError as e:
                        # e.g. the entry vanished between listing and stat
                        raise TraversalError(child_path, str(e)) from e
                    children.append(WalkEntry(path=child_path, info=info))
        except TraversalError:
            raise
        except OSError as e:
            raise TraversalError(dir_path, str(e)) from e
        return children
