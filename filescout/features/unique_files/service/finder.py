import logging
import os
from pathlib import Path
from typing import Dict, Optional

from ..data.file_walker import LocalFileWalker
from ..data.hasher import StreamingHasher
from ..domain.errors import PathResolutionError
from ..domain.interfaces import IFileWalker, IHasher
from ..domain.models import (
    FindUniqueFilesConfig,
    SearchSummary,
    StatefulFileInfo,
    WalkEntry,
    relative_to_root,
)

logger = logging.getLogger(__name__)


class StatefulFileWalker:
    """
    Walks one directory tree and reports every included file,
    remembering which content hashes it has already seen.
    """

    def __init__(self,
                 config: FindUniqueFilesConfig,
                 walker: Optional[IFileWalker] = None,
                 hasher: Optional[IHasher] = None):
        # Fail before touching the filesystem
        config.validate()

        try:
            self.abs_target_dir_path = Path(os.path.abspath(os.fspath(config.target_dir_path)))
        except (OSError, ValueError, TypeError) as e:
            raise PathResolutionError(
                f"failed to resolve '{config.target_dir_path}' to an absolute path - {e}"
            ) from e

        self.config = config
        self.walker = walker or LocalFileWalker()
        self.hasher = hasher or StreamingHasher()
        # digest -> path relative to the search root of its first occurrence
        self.file_hashes_to_previous: Dict[str, str] = {}

    def search(self) -> SearchSummary:
        """
        Runs one full traversal.
        Any error (walk, hashing, or raised by a callback) aborts the search
        and propagates unchanged.
        """
        self.file_hashes_to_previous = {}
        summary = SearchSummary()

        logger.info(
            f"Starting search of: {self.abs_target_dir_path} "
            f"(recursive={self.config.recursive}, allow_dupes={self.config.allow_dupes})"
        )

        for entry in self.walker.walk(self.abs_target_dir_path):
            self._visit(entry, summary)

        logger.info(
            f"Search complete. Included {summary.files_included}/{summary.files_found} files, "
            f"{summary.duplicates_found} duplicates."
        )
        return summary

    def _visit(self, entry: WalkEntry, summary: SearchSummary) -> None:
        if entry.is_dir:
            if not self.config.recursive and entry.path != self.abs_target_dir_path:
                logger.debug(f"Pruning subdirectory: {entry.path}")
                entry.prune()
                summary.directories_pruned += 1
            return

        # TODO: follow symlinks and Windows junctions once link cycles are detected.
        if not entry.is_regular:
            return

        summary.files_found += 1
        file_path = entry.path

        if not self.config.include_file_fn(file_path):
            summary.files_ignored += 1
            return
        summary.files_included += 1

        already_seen = False
        file_hash = ""
        previous_file_path = ""
        if not self.config.allow_dupes:
            file_hash = self.hasher.calculate(file_path, self.config.pick_hasher())

            if file_hash in self.file_hashes_to_previous:
                already_seen = True
                previous_file_path = self.file_hashes_to_previous[file_hash]
                summary.duplicates_found += 1
                logger.debug(f"Duplicate: {file_path} matches {previous_file_path}")
            else:
                self.file_hashes_to_previous[file_hash] = relative_to_root(
                    file_path, self.abs_target_dir_path
                )

        self.config.found_file_fn(StatefulFileInfo(
            already_seen=already_seen,
            file_path=file_path,
            previous_file_path=previous_file_path,
            parent_dir_path=file_path.parent,
            hash=file_hash,
            info=entry.info,
            abs_search_dir_path=self.abs_target_dir_path,
        ))
