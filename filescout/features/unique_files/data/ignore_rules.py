from pathlib import Path
from typing import Callable


class IgnoreRules:
    """
    Ready-made include predicates for FindUniqueFilesConfig.include_file_fn.
    """

    # OS junk that is never worth reporting
    IGNORED_NAMES = {
        ".DS_Store", "Thumbs.db", "desktop.ini",
    }

    # Tool folders; any file below one of these is skipped
    IGNORED_DIRS = {
        ".git", ".hg", ".svn", ".venv", "venv", "node_modules",
        "__pycache__", ".idea", ".vscode",
    }

    # Extensions that are system/temp files
    IGNORED_EXTENSIONS = {
        ".tmp", ".log", ".bak", ".swp", ".pyc", ".class"
    }

    @classmethod
    def should_ignore(cls, path: Path) -> bool:
        """
        Returns True if the file should be skipped.
        """
        # 1. Exact name matches
        if path.name in cls.IGNORED_NAMES:
            return True

        # 2. Hidden files, except .gitignore which people do copy around
        if path.name.startswith(".") and path.name != ".gitignore":
            return True

        # 3. Temp/backup extensions
        if path.suffix.lower() in cls.IGNORED_EXTENSIONS:
            return True

        # 4. Anything living inside a tool folder
        return any(part in cls.IGNORED_DIRS for part in path.parent.parts)

    @classmethod
    def include_file(cls, path: Path) -> bool:
        return not cls.should_ignore(path)

    @staticmethod
    def by_extension(*extensions: str) -> Callable[[Path], bool]:
        """
        Builds a predicate accepting only the given extensions, e.g. by_extension(".jpg", "png").
        """
        wanted = {
            (ext if ext.startswith(".") else f".{ext}").lower()
            for ext in extensions
        }

        def include(path: Path) -> bool:
            return path.suffix.lower() in wanted

        return include
