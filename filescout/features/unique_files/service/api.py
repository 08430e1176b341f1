from ..domain.models import FindUniqueFilesConfig, SearchSummary
from .finder import StatefulFileWalker


def find_unique_files(config: FindUniqueFilesConfig) -> SearchSummary:
    """
    Searches config.target_dir_path and reports files to config.found_file_fn.

    Unless allow_dupes is set, every file is hashed and reported together
    with the relative path of the first file that had the same content.

    For include_file_fn, IgnoreRules.include_file (skips OS junk, hidden and
    temp files, tool folders) and IgnoreRules.by_extension(".jpg", ...) from
    data/ignore_rules.py are ready-made predicates.

    Raises:
        ValidationError: a required callback is missing.
        PathResolutionError: the target cannot be made absolute.
        TraversalError / HashIOError: the filesystem failed mid-walk.
        Anything raised by found_file_fn, unchanged.
    """
    return StatefulFileWalker(config).search()
