"""Filesystem helpers: preflight checks, traversal and filtering."""

import os
from typing import Iterable, List

from utils.config import FormatConfig


def check_directories(config: FormatConfig) -> List[str]:
    """Find configured directories that are missing or unreadable.

    Args:
        config: Run configuration holding the directories to check.

    Returns:
        List[str]: Missing directories in configuration order. Empty when all
        of them are accessible.
    """
    return [
        directory
        for directory in config.directories
        if not (os.path.isdir(directory) and os.access(directory, os.R_OK | os.X_OK))
    ]


def collect_files(directory: str) -> List[str]:
    """Recursively collect every regular file under a directory.

    Entries are visited in name order and subdirectories are expanded where
    they appear. Symlinked directories are not followed. Errors reading a
    directory propagate to the caller.

    Args:
        directory: Directory to walk.

    Returns:
        List[str]: File paths joined onto ``directory``.
    """
    all_files = []
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        full_path = os.path.join(directory, entry.name)
        if entry.is_dir(follow_symlinks=False):
            all_files.extend(collect_files(full_path))
        elif entry.is_file():
            all_files.append(full_path)
    return all_files


def collect_all(config: FormatConfig) -> List[str]:
    """Collect files from every configured directory, in configuration order."""
    file_paths = []
    for directory in config.directories:
        file_paths.extend(collect_files(directory))
    return file_paths


def filter_files(paths: Iterable[str], extensions: Iterable[str]) -> List[str]:
    """Keep only paths whose file name ends with one of the extensions.

    The match is an exact, case-sensitive suffix match, so ``a.hpp`` does not
    match ``.h``.
    """
    extensions = tuple(extensions)
    return [path for path in paths if os.path.basename(path).endswith(extensions)]
