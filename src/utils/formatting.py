"""Utility functions for formatting output."""

import os
from typing import Iterable


def format_size(size_bytes):
    """Format bytes into a human-readable format.

    Args:
        size_bytes: Size in bytes to format.

    Returns:
        str: Formatted size string with appropriate unit.
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ("B", "KB", "MB", "GB", "TB")
    i = 0
    while size_bytes >= 1024 and i < len(size_names) - 1:
        size_bytes /= 1024
        i += 1

    return f"{size_bytes:.2f} {size_names[i]}"


def get_file_size(path: str) -> int:
    """Return the size of a file, or 0 if it cannot be read."""
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


def get_files_size(paths: Iterable[str]) -> int:
    """Calculate the total size of a collection of files.

    Args:
        paths: File paths to sum.

    Returns:
        int: Total size in bytes. Unreadable files count as zero.
    """
    return sum(get_file_size(path) for path in paths)


def pluralize(count: int, noun: str) -> str:
    """Render ``count noun`` with a trailing ``s`` unless count is one."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
