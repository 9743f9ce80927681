"""Run configuration for format-tools."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

# The directories to run our formatting on, recursively
DEFAULT_DIRECTORIES = ("include", "src")

# Filetypes to run the formatter on
DEFAULT_EXTENSIONS = (".h", ".cpp", ".c")

# Some distros append the version to the clang-format binary name
DEFAULT_BINARY = "clang-format"


@dataclass(frozen=True)
class FormatConfig:
    """Everything one formatting run needs to know.

    Attributes:
        directories: Directories to scan, relative to the working directory.
        extensions: File name suffixes eligible for formatting.
        binary: Name or path of the formatter executable.
    """

    directories: Tuple[str, ...] = DEFAULT_DIRECTORIES
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    binary: str = DEFAULT_BINARY

    @classmethod
    def from_options(
        cls,
        directories: Optional[Iterable[str]] = None,
        extensions: Optional[Iterable[str]] = None,
        binary: Optional[str] = None,
    ) -> "FormatConfig":
        """Build a config from CLI options, keeping defaults for empty ones."""
        return cls(
            directories=tuple(directories) if directories else DEFAULT_DIRECTORIES,
            extensions=tuple(extensions) if extensions else DEFAULT_EXTENSIONS,
            binary=binary or DEFAULT_BINARY,
        )
