"""Command modules for format-tools CLI."""

from . import format

# List of all command modules to be registered with the CLI
__all__ = [
    'format',
]
