"""
Command line interface for format-tools.

This module provides the main CLI entry point for all format-tools commands.
"""

import click

from commands.format import format_sources, list_sources


@click.group(invoke_without_command=True)
@click.version_option("0.1.0", prog_name="format-tools")
@click.pass_context
def cli(ctx):
    """Recursively format project source files with clang-format.

    Run without a command from the project root to format everything
    under the default directories.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(format_sources)


# Register all commands with the main CLI
cli.add_command(format_sources)
cli.add_command(list_sources)
