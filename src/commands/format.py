"""Source formatting commands for format-tools CLI."""

import enum
import json
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import click

from utils.config import DEFAULT_BINARY, FormatConfig
from utils.files import check_directories, collect_all, filter_files
from utils.formatting import format_size, get_file_size, get_files_size, pluralize

Echo = Callable[..., None]

USAGE_HINT = "Make sure to run from the project root folder, like so: format-tools format"


class RunOutcome(enum.Enum):
    """Final state of a formatting run."""

    ABORTED = "aborted"
    COMPLETED = "completed"


@dataclass
class FormatResult:
    """Outcome of formatting a single file."""

    path: str
    success: bool
    error: Optional[str] = None


def format_file(path: str, binary: str = DEFAULT_BINARY) -> FormatResult:
    """Format a single file in place with the external formatter.

    The call blocks until the formatter exits. Failures are captured in the
    returned result rather than raised.

    Args:
        path: File to format.
        binary: Formatter executable, resolved on PATH.

    Returns:
        FormatResult: Success, or the captured failure detail.
    """
    try:
        subprocess.run(
            [binary, "-i", path],
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        detail = str(e)
        stderr = (e.stderr or "").strip()
        if stderr:
            detail = f"{detail} {stderr}"
        return FormatResult(path, False, detail)
    except (OSError, subprocess.SubprocessError) as e:
        return FormatResult(path, False, str(e))
    except Exception as e:
        return FormatResult(path, False, f"{type(e).__name__}: {e}")

    return FormatResult(path, True)


def format_files(
    paths: List[str],
    binary: str = DEFAULT_BINARY,
    on_start: Optional[Callable[[str], None]] = None,
    on_result: Optional[Callable[[FormatResult], None]] = None,
) -> List[FormatResult]:
    """Format each path in order, one formatter process at a time.

    Args:
        paths: Files to format.
        binary: Formatter executable.
        on_start: Called with each path before its formatter is invoked.
        on_result: Called with each result as soon as its formatter exits.

    Returns:
        List[FormatResult]: One result per path, in the same order.
    """
    results = []
    for path in paths:
        if on_start is not None:
            on_start(path)
        result = format_file(path, binary)
        if on_result is not None:
            on_result(result)
        results.append(result)
    return results


def report_missing(missing: List[str], echo: Echo) -> None:
    for directory in missing:
        echo(
            f"Failed to find {directory} directory, probably in the wrong folder.",
            err=True,
        )
    echo(USAGE_HINT, err=True)


def run(
    config: FormatConfig, echo: Echo = click.echo, dry_run: bool = False
) -> Tuple[RunOutcome, List[FormatResult]]:
    """Run the whole pipeline: preflight, collect, filter and format.

    Args:
        config: Directories, extensions and formatter to use.
        echo: Output function, called like ``click.echo``.
        dry_run: List the eligible files without invoking the formatter.

    Returns:
        Tuple of (outcome, results). Results are empty when the run aborts
        or is a dry run. The run aborts when a directory is missing or
        cannot be read.
    """
    missing = check_directories(config)
    if missing:
        report_missing(missing, echo)
        return RunOutcome.ABORTED, []

    try:
        file_paths = filter_files(collect_all(config), config.extensions)
    except OSError as e:
        echo(f"Failed to read source files: {e}", err=True)
        return RunOutcome.ABORTED, []
    echo(f"Found {len(file_paths)} files to format!")

    if dry_run:
        for path in file_paths:
            echo(f"Would format {path}")
        return RunOutcome.COMPLETED, []

    def report_failure(result: FormatResult) -> None:
        if not result.success:
            echo(f"Error formatting {result.path}: {result.error}", err=True)

    results = format_files(
        file_paths,
        config.binary,
        on_start=lambda path: echo(f"Formatting {path}"),
        on_result=report_failure,
    )

    return RunOutcome.COMPLETED, results


def config_options(func):
    """Attach the options shared by every formatting command."""
    func = click.option(
        "--ext",
        "-e",
        "extensions",
        multiple=True,
        help="File extension to format. Can be specified multiple times. "
        "Defaults to .h, .cpp and .c",
    )(func)
    func = click.option(
        "--dir",
        "-d",
        "directories",
        multiple=True,
        help="Directory to scan recursively. Can be specified multiple times. "
        "Defaults to include and src",
    )(func)
    return func


@click.command("format")
@config_options
@click.option(
    "--binary",
    "-b",
    default=DEFAULT_BINARY,
    show_default=True,
    help="Formatter executable to invoke as '<binary> -i <file>'",
)
@click.option("--dry-run", is_flag=True, help="Only list the files that would be formatted")
@click.option("--strict", is_flag=True, help="Exit non-zero if any file failed to format")
def format_sources(
    directories: Tuple[str],
    extensions: Tuple[str],
    binary: str,
    dry_run: bool,
    strict: bool,
):
    """Format source files in place.

    Walks each directory recursively and runs the formatter on every file
    with a matching extension. A failure on one file never stops the rest.
    """
    config = FormatConfig.from_options(directories, extensions, binary)
    outcome, results = run(config, dry_run=dry_run)

    if outcome is RunOutcome.ABORTED:
        click.echo("\nFormatting aborted.")
        sys.exit(1)

    failed = [result for result in results if not result.success]
    if failed:
        click.echo(f"\n{pluralize(len(failed), 'file')} failed to format.", err=True)
    click.echo("\nFormatting complete.")

    if strict and failed:
        sys.exit(1)


@click.command("list")
@config_options
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
def list_sources(directories: Tuple[str], extensions: Tuple[str], json_output: bool):
    """List source files eligible for formatting."""
    config = FormatConfig.from_options(directories, extensions)

    missing = check_directories(config)
    if missing:
        report_missing(missing, click.echo)
        sys.exit(1)

    try:
        file_paths = filter_files(collect_all(config), config.extensions)
    except OSError as e:
        click.echo(f"Failed to read source files: {e}", err=True)
        sys.exit(1)

    if json_output:
        files = [{"path": path, "size": get_file_size(path)} for path in file_paths]
        click.echo(json.dumps(files, indent=2))
        return

    for path in file_paths:
        click.echo(path)
    click.echo(
        f"\n{pluralize(len(file_paths), 'file')} eligible "
        f"({format_size(get_files_size(file_paths))})"
    )
