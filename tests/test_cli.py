"""Test cases for the CLI interface.

Contains unit tests for the main CLI entry point and its commands."""

from unittest import mock

import pytest
from click.testing import CliRunner
from cli import cli


def test_cli_basic():
    """Test that the CLI can be invoked without errors."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Recursively format project source files" in result.output


def test_cli_version():
    """Test that version flag works correctly."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_all_commands_registered():
    """Test that all commands are properly registered."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    for cmd in ["format", "list"]:
        assert cmd in result.output


def test_no_command_runs_format(tmp_path, monkeypatch):
    """Test invoking with no arguments formats with the defaults."""
    (tmp_path / "include").mkdir()
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.cpp").write_text("int main() {}\n")
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    with mock.patch("commands.format.subprocess.run") as run_mock:
        result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "Found 1 files to format!" in result.output
    assert "Formatting complete." in result.output
    assert run_mock.call_args.args[0][:2] == ["clang-format", "-i"]


def test_no_command_aborts_outside_project(tmp_path, monkeypatch):
    """Test invoking outside a project root aborts with exit code 1."""
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "Formatting aborted." in result.output
