"""Tests for CLI main module."""

from typer.testing import CliRunner

from logshelf.cli.main import app


runner = CliRunner()


def test_version():
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "logshelf" in result.stdout


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.stdout


def test_help():
    """Test help output."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "rolling" in result.stdout.lower()


def test_tail_help():
    result = runner.invoke(app, ["tail", "--help"])
    assert result.exit_code == 0
    assert "last lines" in result.stdout
