"""Tests for the options commands and top-level CLI."""

import json

import pytest
from click.testing import CliRunner

from quizlet_downloader import __version__
from quizlet_downloader.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestOptionsCommands:
    def test_show_defaults(self, runner, options_path):
        result = runner.invoke(cli, ["options", "show"])

        assert result.exit_code == 0, result.output
        assert "output_format" in result.output
        assert "json" in result.output
        assert str(options_path) in result.output

    def test_set_persists(self, runner, options_path):
        result = runner.invoke(cli, ["options", "set", "output_format", "docx"])

        assert result.exit_code == 0, result.output
        assert "output_format = docx" in result.output
        assert json.loads(options_path.read_text(encoding="utf-8"))["output_format"] == "docx"

    def test_set_boolean(self, runner, options_path):
        runner.invoke(cli, ["options", "set", "swap", "yes"])
        runner.invoke(cli, ["options", "set", "include_images", "off"])

        saved = json.loads(options_path.read_text(encoding="utf-8"))
        assert saved["swap"] is True
        assert saved["include_images"] is False

    def test_set_invalid_value(self, runner, options_path):
        result = runner.invoke(cli, ["options", "set", "swap", "sometimes"])

        assert result.exit_code == 1
        assert "Invalid value for option 'swap'" in result.output
        assert not options_path.exists()

    def test_set_unknown_key(self, runner, options_path):
        result = runner.invoke(cli, ["options", "set", "theme", "dark"])
        assert result.exit_code == 2

    def test_reset(self, runner, options_path):
        options_path.write_text(json.dumps({"output_format": "csv", "swap": True}), encoding="utf-8")

        result = runner.invoke(cli, ["options", "reset"])

        assert result.exit_code == 0
        saved = json.loads(options_path.read_text(encoding="utf-8"))
        assert saved["output_format"] == "json"
        assert saved["swap"] is False


class TestTopLevel:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_about(self, runner):
        result = runner.invoke(cli, ["about"])

        assert result.exit_code == 0
        assert f"Quizlet Downloader {__version__}" in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("export", "options", "about"):
            assert name in result.output
