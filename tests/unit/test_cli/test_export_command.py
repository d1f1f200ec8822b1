"""Tests for the export command."""

import json

import pytest
import requests
from click.testing import CliRunner
from docx import Document

from conftest import SET_URL, make_row, make_set_html
from quizlet_downloader.cli.main import cli
from quizlet_downloader.scrape import fetcher as fetcher_module

ROWS = [
    make_row("Cell", "Basic unit of life"),
    make_row("Mitosis", "Cell division<br>producing two cells"),
    make_row("Ribosome", "Makes proteins", image="https://o.quizlet.com/ribosome.png"),
]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def saved_page(tmp_path):
    """Set page saved from the browser."""
    page = tmp_path / "biology.html"
    page.write_text(make_set_html(ROWS, expected=3, canonical=SET_URL), encoding="utf-8")
    return page


@pytest.fixture
def out_dir(tmp_path):
    directory = tmp_path / "out"
    directory.mkdir()
    return directory


def exported_files(directory):
    return sorted(directory.iterdir())


class TestExportCommand:
    def test_json_export(self, runner, saved_page, out_dir, options_path):
        result = runner.invoke(cli, ["export", str(saved_page), "-y", "-o", str(out_dir)])

        assert result.exit_code == 0, result.output
        assert "Scraping data..." in result.output
        assert "Done! Found 3 quizzes." in result.output

        files = exported_files(out_dir)
        assert len(files) == 1
        assert files[0].name.startswith("Biology_Basics_")
        assert files[0].name.endswith("_TD.json")

        data = json.loads(files[0].read_text(encoding="utf-8"))
        assert data["info"]["quizSetURL"] == SET_URL
        assert data["info"]["creatorName"] == "jdoe"
        assert data["quizData"]["2"]["definitionPart"]["text"] == "Cell division\nproducing two cells"
        assert data["quizData"]["3"]["definitionPart"]["image"] == "https://o.quizlet.com/ribosome.png"

    def test_csv_export_swapped(self, runner, saved_page, out_dir, options_path):
        result = runner.invoke(
            cli, ["export", str(saved_page), "--format", "csv", "--swap", "-y", "-o", str(out_dir)]
        )

        assert result.exit_code == 0, result.output
        (path,) = exported_files(out_dir)
        assert path.name.endswith("_DT.csv")

        content = path.read_bytes()
        assert content.startswith(b"\xef\xbb\xbf")
        text = content.decode("utf-8-sig")
        assert "Definition,Term" in text
        assert "Basic unit of life,Cell" in text

    def test_docx_export_without_images(self, runner, saved_page, out_dir, options_path):
        result = runner.invoke(
            cli, ["export", str(saved_page), "-f", "docx", "--no-images", "-y", "-o", str(out_dir)]
        )

        assert result.exit_code == 0, result.output
        (path,) = exported_files(out_dir)
        document = Document(str(path))
        table = document.tables[0]
        assert [cell.text for cell in table.rows[0].cells] == ["Term", "Definition"]
        assert table.rows[3].cells[1].text == "Makes proteins"

    def test_overrides_are_saved(self, runner, saved_page, out_dir, options_path):
        runner.invoke(
            cli,
            ["export", str(saved_page), "-f", "csv", "--no-images", "-p", "[set]_{quizSetTitle}", "-y", "-o", str(out_dir)],
        )

        saved = json.loads(options_path.read_text(encoding="utf-8"))
        assert saved["output_format"] == "csv"
        assert saved["include_images"] is False
        assert saved["filename_pattern"] == "[set]_{quizSetTitle}"
        assert saved["custom_format_enabled"] is True
        assert [p.name for p in exported_files(out_dir)] == ["set_Biology_Basics.csv"]

    def test_saved_options_used(self, runner, saved_page, out_dir, options_path):
        options_path.write_text(json.dumps({"output_format": "csv", "swap": True}), encoding="utf-8")

        result = runner.invoke(cli, ["export", str(saved_page), "-y", "-o", str(out_dir)])

        assert result.exit_code == 0, result.output
        (path,) = exported_files(out_dir)
        assert path.name.endswith("_DT.csv")

    def test_count_mismatch(self, runner, tmp_path, out_dir, options_path):
        page = tmp_path / "partial.html"
        page.write_text(make_set_html(ROWS[:2], expected=120), encoding="utf-8")

        result = runner.invoke(cli, ["export", str(page), "-y", "-o", str(out_dir)])

        assert result.exit_code == 1
        assert "Error: Mismatch error: Found 2 terms but expected 120. Please scroll down/expand all." in result.output
        assert exported_files(out_dir) == []

    def test_empty_set(self, runner, tmp_path, out_dir, options_path):
        page = tmp_path / "empty.html"
        page.write_text(make_set_html([]), encoding="utf-8")

        result = runner.invoke(cli, ["export", str(page), "-y", "-o", str(out_dir)])

        assert result.exit_code == 1
        assert "Error: No data found or script failed." in result.output

    @pytest.mark.parametrize("content", ["{not json", '{"version": "2025.1"}'])
    def test_bad_selectors_file(self, runner, saved_page, out_dir, tmp_path, monkeypatch, options_path, content):
        selectors = tmp_path / "selectors.json"
        selectors.write_text(content, encoding="utf-8")
        monkeypatch.setenv("QDL_SELECTORS_FILE", str(selectors))

        result = runner.invoke(cli, ["export", str(saved_page), "-y", "-o", str(out_dir)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Cannot load selector table" in result.output
        assert exported_files(out_dir) == []

    def test_not_a_quizlet_page(self, runner, options_path):
        result = runner.invoke(cli, ["export", "https://example.com/cards"])

        assert result.exit_code == 1
        assert "Please open a Quizlet set page." in result.output

    def test_unreachable_page(self, runner, monkeypatch, options_path):
        def refuse(url, **kwargs):
            raise requests.exceptions.ConnectionError("connection refused")

        monkeypatch.setattr(fetcher_module.requests, "get", refuse)
        result = runner.invoke(cli, ["export", SET_URL, "-y"])

        assert result.exit_code == 1
        assert "Error: Page not ready or blocked." in result.output

    def test_http_strategy(self, runner, monkeypatch, out_dir, options_path):
        class Response:
            text = make_set_html(ROWS, expected=3)
            url = SET_URL

            def raise_for_status(self):
                pass

        monkeypatch.setattr(fetcher_module.requests, "get", lambda url, **kwargs: Response())
        result = runner.invoke(cli, ["export", SET_URL, "-s", "http", "-y", "-o", str(out_dir)])

        assert result.exit_code == 0, result.output
        assert "Done! Found 3 quizzes." in result.output


class TestSavePrompt:
    def test_prompt_accepts_new_path(self, runner, saved_page, tmp_path, options_path):
        target = tmp_path / "picked.json"
        result = runner.invoke(cli, ["export", str(saved_page)], input=f"{target}\n")

        assert result.exit_code == 0, result.output
        assert "Save as" in result.output
        assert target.exists()

    def test_prompt_into_directory(self, runner, saved_page, out_dir, options_path):
        result = runner.invoke(cli, ["export", str(saved_page)], input=f"{out_dir}\n")

        assert result.exit_code == 0, result.output
        (path,) = exported_files(out_dir)
        assert path.name.endswith("_TD.json")

    def test_declining_overwrite_cancels(self, runner, saved_page, tmp_path, options_path):
        target = tmp_path / "existing.json"
        target.write_text("keep me", encoding="utf-8")

        result = runner.invoke(cli, ["export", str(saved_page)], input=f"{target}\nn\n")

        assert result.exit_code == 0, result.output
        assert "Save cancelled." in result.output
        assert target.read_text(encoding="utf-8") == "keep me"

    def test_confirming_overwrite(self, runner, saved_page, tmp_path, options_path):
        target = tmp_path / "existing.json"
        target.write_text("old", encoding="utf-8")

        result = runner.invoke(cli, ["export", str(saved_page)], input=f"{target}\ny\n")

        assert result.exit_code == 0, result.output
        assert json.loads(target.read_text(encoding="utf-8"))["info"]["numberOfQuizzes"] == 3
