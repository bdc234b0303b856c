from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from statgen import __version__
from statgen.cli import app


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_inline_markdown_is_written_to_index(workdir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--inline", "#Hello\\n\\nWorld"])
    assert result.exit_code == 0, result.output

    html = Path("dist/index.html").read_text(encoding="utf-8")
    assert "<h1>Hello</h1>" in html
    assert "<p>World</p>" in html
    assert "<title>Hello</title>" in html


def test_inline_accepts_powershell_newlines(workdir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["-i", "# Hi`nBody", "-o", "out"])
    assert result.exit_code == 0, result.output

    html = Path("out/index.html").read_text(encoding="utf-8")
    assert "<h1>Hi</h1>" in html
    assert "<p>Body</p>" in html


def test_file_conversion_applies_options(workdir: Path) -> None:
    runner = CliRunner()
    Path("notes.md").write_text("# Notes\n\n[link](https://example.com)", encoding="utf-8")
    result = runner.invoke(
        app,
        [
            "--file",
            "notes.md",
            "--output",
            "site",
            "--theme",
            "dark",
            "--accent",
            "#ff6600",
            "--font-size",
            "20px",
            "--favicon",
            "📚",
        ],
    )
    assert result.exit_code == 0, result.output

    html = Path("site/index.html").read_text(encoding="utf-8")
    assert "--bg-color: #1a1a1a;" in html
    assert "--link-color: #ff6600;" in html
    assert "font-size: 20px;" in html
    assert 'rel="icon"' in html
    assert "<script" not in html


def test_directory_conversion_reports_each_file(workdir: Path) -> None:
    runner = CliRunner()
    docs = Path("docs")
    docs.mkdir()
    (docs / "intro.md").write_text("# Intro", encoding="utf-8")
    (docs / "guide.md").write_text("# Guide", encoding="utf-8")

    result = runner.invoke(app, ["--directory", "docs", "--output", "site"])
    assert result.exit_code == 0, result.output

    assert Path("site/intro.html").exists()
    assert Path("site/guide.html").exists()
    assert "2 Markdown file(s)" in result.output


def test_directory_without_markdown(workdir: Path) -> None:
    runner = CliRunner()
    Path("empty").mkdir()
    result = runner.invoke(app, ["-d", "empty"])
    assert result.exit_code == 0, result.output
    assert "No .md files found" in result.output


def test_invalid_accent_exits_before_writing(workdir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--inline", "# Page", "--accent", "chartreuse"])
    assert result.exit_code == 1
    assert "Invalid color" in result.output
    assert not Path("dist").exists()


def test_invalid_dark_accent_is_rejected(workdir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--inline", "# Page", "--accent-dark", "#12"])
    assert result.exit_code == 1
    assert "Invalid hex color length" in result.output


def test_missing_input_is_an_error(workdir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "Nothing to convert" in result.output


def test_missing_file_is_fatal(workdir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--file", "missing.md"])
    assert result.exit_code == 1
    assert "Cannot convert" in result.output


def test_unknown_theme_is_a_usage_error() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--inline", "x", "--theme", "sepia"])
    assert result.exit_code == 2


def test_custom_font_prints_install_reminder(workdir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--inline", "x", "--font", "Times New Roman"])
    assert result.exit_code == 0, result.output
    assert "installed" in result.output

    html = Path("dist/index.html").read_text(encoding="utf-8")
    assert "font-family: Times New Roman;" in html


def test_config_file_supplies_defaults(workdir: Path) -> None:
    runner = CliRunner()
    Path("statgen.yml").write_text("theme: dark\noutput: public\naccent: gold\n", encoding="utf-8")

    result = runner.invoke(app, ["--inline", "# Configured"])
    assert result.exit_code == 0, result.output

    html = Path("public/index.html").read_text(encoding="utf-8")
    assert "--bg-color: #1a1a1a;" in html
    assert "--link-color: gold;" in html


def test_cli_options_override_config_file(workdir: Path) -> None:
    runner = CliRunner()
    Path("statgen.json").write_text('{"theme": "dark", "output": "public"}', encoding="utf-8")

    result = runner.invoke(app, ["--inline", "# Override", "--theme", "light", "-o", "out"])
    assert result.exit_code == 0, result.output

    html = Path("out/index.html").read_text(encoding="utf-8")
    assert "--bg-color: #f4f4f4;" in html
    assert not Path("public").exists()


def test_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_config_with_non_string_keys_does_not_stop_the_run(workdir: Path) -> None:
    runner = CliRunner()
    Path("statgen.yml").write_text("1: x\ntheme: dark\n", encoding="utf-8")

    result = runner.invoke(app, ["--inline", "# Hi"])
    assert result.exit_code == 0, result.output

    html = Path("dist/index.html").read_text(encoding="utf-8")
    assert "<h1>Hi</h1>" in html
    assert "--bg-color: #f4f4f4;" in html
