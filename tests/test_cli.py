from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from cleanup_html import cli as cli_module
from cleanup_html.cli import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_module, "configure_logging", lambda level=None: None)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_missing_argument_prints_usage(runner: CliRunner) -> None:
    result = runner.invoke(cli, [])
    assert result.exit_code == 2
    assert "Usage" in result.output


def test_nonexistent_path(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, [str(tmp_path / "nope.html")])
    assert result.exit_code == 2
    assert "does not exist" in result.output


def test_single_file_default_output(runner: CliRunner, tmp_path: Path) -> None:
    src = tmp_path / "page.html"
    src.write_text('<p class="a">Hello</p>', encoding="utf-8")

    result = runner.invoke(cli, [str(src)])

    assert result.exit_code == 0, result.output
    out = tmp_path / "page_processed.html"
    assert f"Processed: {src} -> {out}" in result.output
    assert out.read_text(encoding="utf-8") == "<p>Hello</p>"


def test_single_file_explicit_output(runner: CliRunner, tmp_path: Path) -> None:
    src = tmp_path / "page.html"
    dst = tmp_path / "clean.html"
    src.write_text("<head><title>T</title></head><body><p>x</p></body>", encoding="utf-8")

    result = runner.invoke(cli, [str(src), str(dst)])

    assert result.exit_code == 0, result.output
    assert dst.read_text(encoding="utf-8") == "<p>x</p>"


def test_single_file_failure_exits_nonzero(runner: CliRunner, tmp_path: Path) -> None:
    src = tmp_path / "bad.html"
    src.write_bytes(b"<p>\xff</p>")

    result = runner.invoke(cli, [str(src)])

    assert result.exit_code == 1
    assert "Failed to process" in result.output


def test_directory(runner: CliRunner, html_dir: Path) -> None:
    result = runner.invoke(cli, [str(html_dir), "--threads", "2"])

    assert result.exit_code == 0, result.output
    assert result.output.count("Processed:") == 2
    assert (html_dir / "a_processed.html").exists()
    assert (html_dir / "b_processed.html").exists()


def test_directory_rejects_output(runner: CliRunner, html_dir: Path) -> None:
    result = runner.invoke(cli, [str(html_dir), str(html_dir / "out.html")])
    assert result.exit_code == 2
    assert not (html_dir / "a_processed.html").exists()


def test_directory_with_failures(runner: CliRunner, html_dir: Path) -> None:
    (html_dir / "broken.html").write_bytes(b"<p>\xff</p>")

    result = runner.invoke(cli, [str(html_dir)])

    assert result.exit_code == 1
    assert result.output.count("Processed:") == 2
    assert "Failed to process" in result.output
