from __future__ import annotations

from pathlib import Path

import pytest


def data_path() -> Path:
    """
    :return: Absolute path to test fixtures dir
    """
    return Path(__file__).parent / "fixtures"


def read_text(path: Path) -> str:
    """
    :param path: File path
    :return: File contents as UTF-8 text
    """
    return path.read_text(encoding="utf-8")


@pytest.fixture
def html_dir(tmp_path: Path) -> Path:
    """
    :return: Directory with two HTML files, a text file and a subdirectory
    """
    (tmp_path / "a.html").write_text('<div class="x"><p>A</p></div>', encoding="utf-8")
    (tmp_path / "b.html").write_text("<p><span></span>B</p>", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("<p>ignored</p>", encoding="utf-8")
    (tmp_path / "nested.html").mkdir()
    return tmp_path
