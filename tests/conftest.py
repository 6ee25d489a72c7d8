from __future__ import annotations

from pathlib import Path

import pytest


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small site: two pages, one component, one stylesheet and a head file."""
    _write(tmp_path / "head.html", '<link rel="stylesheet" href="/built.css">')
    _write(tmp_path / "pages" / "index.html", '<h1 class="title">Home</h1><%nav%>')
    _write(tmp_path / "pages" / "about" / "index.html", '<p class="text">About</p>')
    _write(
        tmp_path / "components" / "nav" / "index.html",
        '<nav class="nav"><a href="/about/">About</a></nav>',
    )
    _write(
        tmp_path / "styles" / "main.css",
        ".title { color: red } .nav { margin: 0 } .unused { color: blue }",
    )
    return tmp_path
