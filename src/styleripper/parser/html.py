"""HTML tree provider built on BeautifulSoup."""

from __future__ import annotations

from bs4 import BeautifulSoup

from styleripper.errors import ParseError

__all__ = ["parse_html", "serialize_html"]


def parse_html(source: str, identifier: str | None = None) -> BeautifulSoup:
    """Parse HTML *source* into a mutable BeautifulSoup document.

    The stdlib ``html.parser`` backend is used: it keeps fragments as
    fragments (no implied ``<html>``/``<body>``) and passes ``<script>`` and
    ``<style>`` bodies through untouched.
    """
    try:
        return BeautifulSoup(source, "html.parser")
    except Exception as exc:
        raise ParseError(str(exc), identifier) from exc


def serialize_html(doc: BeautifulSoup) -> str:
    return str(doc)
