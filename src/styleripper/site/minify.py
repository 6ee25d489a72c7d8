"""Whole-document minification used for production builds."""

from __future__ import annotations

import minify_html
import rjsmin


def minify_html_document(html: str) -> str:
    """Collapse whitespace, drop comments and unneeded attribute quotes.

    Closing tags are kept: pages are also injected through ``innerHTML`` by
    the navigation script.
    """
    return minify_html.minify(html, minify_css=True, keep_closing_tags=True)


def minify_js(source: str) -> str:
    return rjsmin.jsmin(source, keep_bang_comments=False)
