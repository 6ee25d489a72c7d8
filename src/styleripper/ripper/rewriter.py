"""Tree rewriter: applies a rename plan to CSS and HTML trees in place."""

from __future__ import annotations

from collections.abc import Mapping

from bs4 import BeautifulSoup

from styleripper.model.bundle import RenameMap
from styleripper.model.css import ClassSelector, Stylesheet, walk
from styleripper.model.html import class_tokens, set_class_tokens, walk_elements


def rename_css(sheet: Stylesheet, plan: Mapping[str, str], rename_map: RenameMap) -> int:
    """Rename every class-selector in *sheet* that has an entry in *plan*.

    Each applied ``original -> short`` pair is recorded in *rename_map*.  A
    selector is visited once, so a short name that happens to equal a later
    original classname is never renamed a second time.  Returns the number
    of selectors rewritten.
    """
    renamed = 0
    for node, _ in walk(sheet, ClassSelector):
        name = node.clean_name  # type: ignore[union-attr]
        short = plan.get(name)
        if short is None:
            continue
        rename_map[name] = short
        node.name = short  # type: ignore[union-attr]
        renamed += 1
    return renamed


def rename_html(doc: BeautifulSoup, rename_map: Mapping[str, str]) -> int:
    """Rewrite class attributes in *doc* using *rename_map*.

    Tokens without an entry are left as they are.  Returns the number of
    tokens replaced.
    """
    replaced = 0
    for element in walk_elements(doc):
        tokens = class_tokens(element)
        if not tokens:
            continue
        renamed = [rename_map.get(token, token) for token in tokens]
        replaced += sum(1 for token in tokens if token in rename_map)
        set_class_tokens(element, renamed)
    return replaced
