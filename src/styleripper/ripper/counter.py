"""Classname counter: tallies class tokens found on HTML elements."""

from __future__ import annotations

from bs4 import BeautifulSoup

from styleripper.model.bundle import ClassCounts
from styleripper.model.html import class_tokens, walk_elements


def count_html_classes(doc: BeautifulSoup, counts: ClassCounts) -> ClassCounts:
    """Increment *counts* once per class token occurrence in *doc*.

    ``class="a b a"`` adds two to ``a`` and one to ``b``.  New tokens are
    inserted in document order, which later decides ranking ties.  The
    document itself is left untouched.
    """
    for element in walk_elements(doc):
        for token in class_tokens(element):
            counts[token] = counts.get(token, 0) + 1
    return counts
