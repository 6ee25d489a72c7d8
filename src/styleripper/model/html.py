"""HTML tree helpers over BeautifulSoup documents."""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag


def walk_elements(doc: BeautifulSoup | Tag) -> Iterator[Tag]:
    """Yield every element below *doc* exactly once, in document order."""
    yield from doc.find_all(True)


def class_tokens(tag: Tag) -> list[str]:
    """Return the class attribute of *tag* as a token list (empty if absent)."""
    value = tag.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [token for token in value if token]


def set_class_tokens(tag: Tag, tokens: list[str]) -> None:
    """Replace the class attribute of *tag* with *tokens*."""
    tag["class"] = list(tokens)
