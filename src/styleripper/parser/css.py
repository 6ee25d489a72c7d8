"""CSS tree provider built on cssutils.

cssutils splits the source into rules and renders declaration blocks; the
selector tokenizer in :mod:`styleripper.parser.selectors` turns each prelude
into class-selector components the ripper can prune and rename.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Any

import cssutils
from cssutils import CSSParser
from cssutils.serialize import CSSSerializer, Preferences

from styleripper.errors import ParseError
from styleripper.model.css import AtBlock, Comment, Node, Opaque, Rule, Stylesheet
from styleripper.parser.selectors import parse_selector_list, serialize_selector_list

__all__ = ["parse_css", "serialize_css"]

# cssutils reports every property it cannot validate; none of that matters here.
cssutils.log.setLevel(logging.CRITICAL)

log = logging.getLogger(__name__)


def _minified_serializer() -> CSSSerializer:
    prefs = Preferences()
    prefs.useMinified()
    prefs.keepUnknownAtRules = True
    return CSSSerializer(prefs)


_SERIALIZER = _minified_serializer()


def _convert(rule: Any) -> Node:
    """Convert one cssutils rule into a tree node."""
    kind = rule.type
    if kind == rule.STYLE_RULE:
        return Rule(
            selectors=parse_selector_list(rule.selectorText),
            declarations=rule.style.cssText,
        )
    if kind == rule.MEDIA_RULE:
        return AtBlock(
            prelude=f"@media {rule.media.mediaText}",
            children=[_convert(child) for child in rule.cssRules],
        )
    if kind == rule.FONT_FACE_RULE:
        return Rule(
            selectors=None,
            declarations=rule.style.cssText,
            at_keyword="@font-face",
        )
    if kind == rule.COMMENT:
        return Comment(rule.cssText)
    return Opaque(rule.cssText)


# Grouping at-rules cssutils has no model for. Left to cssutils they come back
# as unknown rules whose selectors are mangled (".a" becomes ". a").
_GROUPING_RE = re.compile(
    r"@(?:-moz-)?(?:supports|container|layer|document|scope|starting-style)(?![\w-])",
    re.IGNORECASE,
)


def _significant(source: str, start: int = 0) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for characters outside comments, strings and escapes."""
    i, n = start, len(source)
    while i < n:
        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            i = n if end < 0 else end + 2
            continue
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "\"'":
            i += 1
            while i < n and source[i] != ch:
                i += 2 if source[i] == "\\" else 1
            i += 1
            continue
        yield i, ch
        i += 1


def _block(source: str, start: int) -> tuple[int, int] | None:
    """Return the brace positions of the block following an at-rule prelude.

    ``None`` means the at-rule ends with ``;`` (``@layer base;``).  An unclosed
    block runs to the end of *source*.
    """
    depth = 0
    opening = -1
    for i, ch in _significant(source, start):
        if ch == ";" and depth == 0:
            return None
        if ch == "{":
            if depth == 0:
                opening = i
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth == 0:
                return opening, i
    if opening < 0:
        return None
    return opening, len(source)


def _split_grouping_rules(source: str) -> list[tuple[str | None, str]]:
    """Split *source* into plain CSS runs ``(None, text)`` and grouping rules ``(prelude, body)``."""
    chunks: list[tuple[str | None, str]] = []
    plain_start = 0
    depth = 0
    for i, ch in _significant(source):
        if i < plain_start:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(depth - 1, 0)
        elif ch == "@" and depth == 0:
            match = _GROUPING_RE.match(source, i)
            block = _block(source, match.end()) if match else None
            if block is None:
                continue
            opening, closing = block
            chunks.append((None, source[plain_start:i]))
            chunks.append((source[i:opening], source[opening + 1 : closing]))
            plain_start = closing + 1
    chunks.append((None, source[plain_start:]))
    return chunks


def _parse_children(parser: CSSParser, source: str) -> list[Node]:
    children: list[Node] = []
    for prelude, text in _split_grouping_rules(source):
        if prelude is not None:
            body = _parse_children(parser, text)
            children.append(AtBlock(prelude=" ".join(prelude.split()), children=body))
        elif text.strip():
            sheet = parser.parseString(text)
            children.extend(_convert(rule) for rule in sheet.cssRules)
    return children


def parse_css(source: str, identifier: str | None = None) -> Stylesheet:
    """Parse CSS *source* into a mutable :class:`Stylesheet` tree.

    ``@supports``, ``@container``, ``@layer`` and similar blocks are split off
    before cssutils sees them and become :class:`AtBlock` nodes, so the rules
    inside them are pruned and renamed like any other.
    """
    cssutils.setSerializer(_SERIALIZER)
    parser = CSSParser(raiseExceptions=False, validate=False)
    try:
        children = _parse_children(parser, source)
    except Exception as exc:
        raise ParseError(str(exc), identifier) from exc
    log.debug("Parsed %s: %d top-level rules", identifier or "<css>", len(children))
    return Stylesheet(children)


def _serialize_node(node: Node) -> str:
    if isinstance(node, Rule):
        if node.selectors is None:
            head = node.at_keyword
        else:
            head = serialize_selector_list(node.selectors)
        return f"{head}{{{node.declarations}}}"
    if isinstance(node, AtBlock):
        body = "".join(_serialize_node(child) for child in node.children)
        return f"{node.prelude}{{{body}}}"
    if isinstance(node, (Opaque, Comment)):
        return node.text
    raise TypeError(f"Cannot serialize {type(node).__name__} at stylesheet level")


def serialize_css(sheet: Stylesheet) -> str:
    """Render *sheet* back to compact CSS text."""
    return "".join(_serialize_node(node) for node in sheet.children)
