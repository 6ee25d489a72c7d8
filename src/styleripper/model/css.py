"""CSS tree model: one dataclass per node kind, plus traversal helpers.

Nodes compare by identity so that removing a node from its parent list never
hits an equal-looking sibling by accident.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

_ESCAPE_RE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n]?|(.))", re.DOTALL)


# ---------------------------------------------------------------------------
# Selector components
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class ClassSelector:
    """A ``.name`` component. ``name`` may still carry backslash escapes."""

    name: str

    @property
    def clean_name(self) -> str:
        return clean_identifier(self.name)


@dataclass(eq=False)
class Combinator:
    """A combinator between compound selectors: ``" "``, ``>``, ``+`` or ``~``."""

    value: str

    @property
    def is_descendant(self) -> bool:
        return self.value == " "


@dataclass(eq=False)
class SimpleSelector:
    """Any other simple selector, kept verbatim (type, ``*``, ``#id``, ``[attr]``, ``:hover``)."""

    text: str


@dataclass(eq=False)
class PseudoFunction:
    """A functional pseudo-class taking a selector list, e.g. ``:not(.a, .b)``."""

    name: str  # including the leading colon(s), e.g. ":not"
    argument: SelectorList


Component = Union[ClassSelector, Combinator, SimpleSelector, PseudoFunction]


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Selector:
    """One complex selector: an ordered list of components."""

    components: list[Component] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not any(not isinstance(c, Combinator) for c in self.components)


@dataclass(eq=False)
class SelectorList:
    """The comma-separated selectors of a rule."""

    selectors: list[Selector] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.selectors


# ---------------------------------------------------------------------------
# Stylesheet-level nodes
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Rule:
    """A rule with a declaration block.

    Style rules carry a selector list.  Rules such as ``@font-face`` carry an
    ``at_keyword`` and no selector list; class pruning never touches them.
    """

    selectors: SelectorList | None
    declarations: str = ""
    at_keyword: str = ""


@dataclass(eq=False)
class AtBlock:
    """A grouping at-rule such as ``@media`` whose body holds further rules."""

    prelude: str  # e.g. "@media screen and (max-width:600px)"
    children: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class Opaque:
    """An at-rule kept verbatim (``@import``, ``@keyframes``, unknown rules)."""

    text: str


@dataclass(eq=False)
class Comment:
    text: str


@dataclass(eq=False)
class Stylesheet:
    children: list[Node] = field(default_factory=list)


Node = Union[
    Stylesheet,
    Rule,
    AtBlock,
    Opaque,
    Comment,
    SelectorList,
    Selector,
    ClassSelector,
    Combinator,
    SimpleSelector,
    PseudoFunction,
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _unescape(match: re.Match[str]) -> str:
    if match.group(1):
        code = int(match.group(1), 16)
        return chr(code) if 0 < code <= 0x10FFFF else "\ufffd"
    return match.group(2)


def clean_identifier(name: str) -> str:
    """Decode the escapes of a CSS identifier.

    ``\\:`` becomes ``:`` and hex escapes such as ``\\32 `` become the character
    they encode, so ``sm\\:flex`` compares equal to the HTML token ``sm:flex``.
    An escaped backslash (``\\\\``) decodes to a single real backslash.
    """
    return _ESCAPE_RE.sub(_unescape, name)


def _children(node: Node) -> list[Node]:
    """Return the live child list of *node* (a fresh list for single slots)."""
    if isinstance(node, (Stylesheet, AtBlock)):
        return node.children
    if isinstance(node, SelectorList):
        return node.selectors  # type: ignore[return-value]
    if isinstance(node, Selector):
        return node.components  # type: ignore[return-value]
    if isinstance(node, Rule):
        return [node.selectors] if node.selectors is not None else []
    if isinstance(node, PseudoFunction):
        return [node.argument]
    return []


def _is_slot(node: Node) -> bool:
    return isinstance(node, (Rule, PseudoFunction))


def _attached(live: list[Node], child: Node, hint: int) -> bool:
    if hint < len(live) and live[hint] is child:
        return True
    return any(item is child for item in live)


def walk(
    root: Node, kind: type | tuple[type, ...] | None = None
) -> Iterator[tuple[Node, list[Node] | None]]:
    """Yield ``(node, siblings)`` for every descendant of *root* matching *kind*.

    Nodes are visited depth-first in document order.  ``siblings`` is the live
    list holding the node, so the consumer may remove the node (or any other
    entry) from it during iteration; it is ``None`` for single-slot children
    such as a rule's selector list.  Every node is visited at most once, and a
    node removed before it is reached, or removed while being visited, is not
    descended into.
    """
    snapshot = tuple(_children(root))
    for index, child in enumerate(snapshot):
        live = _children(root)
        if not _attached(live, child, index):
            continue
        if kind is None or isinstance(child, kind):
            yield child, (None if _is_slot(root) else live)
            if not _attached(_children(root), child, index):
                continue
        yield from walk(child, kind)


def detach(siblings: list[Node], node: Node) -> None:
    """Remove *node* from *siblings* by identity."""
    for index, item in enumerate(siblings):
        if item is node:
            del siblings[index]
            return
    raise ValueError(f"{node!r} is not in the given list")
