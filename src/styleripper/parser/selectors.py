"""Hand-written tokenizer turning selector text into selector components.

Syntax covered:
    .class  #id  tag  *  ns|tag  &  [attr="value"]  :hover  ::before
    :nth-child(2n+1)           (kept verbatim)
    :not(.a, .b) :is() ...     (argument parsed as a nested selector list)
    a b  a > b  a + b  a ~ b   (combinators)
"""

from __future__ import annotations

import re

from styleripper.errors import ParseError
from styleripper.model.css import (
    ClassSelector,
    Combinator,
    Component,
    PseudoFunction,
    Selector,
    SelectorList,
    SimpleSelector,
)

__all__ = ["parse_selector_list", "serialize_selector_list", "serialize_selector"]

# Functional pseudo-classes whose argument is itself a selector list.
SELECTOR_FUNCTIONS = frozenset(
    {":not", ":is", ":where", ":has", ":matches", ":-webkit-any", ":-moz-any"}
)

_IDENT = r"(?:[\w-]|[^\x00-\x7f]|\\[0-9a-fA-F]{1,6}[ \t\n]?|\\[^\n0-9a-fA-F])+"

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
    | (?P<combinator>[>+~])
    | (?P<comma>,)
    | \.(?P<class_name>""" + _IDENT + r""")
    | (?P<id>\#""" + _IDENT + r""")
    | (?P<attr>\[(?:[^\]"']|"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')*\])
    | (?P<function>::?""" + _IDENT + r""")\(
    | (?P<pseudo>::?""" + _IDENT + r""")
    | (?P<type>(?:(?:""" + _IDENT + r"""|\*)?\|)?(?:""" + _IDENT + r"""|\*)|&)
    """,
    re.VERBOSE,
)


def _closing_paren(text: str, start: int) -> int:
    """Return the index of the ``)`` matching the ``(`` just before *start*."""
    depth = 1
    quote = ""
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "\\":
            i += 1
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    raise ParseError(f"Unbalanced parenthesis in selector {text!r}")


def parse_selector_list(text: str) -> SelectorList:
    """Parse a comma-separated selector list into a :class:`SelectorList`."""
    selectors: list[Selector] = []
    components: list[Component] = []
    pending_space = False
    pos = 0

    def push(component: Component) -> None:
        nonlocal pending_space
        if pending_space and components and not isinstance(components[-1], Combinator):
            components.append(Combinator(" "))
        pending_space = False
        components.append(component)

    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ParseError(f"Unexpected character {text[pos]!r} in selector {text!r}")
        pos = match.end()
        kind = match.lastgroup

        if kind == "ws":
            pending_space = True
        elif kind == "combinator":
            if components and isinstance(components[-1], Combinator):
                components[-1] = Combinator(match.group("combinator"))
            else:
                components.append(Combinator(match.group("combinator")))
            pending_space = False
        elif kind == "comma":
            selectors.append(Selector(components))
            components = []
            pending_space = False
        elif kind == "class_name":
            push(ClassSelector(match.group("class_name")))
        elif kind == "function":
            name = match.group("function")
            end = _closing_paren(text, pos)
            argument = text[pos:end]
            pos = end + 1
            if name.lower() in SELECTOR_FUNCTIONS:
                push(PseudoFunction(name, parse_selector_list(argument)))
            else:
                push(SimpleSelector(f"{name}({argument.strip()})"))
        else:
            push(SimpleSelector(match.group(kind)))

    if components or selectors:
        selectors.append(Selector(components))
    return SelectorList(selectors)


def _serialize_component(component: Component) -> str:
    if isinstance(component, ClassSelector):
        return "." + component.name
    if isinstance(component, Combinator):
        return component.value
    if isinstance(component, PseudoFunction):
        return f"{component.name}({serialize_selector_list(component.argument)})"
    return component.text


def serialize_selector(selector: Selector) -> str:
    return "".join(_serialize_component(c) for c in selector.components)


def serialize_selector_list(selector_list: SelectorList) -> str:
    """Render a selector list compactly: ``a>b,.c .d``."""
    return ",".join(serialize_selector(s) for s in selector_list.selectors)
