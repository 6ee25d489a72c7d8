"""Styleripper model layer -- public type re-exports."""

from styleripper.model.bundle import ClassCounts, RenameMap, RipResult, SourceFile
from styleripper.model.css import (
    AtBlock,
    ClassSelector,
    Combinator,
    Comment,
    Component,
    Node,
    Opaque,
    PseudoFunction,
    Rule,
    Selector,
    SelectorList,
    SimpleSelector,
    Stylesheet,
    clean_identifier,
    detach,
    walk,
)
from styleripper.model.html import class_tokens, set_class_tokens, walk_elements

__all__ = [
    # bundle
    "ClassCounts",
    "RenameMap",
    "SourceFile",
    "RipResult",
    # css tree
    "Stylesheet",
    "Rule",
    "AtBlock",
    "Opaque",
    "Comment",
    "SelectorList",
    "Selector",
    "Component",
    "ClassSelector",
    "Combinator",
    "SimpleSelector",
    "PseudoFunction",
    "Node",
    "clean_identifier",
    "detach",
    "walk",
    # html tree
    "walk_elements",
    "class_tokens",
    "set_class_tokens",
]
