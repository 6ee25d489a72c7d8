"""Dead-rule eliminator: drops CSS that references classes no document uses."""

from __future__ import annotations

import logging
from collections.abc import Container
from dataclasses import dataclass

from styleripper.errors import InvariantViolation
from styleripper.model.bundle import ClassCounts
from styleripper.model.css import (
    AtBlock,
    ClassSelector,
    Combinator,
    Comment,
    Component,
    Node,
    PseudoFunction,
    Rule,
    Selector,
    SelectorList,
    SimpleSelector,
    Stylesheet,
    detach,
    walk,
)

log = logging.getLogger(__name__)


@dataclass
class EliminationReport:
    """What a single elimination pass removed."""

    rules_removed: int = 0
    selectors_removed: int = 0
    components_removed: int = 0
    comments_removed: int = 0
    blocks_removed: int = 0

    def __add__(self, other: EliminationReport) -> EliminationReport:
        return EliminationReport(
            rules_removed=self.rules_removed + other.rules_removed,
            selectors_removed=self.selectors_removed + other.selectors_removed,
            components_removed=self.components_removed + other.components_removed,
            comments_removed=self.comments_removed + other.comments_removed,
            blocks_removed=self.blocks_removed + other.blocks_removed,
        )


def eliminate_dead_rules(sheet: Stylesheet, known: Container[str]) -> EliminationReport:
    """Remove every class reference in *sheet* that is not in *known*.

    Per rule, top to bottom: unknown class components are removed from each
    selector, selectors left with no components are removed from the list,
    and a rule left with no selectors is removed from the stylesheet.  Rules
    without a selector list are skipped.  Comments are always dropped.

    Selector-list arguments of functional pseudo-classes are pruned the same
    way.  An emptied ``:not()`` is dropped from its selector; any other emptied
    function (``:is()``, ``:where()``, ``:has()``...) can never match, so the
    whole selector goes.
    """
    report = EliminationReport()
    _prune_nodes(sheet.children, known, report)
    return report


def count_css_classes(sheet: Stylesheet, counts: ClassCounts) -> ClassCounts:
    """Increment *counts* for every class-selector left in a pruned *sheet*.

    Raises:
        InvariantViolation: a class-selector names a classname that is not in
            *counts*, i.e. :func:`eliminate_dead_rules` let it through.
    """
    for node, _ in walk(sheet, ClassSelector):
        name = node.clean_name  # type: ignore[union-attr]
        if name not in counts:
            raise InvariantViolation(name)
        counts[name] += 1
    return counts


# ---------------------------------------------------------------------------
# Pruning
# ---------------------------------------------------------------------------


def _prune_nodes(nodes: list[Node], known: Container[str], report: EliminationReport) -> None:
    for node in tuple(nodes):
        if isinstance(node, Comment):
            detach(nodes, node)
            report.comments_removed += 1
        elif isinstance(node, AtBlock):
            if not node.children:
                continue
            _prune_nodes(node.children, known, report)
            if not node.children:
                detach(nodes, node)
                report.blocks_removed += 1
        elif isinstance(node, Rule):
            if node.selectors is None:
                continue
            _prune_selector_list(node.selectors, known, report)
            if node.selectors.is_empty():
                detach(nodes, node)
                report.rules_removed += 1


def _prune_selector_list(
    selector_list: SelectorList, known: Container[str], report: EliminationReport
) -> None:
    for selector in tuple(selector_list.selectors):
        _prune_selector(selector, known, report)
        if selector.is_empty():
            detach(selector_list.selectors, selector)  # type: ignore[arg-type]
            report.selectors_removed += 1


def _prune_selector(selector: Selector, known: Container[str], report: EliminationReport) -> None:
    components = selector.components
    relative = bool(components) and isinstance(components[0], Combinator)
    removed: list[str] = []
    for component in tuple(components):
        if isinstance(component, ClassSelector):
            if component.clean_name not in known:
                detach(components, component)  # type: ignore[arg-type]
                report.components_removed += 1
                removed.append(component.clean_name)
        elif isinstance(component, PseudoFunction):
            _prune_selector_list(component.argument, known, report)
            if not component.argument.is_empty():
                continue
            report.components_removed += 1
            if component.name.lower() != ":not":
                # :is(), :where(), :has() with nothing left match no element
                components.clear()
                return
            detach(components, component)  # type: ignore[arg-type]
            removed.append(component.name)
    if removed:
        _tidy_combinators(components, keep_leading=relative)
        if _only_pseudo_classes(components):
            log.warning(
                "Removing unused %s left a selector that matches any element",
                ", ".join(removed),
            )


def _only_pseudo_classes(components: list[Component]) -> bool:
    """True when every remaining component is a pseudo-class such as ``:hover``."""
    rest = [c for c in components if not isinstance(c, Combinator)]
    return bool(rest) and all(
        isinstance(c, PseudoFunction) or (isinstance(c, SimpleSelector) and c.text.startswith(":"))
        for c in rest
    )


def _tidy_combinators(components: list[Component], keep_leading: bool) -> None:
    """Collapse runs of combinators to their last member and trim the edges."""
    tidy: list[Component] = []
    for component in components:
        if isinstance(component, Combinator):
            if tidy and isinstance(tidy[-1], Combinator):
                tidy[-1] = component
                continue
            if not tidy and not keep_leading:
                continue
        tidy.append(component)
    while tidy and isinstance(tidy[-1], Combinator):
        tidy.pop()
    components[:] = tidy
