"""Orchestrator: runs one build unit through count, prune, rank and rewrite."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bs4 import BeautifulSoup

from styleripper.events import types as events
from styleripper.events.bus import EventBus
from styleripper.model.bundle import ClassCounts, RenameMap, RipResult, SourceFile
from styleripper.model.css import Stylesheet
from styleripper.parser.css import parse_css, serialize_css
from styleripper.parser.html import parse_html, serialize_html
from styleripper.ripper.counter import count_html_classes
from styleripper.ripper.eliminator import count_css_classes, eliminate_dead_rules
from styleripper.ripper.planner import plan_renames, rank_classnames
from styleripper.ripper.rewriter import rename_css, rename_html

log = logging.getLogger("styleripper")

BUNDLE_IDENTIFIER = "built.css"


def rip_trees(
    documents: Sequence[BeautifulSoup],
    stylesheets: Sequence[Stylesheet],
    *,
    identifiers: Sequence[str] | None = None,
    event_bus: EventBus | None = None,
) -> tuple[RenameMap, ClassCounts]:
    """Prune and rename already-parsed trees of one build unit in place.

    Returns the rename map (only classnames matched by a surviving CSS
    class-selector get an entry) and the final occurrence counts.
    """
    bus = event_bus or EventBus()
    names = list(identifiers) if identifiers is not None else [
        f"<css {i}>" for i in range(len(stylesheets))
    ]

    counts: ClassCounts = {}
    for doc in documents:
        count_html_classes(doc, counts)
    bus.emit(events.ClassnamesCounted(identifier="<html>", distinct=len(counts)))

    for name, sheet in zip(names, stylesheets):
        report = eliminate_dead_rules(sheet, counts)
        count_css_classes(sheet, counts)
        log.debug(
            "%s: removed %d rule(s), %d selector(s), %d class component(s)",
            name,
            report.rules_removed,
            report.selectors_removed,
            report.components_removed,
        )
        bus.emit(
            events.DeadRulesEliminated(
                identifier=name,
                rules_removed=report.rules_removed,
                selectors_removed=report.selectors_removed,
                components_removed=report.components_removed,
            )
        )

    plan = plan_renames(rank_classnames(counts))
    rename_map: RenameMap = {}
    for sheet in stylesheets:
        rename_css(sheet, plan, rename_map)
    bus.emit(events.RenamePlanned(classnames=len(plan), renamed=len(rename_map)))

    # Unrenamed HTML tokens keep their spelling and may collide with a short name.
    clashes = sorted(set(rename_map.values()) & (set(counts) - set(rename_map)))
    if clashes:
        log.warning(
            "Unrenamed classname(s) %s now match selectors renamed to the same name",
            ", ".join(clashes),
        )

    for doc in documents:
        rename_html(doc, rename_map)
    return rename_map, counts


def rip(
    html_files: Sequence[SourceFile],
    css_files: Sequence[SourceFile],
    *,
    bundle_identifier: str = BUNDLE_IDENTIFIER,
    event_bus: EventBus | None = None,
) -> RipResult:
    """Minify the class names of one build unit.

    Parses every HTML and CSS file, eliminates dead CSS, renames classnames
    by byte weight and returns the concatenated CSS bundle together with each
    rewritten HTML document.  Identical inputs always give identical output.
    """
    bus = event_bus or EventBus()
    bus.emit(events.RipStarted(html_files=len(html_files), css_files=len(css_files)))

    documents = [parse_html(f.text, f.identifier) for f in html_files]
    stylesheets = [parse_css(f.text, f.identifier) for f in css_files]

    rename_map, counts = rip_trees(
        documents,
        stylesheets,
        identifiers=[f.identifier for f in css_files],
        event_bus=bus,
    )

    css_bundle = SourceFile(
        identifier=bundle_identifier,
        text="".join(serialize_css(sheet) for sheet in stylesheets),
    )
    html_documents = [
        SourceFile(identifier=f.identifier, text=serialize_html(doc))
        for f, doc in zip(html_files, documents)
    ]
    result = RipResult(
        css_bundle=css_bundle,
        html_documents=html_documents,
        rename_map=rename_map,
        counts=counts,
    )

    original_bytes = sum(f.size for f in [*html_files, *css_files])
    log.info(
        "Ripped %d HTML and %d CSS file(s): %d classname(s), %d renamed, %d -> %d bytes",
        len(html_files),
        len(css_files),
        len(counts),
        len(rename_map),
        original_bytes,
        result.size,
    )
    bus.emit(events.RipCompleted(original_bytes=original_bytes, output_bytes=result.size))
    return result
