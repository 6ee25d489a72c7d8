"""CLI command: styleripper rip -- process one build unit of HTML and CSS files."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from styleripper.errors import InvariantViolation, StyleRipperError
from styleripper.events import DeadRulesEliminated, EventBus
from styleripper.model.bundle import SourceFile
from styleripper.ripper import BUNDLE_IDENTIFIER
from styleripper.ripper import rip as rip_unit


def _read_sources(paths: tuple[str, ...]) -> list[SourceFile]:
    return [
        SourceFile(identifier=p, text=Path(p).read_text(encoding="utf-8")) for p in paths
    ]


def _output_names(identifiers: list[str]) -> list[Path]:
    """Paths of the HTML outputs relative to the output directory."""
    if len(identifiers) == 1:
        return [Path(Path(identifiers[0]).name)]
    parents = [os.path.dirname(os.path.abspath(i)) for i in identifiers]
    base = os.path.commonpath(parents)
    return [Path(os.path.relpath(os.path.abspath(i), base)) for i in identifiers]


@click.command()
@click.argument(
    "html_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--css",
    "css_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Stylesheet belonging to the build unit (repeatable)",
)
@click.option(
    "--out",
    "out_dir",
    default="ripped",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory to write built.css and the rewritten pages to",
)
@click.pass_context
def rip(
    ctx: click.Context, html_files: tuple[str, ...], css_files: tuple[str, ...], out_dir: str
) -> None:
    """Prune dead CSS and shorten class names across HTML_FILES and their CSS.

    All files given form a single build unit: they share one rename map.
    """
    html_sources = _read_sources(html_files)
    css_sources = _read_sources(css_files)

    bus = EventBus()
    if (ctx.obj or {}).get("verbose"):
        bus.subscribe(
            DeadRulesEliminated,
            lambda e: click.echo(
                f"  {e.identifier}: -{e.rules_removed} rule(s), "
                f"-{e.selectors_removed} selector(s)",
                err=True,
            ),
        )

    try:
        result = rip_unit(html_sources, css_sources, event_bus=bus)
    except InvariantViolation:
        raise
    except StyleRipperError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    (out / BUNDLE_IDENTIFIER).write_text(result.css_bundle.text, encoding="utf-8")
    names = _output_names([doc.identifier for doc in result.html_documents])
    for name, doc in zip(names, result.html_documents):
        target = out / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(doc.text, encoding="utf-8")

    saved = result.bytes_saved(html_sources + css_sources)
    click.echo(f"Renamed {len(result.rename_map)} of {len(result.counts)} classname(s)")
    click.echo(f"Size: {result.size + saved} -> {result.size} bytes ({saved} saved)")
    click.echo(f"Output: {out}")
