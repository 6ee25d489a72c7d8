"""Static-site build: pages + components + styles -> dist/."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from styleripper.events.bus import EventBus
from styleripper.model.bundle import RipResult, SourceFile
from styleripper.ripper import rip
from styleripper.site.collect import collect, strip_first_dir
from styleripper.site.components import expand_components
from styleripper.site.config import SiteConfig
from styleripper.site.minify import minify_html_document, minify_js
from styleripper.site.output import reset_directory, write_output
from styleripper.site.template import page_route, render_navigation, render_page

log = logging.getLogger(__name__)

STYLESHEET_NAME = "built.css"


@dataclass
class BuildReport:
    """Summary of a finished build."""

    pages: list[Path] = field(default_factory=list)
    stylesheet: Path | None = None
    routes: list[str] = field(default_factory=list)
    rip_results: list[RipResult] = field(default_factory=list)

    @property
    def classnames_renamed(self) -> int:
        return sum(len(r.rename_map) for r in self.rip_results)


def _read(config: SiteConfig, path: Path) -> SourceFile:
    return SourceFile(
        identifier=path.relative_to(config.root).as_posix(),
        text=path.read_text(encoding="utf-8"),
    )


def load_sources(config: SiteConfig) -> tuple[list[SourceFile], list[SourceFile]]:
    """Read every page (components expanded) and every stylesheet of the site."""
    files = collect(config.pages_path, [".html", ".css"]) + collect(
        config.styles_path, [".css"]
    )
    pages: list[SourceFile] = []
    styles: list[SourceFile] = []
    for path in files:
        source = _read(config, path)
        if path.suffix == ".html":
            text = expand_components(source.text, config.components_path)
            pages.append(SourceFile(source.identifier, text))
        else:
            styles.append(source)
    return pages, styles


def _rip_pages(
    config: SiteConfig,
    pages: list[SourceFile],
    styles: list[SourceFile],
    event_bus: EventBus | None,
    report: BuildReport,
) -> tuple[list[SourceFile], list[SourceFile]]:
    if config.inline_styles:
        # Each page is its own build unit and carries its CSS with it.
        inlined: list[SourceFile] = []
        for page in pages:
            result = rip([page], styles, event_bus=event_bus)
            report.rip_results.append(result)
            html = result.html_documents[0].text
            text = f"<style>{result.css_bundle.text}</style>{html}"
            inlined.append(SourceFile(page.identifier, text))
        return inlined, []

    result = rip(pages, styles, bundle_identifier=STYLESHEET_NAME, event_bus=event_bus)
    report.rip_results.append(result)
    return result.html_documents, [result.css_bundle]


def build(config: SiteConfig, event_bus: EventBus | None = None) -> BuildReport:
    """Build the site described by *config* into its dist directory."""
    report = BuildReport()
    head = config.head_path.read_text(encoding="utf-8") if config.head_path.is_file() else ""
    pages, styles = load_sources(config)
    log.info("Building %d page(s) and %d stylesheet(s)", len(pages), len(styles))

    if config.production:
        pages, styles = _rip_pages(config, pages, styles, event_bus, report)

    routes: dict[str, str] = {}
    for page in pages:
        body = minify_html_document(page.text) if config.production else page.text
        routes[page_route(page.identifier)] = body
    report.routes = list(routes)

    dist = config.dist_path
    reset_directory(dist)
    for directory in sorted(p for p in config.pages_path.rglob("*") if p.is_dir()):
        (dist / directory.relative_to(config.pages_path)).mkdir(parents=True, exist_ok=True)

    for page in pages:
        route = page_route(page.identifier)
        navigation = render_navigation(routes, route)
        if config.production:
            navigation = minify_js(navigation)
        document = render_page(head, page.text, navigation)
        if config.production:
            document = minify_html_document(document)
        target = dist / strip_first_dir(page.identifier)
        report.pages.append(write_output(target, document, config.production))

    if not config.inline_styles or not config.production:
        css = "".join(sheet.text for sheet in styles)
        report.stylesheet = write_output(dist / STYLESHEET_NAME, css, config.production)

    log.info("Built %d page(s) into %s", len(report.pages), dist)
    return report
