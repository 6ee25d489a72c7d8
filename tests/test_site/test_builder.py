"""Tests for the static-site build."""

import brotli
import pytest

from styleripper.errors import ComponentNotFound
from styleripper.events import EventBus, EventRecorder, RipCompleted
from styleripper.site.builder import build, load_sources
from styleripper.site.config import SiteConfig


def _br(path) -> str:
    return brotli.decompress(path.read_bytes()).decode("utf-8")


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


class TestLoadSources:
    def test_components_expanded(self, site):
        pages, styles = load_sources(SiteConfig(root=site))
        by_id = {p.identifier: p.text for p in pages}
        assert by_id["pages/index.html"] == (
            '<h1 class="title">Home</h1><nav class="nav"><a href="/about/">About</a></nav>'
        )
        assert [s.identifier for s in styles] == ["styles/main.css"]

    def test_css_beside_pages_is_a_stylesheet(self, site):
        (site / "pages" / "extra.css").write_text(".x{color:red}", encoding="utf-8")
        _, styles = load_sources(SiteConfig(root=site))
        assert [s.identifier for s in styles] == ["pages/extra.css", "styles/main.css"]


# ---------------------------------------------------------------------------
# Development builds
# ---------------------------------------------------------------------------


class TestDevelopmentBuild:
    def test_writes_pages_and_stylesheet(self, site):
        report = build(SiteConfig(root=site))
        dist = site / "dist"
        assert (dist / "index.html").is_file()
        assert (dist / "about" / "index.html").is_file()
        assert (dist / "built.css").read_text(encoding="utf-8") == (
            ".title { color: red } .nav { margin: 0 } .unused { color: blue }"
        )
        assert report.stylesheet == dist / "built.css"
        assert set(report.routes) == {"/", "/about/"}
        assert report.rip_results == []

    def test_page_document(self, site):
        build(SiteConfig(root=site))
        index = (site / "dist" / "index.html").read_text(encoding="utf-8")
        assert index.startswith("<!DOCTYPE html>")
        assert '<link rel="stylesheet" href="/built.css">' in index
        assert '<nav class="nav">' in index
        assert "<%" not in index

    def test_navigation_carries_other_routes(self, site):
        build(SiteConfig(root=site))
        index = (site / "dist" / "index.html").read_text(encoding="utf-8")
        assert '"/about/":"<p class=\\"text\\">About<\\/p>"' in index
        assert '"/":' not in index

    def test_page_directories_mirrored(self, site):
        (site / "pages" / "drafts").mkdir()
        build(SiteConfig(root=site))
        assert (site / "dist" / "drafts").is_dir()

    def test_stale_output_removed(self, site):
        stale = site / "dist" / "old.html"
        stale.parent.mkdir()
        stale.write_text("old", encoding="utf-8")
        build(SiteConfig(root=site))
        assert not stale.exists()

    def test_missing_head_file(self, site):
        (site / "head.html").unlink()
        build(SiteConfig(root=site))
        assert (site / "dist" / "index.html").is_file()

    def test_missing_component_fails(self, site):
        (site / "pages" / "broken.html").write_text("<%ghost%>", encoding="utf-8")
        with pytest.raises(ComponentNotFound):
            build(SiteConfig(root=site))


# ---------------------------------------------------------------------------
# Production builds
# ---------------------------------------------------------------------------


class TestProductionBuild:
    def test_only_brotli_files(self, site):
        build(SiteConfig(root=site, production=True))
        dist = site / "dist"
        assert (dist / "index.html.br").is_file()
        assert not (dist / "index.html").exists()
        assert (dist / "built.css.br").is_file()

    def test_stylesheet_ripped(self, site):
        report = build(SiteConfig(root=site, production=True))
        assert _br(site / "dist" / "built.css.br") == ".a{color:red}.b{margin:0}"
        assert report.classnames_renamed == 2

    def test_pages_use_short_names(self, site):
        build(SiteConfig(root=site, production=True))
        index = _br(site / "dist" / "index.html.br")
        assert "title" not in index
        assert "Home" in index
        about = _br(site / "dist" / "about" / "index.html.br")
        assert "text" in about

    def test_events_forwarded(self, site):
        bus = EventBus()
        recorder = EventRecorder(bus)
        build(SiteConfig(root=site, production=True), event_bus=bus)
        assert len(recorder.of_type(RipCompleted)) == 1

    def test_inline_styles(self, site):
        report = build(SiteConfig(root=site, production=True, inline_styles=True))
        dist = site / "dist"
        assert report.stylesheet is None
        assert not (dist / "built.css.br").exists()
        assert "<style>" in _br(dist / "index.html.br")
        assert len(report.rip_results) == 2

    def test_inline_styles_ignored_in_development(self, site):
        report = build(SiteConfig(root=site, inline_styles=True))
        assert report.stylesheet == site / "dist" / "built.css"
