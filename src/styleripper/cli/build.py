"""CLI commands: styleripper build / watch -- build a static site."""

from __future__ import annotations

import sys

import click

from styleripper.errors import InvariantViolation, StyleRipperError
from styleripper.site.builder import BuildReport
from styleripper.site.builder import build as build_site
from styleripper.site.config import SiteConfig
from styleripper.site.watch import watch as watch_site


def _config(root: str, production: bool, inline_styles: bool) -> SiteConfig:
    return SiteConfig.from_env(root, production=production, inline_styles=inline_styles)


def _run_build(config: SiteConfig) -> BuildReport | None:
    """Build once; report user-facing errors instead of raising them."""
    try:
        return build_site(config)
    except InvariantViolation:
        raise
    except StyleRipperError as exc:
        click.echo(f"Build failed: {exc}", err=True)
        return None


def _summary(report: BuildReport) -> None:
    click.echo(f"Built {len(report.pages)} page(s)")
    for route in report.routes:
        click.echo(f"  {route}")
    if report.rip_results:
        click.echo(f"Renamed {report.classnames_renamed} classname(s)")


_root_argument = click.argument(
    "root", default=".", type=click.Path(exists=True, file_okay=False)
)
_production_option = click.option(
    "--production/--no-production",
    default=False,
    envvar="PRODUCTION",
    help="Rip, minify and brotli-compress the output (env: PRODUCTION)",
)
_inline_option = click.option(
    "--inline-styles",
    is_flag=True,
    help="Treat each page as its own build unit and inline its CSS",
)


@click.command()
@_root_argument
@_production_option
@_inline_option
def build(root: str, production: bool, inline_styles: bool) -> None:
    """Build the site in ROOT (pages/, styles/, components/) into dist/."""
    report = _run_build(_config(root, production, inline_styles))
    if report is None:
        sys.exit(1)
    _summary(report)


@click.command()
@_root_argument
@_production_option
@_inline_option
@click.option("--interval", default=0.5, show_default=True, help="Polling interval in seconds")
def watch(root: str, production: bool, inline_styles: bool, interval: float) -> None:
    """Build the site in ROOT, then rebuild whenever an HTML or CSS file changes."""
    config = _config(root, production, inline_styles)
    report = _run_build(config)
    if report is not None:
        _summary(report)

    def rebuild() -> None:
        click.echo("Change detected, rebuilding...")
        rebuilt = _run_build(config)
        if rebuilt is not None:
            _summary(rebuilt)

    try:
        watch_site(config, rebuild, interval=interval)
    except KeyboardInterrupt:
        click.echo("Stopped watching")
