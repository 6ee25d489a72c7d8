"""Static-site builder: component includes, client-side routing, production ripping."""

from styleripper.site.builder import BuildReport, build, load_sources
from styleripper.site.config import SiteConfig
from styleripper.site.watch import Watcher, watch

__all__ = ["BuildReport", "build", "load_sources", "SiteConfig", "Watcher", "watch"]
