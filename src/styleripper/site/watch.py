"""Rebuild-on-change: polls the site's HTML and CSS files."""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Callable

from styleripper.site.collect import collect
from styleripper.site.config import SiteConfig

log = logging.getLogger(__name__)

WATCHED_EXTENSIONS = (".html", ".css")
DEBOUNCE_SECONDS = 0.2

Snapshot = dict[Path, tuple[int, int]]


class Watcher:
    """Detects changes to the watched files between two :meth:`poll` calls."""

    def __init__(self, config: SiteConfig) -> None:
        self.config = config
        self._exclude = ("node_modules", config.dist_dir)
        self._last = self.snapshot()

    def snapshot(self) -> Snapshot:
        state: Snapshot = {}
        for path in collect(self.config.root, WATCHED_EXTENSIONS, self._exclude):
            stat = path.stat()
            state[path] = (stat.st_mtime_ns, stat.st_size)
        return state

    def poll(self) -> bool:
        """Return True if any watched file was added, removed or modified."""
        current = self.snapshot()
        changed = current != self._last
        self._last = current
        return changed


def watch(
    config: SiteConfig,
    on_change: Callable[[], None],
    *,
    interval: float = 0.5,
    debounce: float = DEBOUNCE_SECONDS,
    stop: threading.Event | None = None,
) -> None:
    """Call *on_change* whenever watched files change, until *stop* is set.

    Changes seen within *debounce* seconds of the last call are folded into
    it.
    """
    stop = stop or threading.Event()
    watcher = Watcher(config)
    last_run = float("-inf")
    log.info("Watching %s for changes", config.root)
    while not stop.wait(interval):
        if not watcher.poll():
            continue
        now = time.monotonic()
        if now - last_run < debounce:
            continue
        last_run = now
        on_change()
