"""Writing build output to disk."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import brotli

log = logging.getLogger(__name__)

BROTLI_QUALITY = 11


def write_output(path: Path, data: str, production: bool) -> Path:
    """Write *data* to *path*; production builds write only ``<path>.br``.

    Returns the path actually written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if production:
        target = path.with_name(path.name + ".br")
        target.write_bytes(brotli.compress(data.encode("utf-8"), quality=BROTLI_QUALITY))
    else:
        target = path
        target.write_text(data, encoding="utf-8")
    log.debug("Wrote %s", target)
    return target


def reset_directory(path: Path) -> None:
    """Remove *path* if it exists and create it again, empty."""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)
