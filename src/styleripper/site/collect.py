"""File discovery for the site builder."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def _excluded(path: Path, exclude: Iterable[str]) -> bool:
    text = "/" + path.as_posix()
    return any(text.endswith("/" + suffix.strip("/")) for suffix in exclude)


def collect(
    directory: Path,
    extensions: Iterable[str],
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Return every file under *directory* whose name ends with one of *extensions*.

    Directories and files whose path ends with an entry of *exclude* (matched
    on whole path segments, so ``dist`` does not exclude ``playlist``) are
    skipped.  Entries are visited in sorted order so builds are repeatable.
    A missing directory yields no files.
    """
    extensions = tuple(extensions)
    exclude = tuple(exclude)
    found: list[Path] = []
    if not directory.is_dir():
        return found
    for entry in sorted(directory.iterdir()):
        if _excluded(entry, exclude):
            continue
        if entry.is_dir():
            found.extend(collect(entry, extensions, exclude))
        elif entry.name.endswith(extensions):
            found.append(entry)
    return found


def strip_first_dir(path: str) -> str:
    """Drop the leading path segment: ``pages/about/index.html`` -> ``about/index.html``."""
    head, sep, rest = path.partition("/")
    return rest if sep else head
