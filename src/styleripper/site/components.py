"""Component includes: ``<%name%>`` in a page is replaced by ``components/name/index.html``."""

from __future__ import annotations

import re
from pathlib import Path

from styleripper.errors import ComponentNotFound, StyleRipperError

COMPONENT_RE = re.compile(r"<%\s*(?P<name>[^%<>]+?)\s*%>")


def component_path(components_dir: Path, name: str) -> Path:
    return components_dir / name / "index.html"


def expand_components(
    page: str,
    components_dir: Path,
    _stack: tuple[str, ...] = (),
) -> str:
    """Replace every component marker in *page*, expanding nested components too.

    Raises:
        ComponentNotFound: a marker names a component with no ``index.html``.
        StyleRipperError: components include each other in a cycle.
    """
    cache: dict[str, str] = {}

    def replace(match: re.Match[str]) -> str:
        name = match.group("name")
        if name in _stack:
            chain = " -> ".join([*_stack, name])
            raise StyleRipperError(f"Component cycle: {chain}")
        if name not in cache:
            path = component_path(components_dir, name)
            if not path.is_file():
                raise ComponentNotFound(name, str(path))
            body = path.read_text(encoding="utf-8")
            cache[name] = expand_components(body, components_dir, (*_stack, name))
        return cache[name]

    return COMPONENT_RE.sub(replace, page)
