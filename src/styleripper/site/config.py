from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SiteConfig:
    root: Path = Path(".")
    pages_dir: str = "pages"
    styles_dir: str = "styles"
    components_dir: str = "components"
    head_file: str = "head.html"
    dist_dir: str = "dist"
    production: bool = False
    inline_styles: bool = False  # one build unit per page, CSS inlined as <style>

    @classmethod
    def from_env(cls, root: Path | str = ".", **overrides: object) -> SiteConfig:
        """Build a config for *root*, reading ``PRODUCTION=true`` from the environment."""
        production = os.environ.get("PRODUCTION", "").lower() == "true"
        values: dict[str, object] = {"root": Path(root), "production": production}
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]

    @property
    def pages_path(self) -> Path:
        return self.root / self.pages_dir

    @property
    def styles_path(self) -> Path:
        return self.root / self.styles_dir

    @property
    def components_path(self) -> Path:
        return self.root / self.components_dir

    @property
    def head_path(self) -> Path:
        return self.root / self.head_file

    @property
    def dist_path(self) -> Path:
        return self.root / self.dist_dir
