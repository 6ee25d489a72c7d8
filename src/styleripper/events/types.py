"""Event types emitted while ripping a build unit."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RipStarted:
    html_files: int
    css_files: int


@dataclass(frozen=True)
class ClassnamesCounted:
    identifier: str
    distinct: int


@dataclass(frozen=True)
class DeadRulesEliminated:
    identifier: str
    rules_removed: int
    selectors_removed: int
    components_removed: int


@dataclass(frozen=True)
class RenamePlanned:
    classnames: int
    renamed: int


@dataclass(frozen=True)
class RipCompleted:
    original_bytes: int
    output_bytes: int

    @property
    def bytes_saved(self) -> int:
        return self.original_bytes - self.output_bytes
