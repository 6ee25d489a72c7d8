"""Input and output records for one build unit."""

from __future__ import annotations

from dataclasses import dataclass, field

ClassCounts = dict[str, int]
RenameMap = dict[str, str]


@dataclass(frozen=True)
class SourceFile:
    """A named blob of HTML or CSS text."""

    identifier: str
    text: str

    @property
    def size(self) -> int:
        """Size of the text in bytes (UTF-8)."""
        return len(self.text.encode("utf-8"))


@dataclass(frozen=True)
class RipResult:
    """The rewritten bundle produced by one ``rip`` invocation.

    Attributes:
        css_bundle: All CSS of the build unit, pruned, renamed and concatenated.
        html_documents: Each rewritten HTML document, paired with its
            original identifier and in input order.
        rename_map: Original classname to assigned short name, as applied.
        counts: Final occurrence count per classname.
    """

    css_bundle: SourceFile
    html_documents: list[SourceFile]
    rename_map: RenameMap = field(default_factory=dict)
    counts: ClassCounts = field(default_factory=dict)

    @property
    def size(self) -> int:
        return self.css_bundle.size + sum(doc.size for doc in self.html_documents)

    def bytes_saved(self, originals: list[SourceFile]) -> int:
        """Bytes saved relative to *originals* (may be negative)."""
        return sum(f.size for f in originals) - self.size
