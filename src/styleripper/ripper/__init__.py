"""The ripper: counts, prunes, ranks and renames CSS classnames."""

from styleripper.ripper.counter import count_html_classes
from styleripper.ripper.eliminator import (
    EliminationReport,
    count_css_classes,
    eliminate_dead_rules,
)
from styleripper.ripper.pipeline import BUNDLE_IDENTIFIER, rip, rip_trees
from styleripper.ripper.planner import (
    byte_weight,
    plan_renames,
    rank_classnames,
    shortest_name,
)
from styleripper.ripper.rewriter import rename_css, rename_html

__all__ = [
    "count_html_classes",
    "EliminationReport",
    "eliminate_dead_rules",
    "count_css_classes",
    "byte_weight",
    "rank_classnames",
    "shortest_name",
    "plan_renames",
    "rename_css",
    "rename_html",
    "BUNDLE_IDENTIFIER",
    "rip",
    "rip_trees",
]
