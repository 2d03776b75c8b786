"""
Foldean
=======

Sorts the files of a directory (your Downloads folder by default) into
category folders by extension. Dry run unless asked to apply.
"""

__version__ = "0.1.0"

from .categories import (
    CATEGORY_EXTENSIONS,
    FALLBACK_CATEGORY,
    category_folder_names,
    classify,
    extension_of,
)
from .scanner import Entry, iter_candidates, scan_entries, should_skip
from .planner import PlanItem, build_plan, resolve_destination
from .executor import MoveResult, MoveStatus, apply_plan, move_entry

__all__ = [
    "CATEGORY_EXTENSIONS",
    "FALLBACK_CATEGORY",
    "category_folder_names",
    "classify",
    "extension_of",
    "Entry",
    "iter_candidates",
    "scan_entries",
    "should_skip",
    "PlanItem",
    "build_plan",
    "resolve_destination",
    "MoveResult",
    "MoveStatus",
    "apply_plan",
    "move_entry",
]
