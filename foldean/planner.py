"""
Move planning for Foldean.

Turns scanner candidates into (source, destination) pairs, choosing a free
destination name when the category folder already holds the same name.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .categories import CATEGORY_EXTENSIONS, category_folder_names, classify
from .scanner import iter_candidates
from .utils import print_warning


@dataclass
class PlanItem:
    """A single planned move."""
    source: Path
    destination: Path
    category: str

    def to_dict(self) -> dict:
        return {
            "source": str(self.source),
            "destination": str(self.destination),
            "category": self.category,
        }


def resolve_destination(
    dest_dir: Path,
    filename: str,
    reserved: set[Path] | None = None,
) -> Path:
    """
    Find a destination path in dest_dir that is not taken.

    Tries 'name.ext', then 'name (1).ext', 'name (2).ext', ... until the
    candidate neither exists on disk nor appears in reserved.

    Args:
        dest_dir: Category folder (may not exist yet).
        filename: Original file name.
        reserved: Destinations already claimed by the plan being built.

    Returns:
        The first free candidate path.
    """
    reserved = reserved or set()

    candidate = dest_dir / filename
    if not candidate.exists() and candidate not in reserved:
        return candidate

    stem, ext = os.path.splitext(filename)
    counter = 1
    while True:
        candidate = dest_dir / f"{stem} ({counter}){ext}"
        if not candidate.exists() and candidate not in reserved:
            return candidate
        counter += 1


def build_plan(
    root: Path,
    depth: int = 0,
    include_hidden: bool = False,
    table=CATEGORY_EXTENSIONS,
) -> list[PlanItem]:
    """
    Plan a move for every file Foldean should organize under root.

    Files found directly in root go to root/<category>/; at depth 1, files
    found in a subfolder go to <subfolder>/<category>/. A file is left in
    place, with a warning, when its category path is taken by something
    other than a folder (such as a file named 'Others' with no extension).

    Args:
        root: Target directory.
        depth: 0 for top-level files only, 1 to include first-level subfolders.
        include_hidden: Also plan dotfiles and Office lock files.
        table: Category table used for classification.

    Returns:
        Plan items sorted by source path.
    """
    root = Path(root)
    folders = category_folder_names(table)
    candidates = sorted(
        iter_candidates(root, depth, include_hidden, folders),
        key=lambda e: str(e.path),
    )

    plan: list[PlanItem] = []
    reserved: set[Path] = set()

    for entry in candidates:
        category = classify(entry.name, table)
        dest_dir = entry.path.parent / category

        if dest_dir.exists() and not dest_dir.is_dir():
            print_warning(f"Skipping {entry.path}: {dest_dir} exists and is not a folder")
            continue

        destination = resolve_destination(dest_dir, entry.name, reserved)
        reserved.add(destination)
        plan.append(PlanItem(source=entry.path, destination=destination, category=category))

    return plan
