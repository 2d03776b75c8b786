"""
Directory scanning and entry filtering.

Lists the target directory (and, at depth 1, its first-level subfolders) and
decides which entries are move candidates.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .categories import category_folder_names
from .utils import print_warning

MAX_DEPTH = 1
OFFICE_LOCK_PREFIX = "~$"


@dataclass
class Entry:
    """One directory entry as seen by the scanner."""
    path: Path
    name: str
    is_dir: bool
    is_symlink: bool = False
    level: int = 0  # 0 = target root, 1 = inside a first-level subfolder

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def is_office_lock(self) -> bool:
        return self.name.startswith(OFFICE_LOCK_PREFIX)

    @classmethod
    def from_dir_entry(cls, dir_entry: os.DirEntry, level: int = 0) -> "Entry":
        """Build an Entry from os.scandir() output without following symlinks."""
        try:
            is_dir = dir_entry.is_dir(follow_symlinks=False)
            is_symlink = dir_entry.is_symlink()
        except OSError:
            is_dir, is_symlink = False, False
        return cls(
            path=Path(dir_entry.path),
            name=dir_entry.name,
            is_dir=is_dir,
            is_symlink=is_symlink,
            level=level,
        )


def should_skip(
    entry: Entry,
    include_hidden: bool = False,
    category_folders: frozenset[str] | None = None,
) -> bool:
    """
    Decide whether an entry is excluded from planning.

    Args:
        entry: The entry to check.
        include_hidden: Keep dotfiles and Office lock files ('~$...').
        category_folders: Folder names Foldean owns; defaults to the
            built-in category table.

    Returns:
        True if the entry must not be moved.
    """
    if category_folders is None:
        category_folders = category_folder_names()

    if entry.is_dir and entry.name in category_folders:
        return True

    if not include_hidden and (entry.is_hidden or entry.is_office_lock):
        return True

    # Links are never followed or moved
    if entry.is_symlink:
        return True

    # Folders themselves are never moved; depth 1 descends into them separately
    return entry.is_dir


def _list_dir(directory: Path, level: int) -> list[Entry]:
    with os.scandir(directory) as it:
        return [Entry.from_dir_entry(d, level) for d in it]


def scan_entries(
    root: Path,
    depth: int = 0,
    include_hidden: bool = False,
    category_folders: frozenset[str] | None = None,
) -> Iterator[Entry]:
    """
    Yield the entries of root and, when depth is 1, of its subfolders.

    Subfolders are only entered if they are ordinary directories that
    should_skip() would reject for being directories: category folders,
    hidden folders (unless include_hidden) and symlinks are not entered.
    Nothing below the first level is ever read.

    Raises:
        ValueError: depth is not 0 or 1.
        FileNotFoundError / NotADirectoryError / PermissionError: the
            target directory cannot be listed.
    """
    if depth not in range(MAX_DEPTH + 1):
        raise ValueError(f"depth must be 0 or {MAX_DEPTH}, got {depth}")

    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Target directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Target is not a directory: {root}")

    if category_folders is None:
        category_folders = category_folder_names()

    top_level = _list_dir(root, level=0)

    for entry in top_level:
        yield entry

    if depth == 0:
        return

    for entry in top_level:
        if not entry.is_dir or entry.is_symlink:
            continue
        if entry.name in category_folders:
            continue
        if not include_hidden and (entry.is_hidden or entry.is_office_lock):
            continue

        try:
            children = _list_dir(entry.path, level=1)
        except OSError as e:
            print_warning(f"Skipping unreadable folder {entry.path}: {e}")
            continue

        yield from children


def iter_candidates(
    root: Path,
    depth: int = 0,
    include_hidden: bool = False,
    category_folders: frozenset[str] | None = None,
) -> Iterator[Entry]:
    """Yield only the entries that survive should_skip()."""
    if category_folders is None:
        category_folders = category_folder_names()

    for entry in scan_entries(root, depth, include_hidden, category_folders):
        if not should_skip(entry, include_hidden, category_folders):
            yield entry
