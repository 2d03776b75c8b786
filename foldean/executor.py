"""
Plan execution for Foldean.

Moves files into their category folders. A move is a rename when possible
and a copy followed by deleting the source when the rename fails (for example
across devices). Failures are reported per item and never stop the run.
"""

import os
import shutil
import tempfile
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from tqdm import tqdm

from .planner import PlanItem

PARTIAL_SUFFIX = ".foldean-part"


class MoveStatus(str, Enum):
    PLANNED = "planned"
    MOVED = "moved"
    FAILED = "failed"


@dataclass
class MoveResult:
    """Outcome of a single move_entry() call."""
    status: MoveStatus
    method: str | None = None  # "rename" or "copy" once moved
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not MoveStatus.FAILED


def _try_rename(src: Path, dst: Path) -> OSError | None:
    """Attempt an atomic rename; return the error instead of raising it."""
    try:
        os.rename(src, dst)
    except OSError as e:
        return e
    return None


def _copy_then_delete(src: Path, dst: Path) -> str | None:
    """
    Copy src (contents and metadata) to dst, then remove src.

    The copy goes to a newly created temporary file next to dst and is only
    renamed onto dst once its size matches the source. A failed copy leaves
    src and any existing neighbours of dst untouched.

    Returns:
        None on success, otherwise an error message.
    """
    try:
        expected_size = src.stat().st_size
        fd, tmp_name = tempfile.mkstemp(dir=dst.parent, prefix=f".{dst.name}.", suffix=PARTIAL_SUFFIX)
    except OSError as e:
        return f"Copy failed: {e}"

    os.close(fd)
    tmp = Path(tmp_name)
    try:
        shutil.copy2(src, tmp)
        copied_size = tmp.stat().st_size
        if copied_size != expected_size:
            raise OSError(f"size mismatch after copy ({copied_size} != {expected_size} bytes)")
        os.replace(tmp, dst)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        return f"Copy failed: {e}"

    try:
        src.unlink()
    except OSError as e:
        return f"Copied to destination but could not remove source: {e}"

    return None


def move_entry(source: Path, destination: Path, apply: bool) -> MoveResult:
    """
    Move (or, in dry-run mode, only plan) one file.

    Args:
        source: File to move.
        destination: Final path, already collision-free.
        apply: False returns PLANNED without touching the filesystem.

    Returns:
        A MoveResult describing what happened.
    """
    if not apply:
        return MoveResult(MoveStatus.PLANNED)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return MoveResult(MoveStatus.FAILED, error=f"Failed to create folder: {e}")

    rename_error = _try_rename(source, destination)
    if rename_error is None:
        return MoveResult(MoveStatus.MOVED, method="rename")

    # Rename failed (cross-device or otherwise); fall back to copy + delete
    copy_error = _copy_then_delete(source, destination)
    if copy_error is None:
        return MoveResult(MoveStatus.MOVED, method="copy")

    return MoveResult(MoveStatus.FAILED, error=f"{copy_error} (rename: {rename_error})")


def apply_plan(plan: list[PlanItem], apply: bool = False) -> dict:
    """
    Execute (or simulate) every item of a plan.

    Args:
        plan: Items from build_plan().
        apply: Perform the moves; otherwise only count them.

    Returns:
        Report dict with counts, the planned moves and per-item failures.
    """
    moved = 0
    copied = 0
    failures: list[dict] = []

    items = tqdm(plan, unit="file", disable=not apply or not plan)
    for item in items:
        result = move_entry(item.source, item.destination, apply)

        if not result.ok:
            failures.append({
                "source": str(item.source),
                "destination": str(item.destination),
                "error": result.error,
            })
            tqdm.write(f"[ERROR] {result.error}: {item.source}")
            continue

        if result.status is MoveStatus.MOVED:
            moved += 1
            if result.method == "copy":
                copied += 1

    return {
        "dry_run": not apply,
        "executed_at": datetime.now().isoformat(timespec='seconds'),
        "planned_count": len(plan),
        "moved_count": moved,
        "copied_count": copied,
        "failed_count": len(failures),
        "failures": failures,
        "moves": [item.to_dict() for item in plan],
    }
