#!/usr/bin/env python3
"""
Foldean - CLI Entry Point
=========================

Usage:
    python -m foldean                       # preview how ~/Downloads would be organized
    python -m foldean --apply               # actually move the files
    python -m foldean -d ~/Desktop --depth 1 --include-hidden
"""

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from . import __version__
from .executor import apply_plan
from .planner import build_plan
from .scanner import MAX_DEPTH
from .utils import (
    console,
    default_target_dir,
    print_error,
    print_header,
    print_plan,
    print_plan_table,
    print_success,
    print_warning,
    save_json,
)


def cmd_organize(args) -> int:
    """Organize command - scan, plan, then report or apply."""
    target = args.dir if args.dir is not None else default_target_dir()
    target = target.expanduser().resolve()

    mode = "APPLY" if args.apply else "DRY-RUN"
    print_header("FOLDEAN", f"{mode}: {target}")

    try:
        plan = build_plan(target, depth=args.depth, include_hidden=args.include_hidden)
    except OSError as e:
        print_error(f"Cannot read target directory: {e}")
        return 1

    if not plan:
        console.print(f"Nothing to organize in {escape(str(target))}", highlight=False)
        return 0

    console.print(f"Planned moves ({len(plan)}):")
    print_plan(plan)
    print_plan_table(plan)

    report = apply_plan(plan, apply=args.apply)
    report["root"] = str(target)

    if args.report_out:
        save_json(report, args.report_out)

    if not args.apply:
        print_warning("Dry run. No files were changed. Pass --apply to move files.")
        return 0

    console.print(
        f"\n[{mode}] Done: {report['moved_count']} moved, {report['failed_count']} failed",
        highlight=False,
    )
    if report["failed_count"]:
        for failure in report["failures"]:
            print_error(f"{failure['source']}: {failure['error']}")
        return 1

    print_success(f"Organized {report['moved_count']} files")
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldean",
        description="Organize your Downloads into tidy folders (dry run unless --apply is given)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-d", "--dir", type=Path, default=None,
                        help="Directory to organize (default: your Downloads folder)")
    parser.add_argument("-y", "--apply", action="store_true",
                        help="Actually move files instead of printing the plan")
    parser.add_argument("--include-hidden", action="store_true",
                        help="Include dotfiles and Office lock files (~$...)")
    parser.add_argument("--depth", type=int, default=0, choices=range(MAX_DEPTH + 1),
                        help="Subfolder levels to scan (0 = only the target directory)")
    parser.add_argument("--report-out", type=Path, default=None,
                        help="Write a JSON report of the run to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return cmd_organize(args)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except Exception as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
