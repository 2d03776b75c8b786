"""
Utility functions for Foldean.

Includes:
- Downloads folder lookup
- JSON report saving
- UI helpers
"""

import json
from collections import Counter
from pathlib import Path
from typing import Any

from platformdirs import user_downloads_dir
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# Global console instance
console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{escape(title)}[/bold blue]\n[italic]{escape(subtitle)}[/italic]", expand=False))


def print_plan(plan) -> None:
    """Print one line per planned move: source name -> category/final name."""
    for item in plan:
        console.print(
            f"  [yellow]{escape(item.source.name)}[/yellow] -> "
            f"[cyan]{item.category}[/cyan]/[blue]{escape(item.destination.name)}[/blue]",
            highlight=False,
        )


def print_plan_table(plan) -> None:
    """Print a summary table of the plan, one row per category."""
    counts = Counter(item.category for item in plan)

    table = Table(title="Plan Summary")
    table.add_column("Category", style="cyan")
    table.add_column("Files", style="magenta", justify="right")

    for category, count in sorted(counts.items()):
        table.add_row(category, str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{len(plan)}[/bold]")

    console.print(table)


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}")


def default_target_dir() -> Path:
    """The current user's Downloads folder for this OS."""
    return Path(user_downloads_dir())


def save_json(data: Any, path: Path) -> None:
    """
    Save data to a JSON file with pretty formatting.

    Args:
        data: The data to serialize.
        path: The output file path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    console.print(f"[INFO] Saved: {escape(str(path))}", highlight=False)
