import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode not in OUTPUT_MODES:
        raise ValueError(f"Unsupported output mode: {mode}. Use plain, json or rich.")
    os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"


def print_book_list(books: List[Any], title: str = "Books", empty_message: str = "No books.") -> None:
    """Print books according to the current output mode.
    - plain: 'ID:<id> Title:<title> Author:<author>' lines under a heading
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
        return

    if not books:
        print(empty_message)
        return

    if mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status", style="green")
        for b in books:
            table.add_row(str(b.id), b.title, b.author, b.status.value if b.status else "")
        _console.print(table)
    else:
        print(f"{title}:")
        for b in books:
            print(f"ID:{b.id} Title:{b.title} Author:{b.author}")


def print_member_list(members: List[Any]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([m.to_dict() for m in members], ensure_ascii=False))
        return

    if not members:
        print("No members registered.")
        return

    if mode == "rich":
        table = Table(title="👥 Members", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Borrowed", style="white", justify="right")
        for m in members:
            table.add_row(str(m.id), m.name, str(len(m.borrowed_books)))
        _console.print(table)
    else:
        print("Members:")
        for m in members:
            print(f"ID:{m.id} Name:{m.name} Borrowed:{len(m.borrowed_books)}")


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_books", 0)
    available = stats.get("available_books", 0)
    borrowed = stats.get("borrowed_books", 0)
    members = stats.get("total_members", 0)

    if mode == "json":
        print(json.dumps({
            "total_books": total,
            "available_books": available,
            "borrowed_books": borrowed,
            "total_members": members,
        }, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {total}\n"
            f"[bold]Available:[/] {available}\n"
            f"[bold]Borrowed:[/] {borrowed}\n"
            f"[bold]Members:[/] {members}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Available Books: {available}")
        print(f"Borrowed Books: {borrowed}")
        print(f"Members: {members}")
