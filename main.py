import logging
import threading
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from book import Book
from config import settings
from library import Library, LibraryError
from member import Member
from utils.ui_helpers import set_output_mode, print_book_list, print_member_list, print_stats_result
from utils.validators import IDValidator, TextValidator

APP_NAME = settings.app_name

logger = logging.getLogger(__name__)

console = Console(highlight=False)


def _configure_logging() -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")


# Process-wide Library instance
class LibraryManager:
    _instance: Optional[Library] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls, seed: Optional[bool] = None) -> Library:
        """Get or create the Library singleton, seeding it on first creation."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = Library()
                if settings.seed_demo_data if seed is None else seed:
                    cls._instance.seed_demo_data()
                logger.debug("Library instance created")
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the current instance; the next get_instance() builds a fresh one."""
        with cls._lock:
            cls._instance = None


# --- Typer CLI application ---
app = typer.Typer(help="Library CLI")


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    seed: Optional[bool] = typer.Option(
        None,
        "--seed/--no-seed",
        help="Load the demo members and books on start-up",
    ),
):
    """Global CLI options (output mode, demo data)."""
    _configure_logging()
    if output:
        try:
            set_output_mode(output)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--output")
    LibraryManager.get_instance(seed=seed)
    if ctx.invoked_subcommand is None:
        run_menu(LibraryManager.get_instance())


@app.command("menu")
def cli_menu():
    """Start the interactive menu (default)."""
    run_menu(LibraryManager.get_instance())


@app.command("list")
def cli_list():
    """List the available books."""
    books = LibraryManager.get_instance().list_available_books()
    print_book_list(books, title="Available books", empty_message="No available books.")


@app.command("stats")
def cli_stats():
    """Show library statistics."""
    print_stats_result(LibraryManager.get_instance().get_statistics())


# --- Menu actions ---
def _ask_id(label: str) -> int:
    return IDValidator.parse_id(Prompt.ask(label, console=console))


def add_book(lib: Library) -> None:
    book_id = _ask_id("Book ID")
    title = Prompt.ask("Title", console=console)
    author = Prompt.ask("Author", console=console)
    if not TextValidator.validate_title(title):
        raise ValueError("title cannot be empty")
    if not TextValidator.validate_author(author):
        raise ValueError("author must be a non-numeric name")
    lib.add_book(Book(id=book_id, title=title, author=author))
    console.print("[green]Book added.[/]")


def remove_book(lib: Library) -> None:
    book_id = _ask_id("Book ID to remove")
    lib.remove_book(book_id)
    console.print("[green]Book removed.[/]")


def borrow_book(lib: Library) -> None:
    member_id = _ask_id("Member ID")
    book_id = _ask_id("Book ID to borrow")
    lib.borrow_book(book_id, member_id)
    console.print("[green]Book borrowed.[/]")


def return_book(lib: Library) -> None:
    member_id = _ask_id("Member ID")
    book_id = _ask_id("Book ID to return")
    lib.return_book(book_id, member_id)
    console.print("[green]Book returned.[/]")


def list_available(lib: Library) -> None:
    print_book_list(lib.list_available_books(), title="Available books", empty_message="No available books.")


def list_borrowed(lib: Library) -> None:
    member_id = _ask_id("Member ID")
    books = lib.list_borrowed_books(member_id)
    print_book_list(
        books,
        title=f"Borrowed by member {member_id}",
        empty_message="This member has no borrowed books.",
    )


def add_member(lib: Library) -> None:
    member_id = _ask_id("Member ID")
    name = Prompt.ask("Name", console=console)
    if not TextValidator.validate_name(name):
        raise ValueError("name must be a non-numeric name")
    lib.add_member(Member(id=member_id, name=name))
    console.print("[green]Member added.[/]")


def list_members(lib: Library) -> None:
    print_member_list(lib.list_members())


def stats(lib: Library) -> None:
    print_stats_result(lib.get_statistics())


MENU_ITEMS = [
    ("1", "Add Book", "➕", add_book),
    ("2", "Remove Book", "🗑️", remove_book),
    ("3", "Borrow Book", "📤", borrow_book),
    ("4", "Return Book", "📥", return_book),
    ("5", "List Available Books", "📚", list_available),
    ("6", "List Borrowed Books (by member)", "🔖", list_borrowed),
    ("7", "Exit", "🚪", None),
    ("8", "Add Member", "👤", add_member),
    ("9", "List Members", "👥", list_members),
    ("10", "Show Statistics", "📊", stats),
]

EXIT_OPTION = "7"

ACTIONS = {key: action for key, _, _, action in MENU_ITEMS if action is not None}


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon, _ in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(
        table,
        title=f"{APP_NAME}",
        border_style="cyan",
        box=box.HEAVY,
        padding=(0, 2),
    ))


def run_menu(lib: Library) -> None:
    """Simple interactive menu for the library console."""
    console.print(f"Welcome to the {APP_NAME}")
    while True:
        render_menu()
        try:
            choice = Prompt.ask("Choose an option", console=console).strip()
        except EOFError:
            console.print()
            console.print("[green]Goodbye![/]")
            return

        if choice == EXIT_OPTION:
            console.print("[green]Goodbye![/]")
            return

        action = ACTIONS.get(choice)
        if action is None:
            console.print("[yellow]Invalid option[/]")
            continue

        try:
            action(lib)
        except EOFError:
            console.print()
            console.print("[green]Goodbye![/]")
            return
        except (LibraryError, ValueError) as e:
            console.print(f"[bold red]Error:[/] {escape(str(e))}")
        console.print()  # blank line between operations


if __name__ == "__main__":
    app()
