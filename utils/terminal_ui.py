"""Terminal UI utilities using Rich library for output.

This module provides a unified interface for terminal output, integrating
with the theme palette for consistent styling.
"""

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from config import Config
from utils.theme import Theme, set_theme

# Initialize theme from config
set_theme(Config.TUI_THEME)

# Global console instance with theme support
console = Console(theme=Theme.get_rich_theme())


def _get_colors():
    """Get current theme colors."""
    return Theme.get_colors()


def print_header(title: str, subtitle: Optional[str] = None) -> None:
    """Print a formatted header panel.

    Args:
        title: Main title text
        subtitle: Optional subtitle text
    """
    colors = _get_colors()
    content = f"[bold {colors.primary}]{title}[/bold {colors.primary}]"
    if subtitle:
        content += f"\n[{colors.text_secondary}]{subtitle}[/{colors.text_secondary}]"

    console.print(Panel(content, border_style=colors.primary, box=box.DOUBLE, padding=(1, 2)))


def print_skills_table(rows: Sequence[tuple[str, str, str]]) -> None:
    """Print skills as a table.

    Args:
        rows: (name, source, description) tuples
    """
    colors = _get_colors()
    table = Table(box=box.SIMPLE, border_style=colors.text_muted, padding=(0, 2))
    table.add_column("Skill", style=f"{colors.primary} bold", no_wrap=True)
    table.add_column("Source", style=colors.text_secondary)
    table.add_column("Description", style=colors.text_primary)

    for name, source, description in rows:
        table.add_row(name, source, description)

    console.print(table)


def print_checklist(entries: Sequence[tuple[int, str, Optional[str]]]) -> None:
    """Print checklist entries with their chapter pointers.

    Args:
        entries: (number, statement, chapter) tuples
    """
    colors = _get_colors()
    for number, statement, chapter in entries:
        line = Text.assemble(
            (f"{number:>3}. ", f"bold {colors.item_number}"),
            (statement, colors.text_primary),
        )
        if chapter:
            line.append(f"  ({chapter})", style=colors.chapter)
        console.print(line)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message.

    Args:
        message: Error message
        title: Error title (default: "Error")
    """
    colors = _get_colors()
    console.print(
        Panel(
            f"[{colors.error}]{message}[/{colors.error}]",
            title=f"[bold {colors.error}]{title}[/bold {colors.error}]",
            border_style=colors.error,
            box=box.ROUNDED,
        )
    )


def print_warning(message: str) -> None:
    """Print a warning message."""
    colors = _get_colors()
    console.print(f"[{colors.warning}]{message}[/{colors.warning}]")


def print_success(message: str) -> None:
    """Print a success message."""
    colors = _get_colors()
    console.print(f"[{colors.success}]✓ {message}[/{colors.success}]")


def print_info(message: str) -> None:
    """Print an info message."""
    colors = _get_colors()
    console.print(f"[{colors.primary}]ℹ {message}[/{colors.primary}]")


def print_log_location(log_file: str) -> None:
    """Print log file location.

    Args:
        log_file: Path to log file
    """
    colors = _get_colors()
    console.print()
    console.print(f"[{colors.text_muted}]Detailed logs: {log_file}[/{colors.text_muted}]")


def print_markdown(markdown_text: str) -> None:
    """Print formatted markdown.

    Args:
        markdown_text: Markdown text to render
    """
    md = Markdown(markdown_text)
    console.print(md)
