"""Console utility functions for formatting and output."""

import click
from typing import Optional, Any, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from colorama import Fore, Style, init

init(autoreset=True)


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'start': '⏳',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'file': '📄',
    'list': '📋',
}

# Rendered in the record table for lookups that produced nothing
ABSENT_MARKER = "<absent>"


def _get_console() -> Optional[Console]:
    """Get Rich console instance if it can be created."""
    try:
        return Console()
    except Exception:
        return None


def _rich_echo(message: str, color: str = "white", style: str = None, bold: bool = False, symbol: str = None):
    """Echo message with Rich formatting or colorama fallback."""
    if style is not None:
        color = style

    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console()
    if console:
        try:
            style_str = f"bold {color}" if bold else color
            # markup off: paths and user names may contain [brackets]
            console.print(message, style=style_str, markup=False, highlight=False, soft_wrap=True)
            return
        except Exception:
            pass

    color_map = {
        'red': Fore.RED,
        'green': Fore.GREEN,
        'yellow': Fore.YELLOW,
        'blue': Fore.BLUE,
        'cyan': Fore.CYAN,
        'white': Fore.WHITE,
        'muted': Fore.WHITE,
    }
    color_code = color_map.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}")


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_panel(content: str, title: str = None, style: str = "cyan"):
    """Display content in a Rich panel with fallback."""
    console = _get_console()
    if console:
        try:
            console.print(Panel(content, title=title, border_style=style))
            return
        except Exception:
            pass

    if title:
        click.echo(f"\n--- {title} ---")
    click.echo(content)
    if title:
        click.echo("-" * (len(title) + 8))


def _create_record_table(fields: Mapping[str, Any], title: str = "Build information") -> Table:
    """Create a Rich table listing collected build fields in order.

    Values exposing ``display()`` (lookup results) are rendered through it so
    absent values stay visible instead of printing as an empty cell.
    """
    table = Table(title=f"{STATUS_SYMBOLS['list']} {title}", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold white")
    table.add_column("Value", style="white")

    for name, value in fields.items():
        if hasattr(value, "display"):
            value = value.display(ABSENT_MARKER)
        table.add_row(name, str(value))

    return table


def _rich_table(table: Table):
    """Print a Rich table, falling back to plain rows."""
    console = _get_console()
    if console:
        try:
            console.print(table)
            return
        except Exception:
            pass

    if table.title:
        click.echo(str(table.title))
    for row in zip(*(column.cells for column in table.columns)):
        click.echo("  ".join(str(cell) for cell in row))
