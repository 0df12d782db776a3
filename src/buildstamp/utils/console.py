"""Console utility functions for formatting and output."""

import click
from typing import Optional, Any

from colorama import Fore, Style, init
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

init(autoreset=True)


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'git': '🔀',
    'env': '🌱',
    'list': '📋',
}

# Colorama equivalents of the Rich colors used below
COLOR_MAP = {
    'red': Fore.RED,
    'green': Fore.GREEN,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'cyan': Fore.CYAN,
    'white': Fore.WHITE,
    'magenta': Fore.MAGENTA,
    'muted': Fore.WHITE,
}


def _get_console(stderr: bool = False) -> Optional[Any]:
    """Get Rich console instance, or None if one cannot be created."""
    try:
        return Console(stderr=stderr)
    except Exception:
        return None


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None, err: bool = False):
    """Echo message with Rich formatting or colorama fallback."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console(stderr=err)
    if console:
        try:
            rich_color = "dim white" if color == "muted" else color
            style_str = f"bold {rich_color}" if bold else rich_color
            console.print(message, style=style_str, markup=False, highlight=False)
            return
        except Exception:
            pass

    # Colorama fallback
    color_code = COLOR_MAP.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}", err=err)


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color on stderr."""
    _rich_echo(message, color="red", symbol=symbol, err=True)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color on stderr."""
    _rich_echo(message, color="yellow", symbol=symbol, err=True)


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

    # Fallback to simple text display
    if title:
        click.echo(f"\n--- {title} ---")
    click.echo(content)
    if title:
        click.echo("-" * (len(title) + 8))


def _create_table(rows: list, columns: list, title: str = None) -> Optional[Any]:
    """Create a Rich table from rows of values."""
    try:
        table = Table(title=title, show_header=True, header_style="bold cyan")
        for index, column in enumerate(columns):
            table.add_column(column, style="bold white" if index == 0 else "white")
        for row in rows:
            # Output templates contain [name]-style tokens that Rich would read as markup
            table.add_row(*[escape(str(value)) for value in row])
        return table
    except Exception:
        return None
