"""Rich-based console output utilities.

The confirmation line is printed unstyled on stdout so pipelines can grep
it; diagnostics go to stderr.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from versync import __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
    }
)

# Global console instances
console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    """Print error message in red."""
    from versync.utils.logging import log_message

    console_err.print(
        f"[error][[ERROR]][/error] [red]{escape(message)}[/red]",
        highlight=False,
        soft_wrap=True,
    )
    log_message(f"ERROR: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    from versync.utils.logging import log_message

    console_err.print(
        f"[warning][[WARNING]][/warning] [yellow]{escape(message)}[/yellow]",
        highlight=False,
        soft_wrap=True,
    )
    log_message(f"WARNING: {message}")


def print_plain(message: str) -> None:
    """Print a message verbatim, with no markup, highlighting or wrapping."""
    from versync.utils.logging import log_message

    console.print(message, markup=False, highlight=False, soft_wrap=True)
    log_message(message)


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]VERSYNC[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_warning",
    "print_plain",
    "show_version",
]
