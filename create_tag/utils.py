"""
Utility Functions Module for create-tag

This module provides helpers used throughout the application: logging setup
and the colored console output shown to the user.

Functions:
    setup_logging: Configures application logging
    print_info, print_success, print_warning, print_error, print_tip: Status lines
    print_option, print_step, print_header: Menu and section formatting
"""

import logging

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def print_info(message: str) -> None:
    console.print(escape(message), style="blue")


def print_success(message: str) -> None:
    console.print(f" ✅ {escape(message)}", style="green")


def print_warning(message: str) -> None:
    console.print(f"⚠️  {escape(message)}", style="bold yellow")


def print_error(message: str) -> None:
    console.print(f" ❌ {escape(message)}", style="red")


def print_tip(message: str) -> None:
    console.print(f"💡  {escape(message)}", style="yellow")


def print_plain(message: str) -> None:
    console.print(escape(message))


def print_label(label: str, value: str) -> None:
    """Print 'label: value' with the value highlighted."""
    console.print(f"[yellow]{escape(label)}:[/yellow] [bold cyan]{escape(value)}[/bold cyan]")


def print_option(number: str, description: str, value: str = "") -> None:
    """Print a numbered menu option."""
    console.print(f"   [green]{escape(number)})[/green] {escape(description)} [bold cyan]{escape(value)}[/bold cyan]")


def print_step(message: str, icon: str = "") -> None:
    """Print a step title preceded by an empty line."""
    console.print()
    text = f"{icon}  {escape(message)}" if icon else escape(message)
    console.print(text, style="blue")


def print_header(message: str) -> None:
    console.print(escape(message), style="bold cyan")
