"""
Utility message display functions (errors, warnings, info).
"""

from .core import console


def show_error(msg: str):
    """Display an error message."""
    console.print(f"[bold red]❌ {msg}[/bold red]")


def show_warning(msg: str):
    """Display a warning message."""
    console.print(f"[yellow]⚠️  {msg}[/yellow]")


def show_info(msg: str):
    """Display an info message."""
    console.print(f"[dim]ℹ️  {msg}[/dim]")


def show_success(msg: str):
    """Display a success message."""
    console.print(f"[bold green]✅ {msg}[/bold green]")
