"""
Tables for replacement maps, placeholder references and validation results.
"""

from rich import box
from rich.markup import escape
from rich.table import Table

from .core import STATUS_ICONS, STATUS_STYLES, console


def show_replacements(replacements: dict[str, str], title: str = "Replacements"):
    """Display a replacement map as a key → value table."""
    table = Table(
        title=f"🔑 {title}",
        box=box.SIMPLE,
        header_style="bold",
    )
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key in sorted(replacements):
        table.add_row(escape(key), escape(replacements[key]))

    if not replacements:
        table.add_row("[dim](none)[/dim]", "")

    console.print(table)


def show_variables(task_name: str, rows: list[dict]):
    """
    Display placeholder references and how they resolve.

    Each row: ``{"key": str, "value": str | None}``; ``None`` means unresolved.
    """
    table = Table(
        title=f"📋 Placeholders in '{task_name}'",
        box=box.ROUNDED,
        header_style="bold",
        show_lines=False,
    )
    table.add_column("", width=3, justify="center")
    table.add_column("Placeholder", style="cyan")
    table.add_column("Value")

    for row in rows:
        status = "unresolved" if row["value"] is None else "resolved"
        style = STATUS_STYLES[status]
        value = "[dim]unresolved[/dim]" if row["value"] is None else escape(row["value"])
        table.add_row(
            STATUS_ICONS[status],
            f"[{style}]${{{escape(row['key'])}}}[/{style}]",
            value,
        )

    console.print(table)

    unresolved = sum(1 for r in rows if r["value"] is None)
    console.print(
        f"  [dim]{len(rows)} placeholders, "
        f"{len(rows) - unresolved} resolved, {unresolved} unresolved[/dim]\n"
    )


def show_validation_result(name: str, result):
    """Display validation errors and warnings with color."""
    if result.ok and not result.warnings:
        console.print(f"\n[bold green]✅ '{name}' validation passed![/bold green]\n")
        return

    if result.errors:
        console.print(f"\n[bold red]❌ Validation errors for '{name}':[/bold red]")
        for err in result.errors:
            console.print(f"  [red]  • {err}[/red]")

    if result.warnings:
        console.print(f"\n[yellow]⚠️  Warnings for '{name}':[/yellow]")
        for warn in result.warnings:
            console.print(f"  [yellow]  • {warn}[/yellow]")

    console.print()

    if result.ok:
        console.print(f"  [green]Result: PASS (with {len(result.warnings)} warnings)[/green]\n")
    else:
        console.print(
            f"  [red]Result: FAIL ({len(result.errors)} errors, {len(result.warnings)} warnings)[/red]\n"
        )
