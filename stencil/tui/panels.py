"""Rich output for template lists, generation results and validation reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from stencil.config import OutputDirectory
    from stencil.templates.base import GenerationResult, Template, ValidationResult
    from stencil.templates.install import InstallResult

console = Console()

ACTION_ICONS = {
    "create": "✨",
    "overwrite": "🔄",
    "skip": "⏭️",
}

ACTION_STYLES = {
    "create": "green",
    "overwrite": "yellow",
    "skip": "dim",
}


def print_header() -> None:
    """Print the stencil banner."""
    from stencil import __version__

    console.print(f"\n[bold bright_cyan]▚ stencil[/] [dim]v{__version__} · template generator[/]\n")


def print_templates(templates: list[Template], templates_dir: str) -> None:
    """Print the available templates as a table."""
    if not templates:
        console.print(f"[yellow]No templates found in {escape(templates_dir)}[/]")
        return

    table = Table(
        title=f"📁 Templates in {escape(templates_dir)}",
        show_header=True,
        header_style="bold",
        border_style="bright_black",
    )
    table.add_column("Template", style="bold bright_cyan", min_width=20)
    table.add_column("Type", style="dim", min_width=10)

    for t in templates:
        table.add_row(escape(t.name), t.type.value)

    console.print(table)


def print_output_directories(directories: list[OutputDirectory]) -> None:
    """Print the configured output directories, numbered from 1."""
    for index, d in enumerate(directories, start=1):
        console.print(f"  [bold]{index}.[/] {escape(d.label)}")


def print_generation_results(results: list[GenerationResult], *, dry_run: bool = False) -> None:
    """Print one line per generated (or previewed) file."""
    if dry_run:
        console.print("\n[bold]🔍 Dry-run mode - Files that would be generated:[/]")
    for r in results:
        action = r.action.value
        icon = ACTION_ICONS.get(action, "•")
        style = ACTION_STYLES.get(action, "white")
        console.print(f"   {icon} {escape(r.path)} [{style}]({action})[/]")
    console.print(f"\n   [dim]Total: {len(results)} files[/]\n")


def print_validation_report(results: dict[str, ValidationResult]) -> tuple[int, int]:
    """Print validation findings and a summary.

    Returns the total number of errors and warnings.
    """
    total_errors = 0
    total_warnings = 0

    for name, result in results.items():
        if result.valid and not result.warnings:
            continue

        console.print(f"📁 [bold]{escape(name)}[/]:")
        if result.errors:
            total_errors += len(result.errors)
            console.print("  [red]❌ Errors:[/]")
            for error in result.errors:
                console.print(f"     - {escape(error)}")
        if result.warnings:
            total_warnings += len(result.warnings)
            console.print("  [yellow]⚠️  Warnings:[/]")
            for warning in result.warnings:
                console.print(f"     - {escape(warning)}")
        console.print()

    if not total_errors and not total_warnings:
        console.print("[bold green]✅ All templates are valid![/]\n")
    else:
        console.print("[bold]📊 Summary:[/]")
        console.print(f"   Templates checked: {len(results)}")
        console.print(f"   Errors: {total_errors}")
        console.print(f"   Warnings: {total_warnings}\n")

    return total_errors, total_warnings


def print_install_result(result: InstallResult) -> None:
    if result.skipped:
        console.print(
            f"[green]✅ Templates directory {escape(str(result.target))} already exists. "
            "Existing templates preserved.[/]"
        )
        return
    console.print(f"[green]✅ Templates installed in {escape(str(result.target))}/[/]")
    for name in result.installed:
        console.print(f"[dim]  + {escape(name)}[/]")
