"""stencil CLI — main entry point."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.logging import RichHandler

from stencil import __version__
from stencil.config import (
    CONFIG_FILE,
    OutputDirectory,
    StencilConfig,
    default_config,
    load_config,
    resolve_templates_dir,
    save_config,
    write_default_config,
)
from stencil.errors import InvalidInputError, StencilError
from stencil.templates.install import install_templates
from stencil.templates.manager import TemplateManager
from stencil.templates.validate import validate_all, validate as validate_template
from stencil.tui.panels import (
    console,
    print_generation_results,
    print_header,
    print_install_result,
    print_output_directories,
    print_templates,
    print_validation_report,
)
from stencil.tui.progress import RichProgress
from stencil.validators import validate_target_name

# ─── CLI Group ────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool) -> None:
    """▚ stencil — generate files from templates

    Templates live in .template/ (one file or directory per template) and
    use placeholders such as __templateNameToPascalCase__ in file names and
    content.

    \b
    Placeholders:
      __templateNameToPascalCase__           MyComponent
      __templateNameToCamelCase__            myComponent
      __templateNameToDashCase__             my-component
      __templateNameToSnakeCase__            my_component
      __templateNameToConstantCase__         MY_COMPONENT
      __templateNameToTitleCase__            My Component
      __templateNameToLowerCase__            mycomponent
      __templateNameToLowerCaseWithSpaces__  my component
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

    if version:
        click.echo(f"stencil v{__version__}")
        return

    if ctx.invoked_subcommand is None:
        print_header()
        click.echo(ctx.get_help())


def _fail(message: str) -> None:
    console.print(f"[bold red]❌ {message}[/]")
    sys.exit(1)


# ─── INIT / INSTALL / CONFIG ──────────────────────────────────


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite without asking")
@click.option("--config", "-c", "config_path", default=CONFIG_FILE, help="Path to stencil.yaml")
def init(force: bool, config_path: str) -> None:
    """Set up bundled templates and a default stencil.yaml in this project."""
    print_header()
    console.print("[bold]🚀 Initializing stencil in your project...[/]")

    cfg = load_config(config_path)
    templates_dir = Path(cfg.templates_dir)

    overwrite = True
    if templates_dir.exists() and not force:
        overwrite = click.confirm(f"Templates directory ({templates_dir}) already exists. Overwrite?", default=False)

    if overwrite:
        try:
            result = install_templates(templates_dir, overwrite=True)
        except OSError as e:
            _fail(f"Could not install templates: {e}")
        print_install_result(result)
    else:
        console.print("[dim]Existing templates directory not modified.[/]")

    if Path(config_path).exists() and not force and not click.confirm(
        f"{config_path} already exists. Overwrite?", default=False,
    ):
        console.print(f"[green]✅ Existing {config_path} preserved.[/]")
    else:
        write_default_config(config_path)
        console.print(f"[green]📄 Created default {config_path}[/]")

    console.print("\n[bold green]🎉 stencil initialization complete![/]")
    console.print(f"[dim]   📁 Templates are in {templates_dir}/[/]")
    console.print(f"[dim]   ⚙️  Configuration is in {config_path}[/]")
    console.print("[dim]   🚀 Run 'stencil generate' to get started[/]")


@main.command()
@click.option("--dir", "-d", "target_dir", default=None, help="Templates directory")
def install(target_dir: str | None) -> None:
    """Install the bundled templates without touching existing ones."""
    console.print("[bold]📦 Installing stencil templates...[/]")
    target = target_dir or load_config().templates_dir
    try:
        result = install_templates(target)
    except OSError as e:
        _fail(f"Could not install templates: {e}")
    print_install_result(result)


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file without asking")
@click.option("--config", "-c", "config_path", default=CONFIG_FILE, help="Path to stencil.yaml")
def config(force: bool, config_path: str) -> None:
    """Create a default stencil.yaml."""
    if Path(config_path).exists() and not force and not click.confirm(
        f"{config_path} already exists. Overwrite?", default=False,
    ):
        console.print(f"[green]✅ Existing {config_path} preserved.[/]")
        return
    write_default_config(config_path)
    console.print(f"[green]📄 Created default {config_path}[/]")
    console.print("[dim]   You can customize the output directories in this file.[/]")


def _prompt_directory(current: OutputDirectory | None = None) -> OutputDirectory:
    while True:
        name = click.prompt("Directory name", default=current.name if current else None)
        path = click.prompt("Directory path", default=current.path if current else None)
        description = click.prompt(
            "Description (optional)",
            default=(current.description or "") if current else "",
            show_default=False,
        )
        try:
            return OutputDirectory(name=name, path=path, description=description or None)
        except ValueError as e:
            console.print(f"[red]{e}[/]")


def _pick_directory(cfg: StencilConfig, prompt: str) -> int:
    print_output_directories(cfg.output_directories)
    choice = click.prompt(prompt, type=click.IntRange(1, len(cfg.output_directories)))
    return choice - 1


@main.command()
@click.option("--config", "-c", "config_path", default=CONFIG_FILE, help="Path to stencil.yaml")
def update(config_path: str) -> None:
    """Add, edit or remove output directories in stencil.yaml."""
    if not Path(config_path).exists():
        console.print(f"[red]❌ No {config_path} found in current directory.[/]")
        console.print("[dim]💡 Run 'stencil config' to create a default configuration first.[/]")
        return

    cfg = load_config(config_path)
    console.print("[bold]📝 Current output directories:[/]")
    print_output_directories(cfg.output_directories)

    action = click.prompt(
        "What would you like to do?",
        type=click.Choice(["add", "edit", "remove", "reset", "cancel"]),
        default="cancel",
    )

    if action == "cancel":
        console.print("🚫 Update cancelled.")
        return

    if action == "reset":
        if click.confirm("Are you sure you want to reset to default configuration?", default=False):
            save_config(default_config(), config_path)
            console.print("[green]✅ Configuration reset to default values.[/]")
        else:
            console.print("🚫 Reset cancelled.")
        return

    if action == "add":
        new_dir = _prompt_directory()
        cfg.output_directories.append(new_dir)
        console.print(f"[green]✅ Added new output directory: {new_dir.name} → {new_dir.path}[/]")
    elif action == "edit":
        index = _pick_directory(cfg, "Directory to edit")
        edited = _prompt_directory(cfg.output_directories[index])
        cfg.output_directories[index] = edited
        console.print(f"[green]✅ Updated directory: {edited.name} → {edited.path}[/]")
    else:
        index = _pick_directory(cfg, "Directory to remove")
        removed = cfg.output_directories.pop(index)
        console.print(f"[green]✅ Removed directory: {removed.name} → {removed.path}[/]")

    save_config(cfg, config_path)


# ─── LIST ─────────────────────────────────────────────────────


@main.command(name="list")
@click.option("--config", "-c", "config_path", help="Path to stencil.yaml")
def list_templates(config_path: str | None) -> None:
    """List available templates."""
    cfg = load_config(config_path)
    templates_dir = resolve_templates_dir(cfg)
    templates = asyncio.run(TemplateManager(templates_dir).list_templates())
    print_templates(templates, str(templates_dir))


# ─── GENERATE ─────────────────────────────────────────────────


def _name_value(value: str) -> str:
    try:
        return validate_target_name(value)
    except InvalidInputError as e:
        raise click.BadParameter(str(e))


@main.command()
@click.argument("template", required=False)
@click.argument("name", required=False)
@click.option("--dir", "-d", "output_dir", default=None, help="Output directory")
@click.option("--dry-run", is_flag=True, help="Preview files before generating")
@click.option("--yes", "-y", is_flag=True, help="Generate after the preview without asking")
@click.option("--config", "-c", "config_path", help="Path to stencil.yaml")
def generate(
    template: str | None,
    name: str | None,
    output_dir: str | None,
    dry_run: bool,
    yes: bool,
    config_path: str | None,
) -> None:
    """Generate files from a template.

    Anything not given on the command line is asked for interactively.

    \b
    Examples:
      stencil generate
      stencil generate react-component "user profile" -d src/components
      stencil generate api-endpoint orders --dry-run
    """
    cfg = load_config(config_path)
    templates_dir = resolve_templates_dir(cfg)
    manager = TemplateManager(templates_dir)

    templates = asyncio.run(manager.list_templates())
    if not templates:
        console.print(f"[red]❌ No templates found in the {templates_dir} directory[/]")
        console.print("[dim]💡 Run 'stencil init' to set up the bundled templates.[/]")
        sys.exit(1)

    if template is None:
        print_templates(templates, str(templates_dir))
        template = click.prompt("Choose a template", type=click.Choice([t.name for t in templates]))

    if name is None:
        name = click.prompt("Enter the name for your component/file", value_proc=_name_value)
    else:
        try:
            name = validate_target_name(name)
        except InvalidInputError as e:
            _fail(str(e))

    if output_dir is None:
        if len(cfg.output_directories) == 1:
            output_dir = cfg.output_directories[0].path
        else:
            console.print("[bold]Output directories:[/]")
            output_dir = cfg.output_directories[_pick_directory(cfg, "Choose output directory")].path

    try:
        if dry_run:
            results = asyncio.run(manager.generate_from_template(template, name, output_dir, dry_run=True))
            print_generation_results(results, dry_run=True)
            if not yes and not click.confirm("Proceed with generation?", default=True):
                console.print("Generation cancelled.")
                return

        manager.progress = RichProgress(console) if cfg.progress else None
        results = asyncio.run(manager.generate_from_template(template, name, output_dir))
    except StencilError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Generation aborted: {e}. Files written before the failure were kept.")

    if not cfg.progress:
        print_generation_results(results)
    console.print(f"[bold green]✅ Successfully generated {name} from template {template} in {output_dir}[/]")


# ─── VALIDATE ─────────────────────────────────────────────────


@main.command()
@click.argument("path", required=False)
@click.option("--config", "-c", "config_path", help="Path to stencil.yaml")
def validate(path: str | None, config_path: str | None) -> None:
    """Validate template placeholders and structure.

    Exits with status 1 when any template has errors.
    """
    if path is not None:
        results = {path: asyncio.run(validate_template(path))}
    else:
        templates_dir = resolve_templates_dir(load_config(config_path))
        if not templates_dir.exists():
            console.print(f"[red]❌ No templates found in the {templates_dir} directory[/]")
            console.print("[dim]💡 Run 'stencil init' to set up the bundled templates.[/]")
            return
        console.print("[bold]🔍 Validating templates...[/]\n")
        results = asyncio.run(validate_all(templates_dir))

    errors, _ = print_validation_report(results)
    if errors:
        console.print("[red]❌ Please fix the errors before using these templates.[/]")
        sys.exit(1)


if __name__ == "__main__":
    main()
