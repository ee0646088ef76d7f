"""CLI entry point for hymark."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from hymark.config import BuildOptions, HymarkConfig, load_config
from hymark.config.loader import DEFAULT_CONFIG_TEMPLATE
from hymark.config.models import DEFAULT_PATTERNS
from hymark.engines import default_registry
from hymark.errors import HymarkError
from hymark.pipeline import build as run_build
from hymark.pipeline import render_page

app = typer.Typer(
    name="hymark",
    help="Render a tree of Markdown/HTML sources through a template engine.",
)

config_app = typer.Typer(help="Manage hymark configuration.")
app.add_typer(config_app, name="config")

err_console = Console(stderr=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(level, logging.INFO),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(config_path: str | None) -> HymarkConfig:
    try:
        return load_config(config_path)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    raise typer.Exit(1)


@app.command()
def build(
    input: Annotated[str | None, typer.Argument(help="Input directory")] = None,
    output: Annotated[str | None, typer.Argument(help="Output directory")] = None,
    engine: Annotated[str | None, typer.Option("--engine", "-e", help="Template engine")] = None,
    match: Annotated[
        list[str] | None, typer.Option("--match", "-m", help="Pattern(s) to match")
    ] = None,
    templates: Annotated[
        str | None, typer.Option("--templates", "-t", help="Path to template directory")
    ] = None,
    template: Annotated[
        str | None, typer.Option("--template", help="Default template for every file")
    ] = None,
    concurrency: Annotated[
        int | None, typer.Option("--concurrency", "-j", help="Files processed at once")
    ] = None,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to hymark.yaml")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Render every matched file from INPUT into OUTPUT."""
    cfg = _load(config)
    _setup_logging("debug" if verbose else cfg.log_level)
    file_cfg = cfg.build

    input_dir = input or file_cfg.input
    output_dir = output or file_cfg.output
    if not input_dir or not output_dir:
        err_console.print("[red]Error:[/red] INPUT and OUTPUT directories are required")
        raise typer.Exit(1)

    try:
        options = BuildOptions(
            input=input_dir,
            output=output_dir,
            templates=templates or file_cfg.templates or str(Path.cwd()),
            match=match or file_cfg.match or DEFAULT_PATTERNS,
            engine=engine or file_cfg.engine,
            template=template or file_cfg.template,
            concurrency=file_cfg.concurrency if concurrency is None else concurrency,
        )
    except ValidationError as e:
        _fail(e)

    try:
        report = asyncio.run(run_build(options))
    except HymarkError as e:
        _fail(e)

    rprint(
        f"[green]Built[/green] {len(report.written)} file(s) into {options.output} "
        f"[dim]({report.duration:.2f}s)[/dim]"
    )


@app.command()
def page(
    file: Annotated[str, typer.Argument(help="Source file to render")],
    engine: Annotated[str | None, typer.Option("--engine", "-e", help="Template engine")] = None,
    templates: Annotated[
        str | None, typer.Option("--templates", "-t", help="Path to template directory")
    ] = None,
    template: Annotated[str | None, typer.Option("--template", help="Template name")] = None,
) -> None:
    """Render a single FILE and print the result to stdout."""
    source = Path(file)
    options = BuildOptions(
        input=str(source.parent),
        output=".",
        templates=templates or str(Path.cwd()),
        engine=engine,
        template=template,
    )
    try:
        output = asyncio.run(render_page(source.name, options))
    except HymarkError as e:
        _fail(e)
    typer.echo(output, nl=False)


@app.command()
def engines() -> None:
    """List the available template engines."""
    table = Table(title="Template engines")
    table.add_column("Name", style="cyan")
    table.add_column("Implementation")
    registry = default_registry()
    for name in registry.names():
        impl = registry.get(name)
        table.add_row(name, f"{type(impl).__module__}.{type(impl).__name__}")
    rprint(table)


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default hymark.yaml in current directory."""
    target = Path("hymark.yaml")
    if target.exists() and not force:
        rprint(f"[yellow]{target} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


@config_app.command("show")
def config_show(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to hymark.yaml")
    ] = None,
) -> None:
    """Show current resolved configuration."""
    import yaml

    cfg = _load(config)
    typer.echo(yaml.dump(cfg.model_dump(), default_flow_style=False, sort_keys=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
