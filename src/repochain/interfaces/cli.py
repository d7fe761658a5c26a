"""Command-line interface for repochain.

Commands:
- chain: Register a declarations file and show the resulting resolver chain
- names: Show the final repository names in registration order
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from repochain.config.declarations import apply_declarations, load_declarations
from repochain.config.loader import get_default_config_path, load_config
from repochain.config.schema import AppConfig
from repochain.observability.logging import configure_from_config, get_logger
from repochain.repositories import RepositoryError
from repochain.service.handler import RepositoryHandler

app = typer.Typer(
    name="repochain",
    help="Turn repository declarations into an ordered resolver chain",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


@app.command()
def chain(
    declarations: Path = typer.Argument(..., help="TOML file with [[repositories]] declarations"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Config profile to apply"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help=".env file to load before reading settings"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Show the resolver chain built from a declarations file."""
    config = _load_config(config_file, profile, env_file)
    handler = _build_handler(declarations, config)
    resolvers = handler.resolvers

    if json_output:
        typer.echo(json.dumps([r.model_dump(mode="json", exclude={"credentials"}) for r in resolvers], indent=2))
        return

    table = Table(title=f"Resolver chain ({len(resolvers)} resolvers)")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Roots", style="green")

    for idx, resolver in enumerate(resolvers, start=1):
        table.add_row(
            str(idx),
            resolver.name,
            resolver.kind.value,
            "\n".join(resolver.roots) or "-",
        )

    console.print(table)


@app.command()
def names(
    declarations: Path = typer.Argument(..., help="TOML file with [[repositories]] declarations"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Config profile to apply"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help=".env file to load before reading settings"),
):
    """Show the final repository names in registration order."""
    config = _load_config(config_file, profile, env_file)
    handler = _build_handler(declarations, config)

    for name in handler.names:
        typer.echo(name)


def _build_handler(declarations: Path, config: AppConfig) -> RepositoryHandler:
    """Register every declaration, exiting with code 1 on the first invalid one."""
    if not declarations.exists():
        console.print(f"[red]Declarations file not found: {declarations}[/red]")
        raise typer.Exit(1)

    handler = RepositoryHandler(config)
    try:
        apply_declarations(handler, load_declarations(declarations))
    except RepositoryError as e:
        logger.error("declarations_failed", path=str(declarations), error=str(e))
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    return handler


def _load_config(
    config_file: Optional[Path],
    profile: Optional[str] = None,
    env_file: Optional[Path] = None,
) -> AppConfig:
    """Load configuration and setup logging."""
    if config_file is None:
        config_file = get_default_config_path()

    config = load_config(config_file, profile=profile, env_file=env_file)
    configure_from_config(config)

    return config


if __name__ == "__main__":
    app()
