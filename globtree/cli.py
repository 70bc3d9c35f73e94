"""CLI entry point for globtree."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from globtree_core.config import DEFAULT_CONFIG_TEMPLATE, GlobtreeConfig, load_config
from globtree_core.errors import GlobtreeError
from globtree_core.fingerprint import compute_fingerprint
from globtree_core.logging_setup import setup_logging
from globtree_core.tree import list_directories, list_files, match_directories, printable

app = typer.Typer(
    name="globtree",
    help="Deterministic directory listings, glob matching and content fingerprints.",
)

config_app = typer.Typer(help="Manage globtree configuration.")
app.add_typer(config_app, name="config")


# Global state
_config: GlobtreeConfig | None = None


def _get_config() -> GlobtreeConfig:
    if _config is None:
        return load_config(base_dir=Path.cwd())
    return _config


def _error(e: Exception) -> None:
    rprint(f"[red]Error:[/red] {escape(printable(str(e)))}")


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to globtree.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        # The CLI is the only layer that looks for ./globtree.yaml
        _config = load_config(config, base_dir=Path.cwd())
    except ValueError as e:
        _error(e)
        raise typer.Exit(1)
    setup_logging(_config.log_level, _config.log_format)


def _emit(paths: list[str], as_json: bool) -> None:
    paths = [printable(p) for p in paths]
    if as_json:
        typer.echo(json.dumps(paths))
        return
    for p in paths:
        typer.echo(p)


# ---------------------------------------------------------------------------
# Lenient listings
# ---------------------------------------------------------------------------


@app.command()
def dirs(
    root: Annotated[str, typer.Argument(help="Directory to walk")] = ".",
    native: Annotated[bool, typer.Option("--native", help="Keep platform separators")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print a JSON array")] = False,
) -> None:
    """List every directory below ROOT (unreadable entries are skipped)."""
    unix = _get_config().listing.unix_style and not native
    _emit(list_directories(root, unix), as_json)


@app.command()
def files(
    root: Annotated[str, typer.Argument(help="Directory to walk")] = ".",
    native: Annotated[bool, typer.Option("--native", help="Keep platform separators")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print a JSON array")] = False,
) -> None:
    """List every file below ROOT (unreadable entries are skipped)."""
    unix = _get_config().listing.unix_style and not native
    _emit(list_files(root, unix), as_json)


# ---------------------------------------------------------------------------
# Strict pattern commands
# ---------------------------------------------------------------------------


@app.command()
def dirset(
    root: Annotated[str, typer.Argument(help="Directory to walk")],
    pattern: Annotated[str | None, typer.Argument(help="Glob pattern, e.g. 'src/**'")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print a JSON array")] = False,
) -> None:
    """List the directories below ROOT matching PATTERN."""
    pat = pattern if pattern is not None else _get_config().pattern.default
    try:
        found = match_directories(root, pat)
    except GlobtreeError as e:
        _error(e)
        raise typer.Exit(1)
    _emit(found, as_json)


@app.command()
def dirhash(
    root: Annotated[str, typer.Argument(help="Directory to walk")],
    pattern: Annotated[str | None, typer.Argument(help="Glob pattern, e.g. 'src/**'")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show the hashed files")] = False,
) -> None:
    """Print the SHA-256 fingerprint of the files below ROOT matching PATTERN."""
    pat = pattern if pattern is not None else _get_config().pattern.default
    try:
        result = compute_fingerprint(root, pat)
    except GlobtreeError as e:
        _error(e)
        raise typer.Exit(1)

    if verbose:
        table = Table(title=f"Hashed files ({len(result.files)})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Path", style="cyan")
        for i, path in enumerate(result.files, 1):
            table.add_row(str(i), escape(path))
        rprint(table)
    typer.echo(result.digest)


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command("init")
def config_init(
    path: Annotated[str, typer.Option("--path", help="Where to write the config")] = "globtree.yaml",
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Write a commented default config file."""
    target = Path(path)
    if target.exists() and not force:
        rprint(f"[yellow]{target} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration as YAML."""
    typer.echo(yaml.safe_dump(_get_config().model_dump(), sort_keys=False))


if __name__ == "__main__":
    app()
