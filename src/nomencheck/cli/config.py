"""nomencheck init-config — write a default settings file."""

from __future__ import annotations

from pathlib import Path

import click

from nomencheck.cli.utils import console, error_handler
from nomencheck.io import CheckConfig, config_to_yaml


@click.command("init-config")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--overwrite", is_flag=True, help="Overwrite the file if it exists.")
@error_handler
def init_config(path: str, overwrite: bool) -> None:
    """Write a YAML settings file with the default values to PATH."""
    out_path = Path(path).expanduser()

    if not out_path.parent.exists():
        console.print(
            f"[red]Error:[/red] Parent directory does not exist: {out_path.parent}"
        )
        raise SystemExit(1)

    if out_path.exists() and not overwrite:
        console.print(
            f"[red]Error:[/red] Config file already exists: {out_path}\n"
            "Use --overwrite to replace it."
        )
        raise SystemExit(1)

    config_to_yaml(CheckConfig(), out_path)
    console.print(f"[green]Wrote default config to {out_path}[/green]")
