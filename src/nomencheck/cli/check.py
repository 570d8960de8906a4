"""nomencheck check — check image filenames in a folder."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from pathlib import Path

import click

from nomencheck.cli.utils import console, error_handler, print_report, summary_table
from nomencheck.io import (
    CheckConfig,
    build_log,
    config_from_yaml,
    default_log_name,
    scan,
    write_log,
    write_summary_csv,
)
from nomencheck.nomenclature import check_names, format_report


@click.command()
@click.argument("folder", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--files", multiple=True, type=click.Path(exists=True, dir_okay=False),
    help="Specific image files to check (instead of scanning the folder).",
)
@click.option(
    "-d", "--details/--no-details", default=None,
    help="Describe every section of each name in the report.",
)
@click.option("-q", "--quiet", is_flag=True, help="Do not print reports to the screen.")
@click.option(
    "--recursive/--no-recursive", default=None,
    help="Also check files in subfolders.",
)
@click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False),
    help="YAML file with check settings.",
)
@click.option(
    "--log", "log_path", type=click.Path(dir_okay=False),
    help="Write the log to this file, even if the config disables logging.",
)
@click.option("--no-log", is_flag=True, help="Do not write a log file.")
@click.option(
    "--log-dir", type=click.Path(file_okay=False),
    help="Folder for the timestamped log file (default: the checked folder).",
)
@click.option(
    "--summary-csv", type=click.Path(dir_okay=False),
    help="Also write a one-row-per-file CSV summary.",
)
@error_handler
def check(
    folder: str,
    files: tuple[str, ...],
    details: bool | None,
    quiet: bool,
    recursive: bool | None,
    config_path: str | None,
    log_path: str | None,
    no_log: bool,
    log_dir: str | None,
    summary_csv: str | None,
) -> None:
    """Check that image filenames in FOLDER follow the nomenclature.

    Nothing is renamed; every file gets a report with the suggested name.
    """
    if log_path and no_log:
        console.print("[red]Error:[/red] --log and --no-log cannot be used together.")
        raise SystemExit(1)

    config = config_from_yaml(Path(config_path)) if config_path else CheckConfig()

    overrides: dict[str, object] = {}
    if details is not None:
        overrides["verbose"] = details
    if recursive is not None:
        overrides["recursive"] = recursive
    if quiet:
        overrides["print_to_screen"] = False
    if no_log:
        overrides["write_log"] = False
    if log_path:
        overrides["write_log"] = True
    if log_dir:
        overrides["log_dir"] = Path(log_dir)
    config = dataclasses.replace(config, **overrides)

    folder_path = Path(folder)
    result = scan(folder_path, config, files=[Path(f) for f in files] or None)
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    if not result.files:
        console.print(f"[yellow]No image files found in {folder_path}[/yellow]")
        return

    checked_at = datetime.now()
    reports = list(check_names(result.filenames))
    rendered = [format_report(report, config.report_options) for report in reports]

    if config.print_to_screen:
        for lines in rendered:
            print_report(lines)

    console.print(summary_table(reports))

    if config.write_log:
        if log_path:
            target = Path(log_path)
        else:
            target_dir = config.log_dir or folder_path
            target_dir.mkdir(parents=True, exist_ok=True)
            target = target_dir / default_log_name(checked_at)
        write_log(target, build_log(rendered, checked_at))
        console.print(f"[green]Wrote log to {target}[/green]")

    if summary_csv:
        write_summary_csv(reports, Path(summary_csv))
        console.print(f"[green]Wrote summary to {summary_csv}[/green]")
