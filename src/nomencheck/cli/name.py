"""nomencheck name — check filenames given on the command line."""

from __future__ import annotations

import click

from nomencheck.cli.utils import error_handler, print_report
from nomencheck.core.models import ReportOptions
from nomencheck.nomenclature import check_names, format_report


@click.command()
@click.argument("filenames", nargs=-1, required=True)
@click.option("-d", "--details", is_flag=True, help="Describe every section of each name.")
@error_handler
def name(filenames: tuple[str, ...], details: bool) -> None:
    """Check FILENAMES without looking at the filesystem."""
    options = ReportOptions(verbose=details)
    for report in check_names(filenames):
        print_report(format_report(report, options))
