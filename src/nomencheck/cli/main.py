"""nomencheck CLI — top-level Click group."""

from __future__ import annotations

import click


@click.group(invoke_without_command=True)
@click.version_option(package_name="nomencheck")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs and full tracebacks on errors.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """nomencheck — Microscopy filename nomenclature checker."""
    from nomencheck.cli import utils

    utils.verbose = verbose
    if verbose:
        utils.enable_debug_logging()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    """Register all subcommands."""
    from nomencheck.cli.check import check
    from nomencheck.cli.config import init_config
    from nomencheck.cli.name import name

    cli.add_command(check)
    cli.add_command(init_config)
    cli.add_command(name)


_register_commands()
