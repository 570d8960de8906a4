"""Shared CLI utilities — Rich console, error handling, report printing."""

from __future__ import annotations

import functools
import logging
import traceback
from typing import Any, Callable, Iterable, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from nomencheck.core.models import FileReport

console = Console()

# Set by the --verbose flag on the top-level CLI group.
verbose: bool = False

_STATUS_STYLES = {
    "consistent": "green",
    "mismatch": "yellow",
    "invalid": "magenta",
    "malformed": "red",
}


def enable_debug_logging() -> None:
    """Route library log records through Rich at DEBUG level."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def error_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator wrapping CLI commands with standard error handling.

    Catches NomenclatureError, ValueError and OSError (exit 1) and
    unexpected exceptions (exit 2). With --verbose, unexpected errors
    include the full traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from nomencheck.core.exceptions import NomenclatureError

        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except (NomenclatureError, ValueError, OSError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)
        except Exception as e:
            if verbose:
                console.print(f"[red]Internal error:[/red] {e}")
                console.print(traceback.format_exc())
            else:
                console.print(
                    f"[red]Internal error:[/red] {type(e).__name__}: {e}\n"
                    "[dim]Use --verbose for the full traceback.[/dim]"
                )
            raise SystemExit(2)

    return wrapper


def print_report(lines: Sequence[str]) -> None:
    """Print report lines verbatim; filenames may contain markup characters."""
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def summary_table(reports: Iterable[FileReport]) -> Table:
    """Count reports per status in a Rich table."""
    counts = {status: 0 for status in _STATUS_STYLES}
    for report in reports:
        counts[report.status] += 1

    table = Table(title="Name check summary")
    table.add_column("Status")
    table.add_column("Files", justify="right")
    for status, style in _STATUS_STYLES.items():
        table.add_row(f"[{style}]{status}[/{style}]", str(counts[status]))
    table.add_row("[bold]total[/bold]", str(sum(counts.values())))
    return table
