"""Assemble and write the log of a checking run."""

from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from nomencheck.core.models import FileReport

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ("filename", "status", "destination", "canonical_name", "findings")


def log_header(checked_at: datetime) -> str:
    """First line of a log, e.g. ``Filenames checked on 17 October, 2026 at 03:15 PM.``"""
    return (
        f"Filenames checked on {checked_at.strftime('%d %B, %Y')} "
        f"at {checked_at.strftime('%I:%M %p')}."
    )


def build_log(reports: Iterable[Sequence[str]], checked_at: datetime) -> list[str]:
    """Concatenate rendered reports under a timestamped header.

    Args:
        reports: Report lines, one sequence per file.
        checked_at: When the run happened.

    Returns:
        The log as a list of lines.
    """
    lines = [log_header(checked_at), ""]
    for report_lines in reports:
        lines.extend(report_lines)
        lines.append("")
    return lines


def default_log_name(checked_at: datetime) -> str:
    return f"name_check_{checked_at.strftime('%Y%m%d_%H%M%S')}.log"


def write_log(path: Path, lines: Sequence[str]) -> Path:
    """Write log lines to ``path`` and return it."""
    path = Path(path)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info("Wrote name check log to %s", path)
    return path


def write_summary_csv(reports: Iterable[FileReport], path: Path) -> int:
    """Write one CSV row per checked file.

    Returns:
        Number of rows written.
    """
    path = Path(path)
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(SUMMARY_COLUMNS)
        for report in reports:
            writer.writerow([
                report.filename,
                report.status,
                report.destination or "",
                report.canonical_filename or "",
                "; ".join(finding.message for finding in report.findings),
            ])
            count += 1
    logger.info("Wrote %d rows to %s", count, path)
    return count
