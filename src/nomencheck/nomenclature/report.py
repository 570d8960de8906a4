"""Render FileReports as human-readable report lines.

Two formatters share one layout. ``SummaryFormatter`` prints only findings,
the destination folder and the verdict; ``VerboseFormatter`` also describes
what was read from every section. :func:`format_report` picks one from
:class:`~nomencheck.core.models.ReportOptions`.
"""

from __future__ import annotations

from nomencheck.core.exceptions import SplitError, SplitHint
from nomencheck.core.models import Field, FieldResult, FileReport, ReportOptions

SEPARATOR = "####"
CONSISTENT = "Name is consistent with nomenclature"
INCONSISTENT = "The current name does not fit the nomenclature exactly."
MALFORMED = "The file name does not fit the expected nomenclature."


class SummaryFormatter:
    """Findings and verdict only."""

    def format(self, report: FileReport) -> list[str]:
        lines = [SEPARATOR, f"Current file: {report.filename}", ""]
        if report.split_error is not None:
            lines.extend(self.split_lines(report.split_error))
            return lines

        for result in report.results:
            if result.error is not None:
                lines.append(str(result.error))
            else:
                lines.extend(self.describe(result))
            if result.field == Field.CONDITION:
                lines.append(f"Destination folder: {report.destination}")
        lines.extend(self.trailer())

        lines.extend(self.verdict_lines(report))
        lines.append("")
        return lines

    def describe(self, result: FieldResult) -> list[str]:
        return []

    def trailer(self) -> list[str]:
        return []

    def split_lines(self, error: SplitError) -> list[str]:
        lines = [MALFORMED, "Expected sections:"]
        lines.extend(f"  {key.description}" for key in Field)
        lines.append("")
        if error.hint is SplitHint.ONE_SECTION:
            lines.append("Only 1 section was found.")
            lines.append('Were other symbols (e.g. dashes) used instead of underscores ("_")?')
        elif error.hint is SplitHint.TOO_FEW:
            lines.append(
                f"It may be missing {error.difference} section(s), "
                f"as it only found {error.count}."
            )
        else:
            lines.append(
                f"It may have {error.difference} extra section(s), "
                f"as it found {error.count}."
            )
        lines.extend(f"  {part}" for part in error.fields)
        lines.append("Please double-check.")
        lines.append("")
        return lines

    def verdict_lines(self, report: FileReport) -> list[str]:
        if report.is_consistent:
            return [CONSISTENT]
        return [
            INCONSISTENT,
            f"Current name: {report.stem}",
            f"Updated name: {report.canonical_name}",
        ]


class VerboseFormatter(SummaryFormatter):
    """Adds a description of every section that parsed cleanly."""

    def describe(self, result: FieldResult) -> list[str]:
        key = result.field
        if key == Field.CONDITION:
            return [
                f"Condition: {result.parsed.condition}",
                f"Replicate: {result.parsed.replicate}",
            ]
        if key == Field.IHC_DATE:
            return [f"IHC date: {result.value}"]
        if key == Field.LABELS:
            return ["Dye/antibody/transcript:"] + [f"    {label}" for label in result.parsed]
        if key == Field.CAPTURE_DATE:
            return [f"Capture date: {result.value}"]
        if key == Field.MICROSCOPE:
            return [f"Microscope type: {result.value}"]
        if key == Field.LENS:
            return [
                f"Lens: {result.parsed.lens}",
                f"Zoom level: {result.parsed.zoom}",
                f"Picture #: {result.parsed.image}",
            ]
        return []

    def trailer(self) -> list[str]:
        return [""]


def formatter_for(options: ReportOptions | None = None) -> SummaryFormatter:
    """Return the formatter selected by ``options``."""
    if options is not None and options.verbose:
        return VerboseFormatter()
    return SummaryFormatter()


def format_report(report: FileReport, options: ReportOptions | None = None) -> list[str]:
    """Render one report as a list of text lines."""
    return formatter_for(options).format(report)
