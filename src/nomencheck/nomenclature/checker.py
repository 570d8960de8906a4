"""Check filenames against the nomenclature and build canonical names."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from nomencheck.core.exceptions import NomenclatureError, SplitError
from nomencheck.core.models import Field, FieldResult, FieldVector, FileReport
from nomencheck.io._sanitize import sanitize_filename, split_extension
from nomencheck.nomenclature.fields import (
    LABEL_DELIMITER,
    destination_folder,
    normalize_labels,
    normalize_lens,
    split_condition,
    validate_date,
    validate_microscope,
)
from nomencheck.nomenclature.splitter import split_fields

logger = logging.getLogger(__name__)


def _passthrough(value: str) -> tuple[str, Any]:
    return value, None


def _condition(value: str) -> tuple[str, Any]:
    return value, split_condition(value)


def _date(value: str) -> tuple[str, Any]:
    return value, validate_date(value)


def _labels(value: str) -> tuple[str, Any]:
    labels = normalize_labels(value)
    return LABEL_DELIMITER.join(labels), labels


def _microscope(value: str) -> tuple[str, Any]:
    return validate_microscope(value), None


def _lens(value: str) -> tuple[str, Any]:
    parsed = normalize_lens(value)
    return parsed.canonical, parsed


# Each validator returns (normalized text, parsed value).
_VALIDATORS: dict[Field, Callable[[str], tuple[str, Any]]] = {
    Field.EXPERIMENT: _passthrough,
    Field.EXPERIMENT_DATE: _passthrough,
    Field.CONDITION: _condition,
    Field.IHC_DATE: _date,
    Field.LABELS: _labels,
    Field.CAPTURE_DATE: _date,
    Field.MICROSCOPE: _microscope,
    Field.LENS: _lens,
}


def validate_field(key: Field, value: str) -> FieldResult:
    """Run the validator for one section; errors are recorded, not raised."""
    try:
        normalized, parsed = _VALIDATORS[key](value)
    except NomenclatureError as e:
        logger.debug("Section %d (%s) failed: %s", key, key.name, e)
        return FieldResult(field=key, original=value, value=value, error=e)
    return FieldResult(field=key, original=value, value=normalized, parsed=parsed)


def check_fields(fields: FieldVector) -> tuple[FieldResult, ...]:
    """Validate every section independently, in nomenclature order."""
    return tuple(validate_field(key, fields[key]) for key in Field)


def check_name(filename: str) -> FileReport:
    """Check one filename against the nomenclature.

    The filename is sanitized, its extension removed, and the stem split
    into sections. A split failure ends the check for this file; otherwise
    each section is validated on its own and the normalized sections are
    joined into the canonical name.

    Args:
        filename: Filename as found on disk, extension included.

    Returns:
        A FileReport describing every finding. Never raises for a
        malformed name.
    """
    clean = sanitize_filename(filename)
    stem, extension = split_extension(clean)

    try:
        fields = split_fields(stem)
    except SplitError as e:
        logger.debug("Could not split %r: %s", clean, e)
        return FileReport(
            filename=clean, stem=stem, extension=extension, split_error=e,
        )

    results = check_fields(fields)
    canonical = FieldVector.from_parts(r.value for r in results).join()

    report = FileReport(
        filename=clean,
        stem=stem,
        extension=extension,
        results=results,
        destination=destination_folder(fields),
        canonical_name=canonical,
    )
    logger.debug("Checked %s: %s", clean, report.status)
    return report


def check_names(filenames: Iterable[str]) -> Iterator[FileReport]:
    """Check each filename in turn, yielding one report per file."""
    for filename in filenames:
        yield check_name(filename)
