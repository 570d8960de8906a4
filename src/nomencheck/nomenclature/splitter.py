"""Split a sanitized stem into the eight nomenclature sections."""

from __future__ import annotations

from nomencheck.core.exceptions import EXPECTED_SECTIONS, SplitError, SplitHint
from nomencheck.core.models import FieldVector

__all__ = ["EXPECTED_SECTIONS", "SplitHint", "split_fields"]

DELIMITER = "_"


def split_fields(stem: str) -> FieldVector:
    """Split ``stem`` on underscores into a FieldVector.

    Args:
        stem: Sanitized filename without its extension.

    Returns:
        The eight sections, in order.

    Raises:
        SplitError: If the stem does not have exactly eight sections. The
            error carries the sections found, their count and a hint.
    """
    parts = stem.split(DELIMITER)
    if len(parts) != EXPECTED_SECTIONS:
        raise SplitError(parts)
    return FieldVector.from_parts(parts)
