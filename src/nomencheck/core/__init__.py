"""nomencheck core — exceptions and report models."""

from nomencheck.core.exceptions import (
    EXPECTED_SECTIONS,
    DateError,
    LensParseError,
    NomenclatureError,
    SplitError,
    SplitHint,
)
from nomencheck.core.models import (
    Field,
    FieldResult,
    FieldVector,
    FileReport,
    Finding,
    FindingKind,
    ReportOptions,
)

__all__ = [
    "EXPECTED_SECTIONS",
    "DateError",
    "Field",
    "FieldResult",
    "FieldVector",
    "FileReport",
    "Finding",
    "FindingKind",
    "LensParseError",
    "NomenclatureError",
    "ReportOptions",
    "SplitError",
    "SplitHint",
]
