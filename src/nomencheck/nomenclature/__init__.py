"""nomencheck nomenclature — splitting, section validators, canonical names."""

from nomencheck.nomenclature.checker import check_fields, check_name, check_names, validate_field
from nomencheck.nomenclature.fields import (
    ConditionReplicate,
    LensZoomImage,
    destination_folder,
    normalize_antibody_segment,
    normalize_label,
    normalize_labels,
    normalize_lens,
    split_condition,
    validate_date,
    validate_microscope,
)
from nomencheck.nomenclature.report import (
    SummaryFormatter,
    VerboseFormatter,
    format_report,
    formatter_for,
)
from nomencheck.nomenclature.splitter import split_fields

__all__ = [
    "ConditionReplicate",
    "LensZoomImage",
    "SummaryFormatter",
    "VerboseFormatter",
    "check_fields",
    "check_name",
    "check_names",
    "destination_folder",
    "format_report",
    "formatter_for",
    "normalize_antibody_segment",
    "normalize_label",
    "normalize_labels",
    "normalize_lens",
    "split_condition",
    "split_fields",
    "validate_date",
    "validate_field",
    "validate_microscope",
]
