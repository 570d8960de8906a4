"""Per-section validators for the eight-field nomenclature.

Each validator is a pure function over one section's text. Validators that
can fail raise a :class:`~nomencheck.core.exceptions.NomenclatureError`
subclass; the checker records the error and keeps going with the other
sections.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import PurePosixPath

from nomencheck.core.exceptions import DateError, LensParseError
from nomencheck.core.models import FieldVector

DATE_FORMAT = "%y%m%d"
_DATE_RE = re.compile(r"^[0-9]{6}$")

# A leading lowercase "p" before an uppercase letter marks a phospho-protein.
_PHOSPHO_RE = re.compile(r"^p[A-Z]")

LABEL_DELIMITER = "+"
ANTIBODY_DELIMITER = "-"
SPECIES_LENGTH = 2


@dataclass(frozen=True)
class ConditionReplicate:
    """Condition and replicate extracted from the third section."""

    condition: str
    replicate: str
    delimiter: str


def split_condition(value: str) -> ConditionReplicate:
    """Split the condition section into condition and replicate.

    The replicate follows the last ``#`` if the section has one, otherwise
    the last ``-``. Neither part is normalized.
    """
    delimiter = "#" if "#" in value else "-"
    tokens = value.split(delimiter)
    return ConditionReplicate(
        condition=delimiter.join(tokens[:-1]),
        replicate=tokens[-1],
        delimiter=delimiter,
    )


def destination_folder(fields: FieldVector) -> str:
    """Relative folder the file belongs in: sections 1-3 as a path."""
    return str(PurePosixPath(fields.experiment, fields.experiment_date, fields.condition))


def validate_date(value: str) -> date:
    """Parse a strict ``YYMMDD`` date.

    Only the shape and calendar validity are checked; swapped day/month or
    century ambiguity cannot be detected.

    Raises:
        DateError: If ``value`` is not six digits forming a real date.
    """
    if not _DATE_RE.match(value):
        raise DateError(value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise DateError(value) from None


def normalize_antibody_segment(segment: str) -> str:
    """Normalize one ``<species><target>`` half of an antibody pair.

    The two-letter species code is lower-cased and the target upper-cased,
    except that a phospho marker keeps its lowercase ``p``.
    """
    species = segment[:SPECIES_LENGTH].lower()
    target = segment[SPECIES_LENGTH:]
    if _PHOSPHO_RE.match(target):
        target = "p" + target[1:].upper()
    else:
        target = target.upper()
    return species + target


def normalize_label(label: str) -> str:
    """Normalize one dye, antibody pair or transcript label.

    Only labels containing a dash are treated as antibody pairs. A dye or
    transcript whose name contains a dash is therefore normalized too.
    """
    if ANTIBODY_DELIMITER not in label:
        return label
    segments = label.split(ANTIBODY_DELIMITER)
    return ANTIBODY_DELIMITER.join(normalize_antibody_segment(s) for s in segments)


def normalize_labels(value: str) -> tuple[str, ...]:
    """Normalize every ``+``-separated label, keeping their order."""
    return tuple(normalize_label(label) for label in value.split(LABEL_DELIMITER))


def validate_microscope(value: str) -> str:
    """Microscope type is accepted as-is."""
    return value


@dataclass(frozen=True)
class LensZoomImage:
    """Lens, zoom level and image number from the last section."""

    lens: str
    zoom: str
    image: str

    @property
    def canonical(self) -> str:
        return f"{self.lens}-z{self.zoom}-{self.image}"


def _strip_zoom_prefix(token: str) -> str:
    return token[1:] if token.startswith("z") else token


def normalize_lens(value: str) -> LensZoomImage:
    """Parse the lens/zoom/image section.

    Accepts ``10X-z1-1`` (three dash-separated tokens) and the compact
    ``10Xz1-1``. Both produce the canonical ``10X-z1-1``.

    Raises:
        LensParseError: If the compact form has no ``x`` separating the
            lens from the zoom.
    """
    tokens = value.lower().split("-")
    if len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()

    if len(tokens) >= 3:
        return LensZoomImage(
            lens=tokens[0].upper(),
            zoom=_strip_zoom_prefix(tokens[1]),
            image=tokens[2],
        )

    lens_parts = tokens[0].split("x")
    if lens_parts and lens_parts[-1] == "":
        lens_parts.pop()
    if len(lens_parts) < 2:
        raise LensParseError(value)
    return LensZoomImage(
        lens=lens_parts[0] + "X",
        zoom=_strip_zoom_prefix(lens_parts[1]),
        image="-".join(tokens[1:]),
    )
