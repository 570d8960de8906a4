"""Data models for nomenclature checking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Iterable

from nomencheck.core.exceptions import (
    EXPECTED_SECTIONS,
    DateError,
    LensParseError,
    NomenclatureError,
    SplitError,
)


class Field(IntEnum):
    """Positional sections of a filename, numbered from 1."""

    EXPERIMENT = 1
    EXPERIMENT_DATE = 2
    CONDITION = 3
    IHC_DATE = 4
    LABELS = 5
    CAPTURE_DATE = 6
    MICROSCOPE = 7
    LENS = 8

    @property
    def description(self) -> str:
        return _FIELD_DESCRIPTIONS[self]


_FIELD_DESCRIPTIONS = {
    Field.EXPERIMENT: "Experiment name & initial",
    Field.EXPERIMENT_DATE: "Experiment date and number",
    Field.CONDITION: "Condition & replicate",
    Field.IHC_DATE: "Date of IHC",
    Field.LABELS: "Dye/antibodies/transcript",
    Field.CAPTURE_DATE: "Image capture date",
    Field.MICROSCOPE: "Microscope type",
    Field.LENS: "Lens, zoom & image number",
}


@dataclass(frozen=True)
class FieldVector:
    """The eight sections of a successfully split filename stem."""

    experiment: str
    experiment_date: str
    condition: str
    ihc_date: str
    labels: str
    capture_date: str
    microscope: str
    lens: str

    @classmethod
    def from_parts(cls, parts: Iterable[str]) -> FieldVector:
        """Build a vector from exactly eight strings, in nomenclature order."""
        parts = list(parts)
        if len(parts) != EXPECTED_SECTIONS:
            raise ValueError(
                f"FieldVector needs {EXPECTED_SECTIONS} parts, got {len(parts)}"
            )
        return cls(*parts)

    def parts(self) -> tuple[str, ...]:
        return (
            self.experiment,
            self.experiment_date,
            self.condition,
            self.ihc_date,
            self.labels,
            self.capture_date,
            self.microscope,
            self.lens,
        )

    def __getitem__(self, key: Field) -> str:
        return self.parts()[Field(key) - 1]

    def join(self) -> str:
        """Reassemble the sections into an underscore-delimited stem."""
        return "_".join(self.parts())


class FindingKind(Enum):
    """Categories of reportable findings."""

    SPLIT = "split"
    DATE = "date"
    LENS = "lens"
    FIELD = "field"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class Finding:
    """A single reportable issue for one file."""

    kind: FindingKind
    message: str
    field: Field | None = None


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating one section.

    Attributes:
        field: Which section was validated.
        original: The section text as found in the filename.
        value: Normalized text; equals ``original`` when unchanged or on error.
        parsed: Typed value extracted by the validator, if any.
        error: The validator's error, if it failed.
    """

    field: Field
    original: str
    value: str
    parsed: Any = None
    error: NomenclatureError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def changed(self) -> bool:
        return self.value != self.original


_ERROR_KINDS = (
    (DateError, FindingKind.DATE),
    (LensParseError, FindingKind.LENS),
)


def _kind_for(error: NomenclatureError) -> FindingKind:
    for error_type, kind in _ERROR_KINDS:
        if isinstance(error, error_type):
            return kind
    return FindingKind.FIELD


@dataclass(frozen=True)
class FileReport:
    """Structured result of checking one filename."""

    filename: str
    stem: str
    extension: str = ""
    results: tuple[FieldResult, ...] = ()
    split_error: SplitError | None = None
    destination: str | None = None
    canonical_name: str | None = None

    @property
    def is_split(self) -> bool:
        return self.split_error is None

    @property
    def is_consistent(self) -> bool:
        return self.is_split and self.canonical_name == self.stem

    @property
    def has_field_errors(self) -> bool:
        return any(r.error is not None for r in self.results)

    @property
    def status(self) -> str:
        """One of ``malformed``, ``invalid``, ``mismatch`` or ``consistent``.

        ``invalid`` means some section failed validation; such a name can
        still equal its canonical form, since failed sections are kept as-is.
        """
        if not self.is_split:
            return "malformed"
        if self.has_field_errors:
            return "invalid"
        return "consistent" if self.is_consistent else "mismatch"

    @property
    def canonical_filename(self) -> str | None:
        """Canonical stem with the original extension re-attached."""
        if self.canonical_name is None:
            return None
        return self.canonical_name + self.extension

    def result_for(self, key: Field) -> FieldResult | None:
        for result in self.results:
            if result.field == key:
                return result
        return None

    @property
    def findings(self) -> list[Finding]:
        """All findings, in section order, with the mismatch last."""
        if self.split_error is not None:
            return [Finding(FindingKind.SPLIT, str(self.split_error))]
        found = [
            Finding(_kind_for(r.error), str(r.error), r.field)
            for r in self.results
            if r.error is not None
        ]
        if not self.is_consistent:
            found.append(
                Finding(
                    FindingKind.MISMATCH,
                    f"{self.stem} -> {self.canonical_name}",
                )
            )
        return found


@dataclass(frozen=True)
class ReportOptions:
    """Options that control how reports are rendered."""

    verbose: bool = False
