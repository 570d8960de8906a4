"""Exception classes for nomenclature checking."""

from __future__ import annotations

from enum import Enum

EXPECTED_SECTIONS = 8


class NomenclatureError(Exception):
    """Base exception for all nomenclature-related errors."""


class SplitHint(Enum):
    """Why a filename did not split into the expected number of sections."""

    ONE_SECTION = "one_section"
    TOO_FEW = "too_few"
    TOO_MANY = "too_many"


class SplitError(NomenclatureError):
    """Raised when a stem does not split into exactly eight sections."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        self.count = len(self.fields)
        if self.count == 1:
            self.hint = SplitHint.ONE_SECTION
            self.difference = EXPECTED_SECTIONS - 1
        elif self.count < EXPECTED_SECTIONS:
            self.hint = SplitHint.TOO_FEW
            self.difference = EXPECTED_SECTIONS - self.count
        else:
            self.hint = SplitHint.TOO_MANY
            self.difference = self.count - EXPECTED_SECTIONS
        super().__init__(
            f"Expected {EXPECTED_SECTIONS} sections, found {self.count}"
        )


class DateError(NomenclatureError):
    """Raised when a date field is not a valid YYMMDD date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"{value} is not a date in the expected YYMMDD format")
        self.value = value


class LensParseError(NomenclatureError):
    """Raised when the lens/zoom/image field cannot be decomposed."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Cannot parse lens or zoom information from {value}")
        self.value = value
