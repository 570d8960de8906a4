"""Tests for nomencheck.core.models."""

import dataclasses

import pytest

from nomencheck.core.exceptions import DateError, NomenclatureError, SplitError
from nomencheck.core.models import (
    Field,
    FieldResult,
    FieldVector,
    FileReport,
    FindingKind,
    ReportOptions,
)

PARTS = ["NES-CS", "200514-01", "Vehicle-1", "200517", "DAPI", "200519", "CF", "10X-z1-1"]


class TestField:
    def test_positions(self):
        assert [int(f) for f in Field] == list(range(1, 9))

    def test_descriptions(self):
        assert Field.EXPERIMENT.description == "Experiment name & initial"
        assert Field.LENS.description == "Lens, zoom & image number"


class TestFieldVector:
    def test_from_parts(self):
        vector = FieldVector.from_parts(PARTS)
        assert vector.parts() == tuple(PARTS)

    def test_wrong_count_raises(self):
        with pytest.raises(ValueError, match="8 parts"):
            FieldVector.from_parts(PARTS[:7])

    def test_getitem_by_field(self):
        vector = FieldVector.from_parts(PARTS)
        assert vector[Field.EXPERIMENT] == "NES-CS"
        assert vector[Field.LENS] == "10X-z1-1"

    def test_join(self):
        assert FieldVector.from_parts(PARTS).join() == "_".join(PARTS)

    def test_frozen(self):
        vector = FieldVector.from_parts(PARTS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            vector.lens = "x"  # type: ignore[misc]


class TestFileReport:
    def _report(self, **kwargs) -> FileReport:
        stem = "_".join(PARTS)
        defaults = dict(filename=stem + ".tif", stem=stem, extension=".tif")
        defaults.update(kwargs)
        return FileReport(**defaults)

    def test_consistent(self):
        report = self._report(canonical_name="_".join(PARTS))
        assert report.is_consistent
        assert report.status == "consistent"
        assert report.canonical_filename == "_".join(PARTS) + ".tif"

    def test_mismatch(self):
        report = self._report(canonical_name="other")
        assert report.status == "mismatch"
        assert report.findings[-1].kind is FindingKind.MISMATCH

    def test_malformed(self):
        report = self._report(split_error=SplitError(["a", "b"]))
        assert not report.is_split
        assert not report.is_consistent
        assert report.status == "malformed"
        assert report.canonical_filename is None

    def test_invalid(self):
        error = DateError("209913")
        results = (
            FieldResult(Field.IHC_DATE, "209913", "209913", error=error),
        )
        report = self._report(results=results, canonical_name="_".join(PARTS))
        assert report.status == "invalid"
        assert report.findings[0].kind is FindingKind.DATE
        assert report.findings[0].field is Field.IHC_DATE

    def test_unlisted_error_type_is_a_field_finding(self):
        class MicroscopeError(NomenclatureError):
            pass

        results = (
            FieldResult(Field.MICROSCOPE, "??", "??", error=MicroscopeError("bad microscope")),
        )
        report = self._report(results=results, canonical_name="_".join(PARTS))
        assert report.findings[0].kind is FindingKind.FIELD
        assert report.findings[0].message == "bad microscope"

    def test_date_error_subclass_keeps_date_kind(self):
        class StrictDateError(DateError):
            pass

        results = (
            FieldResult(Field.IHC_DATE, "x", "x", error=StrictDateError("x")),
        )
        report = self._report(results=results, canonical_name="_".join(PARTS))
        assert report.findings[0].kind is FindingKind.DATE

    def test_result_for_missing(self):
        assert self._report().result_for(Field.LENS) is None


class TestFieldResult:
    def test_changed(self):
        assert FieldResult(Field.LENS, "10Xz1-1", "10X-z1-1").changed
        assert not FieldResult(Field.MICROSCOPE, "CF", "CF").changed

    def test_ok(self):
        assert FieldResult(Field.MICROSCOPE, "CF", "CF").ok


class TestReportOptions:
    def test_default_not_verbose(self):
        assert ReportOptions().verbose is False
