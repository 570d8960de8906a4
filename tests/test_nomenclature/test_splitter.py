"""Tests for nomencheck.nomenclature.splitter."""

import pytest

from nomencheck.core.exceptions import SplitError, SplitHint
from nomencheck.core.models import Field, FieldVector
from nomencheck.nomenclature.splitter import split_fields

STEM = "NES-SAI2d15-CS_200514-01_Vehicle-1_200517_DAPI+goPitx3-dk488_200519_CF_10Xz1-1"


class TestSplitFields:
    def test_eight_sections(self):
        fields = split_fields(STEM)
        assert isinstance(fields, FieldVector)
        assert fields.experiment == "NES-SAI2d15-CS"
        assert fields.condition == "Vehicle-1"
        assert fields.labels == "DAPI+goPitx3-dk488"
        assert fields.lens == "10Xz1-1"

    def test_positional_access(self):
        fields = split_fields(STEM)
        assert fields[Field.IHC_DATE] == "200517"
        assert fields[Field.CAPTURE_DATE] == "200519"
        assert fields[Field.MICROSCOPE] == "CF"

    def test_join_round_trips(self):
        assert split_fields(STEM).join() == STEM

    def test_one_section(self):
        with pytest.raises(SplitError) as exc_info:
            split_fields("NES-SAI2d15-CS-200514-01-Vehicle-1")
        err = exc_info.value
        assert err.hint is SplitHint.ONE_SECTION
        assert err.count == 1
        assert err.fields == ["NES-SAI2d15-CS-200514-01-Vehicle-1"]

    def test_too_few(self):
        with pytest.raises(SplitError) as exc_info:
            split_fields("exp_200514_Vehicle")
        err = exc_info.value
        assert err.hint is SplitHint.TOO_FEW
        assert err.count == 3
        assert err.difference == 5
        assert err.fields == ["exp", "200514", "Vehicle"]

    def test_too_many(self):
        with pytest.raises(SplitError) as exc_info:
            split_fields(STEM + "_extra_more")
        err = exc_info.value
        assert err.hint is SplitHint.TOO_MANY
        assert err.count == 10
        assert err.difference == 2

    def test_empty_stem_is_one_section(self):
        with pytest.raises(SplitError) as exc_info:
            split_fields("")
        assert exc_info.value.hint is SplitHint.ONE_SECTION

    def test_empty_sections_are_counted(self):
        fields = split_fields("a__c_d_e_f_g_h")
        assert fields.experiment_date == ""

    @pytest.mark.parametrize("count", [2, 3, 5, 7])
    def test_hint_matches_count_below_eight(self, count):
        with pytest.raises(SplitError) as exc_info:
            split_fields("_".join(["x"] * count))
        assert exc_info.value.hint is SplitHint.TOO_FEW
        assert exc_info.value.difference == 8 - count

    @pytest.mark.parametrize("count", [9, 12])
    def test_hint_matches_count_above_eight(self, count):
        with pytest.raises(SplitError) as exc_info:
            split_fields("_".join(["x"] * count))
        assert exc_info.value.hint is SplitHint.TOO_MANY
        assert exc_info.value.difference == count - 8
