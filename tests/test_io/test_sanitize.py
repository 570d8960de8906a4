"""Tests for nomencheck.io._sanitize."""

from nomencheck.io._sanitize import sanitize_filename, split_extension


class TestSanitizeFilename:
    def test_already_valid(self):
        name = "NES-CS_200514-01_Vehicle-1_200517_DAPI_200519_CF_10X-z1-1.tif"
        assert sanitize_filename(name) == name

    def test_strips_illegal_symbols(self):
        assert sanitize_filename('a<b>:c*d|e?"f.tif') == "abcdef.tif"

    def test_strips_slashes(self):
        assert sanitize_filename("a/b\\c.tif") == "abc.tif"

    def test_strips_control_chars(self):
        assert sanitize_filename("a\x00b\x1fc\x7f.tif") == "abc.tif"

    def test_strips_whitespace(self):
        assert sanitize_filename("my file\t name.tif") == "myfilename.tif"

    def test_dots_only_name(self):
        assert sanitize_filename("...") == ""
        assert sanitize_filename(".") == ""

    def test_trailing_dots_and_spaces(self):
        assert sanitize_filename("name.tif. ") == "name.tif"
        assert sanitize_filename("name..") == "name"

    def test_leading_dot_kept(self):
        assert sanitize_filename(".hidden.tif") == ".hidden.tif"

    def test_empty_string(self):
        assert sanitize_filename("") == ""

    def test_only_illegal_chars(self):
        assert sanitize_filename('<>:"|?*') == ""

    def test_plus_and_hash_preserved(self):
        assert sanitize_filename("DAPI+rbAldh1-dk555#2.tif") == "DAPI+rbAldh1-dk555#2.tif"


class TestSplitExtension:
    def test_simple(self):
        assert split_extension("a_b.tiff") == ("a_b", ".tiff")

    def test_no_extension(self):
        assert split_extension("a_b") == ("a_b", "")

    def test_only_last_suffix(self):
        assert split_extension("a.b.c.tif") == ("a.b.c", ".tif")

    def test_non_alphanumeric_suffix_is_not_extension(self):
        assert split_extension("10Xz1.5-1") == ("10Xz1.5-1", "")

    def test_dotted_zoom_with_extension(self):
        assert split_extension("63Xz2.5-12.czi") == ("63Xz2.5-12", ".czi")
