# -*- coding: utf-8 -*-
"""Unit tests for TOON line normalization."""

# First-Party
from toon_tables.lines import is_comment, normalize_lines


class TestNormalizeLines:
    """Test splitting, trimming and filtering of raw text."""

    def test_trims_and_drops_blank_lines(self):
        """Blank and whitespace-only lines disappear; others are trimmed."""
        text = "\n  a[1]{x}:  \n\n\t\n   1\n"
        assert normalize_lines(text) == ["a[1]{x}:", "1"]

    def test_drops_hash_and_slash_comments(self):
        """Lines starting with # or // are removed after trimming."""
        text = "# title\n   // note\na[1]{x}:\n  #indented comment\n1"
        assert normalize_lines(text) == ["a[1]{x}:", "1"]

    def test_data_value_starting_with_hash_is_dropped(self):
        """A row beginning with # is indistinguishable from a comment."""
        assert normalize_lines("tags[2]{t}:\n#red\nblue") == ["tags[2]{t}:", "blue"]

    def test_inline_hash_is_kept(self):
        """Comment markers only count at the start of a line."""
        assert normalize_lines("1, #2") == ["1, #2"]

    def test_windows_line_endings(self):
        """Carriage returns are trimmed with the rest of the whitespace."""
        assert normalize_lines("a[1]{x}:\r\n1\r\n") == ["a[1]{x}:", "1"]

    def test_byte_order_mark_removed(self):
        """A leading BOM does not prevent header recognition."""
        assert normalize_lines("\ufeffa[1]{x}:\n1") == ["a[1]{x}:", "1"]

    def test_custom_prefixes(self):
        """Only the configured prefixes are treated as comments."""
        text = "; ini\n# kept\n1"
        assert normalize_lines(text, comment_prefixes=(";",)) == ["# kept", "1"]

    def test_no_prefixes(self):
        """An empty prefix list disables comment stripping."""
        assert normalize_lines("# x\n// y", comment_prefixes=()) == ["# x", "// y"]


class TestIsComment:
    """Test comment classification."""

    def test_markers(self):
        """Both default markers are recognized."""
        assert is_comment("#")
        assert is_comment("//x")
        assert not is_comment("/x")
        assert not is_comment("x#")

    def test_empty_prefix_ignored(self):
        """An empty prefix never turns every line into a comment."""
        assert not is_comment("data", prefixes=("",))
