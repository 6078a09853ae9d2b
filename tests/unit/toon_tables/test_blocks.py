# -*- coding: utf-8 -*-
"""Unit tests for TOON block assembly."""

# Third-Party
import pytest

# First-Party
from toon_tables.blocks import assemble_block, assemble_record, split_row
from toon_tables.models import Header


@pytest.fixture
def header() -> Header:
    """Three-field header."""
    return Header(name="pts", declared_count=2, fields=["x", "y", "label"])


class TestSplitRow:
    """Test row tokenization."""

    def test_trims_tokens(self):
        """Each token is trimmed."""
        assert split_row(" 1 ,  2,a b ") == ["1", "2", "a b"]

    def test_keeps_empty_positions(self):
        """Empty middle tokens are kept in place."""
        assert split_row("1,,3") == ["1", "", "3"]

    def test_single_token(self):
        """A row without commas is a single token."""
        assert split_row("solo") == ["solo"]


class TestAssembleRecord:
    """Test mapping tokens onto fields."""

    def test_full_row(self, header):
        """A complete row maps positionally and coerces each value."""
        assert assemble_record(header, '1.5, -2, "start"') == {"x": 1.5, "y": -2, "label": "start"}

    def test_missing_trailing_values(self, header):
        """Missing values are coerced from the empty token, never omitted."""
        assert assemble_record(header, "1") == {"x": 1, "y": "", "label": ""}

    def test_empty_middle_value_keeps_alignment(self, header):
        """An empty middle token does not shift later values."""
        assert assemble_record(header, "1,,end") == {"x": 1, "y": "", "label": "end"}

    def test_extra_values_ignored(self, header):
        """Tokens beyond the field count are dropped."""
        assert assemble_record(header, "1,2,a,extra,more") == {"x": 1, "y": 2, "label": "a"}

    def test_field_order_follows_header(self, header):
        """Record keys follow the header's field order."""
        assert list(assemble_record(header, "1,2,3")) == ["x", "y", "label"]

    def test_duplicate_field_last_value_wins(self):
        """A repeated field keeps its first position and its last value."""
        dup = Header(name="d", declared_count=1, fields=["a", "b", "a"])
        record = assemble_record(dup, "1,2,3")
        assert record == {"a": 3, "b": 2}
        assert list(record) == ["a", "b"]

    def test_no_fields(self):
        """A header without fields yields empty records."""
        assert assemble_record(Header(name="e", declared_count=1, fields=[]), "1,2") == {}


class TestAssembleBlock:
    """Test whole-block assembly."""

    def test_one_record_per_line(self, header):
        """Records are produced in line order."""
        rows = assemble_block(header, ["1,2,a", "3,4,b", "5,6,c"])
        assert [row["label"] for row in rows] == ["a", "b", "c"]

    def test_declared_count_not_used(self, header):
        """The declared count neither truncates nor pads."""
        assert len(assemble_block(header, ["1,2,a", "3,4,b", "5,6,c"])) == 3
        assert assemble_block(header, []) == []

    def test_records_are_independent(self, header):
        """Each line gets its own dict."""
        rows = assemble_block(header, ["1,2,a", "1,2,a"])
        assert rows[0] == rows[1]
        assert rows[0] is not rows[1]
