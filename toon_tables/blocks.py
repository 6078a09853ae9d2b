# -*- coding: utf-8 -*-
"""Location: ./toon_tables/blocks.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Row assembly for TOON tabular blocks.

Each data line becomes one record holding exactly the header's fields.
Missing values are coerced from the empty token, surplus values are
ignored, and the declared row count is never used to pad or truncate.

Examples:
    >>> from toon_tables.models import Header
    >>> h = Header(name="pts", declared_count=2, fields=["x", "y", "label"])
    >>> assemble_block(h, ["1, 2, a", "3,4"])
    [{'x': 1, 'y': 2, 'label': 'a'}, {'x': 3, 'y': 4, 'label': ''}]
"""

# Standard
from typing import Iterable, List

# First-Party
from toon_tables.models import Header, Record
from toon_tables.scalars import coerce_scalar


def split_row(line: str) -> List[str]:
    """Split a data line on commas and trim every token.

    Empty tokens keep their position so later values stay aligned with
    their fields.

    Args:
        line: Trimmed data line.

    Returns:
        List[str]: Trimmed tokens.

    Examples:
        >>> split_row("1, ,3")
        ['1', '', '3']
        >>> split_row("a,b,")
        ['a', 'b', '']
    """
    return [token.strip() for token in line.split(",")]


def assemble_record(header: Header, line: str) -> Record:
    """Map one data line onto the header's fields.

    A repeated field name keeps its first position in the record but takes
    the value of its last column.

    Args:
        header: Block header.
        line: Trimmed data line.

    Returns:
        Record: Field name to coerced scalar.

    Examples:
        >>> h = Header(name="t", declared_count=1, fields=["a", "b", "a"])
        >>> assemble_record(h, "1,2,3")
        {'a': 3, 'b': 2}
        >>> assemble_record(Header(name="t", declared_count=1, fields=[]), "1,2")
        {}
    """
    tokens = split_row(line)
    record: Record = {}
    for i, field in enumerate(header.fields):
        record[field] = coerce_scalar(tokens[i] if i < len(tokens) else "")
    return record


def assemble_block(header: Header, lines: Iterable[str]) -> List[Record]:
    """Assemble one record per data line, in line order.

    Args:
        header: Block header.
        lines: Data lines between this header and the next boundary.

    Returns:
        List[Record]: Records in line order.

    Examples:
        >>> assemble_block(Header(name="t", declared_count=5, fields=["v"]), [])
        []
    """
    return [assemble_record(header, line) for line in lines]
