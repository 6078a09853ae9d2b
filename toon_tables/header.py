# -*- coding: utf-8 -*-
"""Location: ./toon_tables/header.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Block header recognition and decomposition.

A header is a whole line of the form ``IDENT[DIGITS]{FIELDLIST}:`` where
IDENT is an ASCII identifier. Nothing may precede or follow it on the line.

Examples:
    >>> is_header("points[3]{x,y}:")
    True
    >>> is_header("points[3]{x,y}: trailing")
    False
    >>> parse_header("points[3]{ x , y ,}:")
    Header(name='points', declared_count=3, fields=['x', 'y'])
"""

# Standard
import re
from typing import Optional

# First-Party
from toon_tables.models import Header

# ASCII-only classes; \w and \d would also accept other Unicode letters and digits
HEADER_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\[([0-9]+)\]\{([^}]+)\}:")


def is_header(line: str) -> bool:
    """Classify a trimmed line as a block header.

    Args:
        line: Trimmed line.

    Returns:
        bool: True if the whole line matches the header grammar.

    Examples:
        >>> is_header("_p9[0]{a}:")
        True
        >>> is_header("9p[1]{a}:")
        False
        >>> is_header("p[]{a}:")
        False
        >>> is_header("p[1]{}:")
        False
        >>> is_header("p[1]{a}")
        False
        >>> is_header("p[1]{a}:\\n")
        False
    """
    return HEADER_RE.fullmatch(line) is not None


def parse_header(line: str) -> Optional[Header]:
    """Extract name, declared count and field list from a header line.

    The brace content is split on commas; each entry is trimmed and blank
    entries are discarded, which can leave an empty field list.

    Args:
        line: Trimmed line.

    Returns:
        Optional[Header]: The decomposed header, or None if the line is not a header.

    Examples:
        >>> parse_header("cfg[007]{key}:").declared_count
        7
        >>> parse_header("blank[1]{ , }:").fields
        []
        >>> parse_header("not a header") is None
        True
    """
    match = HEADER_RE.fullmatch(line)
    if match is None:
        return None
    name, count, field_list = match.groups()
    fields = [field.strip() for field in field_list.split(",")]
    return Header(name=name, declared_count=int(count, 10), fields=[field for field in fields if field])
