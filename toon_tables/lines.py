# -*- coding: utf-8 -*-
"""Location: ./toon_tables/lines.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Line normalization for TOON documents.

Splits a text buffer on ``\\n``, trims every line and drops blank lines and
comment lines. Comment detection is purely lexical: a data row whose first
token starts with ``#`` or ``//`` is indistinguishable from a comment and is
dropped too.

Examples:
    >>> normalize_lines("a[1]{x}:\\n  # note\\n\\n  1  \\n// tail")
    ['a[1]{x}:', '1']
    >>> normalize_lines("x\\r\\ny\\r\\n")
    ['x', 'y']
"""

# Standard
from typing import List, Sequence

DEFAULT_COMMENT_PREFIXES = ("#", "//")

# str.strip() leaves U+FEFF in place
_BOM = "\ufeff"


def _trim(line: str) -> str:
    """Strip whitespace and byte-order marks from both ends of a line.

    Args:
        line: Raw line.

    Returns:
        str: Trimmed line.

    Examples:
        >>> _trim("\\ufeff  pts[1]{x}:  ")
        'pts[1]{x}:'
    """
    return line.strip().strip(_BOM).strip()


def is_comment(line: str, prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES) -> bool:
    """Return True if an already trimmed line is a comment.

    Args:
        line: Trimmed line.
        prefixes: Comment markers.

    Returns:
        bool: Whether the line starts with any comment marker.

    Examples:
        >>> is_comment("# heading")
        True
        >>> is_comment("// note")
        True
        >>> is_comment("1, # not a comment")
        False
        >>> is_comment("; ini style", prefixes=(";",))
        True
    """
    return any(line.startswith(prefix) for prefix in prefixes if prefix)


def normalize_lines(text: str, comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES) -> List[str]:
    """Split text into trimmed, non-empty, non-comment lines.

    Args:
        text: Full document text.
        comment_prefixes: Markers identifying comment lines.

    Returns:
        List[str]: Surviving lines in document order.

    Examples:
        >>> normalize_lines("")
        []
        >>> normalize_lines("   \\n\\t\\n")
        []
    """
    lines = []
    for raw in text.split("\n"):
        line = _trim(raw)
        if not line or is_comment(line, comment_prefixes):
            continue
        lines.append(line)
    return lines
