# -*- coding: utf-8 -*-
"""Location: ./toon_tables/scalars.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Scalar coercion for TOON row tokens.

Rules are applied to the raw token in this order, first match wins:

1. ``true`` / ``false`` become booleans (exact, case-sensitive).
2. ``null`` becomes None.
3. A complete decimal numeric literal becomes an int (no point, no exponent)
   or a float.
4. A token wrapped in double quotes loses the outer pair; nothing inside is
   unescaped.
5. Anything else is returned unchanged.

Quote stripping runs last, so ``"null"`` and ``"42"`` written with quotes
stay strings instead of turning into None or 42.

Examples:
    >>> [coerce_scalar(t) for t in ["true", "false", "null", "42", "3.5", "-2"]]
    [True, False, None, 42, 3.5, -2]
    >>> coerce_scalar('"hello"'), coerce_scalar("hello")
    ('hello', 'hello')
    >>> coerce_scalar('"null"'), coerce_scalar('"42"')
    ('null', '42')
    >>> coerce_scalar("")
    ''
"""

# Standard
import re
from typing import Tuple

# First-Party
from toon_tables.models import Scalar, ScalarKind

_LITERALS = {
    "true": True,
    "false": False,
}

# Sign, digits with optional fraction (or a bare fraction), optional exponent
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_number(token: str) -> Scalar:
    """Convert a token already known to be a numeric literal.

    Args:
        token: Numeric literal.

    Returns:
        Scalar: int for integral literals, float otherwise. Integers too
        long for ``int()`` (``sys.get_int_max_str_digits``) fall back to float.

    Examples:
        >>> _parse_number("007")
        7
        >>> _parse_number("1e3")
        1000.0
        >>> _parse_number("-.5")
        -0.5
        >>> _parse_number("9" * 5000)
        inf
    """
    if _INTEGER_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError:
            return float(token)
    return float(token)


def classify_token(token: str) -> Tuple[ScalarKind, Scalar]:
    """Coerce a token and report which rule produced the value.

    Args:
        token: Comma-split, trimmed token (may be empty).

    Returns:
        Tuple[ScalarKind, Scalar]: The kind tag and the coerced value.

    Examples:
        >>> classify_token("false")
        (<ScalarKind.BOOLEAN: 'boolean'>, False)
        >>> classify_token("null")
        (<ScalarKind.NULL: 'null'>, None)
        >>> classify_token("+4.")
        (<ScalarKind.NUMBER: 'number'>, 4.0)
        >>> classify_token('"a"b"')
        (<ScalarKind.STRING: 'string'>, 'a"b')
        >>> classify_token("True")
        (<ScalarKind.STRING: 'string'>, 'True')
        >>> classify_token("0x10")
        (<ScalarKind.STRING: 'string'>, '0x10')
        >>> classify_token('"')
        (<ScalarKind.STRING: 'string'>, '"')
    """
    t = token.strip()

    if t in _LITERALS:
        return ScalarKind.BOOLEAN, _LITERALS[t]
    if t == "null":
        return ScalarKind.NULL, None

    if _NUMBER_RE.fullmatch(t):
        return ScalarKind.NUMBER, _parse_number(t)

    if len(t) >= 2 and t.startswith('"') and t.endswith('"'):
        return ScalarKind.STRING, t[1:-1]
    return ScalarKind.STRING, t


def coerce_scalar(token: str) -> Scalar:
    """Coerce a single token into a typed scalar.

    Args:
        token: Comma-split, trimmed token (may be empty).

    Returns:
        Scalar: bool, None, int, float or str.

    Examples:
        >>> coerce_scalar("1.5e-3")
        0.0015
        >>> coerce_scalar("Infinity")
        'Infinity'
    """
    return classify_token(token)[1]
