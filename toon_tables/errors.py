# -*- coding: utf-8 -*-
"""Location: ./toon_tables/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Exceptions raised by the TOON tabular parser.

Malformed-but-lexically-parseable input never raises; the only failure the
parser reports is being called with the wrong kind of argument.

Examples:
    >>> from toon_tables.errors import ToonError, ToonInvocationError
    >>> issubclass(ToonInvocationError, ToonError)
    True
    >>> issubclass(ToonInvocationError, TypeError)
    True
"""


class ToonError(Exception):
    """Base class for TOON parser errors.

    Examples:
        >>> str(ToonError("boom"))
        'boom'
    """


class ToonInvocationError(ToonError, TypeError):
    """Raised when an entry point receives an argument of the wrong shape.

    Examples:
        >>> err = ToonInvocationError("parse_from_lines expects a sequence of strings")
        >>> isinstance(err, TypeError)
        True
    """
