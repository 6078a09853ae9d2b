# -*- coding: utf-8 -*-
"""Location: ./toon_tables/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

TOON Tabular Parser.

Parses the uniform tabular block subset of TOON (Token-Oriented Object
Notation) into plain Python data: a dict mapping each block name to a list
of records.

Typical usage::

    from toon_tables import parse_from_string

    doc = parse_from_string('''
    points[2]{x,y,label}:
      1.5, 2, "start"
      3, -4e2, end
    ''')
    # {'points': [{'x': 1.5, 'y': 2, 'label': 'start'},
    #             {'x': 3, 'y': -400.0, 'label': 'end'}]}
"""

# Standard
import logging

# First-Party
from toon_tables.config import DEFAULT_SETTINGS, get_settings, ParserSettings
from toon_tables.errors import ToonError, ToonInvocationError
from toon_tables.models import CountMismatch, DiagnosticSink, Document, Header, Record, Scalar, ScalarKind
from toon_tables.parser import parse_from_lines, parse_from_string, ToonTableParser

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Entry points
    "parse_from_string",
    "parse_from_lines",
    "ToonTableParser",
    # Config
    "ParserSettings",
    "DEFAULT_SETTINGS",
    "get_settings",
    # Errors
    "ToonError",
    "ToonInvocationError",
    # Models
    "CountMismatch",
    "DiagnosticSink",
    "Document",
    "Header",
    "Record",
    "Scalar",
    "ScalarKind",
]
