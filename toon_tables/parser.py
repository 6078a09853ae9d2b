# -*- coding: utf-8 -*-
"""Location: ./toon_tables/parser.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

TOON tabular document parser.

Drives line normalization, header detection and row assembly across a whole
document. Supported grammar::

    IDENT[LENGTH]{FIELD1,FIELD2,...}:
      v11, v12, ...
      v21, v22, ...

Each header closes the previous block and opens a new one; the end of input
closes the last block. Blocks that reuse a name are concatenated in document
order. Lines before the first header are ignored. When a block's row count
differs from its declared count a :class:`CountMismatch` is logged and handed
to the optional diagnostic sink; the rows are kept as parsed.

Examples:
    >>> from toon_tables.parser import parse_from_string, parse_from_lines
    >>> doc = parse_from_string("pts[2]{x,y}:\\n1,2\\n3,4\\n")
    >>> doc
    {'pts': [{'x': 1, 'y': 2}, {'x': 3, 'y': 4}]}
    >>> parse_from_lines(["a[1]{v}:", "1", "a[1]{v}:", "2"])
    {'a': [{'v': 1}, {'v': 2}]}
    >>> seen = []
    >>> parse_from_string("pts[5]{x}:\\n1\\n2", on_diagnostic=seen.append)
    {'pts': [{'x': 1}, {'x': 2}]}
    >>> seen[0].expected, seen[0].actual
    (5, 2)
"""

# Standard
from dataclasses import dataclass, field
import logging
from typing import List, Optional, Sequence

# First-Party
from toon_tables.blocks import assemble_record
from toon_tables.config import DEFAULT_SETTINGS, ParserSettings
from toon_tables.errors import ToonInvocationError
from toon_tables.header import is_header, parse_header
from toon_tables.lines import normalize_lines
from toon_tables.models import CountMismatch, DiagnosticSink, Document, Header, Record

logger = logging.getLogger(__name__)


@dataclass
class _OpenBlock:
    """Block currently receiving rows.

    Examples:
        >>> block = _OpenBlock(Header(name="t", declared_count=1, fields=["a"]))
        >>> block.rows
        []
    """

    header: Header
    rows: List[Record] = field(default_factory=list)


class ToonTableParser:
    """Parser for the uniform tabular block subset of TOON.

    Instances hold configuration only. Every call to :meth:`parse` builds its
    own document and block state, so one parser may be shared freely.

    Attributes:
        settings: Parser settings (comment prefixes, warning toggle).
        on_diagnostic: Optional callback receiving each CountMismatch.

    Examples:
        >>> parser = ToonTableParser(ParserSettings(comment_prefixes=";"))
        >>> parser.parse("; comment\\nkv[1]{k,v}:\\na, true")
        {'kv': [{'k': 'a', 'v': True}]}
        >>> parser.parse("stray\\n") == {}
        True
    """

    def __init__(self, settings: Optional[ParserSettings] = None, on_diagnostic: Optional[DiagnosticSink] = None) -> None:
        """Initialize the parser.

        Args:
            settings: Explicit settings; defaults to DEFAULT_SETTINGS, which never reads the environment.
            on_diagnostic: Callback invoked once per declared-count mismatch.
        """
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.on_diagnostic = on_diagnostic

    def parse(self, text: str) -> Document:
        """Parse a TOON document held in a single text buffer.

        Args:
            text: Document text.

        Returns:
            Document: Block name to records, in order of first appearance.

        Examples:
            >>> ToonTableParser().parse("")
            {}
            >>> ToonTableParser().parse("e[0]{a}:")
            {'e': []}
        """
        document: Document = {}
        block: Optional[_OpenBlock] = None

        for line in normalize_lines(text, self.settings.comment_prefixes):
            if is_header(line):
                if block is not None:
                    self._close_block(document, block)
                block = _OpenBlock(parse_header(line))
                logger.debug(f"Opened block '{block.header.name}' with fields {block.header.fields}")
            elif block is None:
                logger.debug(f"Ignoring line before first header: {line!r}")
            else:
                block.rows.append(assemble_record(block.header, line))

        if block is not None:
            self._close_block(document, block)
        return document

    def parse_lines(self, lines: Sequence[str]) -> Document:
        """Parse a document given as a sequence of lines.

        Args:
            lines: List or tuple of line strings, joined with ``\\n``.

        Returns:
            Document: Same result as :meth:`parse` on the joined text.

        Raises:
            ToonInvocationError: If ``lines`` is not a list or tuple of strings.

        Examples:
            >>> ToonTableParser().parse_lines(("t[1]{a}:", '"x"'))
            {'t': [{'a': 'x'}]}
            >>> try:
            ...     ToonTableParser().parse_lines("t[1]{a}:")
            ... except ToonInvocationError as e:
            ...     print(e)
            parse_from_lines expects a sequence of strings
        """
        if not isinstance(lines, (list, tuple)) or not all(isinstance(line, str) for line in lines):
            raise ToonInvocationError("parse_from_lines expects a sequence of strings")
        return self.parse("\n".join(lines))

    def _close_block(self, document: Document, block: _OpenBlock) -> None:
        """Merge a finished block into the document and check its row count.

        Args:
            document: Document under construction.
            block: Block being closed.
        """
        header = block.header
        document.setdefault(header.name, []).extend(block.rows)
        logger.debug(f"Closed block '{header.name}' with {len(block.rows)} row(s)")

        if len(block.rows) != header.declared_count:
            mismatch = CountMismatch(block=header.name, expected=header.declared_count, actual=len(block.rows))
            if self.settings.warn_on_count_mismatch:
                logger.warning(mismatch.message)
            if self.on_diagnostic is not None:
                self.on_diagnostic(mismatch)


def parse_from_string(text: str, *, on_diagnostic: Optional[DiagnosticSink] = None, settings: Optional[ParserSettings] = None) -> Document:
    """Parse a TOON document from a text buffer.

    Args:
        text: Document text.
        on_diagnostic: Callback invoked once per declared-count mismatch.
        settings: Explicit settings; defaults to DEFAULT_SETTINGS, which never reads the environment.

    Returns:
        Document: Block name to records.

    Examples:
        >>> parse_from_string("# header comment\\nt[1]{a,b}:\\nnull, 2.5")
        {'t': [{'a': None, 'b': 2.5}]}
    """
    return ToonTableParser(settings=settings, on_diagnostic=on_diagnostic).parse(text)


def parse_from_lines(lines: Sequence[str], *, on_diagnostic: Optional[DiagnosticSink] = None, settings: Optional[ParserSettings] = None) -> Document:
    """Parse a TOON document given as pre-split lines.

    Args:
        lines: List or tuple of line strings.
        on_diagnostic: Callback invoked once per declared-count mismatch.
        settings: Explicit settings; defaults to DEFAULT_SETTINGS, which never reads the environment.

    Returns:
        Document: Block name to records.

    Raises:
        ToonInvocationError: If ``lines`` is not a list or tuple of strings.

    Examples:
        >>> parse_from_lines([])
        {}
    """
    return ToonTableParser(settings=settings, on_diagnostic=on_diagnostic).parse_lines(lines)
