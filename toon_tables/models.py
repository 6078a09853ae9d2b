# -*- coding: utf-8 -*-
"""Location: ./toon_tables/models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Data model for the TOON tabular parser.

A parsed document is a plain insertion-ordered ``dict`` mapping each block
name to a list of records, and each record maps field names to coerced
scalars. Headers and count diagnostics are small frozen pydantic models.

Examples:
    >>> from toon_tables.models import Header, CountMismatch, ScalarKind
    >>> h = Header(name="pts", declared_count=2, fields=["x", "y"])
    >>> h.fields
    ['x', 'y']
    >>> CountMismatch(block="pts", expected=2, actual=1).message
    '[TOON] Declared row-count mismatch for block "pts": expected=2, parsed=1'
    >>> ScalarKind.NUMBER.value
    'number'
"""

# Standard
from enum import Enum
from typing import Callable, Dict, List, Union

# Third-Party
from pydantic import BaseModel, ConfigDict, Field

Scalar = Union[bool, int, float, str, None]
Record = Dict[str, Scalar]
Document = Dict[str, List[Record]]


class ScalarKind(str, Enum):
    """Tag for the outcome of coercing a single token.

    Examples:
        >>> ScalarKind("boolean")
        <ScalarKind.BOOLEAN: 'boolean'>
        >>> sorted(k.value for k in ScalarKind)
        ['boolean', 'null', 'number', 'string']
    """

    BOOLEAN = "boolean"
    NULL = "null"
    NUMBER = "number"
    STRING = "string"


class Header(BaseModel):
    """Decomposed block header ``name[N]{f1,f2,...}:``.

    Attributes:
        name: Block identifier used as the document key.
        declared_count: Row count written in brackets; advisory only.
        fields: Field names in header order. May be empty when every entry
            between the braces is blank.

    Examples:
        >>> Header(name="p", declared_count=0, fields=[]).fields
        []
        >>> try:
        ...     Header(name="p", declared_count=-1, fields=["a"])
        ... except ValueError:
        ...     print("rejected")
        rejected
    """

    model_config = ConfigDict(frozen=True)

    name: str
    declared_count: int = Field(ge=0)
    fields: List[str] = Field(default_factory=list)


class CountMismatch(BaseModel):
    """Non-fatal diagnostic: a block's parsed rows differ from its declared count."""

    model_config = ConfigDict(frozen=True)

    block: str
    expected: int
    actual: int

    @property
    def message(self) -> str:
        """Human-readable warning text.

        Returns:
            str: Message naming the block and both counts.
        """
        return f'[TOON] Declared row-count mismatch for block "{self.block}": expected={self.expected}, parsed={self.actual}'


DiagnosticSink = Callable[[CountMismatch], None]
