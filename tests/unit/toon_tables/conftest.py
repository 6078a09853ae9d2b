# -*- coding: utf-8 -*-
"""Location: ./tests/unit/toon_tables/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Shared fixtures for the TOON tabular parser tests.
"""

# Standard
import os

# Third-Party
import pytest

# First-Party
from toon_tables.config import get_settings, ParserSettings
from toon_tables.models import CountMismatch


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from TOON_* environment variables and the settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("TOON_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ParserSettings:
    """Default settings built without reading a .env file."""
    return ParserSettings(_env_file=None)


@pytest.fixture
def diagnostics() -> list[CountMismatch]:
    """List used as a diagnostic sink via its append method."""
    return []
