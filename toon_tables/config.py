# -*- coding: utf-8 -*-
"""Location: ./toon_tables/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

TOON Tabular Parser Configuration.
This module defines parser settings using Pydantic. The parser itself only
uses ``DEFAULT_SETTINGS`` (field defaults, no environment access) unless a
caller passes settings explicitly. ``get_settings()`` is the opt-in loader
for environment variables (prefix ``TOON_``) and a ``.env`` file.

Environment variables:
- TOON_COMMENT_PREFIXES: Line prefixes treated as comments, CSV or JSON list (default: "#,//")
- TOON_WARN_ON_COUNT_MISMATCH: Log a warning when a block's row count differs from its header (default: True)
- TOON_LOG_LEVEL: Level applied to the ``toon_tables`` logger (default: "INFO")

Examples:
    >>> from toon_tables.config import ParserSettings
    >>> s = ParserSettings(comment_prefixes="#, //, ;")
    >>> s.comment_prefixes
    ['#', '//', ';']
    >>> ParserSettings(log_level="debug").log_level
    'DEBUG'
    >>> try:
    ...     ParserSettings(log_level="verbose")
    ... except ValueError:
    ...     print("error")
    error
"""

# Standard
from functools import lru_cache
import logging
import sys
from typing import Annotated, Any, List

# Third-Party
import orjson
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "toon_tables"


class ParserSettings(BaseSettings):
    """
    TOON tabular parser settings.

    Examples:
        >>> s = ParserSettings()
        >>> s.comment_prefixes
        ['#', '//']
        >>> s.warn_on_count_mismatch
        True
        >>> ParserSettings(comment_prefixes='["--"]').comment_prefixes
        ['--']
    """

    comment_prefixes: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["#", "//"], description="Line prefixes marking comment lines (CSV or JSON list)")
    warn_on_count_mismatch: bool = Field(default=True, description="Log a warning when parsed rows differ from the declared count")
    log_level: str = Field(default="INFO", description="Log level for the toon_tables logger")

    model_config = SettingsConfigDict(env_prefix="TOON_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("comment_prefixes", mode="before")
    @classmethod
    def _parse_list_from_env(cls, v: None | str | List[str]) -> List[str]:
        """Parse the comment prefix list from an environment value.

        Accepts either a JSON array (e.g. '["#","//"]') or a comma-separated
        string (e.g. '#,//'). Blank entries are dropped since an empty prefix
        would mark every line as a comment.

        Args:
            v: The value to parse, can be None, list, or string.

        Returns:
            list: Parsed list of prefixes.

        Raises:
            ValueError: If the value type is invalid for list field parsing.
        """
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return [str(item).strip() for item in v if str(item).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = orjson.loads(s)
                    if isinstance(parsed, list):
                        return [str(item).strip() for item in parsed if str(item).strip()]
                except orjson.JSONDecodeError:
                    logger.warning("Invalid JSON list in TOON_COMMENT_PREFIXES; falling back to CSV parsing")
            # CSV fallback
            return [item.strip() for item in s.split(",") if item.strip()]
        raise ValueError("Invalid type for list field")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level value.

        Args:
            v (str): The log level string provided via configuration or environment.

        Returns:
            str: The validated and normalized (uppercase) log level.

        Raises:
            ValueError: If the provided value is not a standard level name.
        """
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_up = str(v).upper()
        if v_up not in allowed:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {sorted(allowed)}")
        return v_up

    def log_summary(self) -> None:
        """Log a summary of the parser settings at INFO level."""
        summary = self.model_dump()
        logger.info(f"Parser settings summary: {summary}")

    def apply_log_level(self) -> None:
        """Set ``log_level`` on the ``toon_tables`` logger.

        Never called by the parser; hosts opt in explicitly.
        """
        logging.getLogger(PACKAGE_LOGGER).setLevel(self.log_level)


# Field defaults only; model_construct bypasses the env and .env sources
DEFAULT_SETTINGS = ParserSettings.model_construct()


@lru_cache()
def get_settings(**kwargs: Any) -> ParserSettings:
    """Get cached settings loaded from the environment and ``.env``.

    The parser never calls this; pass the result as ``settings=`` to opt in.

    Args:
        **kwargs: Keyword arguments to pass to the ParserSettings setup.

    Returns:
        ParserSettings: A cached instance of the ParserSettings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, ParserSettings)
        True
        >>> settings is get_settings()
        True
    """
    return ParserSettings(**kwargs)


def generate_settings_schema() -> dict[str, Any]:
    """
    Return the JSON Schema describing the ParserSettings model.

    Returns:
        dict: A dictionary representing the JSON Schema of the settings model.

    Examples:
        >>> "comment_prefixes" in generate_settings_schema()["properties"]
        True
    """
    return ParserSettings.model_json_schema(mode="validation")


if __name__ == "__main__":
    if "--schema" in sys.argv:
        schema = generate_settings_schema()
        print(orjson.dumps(schema, option=orjson.OPT_INDENT_2).decode())
        sys.exit(0)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    cfg = get_settings()
    cfg.apply_log_level()
    cfg.log_summary()
