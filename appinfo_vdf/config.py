"""
Configuration - decoder switches and logging settings.

Values are resolved in increasing precedence from the dataclass defaults,
an optional JSON settings file and environment variables (a ``.env`` file
is honored through python-dotenv).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from appinfo_vdf.core.options import MAX_DEPTH_LIMIT, DecodeOptions

logger = logging.getLogger("appinfo_vdf.config")


__all__ = ["Config", "config"]

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(raw: Any) -> bool | None:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def _parse_depth(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if 0 < value <= MAX_DEPTH_LIMIT else None


def _parse_level(raw: Any) -> str | None:
    name = str(raw).strip().upper()
    return name if isinstance(getattr(logging, name, None), int) else None


@dataclass
class Config:
    """
    Central configuration for the decoder and the command-line tool.
    """

    SETTINGS_FILE: Path | None = None
    LOAD_DOTENV: bool = True

    # Decoder switches
    STRICT_TAGS: bool = False
    STRICT_TRUNCATION: bool = True
    MAX_DEPTH: int = MAX_DEPTH_LIMIT

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    def __post_init__(self):
        """Load the .env file, the settings file and environment overrides."""
        if self.LOAD_DOTENV:
            load_dotenv()

        if self.SETTINGS_FILE is None:
            env_settings = os.getenv("APPINFO_SETTINGS_FILE")
            if env_settings:
                self.SETTINGS_FILE = Path(env_settings)

        self._load_settings()
        self._apply_environment()

    # Maps setting names to (attribute, parser).
    _FIELDS = {
        "strict_tags": ("STRICT_TAGS", _parse_bool),
        "strict_truncation": ("STRICT_TRUNCATION", _parse_bool),
        "max_depth": ("MAX_DEPTH", _parse_depth),
        "log_level": ("LOG_LEVEL", _parse_level),
    }

    def _set(self, source: str, key: str, raw: Any) -> None:
        attr, parser = self._FIELDS[key]
        value = parser(raw)
        if value is None:
            logger.warning("Ignoring invalid %s value for %s: %r", source, key, raw)
            return
        setattr(self, attr, value)

    def _load_settings(self) -> None:
        """Load settings from the JSON file, if one is configured."""
        if self.SETTINGS_FILE is None:
            return

        if not self.SETTINGS_FILE.exists():
            logger.warning("Settings file not found: %s", self.SETTINGS_FILE)
            return

        try:
            with open(self.SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading settings from %s: %s", self.SETTINGS_FILE, e)
            return

        if not isinstance(data, dict):
            logger.error("Settings file %s must contain a JSON object", self.SETTINGS_FILE)
            return

        for key in self._FIELDS:
            if key in data:
                self._set("settings", key, data[key])

        log_file = data.get("log_file")
        if log_file:
            self.LOG_FILE = Path(log_file)

    def _apply_environment(self) -> None:
        """Apply ``APPINFO_*`` environment variables."""
        for key in self._FIELDS:
            raw = os.getenv(f"APPINFO_{key.upper()}")
            if raw is not None and raw != "":
                self._set("environment", key, raw)

        log_file = os.getenv("APPINFO_LOG_FILE")
        if log_file:
            self.LOG_FILE = Path(log_file)

    @property
    def log_level(self) -> int:
        """Numeric logging level for ``LOG_LEVEL``."""
        return getattr(logging, self.LOG_LEVEL.upper(), logging.INFO)

    def decode_options(self, **overrides: Any) -> DecodeOptions:
        """Builds ``DecodeOptions`` from the current settings.

        Args:
            **overrides: Keyword arguments that replace individual switches
                (``None`` values are ignored).

        Returns:
            DecodeOptions: The resolved switches.
        """
        values = {
            "strict_tags": self.STRICT_TAGS,
            "strict_truncation": self.STRICT_TRUNCATION,
            "max_depth": self.MAX_DEPTH,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return DecodeOptions(**values)


config = Config()
