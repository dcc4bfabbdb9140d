# tests/conftest.py
import logging
from pathlib import Path

import pytest

from vdf_builders import build_appinfo, game_entry

_ENV_KEYS = (
    "APPINFO_SETTINGS_FILE",
    "APPINFO_STRICT_TAGS",
    "APPINFO_STRICT_TRUNCATION",
    "APPINFO_MAX_DEPTH",
    "APPINFO_LOG_LEVEL",
    "APPINFO_LOG_FILE",
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so each test starts clean."""
    yield
    pkg_logger = logging.getLogger("appinfo_vdf")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove APPINFO_* variables from the environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def sample_appinfo_bytes() -> bytes:
    """Two well-formed entries followed by the end-of-entries marker."""
    return build_appinfo(
        game_entry(10, "Counter-Strike", change_number=100),
        game_entry(70, "Half-Life", change_number=200),
        end_marker=True,
    )


@pytest.fixture
def sample_appinfo_file(tmp_path, sample_appinfo_bytes) -> Path:
    """sample_appinfo_bytes written to disk."""
    path = tmp_path / "appcache" / "appinfo.vdf"
    path.parent.mkdir(parents=True)
    path.write_bytes(sample_appinfo_bytes)
    return path
