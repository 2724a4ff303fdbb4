"""
conftest.py — shared fixtures for the Rescom test suite.

1. ENV CLEANUP: Snapshot and restore RESCOM_* environment variables.
2. SETTINGS: Restore the process settings object after each test.
3. TREES: Build configuration + resource files under tmp_path.
"""
import os
import pytest

from rescom.config import settings


# ─── Environment Variable Safety ────────────────────────────────────────────

_ENV_KEYS_TO_PROTECT = [
    "RESCOM_TABULATION_SIZE",
    "RESCOM_LOG_LEVEL",
    "RESCOM_PARSE_DEBUG",
]


@pytest.fixture(autouse=True)
def _clean_env_vars():
    """Snapshot and restore Rescom environment variables after each test."""
    saved = {}
    for key in _ENV_KEYS_TO_PROTECT:
        if key in os.environ:
            saved[key] = os.environ[key]

    yield

    for key in _ENV_KEYS_TO_PROTECT:
        if key in saved:
            os.environ[key] = saved[key]
        else:
            os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def _restore_settings():
    """Tests may tweak the settings singleton; put every field back."""
    snapshot = settings.model_dump()
    yield
    for name, value in snapshot.items():
        setattr(settings, name, value)


# ─── On-disk resource trees ─────────────────────────────────────────────────

@pytest.fixture
def resource_tree(tmp_path):
    """
    Factory writing resource files and a configuration file under tmp_path.

        config = resource_tree({"a.txt": b"hello"}, "a.txt\\n", name="Assets.rescom")
    """
    def _build(files, config_text, name="resources.rescom"):
        for rel_path, data in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        config_path = tmp_path / name
        config_path.write_text(config_text, encoding="utf-8")
        return config_path

    return _build
