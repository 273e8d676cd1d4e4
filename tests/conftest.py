"""Shared fixtures for hook and ops tests."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
for _dir in (ROOT / "hooks", ROOT / "lib", ROOT):
    if str(_dir) not in sys.path:
        sys.path.insert(0, str(_dir))

from _config import load_settings  # noqa: E402


@pytest.fixture(autouse=True)
def pai_dir(tmp_path, monkeypatch):
    """Point PAI_DIR at a scratch directory with fresh settings."""
    monkeypatch.setenv("PAI_DIR", str(tmp_path))
    load_settings.cache_clear()
    yield tmp_path
    load_settings.cache_clear()


@pytest.fixture
def write_settings(pai_dir):
    """Write hook_settings.json overrides and reload."""
    import json

    def _write(overrides: dict) -> Path:
        path = pai_dir / "config" / "hook_settings.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(overrides))
        load_settings.cache_clear()
        return path

    return _write
