"""
Centralized configuration for hook runners.

Loads settings from $PAI_DIR/config/hook_settings.json with sensible defaults.
Settings are read once per process and frozen; hooks are short-lived, so a
change on disk takes effect on the next invocation.
"""

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

# =============================================================================
# CONFIG PATHS
# =============================================================================


def get_pai_dir() -> Path:
    """Root of the host runtime's data directory."""
    return Path(os.environ.get("PAI_DIR", str(Path.home() / ".claude"))).expanduser()


SETTINGS_FILENAME = "hook_settings.json"

# =============================================================================
# TOOL NAMES (avoid magic strings scattered across codebase)
# =============================================================================

TOOL_NAMES = {
    "bash": "Bash",
}

# =============================================================================
# DEFAULT VALUES (used when config file missing or key not found)
# =============================================================================

DEFAULTS = {
    "timeouts": {
        "command_stdin_seconds": 0.5,
        "prompt_stdin_seconds": 3.0,
    },
    "thresholds": {
        "simple_max_score": 3,
        "medium_max_score": 6,
    },
    "limits": {
        "command_preview_chars": 100,
        "max_indicators": 4,
        "max_contexts": 3,
    },
    "paths": {
        "audit_log": "history/security/security-events.jsonl",
        "agents_dir": "agents",
    },
}


# =============================================================================
# SETTINGS
# =============================================================================


@dataclass(frozen=True)
class HookSettings:
    """Read-only view over the merged settings sections."""

    pai_dir: Path
    sections: dict

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to defaults."""
        return self.sections.get(section, {}).get(key, default)

    def resolve_path(self, key: str) -> Path:
        """Resolve a `paths` entry; relative entries hang off PAI_DIR."""
        path = Path(str(self.get("paths", key, DEFAULTS["paths"].get(key, "")))).expanduser()
        return path if path.is_absolute() else self.pai_dir / path

    @property
    def audit_log_path(self) -> Path:
        return self.resolve_path("audit_log")

    @property
    def agents_dir(self) -> Path:
        return self.resolve_path("agents_dir")


def _read_settings_file(path: Path) -> dict:
    """Load overrides from disk; missing or malformed files mean no overrides."""
    if not path.exists():
        return {}
    try:
        loaded = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        return {}
    return loaded if isinstance(loaded, dict) else {}


@lru_cache(maxsize=1)
def load_settings() -> HookSettings:
    """Build the process-wide settings once (DEFAULTS merged with the file)."""
    pai_dir = get_pai_dir()
    overrides = _read_settings_file(pai_dir / "config" / SETTINGS_FILENAME)

    sections = {}
    for section, values in DEFAULTS.items():
        merged = dict(values)
        extra = overrides.get(section)
        if isinstance(extra, dict):
            merged.update(extra)
        sections[section] = merged

    return HookSettings(pai_dir=pai_dir, sections=sections)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def get_timeout(name: str) -> float:
    """Get stdin read timeout in seconds."""
    return float(load_settings().get("timeouts", name, 1.0))


def get_threshold(name: str) -> int:
    """Get threshold value."""
    return int(load_settings().get("thresholds", name, 0))


def get_limit(name: str) -> int:
    """Get limit value."""
    return int(load_settings().get("limits", name, 10))


def get_tool_name(key: str) -> str:
    """Get canonical tool name (avoids magic strings)."""
    return TOOL_NAMES.get(key, key.title())
