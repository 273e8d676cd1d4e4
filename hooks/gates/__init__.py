#!/usr/bin/env python3
"""
Gates Package - Modular PreToolUse hook gates.

Each module registers its hooks into the shared HOOKS list on import.

Modules:
  _security.py - Bash command risk classification and advisories
"""

from ._common import HOOKS, register_hook, HookResult
from ._security import (
    check_command_risk,
    check_command_advisories,
)

__all__ = [
    "HOOKS",
    "register_hook",
    "HookResult",
    # Security gates
    "check_command_risk",
    "check_command_advisories",
]
