#!/usr/bin/env python3
"""
Gate registry shared by every module in the gates package.

A gate takes the PreToolUse payload and returns a HookResult. It registers
with a tool-name matcher (a regex the runner anchors on both ends, or None
for every tool) and a priority; lower priorities run first.
"""

import sys
from pathlib import Path

# Gate modules import hook helpers (_audit, _command_risk, ...) as top-level modules
_hooks_dir = Path(__file__).resolve().parent.parent
if str(_hooks_dir) not in sys.path:
    sys.path.insert(0, str(_hooks_dir))

import os  # noqa: E402
from typing import Callable, Optional  # noqa: E402

from _hook_result import HookResult  # noqa: E402

GateCheck = Callable[[dict], HookResult]

# (name, matcher, check, priority); the runner sorts by priority
HOOKS: list[tuple[str, Optional[str], GateCheck, int]] = []

DISABLE_ENV_PREFIX = "PAI_HOOK_DISABLE_"


def is_disabled(name: str) -> bool:
    """True when PAI_HOOK_DISABLE_<NAME>=1 switches this gate off."""
    return os.environ.get(DISABLE_ENV_PREFIX + name.upper(), "0") == "1"


def register_hook(name: str, matcher: Optional[str], priority: int = 50):
    """Add the decorated check to HOOKS unless it has been switched off.

    Example:
        PAI_HOOK_DISABLE_COMMAND_ADVISORIES=1   # silence Bash advisories
    """

    def decorator(func: GateCheck) -> GateCheck:
        if not is_disabled(name):
            HOOKS.append((name, matcher, func, priority))
        return func

    return decorator


__all__ = ["HOOKS", "register_hook", "is_disabled", "HookResult"]
