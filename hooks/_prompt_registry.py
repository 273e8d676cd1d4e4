"""
Shared hook registry for UserPromptSubmit hooks.

Hook modules register into HOOKS on import; the runner sorts by priority.
"""

import os
from typing import Callable

from _hook_result import HookResult

# Format: (name, check_function, priority)
HOOKS: list[tuple[str, Callable[[dict], HookResult], int]] = []


def register_hook(name: str, priority: int = 50):
    """Decorator to register a prompt hook.

    Hooks can be disabled via environment variable:
        PAI_HOOK_DISABLE_<NAME>=1
    """

    def decorator(func: Callable[[dict], HookResult]):
        env_key = f"PAI_HOOK_DISABLE_{name.upper()}"
        if os.environ.get(env_key, "0") == "1":
            return func  # Skip registration
        HOOKS.append((name, func, priority))
        return func

    return decorator
