#!/usr/bin/env python3
"""
Composite UserPromptSubmit Runner: Runs all UserPromptSubmit hooks in a single process.

HOOKS INDEX (by priority):
  SCOPING (70):
   70  task_scope  - Complexity scoring, clarifying-question directive

ARCHITECTURE:
  - Hooks register via @register_hook(name, priority)
  - Lower priority = runs first
  - Contexts are aggregated and joined
  - Never blocks: output is plain text on stdout, exit code is always 0
"""

import sys
import time
import traceback

from _config import get_limit, get_timeout
from _hook_io import read_payload
from _logging import diagnostic

# =============================================================================
# HOOK REGISTRY (shared across modules)
# =============================================================================

from _prompt_registry import HOOKS

# Import hook modules (triggers registration via decorators)
import _prompt_scope  # noqa: F401 - Task scoping (priority 70)


# =============================================================================
# MAIN RUNNER
# =============================================================================


def run_hooks(data: dict) -> str:
    """Run all hooks and return the text to inject (possibly empty)."""
    contexts = []

    for name, check_func, priority in HOOKS:
        try:
            result = check_func(data)
        except Exception:
            diagnostic("ups-runner", f"Hook {name} crashed:\n{traceback.format_exc()}")
            continue

        if result.context:
            contexts.append(result.context)

    # Limit to avoid context explosion
    return "\n\n".join(contexts[: get_limit("max_contexts")])


# Pre-sort hooks by priority at module load (avoid re-sorting on every call)
HOOKS.sort(key=lambda x: x[2])


def main():
    """Main entry point."""
    start = time.time()

    data = read_payload(get_timeout("prompt_stdin_seconds"))

    # Normalize prompt field
    prompt = data.get("prompt", "") or data.get("user_prompt", "")
    data["prompt"] = prompt if isinstance(prompt, str) else ""

    output = run_hooks(data) if data["prompt"] else ""
    if output:
        print(output)

    elapsed = (time.time() - start) * 1000
    if elapsed > 100:
        diagnostic("ups-runner", f"Slow: {elapsed:.1f}ms")

    sys.exit(0)


if __name__ == "__main__":
    main()
