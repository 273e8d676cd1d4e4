#!/usr/bin/env python3
"""
Composite PreToolUse Runner: Runs all PreToolUse gates in a single process.

HOOKS INDEX (by priority):
  SECURITY (0-20):
    5  command_risk        - Block dangerous commands, confirm risky git ops

  ADVISORY (40-60):
    50 command_advisories  - Warn on destructive / non-preferred commands

ARCHITECTURE:
  - Gates register via @register_hook(name, matcher, priority)
  - Lower priority = runs first
  - First DENY wins, contexts are aggregated
  - Fail open: bad input, timeouts and crashing gates all resolve to allow

OUTPUT (single JSON line on stdout):
  allow -> {"permissionDecision": "allow", "additionalContext"?: str}, exit 0
  deny  -> {"permissionDecision": "deny", "feedback": str},            exit 2
"""

import json
import re
import sys
import time
from functools import lru_cache
from typing import Optional

from _config import get_limit, get_timeout
from _hook_io import read_payload
from _logging import diagnostic

from gates import HOOKS

EXIT_ALLOW = 0
EXIT_BLOCK = 2

# Budget before the runner reports itself as slow
SLOW_RUN_MS = 50

# =============================================================================
# GATE SELECTION
# =============================================================================


@lru_cache(maxsize=None)
def _matcher_regex(matcher: str) -> re.Pattern:
    return re.compile(f"^({matcher})$")


def matches_tool(matcher: Optional[str], tool_name: str) -> bool:
    """A None matcher applies to every tool; otherwise the full name must match."""
    if matcher is None:
        return True
    return bool(_matcher_regex(matcher).match(tool_name))


@lru_cache(maxsize=None)
def hooks_for_tool(tool_name: str) -> tuple:
    """Gates that apply to tool_name, in priority order."""
    return tuple(hook for hook in HOOKS if matches_tool(hook[1], tool_name))


# =============================================================================
# MAIN RUNNER
# =============================================================================


def allow_output(context: str = "") -> dict:
    output = {"permissionDecision": "allow"}
    if context:
        output["additionalContext"] = context
    return output


def run_hooks(data: dict) -> dict:
    """Run all applicable gates and return the aggregated decision."""
    tool_name = data.get("tool_name", "")
    if not isinstance(tool_name, str):
        return allow_output()

    contexts = []

    for name, matcher, check_func, priority in hooks_for_tool(tool_name):
        try:
            result = check_func(data)
        except Exception as e:
            # A broken gate must not block the tool call
            diagnostic("pre-tool", f"Hook {name} error: {e}")
            continue

        # First deny wins
        if result.is_deny:
            return {"permissionDecision": "deny", "feedback": result.reason}

        if result.context:
            contexts.append(result.context)

    return allow_output("\n\n".join(contexts[: get_limit("max_contexts")]))


def exit_code_for(output: dict) -> int:
    return EXIT_BLOCK if output.get("permissionDecision") == "deny" else EXIT_ALLOW


# Sort once at import; hooks_for_tool caches per tool from the sorted list
HOOKS.sort(key=lambda hook: hook[3])


def main():
    """Main entry point."""
    start = time.time()

    data = read_payload(get_timeout("command_stdin_seconds"))
    result = run_hooks(data) if data else allow_output()

    print(json.dumps(result))

    elapsed = (time.time() - start) * 1000
    if elapsed > SLOW_RUN_MS:
        diagnostic("pre-tool", f"Slow: {elapsed:.1f}ms")

    sys.exit(exit_code_for(result))


if __name__ == "__main__":
    main()
