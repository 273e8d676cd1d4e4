#!/usr/bin/env python3
"""
Security Gates - Bash command risk classification.

  command_risk       (5)  - Block reverse shells, injection phrases, catastrophic
                            deletes; hold dangerous git ops for user confirmation
  command_advisories (50) - Attach advisory warnings to allowed commands

A block or confirmation is recorded in the security audit log. The audit
write runs in the background and its outcome never changes the decision.
"""

from _audit import EVENT_BLOCKED, EVENT_CONFIRMATION, log_security_event
from _command_risk import (
    classify,
    collect_warnings,
    format_block_feedback,
    format_confirmation_feedback,
    format_warnings,
)
from _config import get_tool_name
from _hook_io import extract_command
from _logging import log_debug

from ._common import register_hook, HookResult

BASH = get_tool_name("bash")


def _command_from(data: dict) -> str:
    return extract_command(data.get("tool_input")) or ""


def _audit(event_type: str, result, command: str, data: dict) -> None:
    try:
        log_security_event(
            event_type,
            result.category or "",
            result.pattern or "",
            command,
            str(data.get("session_id") or ""),
        )
    except Exception as e:
        log_debug("command_risk", f"audit dispatch failed: {e}")


# =============================================================================
# COMMAND RISK (Priority 5) - Block / confirm tiers
# =============================================================================


@register_hook("command_risk", BASH, priority=5)
def check_command_risk(data: dict) -> HookResult:
    """Deny blocked commands; hold dangerous git operations for confirmation."""
    command = _command_from(data)
    if not command:
        return HookResult.approve()

    result = classify(command)
    if result.blocked:
        _audit(EVENT_BLOCKED, result, command, data)
        return HookResult.deny(format_block_feedback(result, command))
    if result.requires_confirmation:
        _audit(EVENT_CONFIRMATION, result, command, data)
        return HookResult.confirm(format_confirmation_feedback(result, command))
    return HookResult.approve()


# =============================================================================
# COMMAND ADVISORIES (Priority 50) - Warn tier
# =============================================================================


@register_hook("command_advisories", BASH, priority=50)
def check_command_advisories(data: dict) -> HookResult:
    """Surface every applicable advisory for an allowed command."""
    command = _command_from(data)
    if not command:
        return HookResult.approve()
    return HookResult.approve(format_warnings(collect_warnings(command)))
