"""
Command risk classification for Bash tool calls.

Tiers are checked in strict precedence:
  1. BLOCK   - first matching group wins, hard deny
  2. CONFIRM - first matching group wins, deny until the user confirms
  3. WARN    - every group evaluated, all advisories collected

Matching runs on the raw command string: no shell parsing, no variable
expansion. Both entry points are pure and never raise.
"""

from dataclasses import dataclass, field
from typing import Optional

from _patterns import BLOCK_GROUPS, CONFIRM_GROUPS, WARN_GROUPS, Tier

CATEGORY_TITLES = {
    "reverse_shell": "Reverse shell",
    "instruction_override": "Prompt injection (instruction override)",
    "catastrophic_deletion": "Catastrophic deletion",
    "dangerous_file_ops": "Dangerous file operation",
    "dangerous_git": "Dangerous git operation",
}


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of classifying one command.

    Exactly one holds: blocked, requires_confirmation, or neither (clean).
    """

    blocked: bool = False
    requires_confirmation: bool = False
    category: Optional[str] = None
    pattern: Optional[str] = None
    reason: str = ""

    @property
    def is_clean(self) -> bool:
        return not self.blocked and not self.requires_confirmation


@dataclass(frozen=True)
class WarningResult:
    """Advisories for an allowed command, deduplicated, first-match order."""

    messages: tuple = field(default_factory=tuple)

    @property
    def has_warnings(self) -> bool:
        return bool(self.messages)


CLEAN = DetectionResult()


def _first_hit(groups: tuple, command: str) -> Optional[tuple]:
    """(group, rule) for the first block/confirm group in table order that matches."""
    for group in groups:
        if group.tier is Tier.WARN:
            continue
        rule = group.first_match(command)
        if rule is not None:
            return group, rule
    return None


def classify(command: str, groups: tuple = BLOCK_GROUPS + CONFIRM_GROUPS) -> DetectionResult:
    """Classify a shell command into block / confirm / clean.

    groups is evaluated in order; the hit group's tier decides the outcome,
    so block groups must come before confirm groups.
    """
    if not isinstance(command, str) or not command.strip():
        return CLEAN

    hit = _first_hit(groups, command)
    if not hit:
        return CLEAN

    group, rule = hit
    return DetectionResult(
        blocked=group.tier is Tier.BLOCK,
        requires_confirmation=group.tier is Tier.CONFIRM,
        category=group.name,
        pattern=rule.source,
        reason=rule.message,
    )


def collect_warnings(command: str, groups: tuple = WARN_GROUPS) -> WarningResult:
    """Collect advisories from every warn-tier group (no short-circuit)."""
    if not isinstance(command, str) or not command.strip():
        return WarningResult()

    messages: list[str] = []
    for group in groups:
        for rule in group.all_matches(command):
            if rule.message not in messages:
                messages.append(rule.message)
    return WarningResult(messages=tuple(messages))


def category_title(category: Optional[str]) -> str:
    if not category:
        return "Unknown risk"
    return CATEGORY_TITLES.get(category, category.replace("_", " ").capitalize())


def format_block_feedback(result: DetectionResult, command: str) -> str:
    """Feedback text for a hard block."""
    return (
        f"⛔ BLOCKED: {category_title(result.category)}\n"
        f"Reason: {result.reason}\n"
        f"Command: `{command[:200]}`\n"
        "This command is never run automatically. Choose a safer alternative."
    )


def format_confirmation_feedback(result: DetectionResult, command: str) -> str:
    """Feedback text for an operation that needs the user's explicit go-ahead."""
    return (
        f"⚠️ CONFIRMATION REQUIRED: {category_title(result.category)} ({result.reason})\n"
        f"Command: `{command[:200]}`\n"
        "This can discard work or rewrite shared history. Explain the impact to the "
        "user and run it only after they explicitly confirm."
    )


def format_warnings(warnings: WarningResult) -> str:
    """Advisory block injected as additional context."""
    if not warnings.has_warnings:
        return ""
    lines = ["💡 Command advisories:"]
    lines.extend(f"  - {message}" for message in warnings.messages)
    return "\n".join(lines)
