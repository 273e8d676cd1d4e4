"""
HookResult: the verdict a single hook check hands back to its runner.

A check either lets the event through (optionally adding text to the
assistant's context) or stops it with feedback. A confirmation is a stop
the user can lift by explicitly approving the command.
"""

from dataclasses import dataclass

APPROVE = "approve"
DENY = "deny"


@dataclass(frozen=True)
class HookResult:
    """Verdict from one check.

    Attributes:
        decision: APPROVE or DENY
        reason: Feedback shown to the assistant when the event is stopped
        context: Text added to the assistant's context on approval
        needs_confirmation: The stop lifts once the user confirms
    """

    decision: str = APPROVE
    reason: str = ""
    context: str = ""
    needs_confirmation: bool = False

    @staticmethod
    def approve(context: str = "") -> "HookResult":
        """Let the event through, optionally with context to inject."""
        return HookResult(decision=APPROVE, context=context)

    # Prompt hooks never stop anything, they only add context
    allow = approve

    @staticmethod
    def deny(reason: str) -> "HookResult":
        """Stop the event with feedback."""
        return HookResult(decision=DENY, reason=reason)

    @staticmethod
    def confirm(reason: str) -> "HookResult":
        """Stop the event until the user explicitly approves it."""
        return HookResult(decision=DENY, reason=reason, needs_confirmation=True)

    @property
    def is_deny(self) -> bool:
        return self.decision == DENY
