"""Tests for unified HookResult class."""

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "hooks"))

from _hook_result import HookResult


class TestHookResultApprove:
    """Tests for approve/allow methods."""

    def test_approve_returns_approve_decision(self):
        # Act
        result = HookResult.approve()

        # Assert
        assert result.decision == "approve"
        assert not result.is_deny

    def test_approve_with_context_includes_context(self):
        # Arrange
        context = "💡 Command advisories:\n  - Recursive delete"

        # Act
        result = HookResult.approve(context)

        # Assert
        assert result.context == context

    def test_allow_is_alias_for_approve(self):
        # Act
        result = HookResult.allow("task scope")

        # Assert
        assert result.decision == "approve"
        assert result.context == "task scope"


class TestHookResultDeny:
    """Tests for deny/confirm methods."""

    def test_deny_returns_deny_decision(self):
        # Act
        result = HookResult.deny("blocked reason")

        # Assert
        assert result.decision == "deny"
        assert result.is_deny
        assert result.needs_confirmation is False

    def test_deny_includes_reason(self):
        # Arrange
        reason = "Reverse shell blocked"

        # Act
        result = HookResult.deny(reason)

        # Assert
        assert result.reason == reason

    def test_confirm_is_a_deny_pending_confirmation(self):
        # Act
        result = HookResult.confirm("Force push")

        # Assert
        assert result.is_deny
        assert result.needs_confirmation is True
        assert result.reason == "Force push"


class TestHookResultDefaults:
    """Tests for the default verdict."""

    def test_default_is_empty_approval(self):
        # Act
        result = HookResult()

        # Assert
        assert result.decision == "approve"
        assert result.context == ""
        assert result.reason == ""
        assert result.needs_confirmation is False

    def test_results_are_immutable(self):
        # Arrange
        result = HookResult.approve()

        # Act / Assert
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.decision = "deny"
