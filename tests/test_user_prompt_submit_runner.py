"""Tests for the UserPromptSubmit runner and the task_scope hook."""

import json
import os
import subprocess
import sys
from pathlib import Path

HOOKS_DIR = Path(__file__).parent.parent / "hooks"
sys.path.insert(0, str(HOOKS_DIR))

import user_prompt_submit_runner as runner
from _prompt_scope import check_task_scope

RUNNER = HOOKS_DIR / "user_prompt_submit_runner.py"

COMPLEX_PROMPT = (
    "Rewrite the entire payments service for production, migrate every table, "
    "and then delete the old code everywhere"
)


class TestTaskScopeHook:
    """The hook wraps scoring and emits a stderr diagnostic."""

    def test_complex_prompt_gets_guidance(self, capsys):
        result = check_task_scope({"prompt": COMPLEX_PROMPT})

        assert "TASK SCOPE: Complex" in result.context
        assert "[task-scope] level=Complex" in capsys.readouterr().err

    def test_continuation_gets_nothing(self, capsys):
        result = check_task_scope({"prompt": "ok"})

        assert result.context == ""
        assert "guidance=suppressed" in capsys.readouterr().err

    def test_missing_prompt(self):
        assert check_task_scope({}).context == ""
        assert check_task_scope({"prompt": 12}).context == ""

    def test_registered(self):
        assert ("task_scope", 70) in [(name, priority) for name, _, priority in runner.HOOKS]


class TestRunHooks:
    def test_joins_contexts(self):
        assert runner.run_hooks({"prompt": COMPLEX_PROMPT}).startswith("```task-scope")

    def test_simple_prompt_is_empty(self):
        assert runner.run_hooks({"prompt": "rename foo to bar"}) == ""


def _run(stdin: str, pai_dir: Path, **extra_env):
    env = dict(os.environ, PAI_DIR=str(pai_dir))
    env.update(extra_env)
    return subprocess.run(
        [sys.executable, str(RUNNER)],
        input=stdin,
        capture_output=True,
        text=True,
        timeout=30,
        env=env,
    )


class TestRunnerProcess:
    """End to end: plain text out, always exit 0."""

    def test_complex_prompt(self, pai_dir):
        proc = _run(json.dumps({"session_id": "s", "prompt": COMPLEX_PROMPT}), pai_dir)

        assert proc.returncode == 0
        assert proc.stdout.startswith("```task-scope")
        assert "[task-scope] level=Complex" in proc.stderr

    def test_user_prompt_field_is_accepted(self, pai_dir):
        proc = _run(json.dumps({"user_prompt": COMPLEX_PROMPT}), pai_dir)

        assert "TASK SCOPE" in proc.stdout

    def test_continuation_prints_nothing(self, pai_dir):
        proc = _run(json.dumps({"prompt": "sounds good"}), pai_dir)

        assert proc.returncode == 0
        assert proc.stdout == ""

    def test_malformed_input(self, pai_dir):
        proc = _run("{oops", pai_dir)

        assert proc.returncode == 0
        assert proc.stdout == ""

    def test_hook_can_be_disabled(self, pai_dir):
        proc = _run(json.dumps({"prompt": COMPLEX_PROMPT}), pai_dir, PAI_HOOK_DISABLE_TASK_SCOPE="1")

        assert proc.returncode == 0
        assert proc.stdout == ""
