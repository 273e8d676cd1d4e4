"""
Task scoping hook (priority 70): asks for clarifying questions on
Medium/Complex prompts before any work starts.
"""

from _hook_result import HookResult
from _logging import diagnostic
from _prompt_registry import register_hook
from _task_scope import analyze_complexity, generate_scoping_guidance, summarize


@register_hook("task_scope", priority=70)
def check_task_scope(data: dict) -> HookResult:
    """Score the prompt and inject a scoping directive when warranted."""
    prompt = data.get("prompt", "")
    if not isinstance(prompt, str) or not prompt.strip():
        return HookResult.allow()

    analysis = analyze_complexity(prompt)
    guidance = generate_scoping_guidance(analysis, prompt)
    diagnostic("task-scope", summarize(analysis, guidance))
    return HookResult.allow(guidance)
