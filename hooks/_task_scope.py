"""
Task Scope Analysis: complexity scoring for user prompts.

Scores a prompt 0-10 from independent, additive heuristic signals, maps the
score to a level, and renders a clarification directive for Medium/Complex
tasks so the assistant asks before acting.

Signals (each group counts once, groups add up):
  length       >50 words +2, >100 words +1 more
  multi-part   numbered list / chained clauses / bullets      +2
  ambiguity    hedging or vague vocabulary                    +1
  specificity  talks about code/files but names none          +1
  domain       architecture, security, database, ...          +2
  risk         delete, production, payment, ...               +2
  scope        entire, everywhere, across, ...                +2

Keyword matching only; there is no semantic understanding of the prompt.
"""

from dataclasses import dataclass
from enum import Enum

from _config import get_limit, get_threshold
from _patterns import (
    AMBIGUITY,
    CODE_REFERENCE,
    CONCRETE_LOCATION,
    CONTINUATION,
    INTERROGATIVE_START,
    KEYWORD_SIGNALS,
    MULTI_PART,
    TASK_QUESTION,
    SignalGroup,
)

MAX_SCORE = 10
LONG_PROMPT_WORDS = 50
VERY_LONG_PROMPT_WORDS = 100
SPECIFICITY_WEIGHT = 1


class ComplexityLevel(Enum):
    SIMPLE = "Simple"
    MEDIUM = "Medium"
    COMPLEX = "Complex"


QUESTIONS_BY_LEVEL = {
    ComplexityLevel.SIMPLE: 2,
    ComplexityLevel.MEDIUM: 4,
    ComplexityLevel.COMPLEX: 6,
}

# Question focus areas, most important first; a level asks the first N
QUESTION_FOCUS = (
    "the concrete outcome and how success will be verified",
    "which files, modules or environments are in scope (and which are not)",
    "constraints: compatibility, performance, dependencies, deadlines",
    "existing behaviour that must not change",
    "rollout order and what happens if a step fails",
    "who else is affected and whether anything is irreversible",
)

RISK_CHECKLIST = (
    "Restate the plan and get explicit approval before the first change",
    "Identify irreversible steps (deletes, migrations, publishes) and how to roll each back",
    "Work in small, verifiable increments; run tests after each",
    "Never touch production data or credentials without a confirmed backup",
)


@dataclass(frozen=True)
class ComplexityAnalysis:
    score: int
    level: ComplexityLevel
    indicators: tuple
    suggested_questions: int


# =============================================================================
# SCORING
# =============================================================================


def _clamp(score: int) -> int:
    return max(0, min(MAX_SCORE, score))


def level_for_score(score: int) -> ComplexityLevel:
    """Map a clamped score to its level using the configured thresholds."""
    if score <= get_threshold("simple_max_score"):
        return ComplexityLevel.SIMPLE
    if score <= get_threshold("medium_max_score"):
        return ComplexityLevel.MEDIUM
    return ComplexityLevel.COMPLEX


def _length_signal(prompt: str) -> tuple[int, list[str]]:
    words = len(prompt.split())
    if words > VERY_LONG_PROMPT_WORDS:
        return 3, [f"Very long prompt ({words} words)"]
    if words > LONG_PROMPT_WORDS:
        return 2, [f"Long prompt ({words} words)"]
    return 0, []


def _keyword_signal(group: SignalGroup, prompt: str) -> tuple[int, list[str]]:
    hit = group.first_match(prompt)
    if not hit:
        return 0, []
    rule, match = hit
    detail = rule.message or " ".join(match.group(0).lower().split())
    return group.weight, [f"{group.label}: {detail}"]


def _specificity_signal(prompt: str) -> tuple[int, list[str]]:
    if CODE_REFERENCE.search(prompt) and not CONCRETE_LOCATION.search(prompt):
        return SPECIFICITY_WEIGHT, ["No specific files or locations mentioned"]
    return 0, []


def analyze_complexity(prompt: str) -> ComplexityAnalysis:
    """Score a prompt for ambiguity, complexity and risk."""
    if not isinstance(prompt, str):
        prompt = ""

    score = 0
    indicators: list[str] = []

    signals = [
        _length_signal(prompt),
        _keyword_signal(MULTI_PART, prompt),
        _keyword_signal(AMBIGUITY, prompt),
        _specificity_signal(prompt),
    ]
    signals.extend(_keyword_signal(group, prompt) for group in KEYWORD_SIGNALS)

    for weight, labels in signals:
        score += weight
        indicators.extend(labels)

    score = _clamp(score)
    level = level_for_score(score)
    return ComplexityAnalysis(
        score=score,
        level=level,
        indicators=tuple(indicators),
        suggested_questions=QUESTIONS_BY_LEVEL[level],
    )


# =============================================================================
# SUPPRESSION
# =============================================================================


def is_continuation(prompt: str) -> bool:
    """Short acknowledgement ("ok", "sounds good") that just keeps work going."""
    return bool(CONTINUATION.search(prompt.strip()))


def is_task_question(prompt: str) -> bool:
    """Phrased as a question but actually asks for work ("can you fix ...")."""
    return bool(TASK_QUESTION.search(prompt.strip()))


def is_informational_question(prompt: str) -> bool:
    stripped = prompt.strip()
    if not stripped:
        return False
    if is_task_question(stripped):
        return False
    return bool(INTERROGATIVE_START.search(stripped)) or stripped.endswith("?")


def should_suppress(prompt: str) -> bool:
    """Guidance is withheld for continuations and pure questions."""
    if not isinstance(prompt, str) or not prompt.strip():
        return True
    return is_continuation(prompt) or is_informational_question(prompt)


# =============================================================================
# GUIDANCE
# =============================================================================


def generate_scoping_guidance(analysis: ComplexityAnalysis, prompt: str) -> str:
    """Render the clarification directive, or "" when none is warranted."""
    if should_suppress(prompt) or analysis.level is ComplexityLevel.SIMPLE:
        return ""

    max_indicators = get_limit("max_indicators")
    questions = analysis.suggested_questions

    lines = [
        "```task-scope",
        f"TASK SCOPE: {analysis.level.value} (score {analysis.score}/{MAX_SCORE})",
    ]
    if analysis.indicators:
        lines.append("Signals detected:")
        lines.extend(f"  - {label}" for label in analysis.indicators[:max_indicators])

    lines.append("")
    lines.append(
        f"Before writing any code, ask the user up to {questions} clarifying "
        "questions covering:"
    )
    focus = QUESTION_FOCUS[: min(questions, len(QUESTION_FOCUS))]
    lines.extend(f"  {i}. {area}" for i, area in enumerate(focus, 1))
    lines.append("Wait for the answers, then confirm the plan before starting.")

    if analysis.level is ComplexityLevel.COMPLEX:
        lines.append("")
        lines.append("⚠️ RISK WARNING: high-complexity or high-risk task.")
        lines.extend(f"  [ ] {item}" for item in RISK_CHECKLIST)

    lines.append("```")
    return "\n".join(lines)


def summarize(analysis: ComplexityAnalysis, guidance: str) -> str:
    """One-line operator diagnostic."""
    emitted = "emitted" if guidance else "suppressed"
    return (
        f"level={analysis.level.value} score={analysis.score} "
        f"indicators={len(analysis.indicators)} guidance={emitted}"
    )
