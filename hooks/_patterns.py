"""
Centralized pattern definitions for hook runners.

Two static tables live here:
  - Command risk groups (block / confirm / warn tiers) for PreToolUse
  - Task scope signals and prompt vocabularies for UserPromptSubmit

All patterns are pre-compiled at module load and the tables are tuples:
order is precedence, so nothing appends to them at runtime.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# =============================================================================
# TABLE TYPES
# =============================================================================


class Tier(Enum):
    """Priority class of a pattern group (block > confirm > warn)."""

    BLOCK = "block"
    CONFIRM = "confirm"
    WARN = "warn"


@dataclass(frozen=True)
class PatternRule:
    """A compiled regex plus the label/message it produces when it matches."""

    regex: re.Pattern
    message: str = ""

    @property
    def source(self) -> str:
        return self.regex.pattern

    def search(self, text: str) -> Optional[re.Match]:
        return self.regex.search(text)


@dataclass(frozen=True)
class PatternGroup:
    """Named, ordered set of rules sharing a category and tier."""

    name: str
    tier: Tier
    rules: tuple

    def first_match(self, text: str) -> Optional[PatternRule]:
        """First rule that matches, in table order."""
        for rule in self.rules:
            if rule.search(text):
                return rule
        return None

    def all_matches(self, text: str) -> list:
        return [rule for rule in self.rules if rule.search(text)]


@dataclass(frozen=True)
class SignalGroup:
    """One additive complexity signal: first matching rule contributes weight once."""

    name: str
    weight: int
    label: str
    rules: tuple

    def first_match(self, text: str) -> Optional[tuple]:
        """(rule, match) for the first rule that matches, else None."""
        for rule in self.rules:
            match = rule.search(text)
            if match:
                return rule, match
        return None


def _rule(pattern: str, message: str = "", flags: int = 0) -> PatternRule:
    return PatternRule(re.compile(pattern, flags), message)


def _phrase(term: str) -> str:
    """Escape a term, letting any run of whitespace separate its words."""
    return r"\s+".join(re.escape(word) for word in term.split())


def _vocabulary(terms: tuple, message: str = "") -> PatternRule:
    """Whole-word, case-insensitive alternation over a fixed term list."""
    alternation = "|".join(_phrase(term) for term in terms)
    return _rule(rf"\b(?:{alternation})\b", message, re.IGNORECASE)


# =============================================================================
# COMMAND RISK - SHARED FRAGMENTS
# =============================================================================

# rm with a recursive flag anywhere among its leading options
_RM_RECURSIVE = (
    r"\brm\s+(?:-{1,2}[\w-]+\s+)*?(?:-[a-zA-Z]*[rR][a-zA-Z]*|--recursive)\s+"
    r"(?:-{1,2}[\w-]+\s+)*"
)
# End of a shell word
_WORD_END = r"(?=\s|$|[;&|)])"
_RECURSIVE_FLAG = r"(?:-[a-zA-Z]*R[a-zA-Z]*|--recursive)"

# =============================================================================
# COMMAND RISK - BLOCK TIER (hard deny)
# =============================================================================

REVERSE_SHELL = PatternGroup(
    "reverse_shell",
    Tier.BLOCK,
    (
        _rule(r"/dev/(?:tcp|udp)/", "Raw TCP/UDP device path"),
        _rule(
            r"\b(?:ba|z|da|k)?sh\s+-i\s+(?:\d?[<>]&?|&>)\s*/dev/",
            "Interactive shell redirected to a device",
        ),
        _rule(r"\bnc(?:at)?\s+.*-e\s+/bin/(?:ba|z)?sh\b", "Netcat shell execution"),
        _rule(
            r"\bmkfifo\b.*\|\s*(?:/bin/)?(?:ba)?sh\s+-i\b",
            "Named-pipe interactive shell",
        ),
    ),
)

INSTRUCTION_OVERRIDE = PatternGroup(
    "instruction_override",
    Tier.BLOCK,
    (
        _rule(
            r"\bignore\s+(?:all\s+)?(?:of\s+)?(?:the\s+|your\s+)?"
            r"(?:previous|prior|above|earlier)\s+(?:instructions|directions|rules|prompts?)",
            "Ignore-previous-instructions phrase",
            re.IGNORECASE,
        ),
        _rule(
            r"\bdisregard\s+(?:all\s+)?(?:the\s+|your\s+)?(?:previous\s+|prior\s+|above\s+|earlier\s+)?"
            r"(?:instructions|directions|rules|prompts?)",
            "Disregard-instructions phrase",
            re.IGNORECASE,
        ),
        _rule(
            r"\bforget\s+(?:all\s+)?(?:your|the|previous|prior)\s+(?:previous\s+|prior\s+)?instructions",
            "Forget-instructions phrase",
            re.IGNORECASE,
        ),
        _rule(
            r"\boverride\s+(?:your|the|all)\s+(?:safety\s+)?(?:instructions|rules|guidelines)",
            "Override-instructions phrase",
            re.IGNORECASE,
        ),
    ),
)

CATASTROPHIC_DELETION = PatternGroup(
    "catastrophic_deletion",
    Tier.BLOCK,
    (
        _rule(_RM_RECURSIVE + r"/" + _WORD_END, "Recursive delete of filesystem root"),
        _rule(_RM_RECURSIVE + r"/\*", "Recursive delete of root wildcard"),
        _rule(
            _RM_RECURSIVE + r"(?:~|\$HOME|\$\{HOME\})/?" + _WORD_END,
            "Recursive delete of home directory",
        ),
        # Any command ending in " ~/", not only rm
        _rule(r"\s~/\s*$", "Trailing home-directory target"),
        _rule(_RM_RECURSIVE + r"\.{1,2}/?" + _WORD_END, "Recursive delete of current or parent directory"),
    ),
)

DANGEROUS_FILE_OPS = PatternGroup(
    "dangerous_file_ops",
    Tier.BLOCK,
    (
        _rule(rf"\bchmod\s+{_RECURSIVE_FLAG}\s+0{{3,4}}\b", "Recursive permission wipe"),
        _rule(
            rf"\bchmod\s+{_RECURSIVE_FLAG}\s+[0-7]?777\s+/" + _WORD_END,
            "Recursive world-writable root",
        ),
        _rule(
            rf"\bchown\s+{_RECURSIVE_FLAG}\s+\S+\s+/" + _WORD_END,
            "Recursive ownership change of root",
        ),
        _rule(r"\bdd\s+.*\bof=/dev/(?:sd|hd|nvme|disk|xvd|vd)", "Raw write to a disk device"),
        _rule(r"\bmkfs(?:\.\w+)?\s", "Filesystem format"),
    ),
)

BLOCK_GROUPS = (REVERSE_SHELL, INSTRUCTION_OVERRIDE, CATASTROPHIC_DELETION, DANGEROUS_FILE_OPS)

# =============================================================================
# COMMAND RISK - CONFIRM TIER (deny until the user confirms)
# =============================================================================

DANGEROUS_GIT = PatternGroup(
    "dangerous_git",
    Tier.CONFIRM,
    (
        _rule(r"\bgit\s+push\b.*\s(?:--force|-f)(?=\s|$)", "Force push"),
        _rule(r"\bgit\s+reset\s+(?:.*\s)?--hard\b", "Hard reset"),
        _rule(r"\bgit\s+clean\s+(?:.*\s)?-[a-zA-Z]*f", "Forced clean of untracked files"),
        _rule(r"\bgit\s+branch\s+(?:.*\s)?-D\b", "Forced branch deletion"),
    ),
)

CONFIRM_GROUPS = (DANGEROUS_GIT,)

# =============================================================================
# COMMAND RISK - WARN TIER (allow with advisory text)
# =============================================================================

DESTRUCTIVE = PatternGroup(
    "destructive",
    Tier.WARN,
    (
        _rule(
            _RM_RECURSIVE + r"\S*\*",
            "Wildcard recursive delete: make sure the glob only matches what you mean to remove",
        ),
        _rule(
            _RM_RECURSIVE + r"\.\./",
            "Recursive delete outside the working directory (../): double-check the target path",
        ),
        _rule(
            r"\brm\s+(?:-{1,2}[\w-]+\s+)*?(?:-[a-zA-Z]*[rR][a-zA-Z]*|--recursive)\b",
            "Recursive delete: verify the target path before running",
        ),
    ),
)

FORCE_PUSH = PatternGroup(
    "force_push",
    Tier.WARN,
    (
        _rule(
            r"\bgit\s+push\b.*--force-with-lease\b",
            "Force push with lease still rewrites remote history: confirm nobody else uses the branch",
        ),
        _rule(
            r"\bgit\s+push\s+(?:.*\s)?\+[\w./-]+",
            "Forced refspec (+branch) rewrites remote history: confirm the target branch",
        ),
    ),
)

PACKAGE_MANAGER = PatternGroup(
    "package_manager",
    Tier.WARN,
    (
        _rule(
            r"\bnpm\s+(?:install|i|ci|add|run|exec|test|start|init|update)\b",
            "Package manager: this setup prefers bun over npm (bun install / bun run)",
        ),
        _rule(r"\byarn(?:\s|$)", "Package manager: this setup prefers bun over yarn (bun install / bun run)"),
        _rule(r"\bpnpm(?:\s|$)", "Package manager: this setup prefers bun over pnpm (bun install / bun run)"),
        _rule(r"\bnpx\s", "Package manager: this setup prefers bunx over npx"),
        _rule(r"\bpip3?\s+install\b", "Package manager: this setup prefers uv over pip (uv add / uv pip install)"),
    ),
)

GIT_SAFETY = PatternGroup(
    "git_safety",
    Tier.WARN,
    (
        _rule(
            r"\bgit\s+push\b",
            "Git push: confirm the remote and branch, and that no secrets are staged",
        ),
        _rule(
            r"\bgit\s+clone\b",
            "Git clone: verify the repository source is trusted before running its code",
        ),
    ),
)

WARN_GROUPS = (DESTRUCTIVE, FORCE_PUSH, PACKAGE_MANAGER, GIT_SAFETY)

# =============================================================================
# TASK SCOPE - VOCABULARIES
# =============================================================================

AMBIGUITY_TERMS = (
    "something",
    "somehow",
    "some way",
    "maybe",
    "perhaps",
    "probably",
    "kind of",
    "sort of",
    "fix it",
    "fix this",
    "make it work",
    "improve",
    "better",
    "clean up",
    "stuff",
    "etc",
    "whatever",
)

DOMAIN_TERMS = (
    "architecture",
    "architectural",
    "security",
    "authentication",
    "authorization",
    "auth",
    "login",
    "oauth",
    "database",
    "databases",
    "migrations",
    "migration",
    "migrate",
    "deployment",
    "deploy",
    "refactoring",
    "refactor",
    "redesign",
    "rewrite",
    "performance",
    "scalability",
    "scaling",
)

RISK_TERMS = (
    "delete",
    "deletion",
    "remove all",
    "drop",
    "production",
    "publish",
    "payments",
    "payment",
    "financial",
    "irreversible",
)

SCOPE_TERMS = (
    "all files",
    "entire",
    "whole project",
    "whole app",
    "whole codebase",
    "whole repo",
    "everywhere",
    "across",
    "throughout",
    "globally",
    "global",
)

CONTINUATION_REPLIES = (
    "ok",
    "okay",
    "k",
    "yes",
    "yep",
    "yeah",
    "y",
    "no",
    "nope",
    "sure",
    "continue",
    "please continue",
    "keep going",
    "go on",
    "go ahead",
    "proceed",
    "next",
    "do it",
    "yes please",
    "sounds good",
    "looks good",
    "lgtm",
    "perfect",
    "great",
    "thanks",
    "thank you",
    "done",
)

# =============================================================================
# TASK SCOPE - SIGNAL GROUPS
# =============================================================================

MULTI_PART = SignalGroup(
    "multi_part",
    2,
    "Multi-part request",
    (
        _rule(r"^\s*\d+[.)]\s+\S", "numbered list", re.MULTILINE),
        _rule(r",\s*(?:and|then|also)\b", "chained clauses", re.IGNORECASE),
        _rule(r"^\s*[-*•]\s+\S", "bulleted list", re.MULTILINE),
    ),
)

AMBIGUITY = SignalGroup("ambiguity", 1, "Ambiguous language", (_vocabulary(AMBIGUITY_TERMS),))

DOMAIN = SignalGroup("domain", 2, "Domain complexity", (_vocabulary(DOMAIN_TERMS),))

RISK = SignalGroup("risk", 2, "High-risk operation", (_vocabulary(RISK_TERMS),))

SCOPE = SignalGroup("scope", 2, "System-wide scope", (_vocabulary(SCOPE_TERMS),))

# Evaluated in this order; indicator order follows it
KEYWORD_SIGNALS = (DOMAIN, RISK, SCOPE)

# References code by category ("the module", "this function")...
CODE_REFERENCE = _vocabulary(
    (
        "code",
        "codebase",
        "file",
        "files",
        "module",
        "modules",
        "function",
        "functions",
        "class",
        "classes",
        "component",
        "components",
        "script",
        "scripts",
        "config",
        "endpoint",
        "endpoints",
        "service",
    )
)

# ...but names no concrete path or file
CONCRETE_LOCATION = _rule(
    r"(?:[\w.~-]*/[\w./-]+"
    r"|\b[\w-]+\.(?:py|pyi|ts|tsx|js|jsx|mjs|cjs|json|md|ya?ml|toml|sh|go|rs|java|kt|rb|php"
    r"|c|h|cpp|hpp|cs|swift|css|scss|html|sql|txt|cfg|ini|env|lock)\b)",
    "concrete location",
)

# =============================================================================
# TASK SCOPE - SUPPRESSION
# =============================================================================

CONTINUATION = _rule(
    r"^(?:"
    + "|".join(_phrase(reply) for reply in CONTINUATION_REPLIES)
    + r")[\s.!]*$",
    "continuation",
    re.IGNORECASE,
)

# Wh-words always open a question; auxiliaries only when a subject follows,
# so imperatives like "Do the migration" stay tasks
INTERROGATIVE_START = _rule(
    r"^(?:(?:what|why|how|when|where|who|whom|whose|which)\b"
    r"|(?:is|are|was|were|does|do|did|can|could|would|should|will|shall|may)\s+"
    r"(?:you|we|i|it|this|that|they|there)\b)",
    "question",
    re.IGNORECASE,
)

TASK_QUESTION = _rule(
    r"^(?:can|could|would|will)\s+you\s+(?:please\s+)?(?:help\s+(?:me\s+)?)?"
    r"(?:create|fix|implement|add|build|write|update|refactor|change|make|remove|delete"
    r"|set\s+up|setup|migrate|deploy|rewrite|debug|convert|move|rename|install"
    r"|configure|optimi[sz]e|improve)\b",
    "task request",
    re.IGNORECASE,
)
