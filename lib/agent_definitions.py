"""
Agent Definitions: load agent personas from Markdown files.

Storage: $PAI_DIR/agents/<name>.md

Each file starts with a YAML frontmatter block:

    ---
    name: researcher
    description: Finds and summarizes sources
    model: sonnet
    tools: [WebSearch, Read]
    ---
    <system prompt body>

A file without frontmatter is still an agent: its stem is the name and the
whole file is the prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger("PAI")

AGENT_SUFFIX = ".md"


@dataclass
class AgentDefinition:
    name: str
    description: str = ""
    model: str = ""
    tools: list[str] = field(default_factory=list)
    prompt: str = ""
    path: Optional[Path] = None


def split_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split a document into (frontmatter dict, body).

    Malformed frontmatter is treated as absent.
    """
    if not content.startswith("---"):
        return {}, content.strip()

    parts = content.split("---", 2)
    if len(parts) < 3:
        return {}, content.strip()

    try:
        meta = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError as e:
        logger.debug(f"frontmatter parse failed: {e}")
        return {}, content.strip()
    if not isinstance(meta, dict):
        return {}, content.strip()
    return meta, parts[2].strip()


def _as_tool_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    if isinstance(value, (list, tuple)):
        return [str(t) for t in value]
    return [str(value)]


def parse_agent(path: Path) -> AgentDefinition:
    """Build an AgentDefinition from one Markdown file."""
    meta, body = split_frontmatter(path.read_text(encoding="utf-8"))
    return AgentDefinition(
        name=str(meta.get("name") or path.stem),
        description=str(meta.get("description") or ""),
        model=str(meta.get("model") or ""),
        tools=_as_tool_list(meta.get("tools")),
        prompt=body,
        path=path,
    )


def load_agents(agents_dir: Path) -> list[AgentDefinition]:
    """All agent definitions in a directory, sorted by name.

    Unreadable files are skipped.
    """
    if not agents_dir.is_dir():
        return []

    agents = []
    for path in sorted(agents_dir.glob(f"*{AGENT_SUFFIX}")):
        try:
            agents.append(parse_agent(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"skipping {path.name}: {e}")
    return sorted(agents, key=lambda a: a.name.lower())


def find_agent(agents_dir: Path, name: str) -> Optional[AgentDefinition]:
    """Look up an agent by name (case-insensitive), falling back to file stem."""
    wanted = name.lower()
    for agent in load_agents(agents_dir):
        if agent.name.lower() == wanted:
            return agent
        if agent.path is not None and agent.path.stem.lower() == wanted:
            return agent
    return None


def compose_prompt(agent: AgentDefinition, task: str) -> str:
    """Agent system prompt followed by the task to hand it."""
    sections = []
    if agent.prompt:
        sections.append(agent.prompt)
    sections.append(f"## Task\n\n{task.strip()}")
    return "\n\n".join(sections)
