#!/usr/bin/env python3
"""
Spawn Agent: Inspect agent definitions and build the prompt to launch one.

Usage:
    spawn_agent.py list
    spawn_agent.py info <name>
    spawn_agent.py prompt <name> <task...>

Agents live in $PAI_DIR/agents/*.md (override with --agents-dir or the
"paths.agents_dir" hook setting).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add lib and hooks to path
_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT / "lib"))
sys.path.insert(0, str(_ROOT / "hooks"))

from core import EXIT_OK, fail, handle_debug, logger, setup_script  # noqa: E402
from agent_definitions import compose_prompt, find_agent, load_agents  # noqa: E402
from _config import load_settings  # noqa: E402


def cmd_list(agents_dir: Path, as_json: bool = False) -> int:
    agents = load_agents(agents_dir)
    if as_json:
        print(json.dumps([{"name": a.name, "description": a.description} for a in agents]))
        return EXIT_OK

    if not agents:
        print(f"No agents found in {agents_dir}")
        return EXIT_OK

    width = max(len(a.name) for a in agents)
    for agent in agents:
        print(f"{agent.name:<{width}}  {agent.description}".rstrip())
    return EXIT_OK


def cmd_info(agents_dir: Path, name: str) -> int:
    agent = find_agent(agents_dir, name)
    if agent is None:
        return fail(f"Agent not found: {name}")

    print(f"Name:        {agent.name}")
    print(f"Description: {agent.description or '-'}")
    print(f"Model:       {agent.model or 'default'}")
    print(f"Tools:       {', '.join(agent.tools) if agent.tools else 'all'}")
    print(f"File:        {agent.path}")
    return EXIT_OK


def cmd_prompt(agents_dir: Path, name: str, task: str) -> int:
    agent = find_agent(agents_dir, name)
    if agent is None:
        return fail(f"Agent not found: {name}")
    if not task.strip():
        return fail("Task text is required")

    print(compose_prompt(agent, task))
    return EXIT_OK


def build_parser():
    parser = setup_script("Inspect agent definitions and build launch prompts")
    parser.add_argument(
        "--agents-dir",
        type=Path,
        default=None,
        help="Directory of agent .md files (default: $PAI_DIR/agents)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List available agents")
    list_parser.add_argument("--json", action="store_true", help="Output JSON")

    info_parser = subparsers.add_parser("info", help="Show one agent's definition")
    info_parser.add_argument("name")

    prompt_parser = subparsers.add_parser("prompt", help="Print the launch prompt")
    prompt_parser.add_argument("name")
    prompt_parser.add_argument("task", nargs="+")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    handle_debug(args)

    agents_dir = args.agents_dir or load_settings().agents_dir
    logger.debug(f"agents dir: {agents_dir}")

    if args.command == "list":
        return cmd_list(agents_dir, as_json=args.json)
    if args.command == "info":
        return cmd_info(agents_dir, args.name)
    return cmd_prompt(agents_dir, args.name, " ".join(args.task))


if __name__ == "__main__":
    sys.exit(main())
