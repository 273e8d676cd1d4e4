"""Tests for agent definitions and the spawn_agent CLI."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from agent_definitions import (
    compose_prompt,
    find_agent,
    load_agents,
    parse_agent,
    split_frontmatter,
)
from ops.spawn_agent import main

RESEARCHER = """---
name: researcher
description: Finds and summarizes sources
model: sonnet
tools: [WebSearch, Read]
---
You are a careful researcher. Cite everything.
"""


@pytest.fixture
def agents_dir(tmp_path):
    directory = tmp_path / "agents"
    directory.mkdir()
    (directory / "researcher.md").write_text(RESEARCHER)
    (directory / "plain.md").write_text("Just a prompt, no metadata.\n")
    (directory / "notes.txt").write_text("ignored")
    return directory


class TestFrontmatter:
    """YAML frontmatter parsing."""

    def test_split(self):
        meta, body = split_frontmatter(RESEARCHER)

        assert meta["tools"] == ["WebSearch", "Read"]
        assert body == "You are a careful researcher. Cite everything."

    def test_no_frontmatter(self):
        assert split_frontmatter("hello") == ({}, "hello")

    def test_malformed_yaml_is_ignored(self):
        meta, body = split_frontmatter("---\nname: [unclosed\n---\nbody")

        assert meta == {}
        assert "body" in body

    def test_comma_separated_tools(self, tmp_path):
        path = tmp_path / "coder.md"
        path.write_text("---\ntools: Read, Edit ,Bash\n---\nCode.")

        agent = parse_agent(path)

        assert agent.name == "coder"
        assert agent.tools == ["Read", "Edit", "Bash"]


class TestLoading:
    """Directory scans and lookup."""

    def test_load_agents_sorted(self, agents_dir):
        names = [agent.name for agent in load_agents(agents_dir)]

        assert names == ["plain", "researcher"]

    def test_missing_directory(self, tmp_path):
        assert load_agents(tmp_path / "nope") == []

    def test_find_is_case_insensitive(self, agents_dir):
        agent = find_agent(agents_dir, "Researcher")

        assert agent is not None
        assert agent.model == "sonnet"

    def test_find_missing(self, agents_dir):
        assert find_agent(agents_dir, "ghost") is None

    def test_compose_prompt(self, agents_dir):
        prompt = compose_prompt(find_agent(agents_dir, "researcher"), "  survey hook frameworks ")

        assert prompt.startswith("You are a careful researcher.")
        assert prompt.endswith("## Task\n\nsurvey hook frameworks")


class TestCli:
    """pai-agent subcommands."""

    def test_list(self, agents_dir, capsys):
        assert main(["--agents-dir", str(agents_dir), "list"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "plain"
        assert lines[1].startswith("researcher")
        assert lines[1].endswith("Finds and summarizes sources")

    def test_list_json(self, agents_dir, capsys):
        main(["--agents-dir", str(agents_dir), "list", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert {"name": "researcher", "description": "Finds and summarizes sources"} in data

    def test_list_defaults_to_pai_dir(self, pai_dir, capsys):
        (pai_dir / "agents").mkdir()
        (pai_dir / "agents" / "helper.md").write_text("Help.")

        main(["list"])

        assert capsys.readouterr().out.strip() == "helper"

    def test_list_empty(self, tmp_path, capsys):
        assert main(["--agents-dir", str(tmp_path / "none"), "list"]) == 0
        assert "No agents found" in capsys.readouterr().out

    def test_info(self, agents_dir, capsys):
        assert main(["--agents-dir", str(agents_dir), "info", "researcher"]) == 0

        out = capsys.readouterr().out
        assert "Model:       sonnet" in out
        assert "Tools:       WebSearch, Read" in out

    def test_info_missing_agent(self, agents_dir):
        assert main(["--agents-dir", str(agents_dir), "info", "ghost"]) == 1

    def test_prompt(self, agents_dir, capsys):
        assert main(["--agents-dir", str(agents_dir), "prompt", "plain", "fix", "the", "build"]) == 0

        assert capsys.readouterr().out.strip().endswith("## Task\n\nfix the build")

    def test_prompt_missing_agent(self, agents_dir):
        assert main(["--agents-dir", str(agents_dir), "prompt", "ghost", "task"]) == 1
