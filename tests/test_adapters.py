"""
Unit tests for the artifact adapters.

Tests cover:
- Claude, Kiro, Gemini and Codex agent conversion (frontmatter, tool/model mapping)
- Skill adapters (SKILL.md, Kiro steering) and write_skill_dir
- Command adapters (Claude/Codex Markdown, Gemini TOML)
- MCP server files, plugin manifests and context rendering
"""

import json

import pytest
import tomli

from assistkit.adapters import (
    ClaudeAgentAdapter,
    ClaudeCommandAdapter,
    ClaudeContextAdapter,
    ClaudeMCPAdapter,
    ClaudePluginAdapter,
    ClaudeSkillAdapter,
    CodexAgentAdapter,
    CodexCommandAdapter,
    CodexSkillAdapter,
    CursorContextAdapter,
    GeminiAgentAdapter,
    GeminiCommandAdapter,
    GeminiExtensionAdapter,
    KiroAgentAdapter,
    KiroMCPAdapter,
    KiroSkillAdapter,
    VSCodeMCPAdapter,
)
from assistkit.adapters.claude.commands import parse_argument_hint
from assistkit.adapters.kiro.skills import to_kebab_case, to_title_case
from assistkit.adapters.shared.frontmatter import parse_list, split_frontmatter
from assistkit.core.canonical_models import (
    CanonicalAgent,
    CanonicalCommand,
    CanonicalContext,
    CanonicalPlugin,
    CanonicalSkill,
    CommandArgument,
    MCPConfig,
    MCPServer,
)
from assistkit.core.errors import MarshalError, ParseError


class TestFrontmatter:
    """Tests for the shared frontmatter helpers."""

    def test_split(self):
        fields, body = split_frontmatter("---\nname: a\ntools: [Read, Grep]\n---\n\nBody text\n")
        assert fields == {'name': 'a', 'tools': ['Read', 'Grep']}
        assert body == "Body text"

    def test_no_frontmatter(self):
        fields, body = split_frontmatter("Just instructions\n")
        assert fields is None
        assert body == "Just instructions"

    def test_empty_frontmatter(self):
        fields, body = split_frontmatter("---\n---\nBody")
        assert fields == {}
        assert body == "Body"

    def test_non_mapping_frontmatter(self):
        with pytest.raises(ValueError):
            split_frontmatter("---\n- a\n- b\n---\nBody")

    def test_parse_list(self):
        assert parse_list("Read, Grep") == ["Read", "Grep"]
        assert parse_list("[Read, Grep]") == ["Read", "Grep"]
        assert parse_list(["Read", " Grep "]) == ["Read", "Grep"]
        assert parse_list("") == []
        assert parse_list(None) == []


class TestClaudeAgentAdapter:
    """Tests for ClaudeAgentAdapter."""

    @pytest.fixture
    def adapter(self):
        return ClaudeAgentAdapter()

    @pytest.fixture
    def sample_claude_content(self):
        return b"""---
name: reviewer
description: Reviews code changes
tools: Read, Grep, Glob
model: Sonnet
permissionMode: acceptEdits
skills: [lint, style]
---

You review code.

Be concise.
"""

    def test_format_properties(self, adapter):
        assert adapter.format_name == 'claude'
        assert adapter.file_extension == '.md'

    def test_parse(self, adapter, sample_claude_content):
        agent = adapter.parse(sample_claude_content)
        assert agent.name == 'reviewer'
        assert agent.description == 'Reviews code changes'
        assert agent.tools == ['Read', 'Grep', 'Glob']
        assert agent.model == 'sonnet'
        assert agent.skills == ['lint', 'style']
        assert agent.instructions == "You review code.\n\nBe concise."
        assert agent.get_metadata('claude_permission_mode') == 'acceptEdits'
        assert agent.source_format == 'claude'

    def test_parse_without_frontmatter_fails(self, adapter):
        with pytest.raises(ParseError, match="No YAML frontmatter"):
            adapter.parse(b"Just a body")

    def test_parse_bad_yaml(self, adapter):
        with pytest.raises(ParseError):
            adapter.parse(b"---\nname: [unclosed\n---\nbody")

    def test_marshal(self, adapter):
        agent = CanonicalAgent(name="planner", description="Plans", instructions="Plan well.",
                               tools=["Read", "Write"], model="opus")
        text = adapter.marshal(agent).decode()
        assert text.startswith("---\nname: planner\n")
        assert "tools: Read, Write\n" in text
        assert "model: opus\n" in text
        assert text.endswith("---\n\nPlan well.\n")

    def test_round_trip(self, adapter, sample_claude_content):
        agent = adapter.parse(sample_claude_content)
        again = adapter.parse(adapter.marshal(agent))
        assert again.name == agent.name
        assert again.tools == agent.tools
        assert again.skills == agent.skills
        assert again.instructions == agent.instructions
        assert again.get_metadata('claude_permission_mode') == 'acceptEdits'

    def test_name_falls_back_to_file_stem(self, adapter, tmp_path):
        path = tmp_path / "helper.md"
        path.write_text("---\ndescription: Helps\n---\nHelp.\n")
        assert adapter.read_file(path).name == 'helper'

    def test_dependencies_warned(self, adapter):
        adapter.marshal(CanonicalAgent(name="a", dependencies=["git"]))
        assert adapter.get_conversion_warnings()


class TestKiroAgentAdapter:
    """Tests for KiroAgentAdapter."""

    @pytest.fixture
    def adapter(self):
        return KiroAgentAdapter()

    def test_from_canonical(self, adapter):
        agent = CanonicalAgent(
            name="reviewer", description="Reviews", instructions="Review it.",
            model="sonnet", tools=["Read", "Edit", "Write", "Bash", "Custom"],
            skills=["Code Review"], dependencies=["file://README.md"],
        )
        native = adapter.from_canonical(agent)
        assert native['tools'] == ['read', 'write', 'shell', 'Custom']
        assert native['model'] == 'claude-sonnet-4'
        assert native['prompt'] == 'Review it.'
        assert native['resources'] == ['file://.kiro/steering/code-review.md', 'file://README.md']

    def test_to_canonical(self, adapter):
        native = {
            "name": "reviewer",
            "prompt": "Review it.",
            "model": "claude-haiku",
            "tools": ["read", "shell", "web_fetch"],
            "allowedTools": ["read"],
            "resources": ["file://.kiro/steering/lint.md", "file://docs/a.md"],
        }
        agent = adapter.parse(json.dumps(native).encode())
        assert agent.model == 'haiku'
        assert agent.tools == ['Read', 'Bash', 'WebFetch']
        assert agent.skills == ['lint']
        assert agent.dependencies == ['file://docs/a.md']
        assert agent.get_metadata('kiro_allowed_tools') == ['read']

    def test_claude_to_kiro(self, adapter):
        claude = ClaudeAgentAdapter()
        agent = claude.parse(b"---\nname: a\ndescription: d\ntools: Bash\nmodel: opus\n---\nDo it.\n")
        native = json.loads(adapter.marshal(agent))
        assert native == {
            "name": "a",
            "description": "d",
            "tools": ["shell"],
            "prompt": "Do it.",
            "model": "claude-opus-4",
        }


class TestGeminiAgentAdapter:
    """Tests for GeminiAgentAdapter."""

    @pytest.fixture
    def adapter(self):
        return GeminiAgentAdapter()

    @pytest.fixture
    def agent(self):
        return CanonicalAgent(
            name="reviewer", description="Reviews", instructions="Review it.\nThen report.",
            model="gemini-2.5-pro", tools=["Read", "Bash", "Custom"],
        )

    def test_format_properties(self, adapter):
        assert adapter.format_name == 'gemini'
        assert adapter.file_extension == '.toml'

    def test_marshal(self, adapter, agent):
        native = tomli.loads(adapter.marshal(agent).decode())
        assert native == {
            "name": "reviewer",
            "description": "Reviews",
            "model": "gemini-2.5-pro",
            "tools": ["read_file", "run_shell_command", "Custom"],
            "prompt": "Review it.\nThen report.",
        }
        assert adapter.get_conversion_warnings() == []

    def test_round_trip(self, adapter, agent, tmp_path):
        path = tmp_path / "reviewer.toml"
        adapter.write_file(agent, path)
        restored = adapter.read_file(path)
        assert restored.tools == agent.tools
        assert restored.instructions == agent.instructions
        assert restored.source_format == 'gemini'

    def test_unsupported_fields_warned(self, adapter, agent):
        agent.skills = ["lint"]
        agent.dependencies = ["jq"]
        adapter.marshal(agent)
        assert len(adapter.get_conversion_warnings()) == 2

    def test_name_from_file(self, adapter, tmp_path):
        path = tmp_path / "helper.toml"
        path.write_text('prompt = "Help."\n')
        assert adapter.read_file(path).name == "helper"

    def test_invalid_toml(self, adapter):
        with pytest.raises(ParseError):
            adapter.parse(b"name = ")
        with pytest.raises(ParseError):
            adapter.parse(b'tools = "Read"\n')


class TestCodexAgentAdapter:
    """Tests for CodexAgentAdapter."""

    def test_drops_claude_only_keys(self):
        adapter = CodexAgentAdapter()
        agent = CanonicalAgent(name="a", description="d", instructions="Do it.", tools=["Read"], skills=["lint"])
        agent.add_metadata('claude_permission_mode', 'plan')

        fields, body = split_frontmatter(adapter.marshal(agent).decode())
        assert fields == {"name": "a", "description": "d", "tools": "Read"}
        assert body == "Do it."
        assert len(adapter.get_conversion_warnings()) == 2

    def test_parse(self):
        agent = CodexAgentAdapter().parse(b"---\nname: a\ntools: Read, Bash\nmodel: Opus\n---\nDo it.\n")
        assert agent.tools == ["Read", "Bash"]
        assert agent.model == "opus"
        assert agent.source_format == 'codex'


class TestSkillAdapters:
    """Tests for skill adapters."""

    @pytest.fixture
    def skill(self):
        return CanonicalSkill(
            name="code-review",
            description="Review code for defects",
            instructions="Check tests first.",
            triggers=["review", "audit"],
            scripts=["scripts/run.sh"],
        )

    def test_claude_write_skill_dir(self, skill, tmp_path):
        adapter = ClaudeSkillAdapter()
        path = adapter.write_skill_dir(skill, tmp_path / "skills")
        assert path == tmp_path / "skills" / "code-review" / "SKILL.md"

        again = adapter.read_file(path)
        assert again.name == "code-review"
        assert again.triggers == ["review", "audit"]
        assert again.scripts == ["scripts/run.sh"]
        assert again.instructions == "Check tests first."

    def test_claude_skill_name_from_directory(self, tmp_path):
        path = tmp_path / "deploy" / "SKILL.md"
        path.parent.mkdir()
        path.write_text("---\ndescription: Deploys\n---\nShip it.\n")
        assert ClaudeSkillAdapter().read_file(path).name == "deploy"

    def test_codex_uses_same_layout(self, skill, tmp_path):
        adapter = CodexSkillAdapter()
        assert adapter.format_name == 'codex'
        path = adapter.write_skill_dir(skill, tmp_path)
        assert path.name == "SKILL.md"
        assert path.read_bytes() == ClaudeSkillAdapter().marshal(skill)

    def test_kiro_steering(self, skill, tmp_path):
        adapter = KiroSkillAdapter()
        text = adapter.marshal(skill).decode()
        assert text == "# Code Review\n\nReview code for defects\n\nCheck tests first.\n"
        assert adapter.get_conversion_warnings()

        path = adapter.write_skill_dir(skill, tmp_path)
        assert path == tmp_path / "code-review.md"
        again = adapter.read_file(path)
        assert again.name == "code-review"
        assert again.description == "Review code for defects"
        assert again.instructions == "Check tests first."

    def test_case_helpers(self):
        assert to_kebab_case("Code Review") == "code-review"
        assert to_kebab_case("codeReview") == "code-review"
        assert to_kebab_case("code_review") == "code-review"
        assert to_title_case("code-review") == "Code Review"


class TestCommandAdapters:
    """Tests for command adapters."""

    @pytest.fixture
    def command(self):
        return CanonicalCommand(
            name="review",
            description="Review a file",
            prompt="Review $ARGUMENTS carefully.",
            arguments=[CommandArgument(name="file", required=True), CommandArgument(name="focus")],
            allowed_tools=["Read", "Grep"],
        )

    def test_parse_argument_hint(self):
        args = parse_argument_hint("<file> [focus]")
        assert [(a.name, a.required) for a in args] == [("file", True), ("focus", False)]
        assert parse_argument_hint("a file name") is None

    def test_claude_round_trip(self, command, tmp_path):
        adapter = ClaudeCommandAdapter()
        path = tmp_path / "review.md"
        adapter.write_file(command, path)
        text = path.read_text()
        assert "argument-hint: <file> [focus]\n" in text
        assert "allowed-tools: Read, Grep\n" in text

        again = adapter.read_file(path)
        assert again.name == "review"
        assert again.argument_hint() == "<file> [focus]"
        assert again.allowed_tools == ["Read", "Grep"]
        assert again.prompt == command.prompt

    def test_claude_free_text_hint_preserved(self):
        adapter = ClaudeCommandAdapter()
        command = adapter.parse(b"---\nargument-hint: any text\n---\nDo $ARGUMENTS\n")
        assert command.arguments == []
        assert b"argument-hint: any text" in adapter.marshal(command)

    def test_claude_plain_markdown(self):
        adapter = ClaudeCommandAdapter()
        assert adapter.marshal(CanonicalCommand(name="x", prompt="Just do it.")) == b"Just do it.\n"
        assert adapter.parse(b"Just do it.\n").prompt == "Just do it."

    def test_codex_drops_unsupported_keys(self, command):
        adapter = CodexCommandAdapter()
        text = adapter.marshal(command).decode()
        assert "allowed-tools" not in text
        assert "argument-hint" in text
        assert len(adapter.get_conversion_warnings()) == 1

    def test_gemini_toml(self, command, tmp_path):
        adapter = GeminiCommandAdapter()
        assert adapter.file_extension == '.toml'
        text = adapter.marshal(command).decode()
        assert 'description = "Review a file"' in text
        assert "{{args}}" in text
        assert "$ARGUMENTS" not in text

        path = tmp_path / "review.toml"
        adapter.write_file(command, path)
        again = adapter.read_file(path)
        assert again.name == "review"
        assert again.prompt == "Review $ARGUMENTS carefully."

    def test_gemini_invalid_toml(self):
        with pytest.raises(ParseError) as exc_info:
            GeminiCommandAdapter().parse(b"prompt = ")
        assert exc_info.value.format == 'gemini'


class TestMCPAdapters:
    """Tests for MCP server adapters."""

    @pytest.fixture
    def config(self):
        cfg = MCPConfig()
        cfg.add_server("github", MCPServer(command="npx", args=["-y", "gh"], env={"TOKEN": "x"}))
        cfg.add_server("remote", MCPServer(url="https://mcp.example.com", transport="http",
                                           headers={"Authorization": "Bearer t"}))
        return cfg

    def test_claude_shape(self, config):
        native = json.loads(ClaudeMCPAdapter().marshal(config))
        assert native["mcpServers"]["github"] == {"command": "npx", "args": ["-y", "gh"], "env": {"TOKEN": "x"}}
        assert native["mcpServers"]["remote"]["type"] == "http"

    def test_vscode_shape(self, config):
        native = json.loads(VSCodeMCPAdapter().marshal(config))
        assert set(native) == {"servers"}
        assert native["servers"]["github"]["type"] == "stdio"

    def test_round_trip(self, config):
        adapter = KiroMCPAdapter()
        again = adapter.parse(adapter.marshal(config))
        assert again.servers["github"].args == ["-y", "gh"]
        assert again.servers["remote"].url == "https://mcp.example.com"
        assert again.servers["remote"].transport == "http"

    def test_disabled_servers(self):
        cfg = MCPConfig(servers={"off": MCPServer(command="x", enabled=False)})
        assert json.loads(KiroMCPAdapter().marshal(cfg))["mcpServers"]["off"]["disabled"] is True

        claude = ClaudeMCPAdapter()
        assert "disabled" not in json.loads(claude.marshal(cfg))["mcpServers"]["off"]
        assert claude.get_conversion_warnings()


class TestPluginAdapters:
    """Tests for plugin manifest adapters."""

    @pytest.fixture
    def plugin(self):
        plugin = CanonicalPlugin(name="toolkit", version="1.2.0", description="Tools", author="Dev",
                                 keywords=["ai"], skills="skills", commands="commands")
        plugin.add_mcp_server("db", MCPServer(command="db-mcp"))
        return plugin

    def test_claude_manifest(self, plugin):
        native = ClaudePluginAdapter().from_canonical(plugin)
        assert native["author"] == {"name": "Dev"}
        assert native["skills"] == "./skills/"
        assert native["commands"] == "./commands/"
        assert "agents" not in native
        assert native["mcpServers"] == {"db": {"command": "db-mcp"}}

    def test_claude_round_trip(self, plugin):
        adapter = ClaudePluginAdapter()
        again = adapter.parse(adapter.marshal(plugin))
        assert again.skills == "skills"
        assert again.author == "Dev"
        assert again.mcp_servers["db"].command == "db-mcp"

    def test_gemini_manifest(self, plugin):
        native = GeminiExtensionAdapter().from_canonical(plugin)
        assert native == {
            "name": "toolkit",
            "version": "1.2.0",
            "description": "Tools",
            "mcpServers": {"db": {"command": "db-mcp"}},
        }

    def test_missing_name(self):
        with pytest.raises(ParseError):
            ClaudePluginAdapter().parse(b'{"version": "1"}')


class TestContextAdapters:
    """Tests for context renderers."""

    @pytest.fixture
    def context(self):
        ctx = CanonicalContext(name="assistkit", description="Config converter",
                               version="0.1.0", language="python")
        ctx.add_package("assistkit/core", "Canonical models")
        ctx.set_command("deploy", "make deploy")
        ctx.set_command("test", "pytest")
        ctx.add_convention("Type hints on public functions")
        ctx.add_note("Never commit secrets", severity="critical")
        return ctx

    def test_claude_render(self, context):
        text = ClaudeContextAdapter().marshal(context).decode()
        assert text.startswith("# assistkit\n\nConfig converter\n\n**Version:** 0.1.0 | **Language:** python\n")
        assert "| `assistkit/core` | Canonical models |" in text
        assert text.index("# test") < text.index("# deploy")
        assert "- **CRITICAL:** Never commit secrets" in text
        assert text.endswith("---\n*Generated from CONTEXT.json*\n")

    def test_cursor_has_no_footer(self, context):
        text = CursorContextAdapter().marshal(context).decode()
        assert "Generated from CONTEXT.json" not in text

    def test_parse_canonical_json(self, context):
        adapter = ClaudeContextAdapter()
        data = json.dumps(context.to_dict()).encode()
        again = adapter.parse(data)
        assert again.commands == context.commands
        assert again.notes[0].severity == "critical"

    def test_missing_name(self):
        with pytest.raises(MarshalError):
            ClaudeContextAdapter().marshal(CanonicalContext(name=""))
