"""
Per-tool output layout for bundle generation.

An empty path means the tool does not support that artifact kind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ArtifactSink(Enum):
    """Where a tool expects hooks and MCP servers to live."""
    SEPARATE_FILES = "separate_files"
    INLINE_MANIFEST = "inline_manifest"


@dataclass(frozen=True)
class ToolConfig:
    plugin_dir: str = ""
    plugin_file: str = ""
    skills_dir: str = ""
    commands_dir: str = ""
    hooks_dir: str = ""
    hooks_file: str = ""
    agents_dir: str = ""
    mcp_dir: str = ""
    mcp_file: str = ""
    context_dir: str = ""
    context_file: str = ""
    sink_style: ArtifactSink = ArtifactSink.SEPARATE_FILES

    @property
    def embeds_in_manifest(self) -> bool:
        return self.sink_style is ArtifactSink.INLINE_MANIFEST


SUPPORTED_TOOLS = ("claude", "kiro", "gemini", "cursor", "codex", "windsurf")

DEFAULT_TOOL_CONFIGS: Dict[str, ToolConfig] = {
    "claude": ToolConfig(
        plugin_dir=".claude-plugin",
        plugin_file="plugin.json",
        skills_dir="skills",
        commands_dir="commands",
        agents_dir="agents",
        context_dir=".",
        context_file="CLAUDE.md",
        sink_style=ArtifactSink.INLINE_MANIFEST,
    ),
    "kiro": ToolConfig(
        skills_dir=".kiro/steering",
        agents_dir=".kiro/agents",
        mcp_dir=".kiro/settings",
        mcp_file="mcp.json",
    ),
    "gemini": ToolConfig(
        plugin_dir=".",
        plugin_file="gemini-extension.json",
        commands_dir="commands",
        agents_dir="agents",
    ),
    "cursor": ToolConfig(
        hooks_dir=".cursor",
        hooks_file="hooks.json",
        mcp_dir=".cursor",
        mcp_file="mcp.json",
        context_dir=".",
        context_file=".cursorrules",
    ),
    "codex": ToolConfig(
        skills_dir="skills",
        commands_dir="prompts",
        agents_dir="agents",
        mcp_dir=".codex",
        mcp_file="mcp.json",
        context_dir=".",
        context_file="AGENTS.md",
    ),
    "windsurf": ToolConfig(
        hooks_dir=".windsurf",
        hooks_file="hooks.json",
    ),
    "vscode": ToolConfig(
        mcp_dir=".vscode",
        mcp_file="mcp.json",
    ),
}
