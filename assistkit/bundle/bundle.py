"""
Bundle: every artifact of a plugin, kept in canonical form until a tool is
chosen at generation time.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from assistkit.core.canonical_models import (
    CanonicalAgent,
    CanonicalCommand,
    CanonicalContext,
    CanonicalPlugin,
    CanonicalSkill,
    HooksConfig,
    MCPConfig,
    MCPServer,
)


@dataclass
class Bundle:
    plugin: CanonicalPlugin
    skills: List[CanonicalSkill] = field(default_factory=list)
    commands: List[CanonicalCommand] = field(default_factory=list)
    hooks: HooksConfig = field(default_factory=HooksConfig)
    agents: List[CanonicalAgent] = field(default_factory=list)
    context: Optional[CanonicalContext] = None
    mcp: MCPConfig = field(default_factory=MCPConfig)

    @classmethod
    def new(cls, name: str, version: str = "", description: str = "") -> "Bundle":
        return cls(plugin=CanonicalPlugin(name=name, version=version, description=description))

    def add_skill(self, skill: CanonicalSkill):
        self.skills.append(skill)

    def add_command(self, command: CanonicalCommand):
        self.commands.append(command)

    def add_agent(self, agent: CanonicalAgent):
        self.agents.append(agent)

    def set_hooks(self, hooks: HooksConfig):
        self.hooks = hooks

    def set_context(self, context: CanonicalContext):
        self.context = context

    def add_mcp_server(self, name: str, server: MCPServer):
        """Register a server in the MCP config and in the plugin manifest."""
        self.mcp.add_server(name, server)
        self.plugin.add_mcp_server(name, server)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bundle":
        """
        Build a bundle from its JSON description::

            {
              "plugin": {"name": "...", "version": "..."},
              "skills": [...], "commands": [...], "agents": [...],
              "hooks": {"hooks": {"before_command": [...]}},
              "mcpServers": {"name": {...}},
              "context": {...}
            }

        Raises KeyError/ValueError/TypeError on malformed input.
        """
        bundle = cls(plugin=CanonicalPlugin.from_dict(data['plugin']))
        for raw in data.get('skills') or []:
            bundle.add_skill(CanonicalSkill.from_dict(raw))
        for raw in data.get('commands') or []:
            bundle.add_command(CanonicalCommand.from_dict(raw))
        for raw in data.get('agents') or []:
            bundle.add_agent(CanonicalAgent.from_dict(raw))
        if data.get('hooks'):
            bundle.set_hooks(HooksConfig.from_dict(data['hooks']))
        for name, raw in (data.get('mcpServers') or {}).items():
            bundle.add_mcp_server(name, MCPServer.from_dict(raw))
        if data.get('context'):
            bundle.set_context(CanonicalContext.from_dict(data['context']))
        return bundle
