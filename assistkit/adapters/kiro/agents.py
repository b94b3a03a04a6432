"""
Kiro agent adapter (.kiro/agents/<name>.json).

Kiro names tools and models differently from the canonical (Claude-style)
vocabulary, and references skills as steering files.
"""

from pathlib import Path
from typing import Any, Dict, List

from assistkit.core.adapter_interface import JSONFormatAdapter
from assistkit.core.canonical_models import CanonicalAgent, ConfigType
from .skills import steering_path

MODEL_TO_KIRO = {
    'sonnet': 'claude-sonnet-4',
    'opus': 'claude-opus-4',
    'haiku': 'claude-haiku',
}
MODEL_FROM_KIRO = {kiro: model for model, kiro in MODEL_TO_KIRO.items()}

TOOL_TO_KIRO = {
    'Read': 'read',
    'Write': 'write',
    'Edit': 'write',
    'Bash': 'shell',
    'WebSearch': 'web_search',
    'WebFetch': 'web_fetch',
    'Grep': 'grep',
    'Glob': 'glob',
}
TOOL_FROM_KIRO = {
    'read': 'Read',
    'write': 'Write',
    'shell': 'Bash',
    'web_search': 'WebSearch',
    'web_fetch': 'WebFetch',
    'grep': 'Grep',
    'glob': 'Glob',
}

STEERING_PREFIX = "file://.kiro/steering/"


class KiroAgentAdapter(JSONFormatAdapter):

    @property
    def format_name(self) -> str:
        return "kiro"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.AGENT

    def default_paths(self) -> List[Path]:
        return [Path(".kiro") / "agents", Path.home() / ".kiro" / "agents"]

    def complete_from_path(self, agent: CanonicalAgent, path: Path) -> CanonicalAgent:
        if not agent.name:
            agent.name = path.stem
        return agent

    def to_canonical(self, native: Dict[str, Any]) -> CanonicalAgent:
        model = native.get('model')
        agent = CanonicalAgent(
            name=native.get('name') or '',
            description=native.get('description') or '',
            instructions=native.get('prompt') or '',
            model=MODEL_FROM_KIRO.get(model, model) if model else None,
            tools=[TOOL_FROM_KIRO.get(t, t) for t in native.get('tools') or []],
            source_format='kiro',
        )
        for resource in native.get('resources') or []:
            if resource.startswith(STEERING_PREFIX) and resource.endswith('.md'):
                agent.skills.append(resource[len(STEERING_PREFIX):-len('.md')])
            else:
                agent.dependencies.append(resource)

        if native.get('allowedTools'):
            agent.add_metadata('kiro_allowed_tools', native['allowedTools'])
        if native.get('mcpServers'):
            agent.add_metadata('kiro_mcp_servers', native['mcpServers'])
        return agent

    def from_canonical(self, agent: CanonicalAgent) -> Dict[str, Any]:
        native: Dict[str, Any] = {
            'name': agent.name,
            'description': agent.description,
        }

        tools: List[str] = []
        for tool in agent.tools:
            kiro_tool = TOOL_TO_KIRO.get(tool, tool)
            if kiro_tool not in tools:
                tools.append(kiro_tool)
        if tools:
            native['tools'] = tools
        if agent.get_metadata('kiro_allowed_tools'):
            native['allowedTools'] = agent.get_metadata('kiro_allowed_tools')

        resources = [f"file://{steering_path(skill).as_posix()}" for skill in agent.skills]
        resources.extend(agent.dependencies)
        if resources:
            native['resources'] = resources

        if agent.instructions:
            native['prompt'] = agent.instructions
        if agent.model:
            native['model'] = MODEL_TO_KIRO.get(agent.model, agent.model)
        if agent.get_metadata('kiro_mcp_servers'):
            native['mcpServers'] = agent.get_metadata('kiro_mcp_servers')
        return native
