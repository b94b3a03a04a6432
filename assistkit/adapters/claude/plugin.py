"""
Claude Code plugin manifest adapter (.claude-plugin/plugin.json).

The manifest points at component directories and may carry hooks and MCP
servers inline, which is how bundles are emitted for Claude.
"""

from pathlib import Path
from typing import Any, Dict, List

from assistkit.core.adapter_interface import JSONFormatAdapter
from assistkit.core.canonical_models import CanonicalPlugin, ConfigType
from .mcp import ClaudeMCPAdapter

COMPONENT_FIELDS = ('commands', 'agents', 'skills')


def to_manifest_path(directory: str) -> str:
    """'skills' -> './skills/'."""
    return f"./{from_manifest_path(directory)}/"


def from_manifest_path(value: str) -> str:
    """'./skills/' -> 'skills'."""
    if value.startswith('./'):
        value = value[2:]
    return value.rstrip('/')


class ClaudePluginAdapter(JSONFormatAdapter):

    def __init__(self):
        super().__init__()
        self._mcp = ClaudeMCPAdapter()

    @property
    def format_name(self) -> str:
        return "claude"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.PLUGIN

    def default_paths(self) -> List[Path]:
        return [Path(".claude-plugin") / "plugin.json"]

    def to_canonical(self, native: Dict[str, Any]) -> CanonicalPlugin:
        author = native.get('author') or ''
        if isinstance(author, dict):
            author = author.get('name', '')

        plugin = CanonicalPlugin(
            name=native['name'],
            version=native.get('version', ''),
            description=native.get('description', ''),
            author=author,
            homepage=native.get('homepage', ''),
            repository=native.get('repository', ''),
            license=native.get('license', ''),
            keywords=list(native.get('keywords') or []),
            source_format='claude',
        )
        for field_name in COMPONENT_FIELDS:
            if isinstance(native.get(field_name), str):
                setattr(plugin, field_name, from_manifest_path(native[field_name]))

        hooks = native.get('hooks')
        if isinstance(hooks, str):
            plugin.hooks = hooks
        elif isinstance(hooks, dict):
            plugin.add_metadata('claude_inline_hooks', hooks)

        for name, raw in (native.get('mcpServers') or {}).items():
            plugin.add_mcp_server(name, self._mcp.server_to_canonical(raw))
        return plugin

    def from_canonical(self, plugin: CanonicalPlugin) -> Dict[str, Any]:
        native: Dict[str, Any] = {'name': plugin.name}
        if plugin.version:
            native['version'] = plugin.version
        if plugin.description:
            native['description'] = plugin.description
        if plugin.author:
            native['author'] = {'name': plugin.author}
        for key in ('homepage', 'repository', 'license'):
            if getattr(plugin, key):
                native[key] = getattr(plugin, key)
        if plugin.keywords:
            native['keywords'] = list(plugin.keywords)

        for field_name in COMPONENT_FIELDS:
            directory = getattr(plugin, field_name)
            if directory:
                native[field_name] = to_manifest_path(directory)

        if plugin.hooks:
            native['hooks'] = plugin.hooks
        elif plugin.get_metadata('claude_inline_hooks'):
            native['hooks'] = plugin.get_metadata('claude_inline_hooks')

        if plugin.mcp_servers:
            native['mcpServers'] = self._mcp.servers_from_canonical(plugin.mcp_servers)
        return native
