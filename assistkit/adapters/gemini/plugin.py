"""
Gemini CLI extension manifest adapter (gemini-extension.json).
"""

from pathlib import Path
from typing import Any, Dict, List

from assistkit.core.adapter_interface import JSONFormatAdapter
from assistkit.core.canonical_models import CanonicalPlugin, ConfigType
from ..shared.mcp_adapter import MCPServersAdapter


class GeminiMCPServers(MCPServersAdapter):
    """MCP server entries as embedded in a Gemini extension manifest."""

    @property
    def format_name(self) -> str:
        return "gemini"


class GeminiExtensionAdapter(JSONFormatAdapter):
    """
    Gemini extensions declare name, version, MCP servers and the context
    file; commands are discovered from the commands/ directory.
    """

    def __init__(self):
        super().__init__()
        self._mcp = GeminiMCPServers()

    @property
    def format_name(self) -> str:
        return "gemini"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.PLUGIN

    def default_paths(self) -> List[Path]:
        return [Path("gemini-extension.json")]

    def to_canonical(self, native: Dict[str, Any]) -> CanonicalPlugin:
        plugin = CanonicalPlugin(
            name=native['name'],
            version=native.get('version', ''),
            description=native.get('description', ''),
            source_format='gemini',
        )
        for name, raw in (native.get('mcpServers') or {}).items():
            plugin.add_mcp_server(name, self._mcp.server_to_canonical(raw))
        if native.get('contextFileName'):
            plugin.add_metadata('gemini_context_file', native['contextFileName'])
        if native.get('excludeTools'):
            plugin.add_metadata('gemini_exclude_tools', native['excludeTools'])
        return plugin

    def from_canonical(self, plugin: CanonicalPlugin) -> Dict[str, Any]:
        native: Dict[str, Any] = {
            'name': plugin.name,
            'version': plugin.version or '0.0.0',
        }
        if plugin.description:
            native['description'] = plugin.description
        if plugin.mcp_servers:
            native['mcpServers'] = self._mcp.servers_from_canonical(plugin.mcp_servers)
        if plugin.get_metadata('gemini_context_file'):
            native['contextFileName'] = plugin.get_metadata('gemini_context_file')
        if plugin.get_metadata('gemini_exclude_tools'):
            native['excludeTools'] = plugin.get_metadata('gemini_exclude_tools')
        if plugin.hooks:
            self.warn(f"Plugin '{plugin.name}': Gemini extensions do not support hooks")
        return native
