"""
Shared base for MCP server configuration files.

Most tools use the same shape under different paths::

    {"mcpServers": {"github": {"command": "npx", "args": ["-y", "server-github"]}}}

Subclasses set the top-level key and whether the transport type is always
written.
"""

from typing import Any, Dict

from assistkit.core.adapter_interface import JSONFormatAdapter
from assistkit.core.canonical_models import (
    TRANSPORT_HTTP,
    TRANSPORT_STDIO,
    ConfigType,
    MCPConfig,
    MCPServer,
)


class MCPServersAdapter(JSONFormatAdapter):
    servers_key = "mcpServers"
    always_write_type = False
    supports_disabled = False

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.MCP

    def to_canonical(self, native: Dict[str, Any]) -> MCPConfig:
        cfg = MCPConfig()
        for name, raw in (native.get(self.servers_key) or {}).items():
            cfg.add_server(name, self.server_to_canonical(raw))
        return cfg

    def from_canonical(self, cfg: MCPConfig) -> Dict[str, Any]:
        return {self.servers_key: self.servers_from_canonical(cfg.servers)}

    def servers_from_canonical(self, servers: Dict[str, MCPServer]) -> Dict[str, Any]:
        return {name: self.server_from_canonical(name, server) for name, server in servers.items()}

    def server_to_canonical(self, raw: Dict[str, Any]) -> MCPServer:
        url = raw.get('url') or ''
        return MCPServer(
            command=raw.get('command') or '',
            args=list(raw.get('args') or []),
            env=dict(raw.get('env') or {}),
            cwd=raw.get('cwd') or '',
            url=url,
            headers=dict(raw.get('headers') or {}),
            transport=raw.get('type') or (TRANSPORT_HTTP if url else TRANSPORT_STDIO),
            enabled=not raw.get('disabled', False),
        )

    def server_from_canonical(self, name: str, server: MCPServer) -> Dict[str, Any]:
        native: Dict[str, Any] = {}
        if self.always_write_type or server.transport != TRANSPORT_STDIO:
            native['type'] = server.transport
        if server.url:
            native['url'] = server.url
            if server.headers:
                native['headers'] = dict(server.headers)
        else:
            native['command'] = server.command
            if server.args:
                native['args'] = list(server.args)
            if server.cwd:
                native['cwd'] = server.cwd
        if server.env:
            native['env'] = dict(server.env)
        if not server.is_enabled():
            if self.supports_disabled:
                native['disabled'] = True
            else:
                self.warn(f"MCP server '{name}': disabled flag is not supported by {self.format_name}")
        return native
