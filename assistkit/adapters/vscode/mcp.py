"""
VS Code MCP server adapter (.vscode/mcp.json).

VS Code keys servers under "servers" and always states the transport::

    {"servers": {"github": {"type": "stdio", "command": "npx", "args": [...]}}}
"""

from pathlib import Path
from typing import List

from ..shared.mcp_adapter import MCPServersAdapter


class VSCodeMCPAdapter(MCPServersAdapter):
    servers_key = "servers"
    always_write_type = True

    @property
    def format_name(self) -> str:
        return "vscode"

    def default_paths(self) -> List[Path]:
        return [Path('.vscode') / 'mcp.json']
