"""
Cursor MCP server adapter (.cursor/mcp.json).
"""

from pathlib import Path
from typing import List

from ..shared.mcp_adapter import MCPServersAdapter


class CursorMCPAdapter(MCPServersAdapter):

    @property
    def format_name(self) -> str:
        return "cursor"

    def default_paths(self) -> List[Path]:
        return [Path('.cursor') / 'mcp.json', Path.home() / '.cursor' / 'mcp.json']
