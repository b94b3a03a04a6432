"""
Claude MCP server adapter (.mcp.json).
"""

from pathlib import Path
from typing import List

from ..shared.mcp_adapter import MCPServersAdapter


class ClaudeMCPAdapter(MCPServersAdapter):

    @property
    def format_name(self) -> str:
        return "claude"

    def default_paths(self) -> List[Path]:
        return [Path('.mcp.json'), Path.home() / '.claude.json']
