"""
Codex MCP server adapter (.codex/mcp.json).
"""

from pathlib import Path
from typing import List

from ..shared.mcp_adapter import MCPServersAdapter


class CodexMCPAdapter(MCPServersAdapter):

    @property
    def format_name(self) -> str:
        return "codex"

    def default_paths(self) -> List[Path]:
        return [Path('.codex') / 'mcp.json']
