"""
Kiro MCP server adapter (.kiro/settings/mcp.json).
"""

from pathlib import Path
from typing import List

from ..shared.mcp_adapter import MCPServersAdapter


class KiroMCPAdapter(MCPServersAdapter):
    """Kiro can keep a server configured but switched off."""

    supports_disabled = True

    @property
    def format_name(self) -> str:
        return "kiro"

    def default_paths(self) -> List[Path]:
        return [Path('.kiro') / 'settings' / 'mcp.json', Path.home() / '.kiro' / 'settings' / 'mcp.json']
