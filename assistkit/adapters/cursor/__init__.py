from .context import CursorContextAdapter
from .hooks import CursorHooksAdapter
from .mcp import CursorMCPAdapter

__all__ = ['CursorContextAdapter', 'CursorHooksAdapter', 'CursorMCPAdapter']
