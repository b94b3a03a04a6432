from .mcp import VSCodeMCPAdapter

__all__ = ['VSCodeMCPAdapter']
