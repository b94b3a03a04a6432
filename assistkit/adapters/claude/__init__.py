"""Claude Code adapters: hooks, agents, skills, commands, MCP, plugin, context, validation."""

from .agents import ClaudeAgentAdapter
from .commands import ClaudeCommandAdapter
from .context import ClaudeContextAdapter
from .hooks import ClaudeHooksAdapter
from .mcp import ClaudeMCPAdapter
from .plugin import ClaudePluginAdapter
from .skills import ClaudeSkillAdapter
from .validation import ClaudeValidationAdapter

__all__ = [
    'ClaudeAgentAdapter',
    'ClaudeCommandAdapter',
    'ClaudeContextAdapter',
    'ClaudeHooksAdapter',
    'ClaudeMCPAdapter',
    'ClaudePluginAdapter',
    'ClaudeSkillAdapter',
    'ClaudeValidationAdapter',
]
