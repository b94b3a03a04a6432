from .agents import CodexAgentAdapter
from .commands import CodexCommandAdapter
from .context import CodexContextAdapter
from .mcp import CodexMCPAdapter
from .skills import CodexSkillAdapter
from .validation import CodexValidationAdapter

__all__ = [
    'CodexAgentAdapter',
    'CodexCommandAdapter',
    'CodexContextAdapter',
    'CodexMCPAdapter',
    'CodexSkillAdapter',
    'CodexValidationAdapter',
]
