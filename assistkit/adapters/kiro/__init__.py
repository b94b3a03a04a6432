from .agents import KiroAgentAdapter
from .mcp import KiroMCPAdapter
from .skills import KiroSkillAdapter

__all__ = ['KiroAgentAdapter', 'KiroMCPAdapter', 'KiroSkillAdapter']
