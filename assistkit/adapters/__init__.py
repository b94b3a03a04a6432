"""
Format adapters for converting between tool-specific formats and the
canonical representation.

Each tool package holds one adapter per artifact kind it supports. Every
adapter knows how to:
- Parse the tool's native format into a canonical model
- Marshal a canonical model back into the tool's format
- Drop (and report) what the tool cannot express

Adding a new adapter:
1. Implement FormatAdapter (or JSONFormatAdapter / MarkdownFormatAdapter)
2. Register it in build_registries() below
"""

from typing import Dict

from assistkit.core.canonical_models import ConfigType
from assistkit.core.registry import FormatRegistry
from .claude import (
    ClaudeAgentAdapter,
    ClaudeCommandAdapter,
    ClaudeContextAdapter,
    ClaudeHooksAdapter,
    ClaudeMCPAdapter,
    ClaudePluginAdapter,
    ClaudeSkillAdapter,
    ClaudeValidationAdapter,
)
from .codex import (
    CodexAgentAdapter,
    CodexCommandAdapter,
    CodexContextAdapter,
    CodexMCPAdapter,
    CodexSkillAdapter,
    CodexValidationAdapter,
)
from .cursor import CursorContextAdapter, CursorHooksAdapter, CursorMCPAdapter
from .gemini import GeminiAgentAdapter, GeminiCommandAdapter, GeminiExtensionAdapter, GeminiValidationAdapter
from .kiro import KiroAgentAdapter, KiroMCPAdapter, KiroSkillAdapter
from .vscode import VSCodeMCPAdapter
from .windsurf import WindsurfHooksAdapter

Registries = Dict[ConfigType, FormatRegistry]


def build_registries() -> Registries:
    """
    Create one registry per artifact kind and register every adapter.

    This is the only place adapters are registered; callers get fresh
    registries and pass them to whatever needs lookups.
    """
    registries: Registries = {config_type: FormatRegistry(config_type) for config_type in ConfigType}

    hooks = registries[ConfigType.HOOKS]
    hooks.register(ClaudeHooksAdapter())
    hooks.register(CursorHooksAdapter())
    hooks.register(WindsurfHooksAdapter())

    agents = registries[ConfigType.AGENT]
    agents.register(ClaudeAgentAdapter())
    agents.register(CodexAgentAdapter())
    agents.register(GeminiAgentAdapter())
    agents.register(KiroAgentAdapter())

    skills = registries[ConfigType.SKILL]
    skills.register(ClaudeSkillAdapter())
    skills.register(CodexSkillAdapter())
    skills.register(KiroSkillAdapter())

    commands = registries[ConfigType.COMMAND]
    commands.register(ClaudeCommandAdapter())
    commands.register(CodexCommandAdapter())
    commands.register(GeminiCommandAdapter())

    mcp = registries[ConfigType.MCP]
    mcp.register(ClaudeMCPAdapter())
    mcp.register(CursorMCPAdapter())
    mcp.register(KiroMCPAdapter())
    mcp.register(CodexMCPAdapter())
    mcp.register(VSCodeMCPAdapter())

    plugins = registries[ConfigType.PLUGIN]
    plugins.register(ClaudePluginAdapter())
    plugins.register(GeminiExtensionAdapter())

    context = registries[ConfigType.CONTEXT]
    context.register(ClaudeContextAdapter())
    context.register(CursorContextAdapter())
    context.register(CodexContextAdapter())

    validation = registries[ConfigType.VALIDATION]
    validation.register(ClaudeValidationAdapter())
    validation.register(CodexValidationAdapter())
    validation.register(GeminiValidationAdapter())

    return registries


__all__ = [
    'Registries',
    'build_registries',
    'ClaudeAgentAdapter',
    'ClaudeCommandAdapter',
    'ClaudeContextAdapter',
    'ClaudeHooksAdapter',
    'ClaudeMCPAdapter',
    'ClaudePluginAdapter',
    'ClaudeSkillAdapter',
    'ClaudeValidationAdapter',
    'CodexAgentAdapter',
    'CodexCommandAdapter',
    'CodexContextAdapter',
    'CodexMCPAdapter',
    'CodexSkillAdapter',
    'CodexValidationAdapter',
    'CursorContextAdapter',
    'CursorHooksAdapter',
    'CursorMCPAdapter',
    'GeminiAgentAdapter',
    'GeminiCommandAdapter',
    'GeminiExtensionAdapter',
    'GeminiValidationAdapter',
    'KiroAgentAdapter',
    'KiroMCPAdapter',
    'KiroSkillAdapter',
    'VSCodeMCPAdapter',
    'WindsurfHooksAdapter',
]
