"""
Multi-tool plugin bundles.

A Bundle holds canonical skills, commands, agents, hooks, MCP servers and
context; BundleGenerator writes it out in each tool's layout.
"""

from .bundle import Bundle
from .generator import BundleGenerator
from .tool_config import DEFAULT_TOOL_CONFIGS, SUPPORTED_TOOLS, ArtifactSink, ToolConfig

__all__ = [
    'ArtifactSink',
    'Bundle',
    'BundleGenerator',
    'DEFAULT_TOOL_CONFIGS',
    'SUPPORTED_TOOLS',
    'ToolConfig',
]
