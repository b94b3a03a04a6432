"""
assistkit: keep AI coding assistant configuration (hooks, agents, skills,
commands, MCP servers, plugin manifests, project context) in one canonical
form and convert it to each tool's native files.
"""

__version__ = "0.1.0"
