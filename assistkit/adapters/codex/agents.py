"""
Codex agent adapter (agents/<name>.md).

Same Markdown layout as Claude sub-agents without the Claude-only keys.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assistkit.core.canonical_models import CanonicalAgent
from ..claude.agents import ClaudeAgentAdapter


class CodexAgentAdapter(ClaudeAgentAdapter):

    @property
    def format_name(self) -> str:
        return "codex"

    def default_paths(self) -> List[Path]:
        return [Path(".codex") / "agents", Path.home() / ".codex" / "agents"]

    def to_canonical(self, frontmatter: Optional[Dict[str, Any]], body: str) -> CanonicalAgent:
        agent = super().to_canonical(frontmatter, body)
        agent.source_format = 'codex'
        return agent

    def from_canonical(self, agent: CanonicalAgent) -> Tuple[Dict[str, Any], str]:
        frontmatter, body = super().from_canonical(agent)
        for key in ('permissionMode', 'skills'):
            if frontmatter.pop(key, None):
                self.warn(f"Agent '{agent.name}': {key} is not supported by Codex agents")
        return frontmatter, body
