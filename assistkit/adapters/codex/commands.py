"""
Codex custom prompt adapter (~/.codex/prompts/<name>.md).

Same Markdown layout as Claude commands, but Codex only reads the
description and argument-hint keys.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple

from assistkit.core.canonical_models import CanonicalCommand
from ..claude.commands import ClaudeCommandAdapter


class CodexCommandAdapter(ClaudeCommandAdapter):

    @property
    def format_name(self) -> str:
        return "codex"

    def default_paths(self) -> List[Path]:
        return [Path.home() / ".codex" / "prompts"]

    def from_canonical(self, command: CanonicalCommand) -> Tuple[Dict[str, Any], str]:
        frontmatter, body = super().from_canonical(command)
        for key in ('allowed-tools', 'model'):
            if frontmatter.pop(key, None):
                self.warn(f"Command '{command.name}': {key} is not supported by Codex prompts")
        return frontmatter, body
