"""
Codex skill adapter.

Codex reads the same SKILL.md layout as Claude Code.
"""

from pathlib import Path
from typing import List

from ..claude.skills import ClaudeSkillAdapter


class CodexSkillAdapter(ClaudeSkillAdapter):

    @property
    def format_name(self) -> str:
        return "codex"

    def default_paths(self) -> List[Path]:
        return [Path(".codex") / "skills", Path.home() / ".codex" / "skills"]
