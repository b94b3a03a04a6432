"""
AGENTS.md renderer, read by Codex and other AGENTS.md-aware tools.
"""

from ..shared.context_adapter import MarkdownContextAdapter


class CodexContextAdapter(MarkdownContextAdapter):
    output_file_name = "AGENTS.md"

    @property
    def format_name(self) -> str:
        return "codex"
