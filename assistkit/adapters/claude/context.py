"""
CLAUDE.md renderer.
"""

from ..shared.context_adapter import MarkdownContextAdapter


class ClaudeContextAdapter(MarkdownContextAdapter):
    output_file_name = "CLAUDE.md"

    @property
    def format_name(self) -> str:
        return "claude"
