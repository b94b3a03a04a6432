"""
.cursorrules renderer.
"""

from ..shared.context_adapter import MarkdownContextAdapter


class CursorContextAdapter(MarkdownContextAdapter):
    output_file_name = ".cursorrules"
    # Rules files are injected verbatim into every prompt
    footer = ""

    @property
    def format_name(self) -> str:
        return "cursor"
