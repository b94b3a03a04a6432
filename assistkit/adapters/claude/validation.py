"""
Validation areas as Claude Code sub-agents (agents/<area>.md).
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assistkit.core.canonical_models import ValidationArea
from ..shared.frontmatter import as_str, parse_list
from ..shared.markdown_adapter import MarkdownFormatAdapter
from ..shared.validation import (
    ValidationAdapterMixin,
    area_name,
    describe,
    read_document,
    render_document,
    status_lines,
    undescribe,
    validator_name,
)

DESCRIPTION_PHRASE = "validation agent for release readiness"

# Validation agents only read and run checks
DEFAULT_MODEL = "haiku"
DEFAULT_TOOLS = ["Read", "Grep", "Glob", "Bash"]


class ClaudeValidationAdapter(ValidationAdapterMixin, MarkdownFormatAdapter):
    """
    One sub-agent per area. Without a model or tools the agent gets
    haiku and read-only tools plus Bash for running check commands.
    """

    @property
    def format_name(self) -> str:
        return "claude"

    @property
    def default_dir(self) -> str:
        return "agents"

    def default_paths(self) -> List[Path]:
        return [Path(".claude") / "agents"]

    def to_canonical(self, frontmatter: Optional[Dict[str, Any]], body: str) -> ValidationArea:
        frontmatter = frontmatter or {}
        name = area_name(as_str(frontmatter.get('name')))
        area = ValidationArea(
            name=name,
            description=undescribe(name, as_str(frontmatter.get('description')), DESCRIPTION_PHRASE),
            model=as_str(frontmatter.get('model')) or None,
            tools=parse_list(frontmatter.get('tools')),
            skills=parse_list(frontmatter.get('skills')),
            source_format='claude',
        )
        read_document(area, body, self.warn)
        return area

    def from_canonical(self, area: ValidationArea) -> Tuple[Dict[str, Any], str]:
        frontmatter: Dict[str, Any] = {
            'name': validator_name(area.name),
            'description': describe(area, DESCRIPTION_PHRASE),
            'model': area.model or DEFAULT_MODEL,
            'tools': ', '.join(area.tools or DEFAULT_TOOLS),
        }
        if area.skills:
            frontmatter['skills'] = ', '.join(area.skills)
        return frontmatter, render_document(area, self._checks_table(area), self._reporting(area))

    def _checks_table(self, area: ValidationArea) -> str:
        if not area.checks:
            return ''
        rows = [
            "| Check | Required | Command/Pattern |",
            "|-------|----------|-----------------|",
        ]
        for check in area.checks:
            required = "Required" if check.required else "Warning"
            rows.append(f"| {check.name} | {required} | `{check.command or check.pattern}` |")
        return '\n'.join(rows)

    def _reporting(self, area: ValidationArea) -> str:
        upper = area.name.upper()
        lines = ["Report results in Go/No-Go format:", "", "```", f"{upper} VALIDATION", ""]
        lines += status_lines("{status:<6} {meaning}")
        lines += ["", f"{upper}: GO", "```"]
        return '\n'.join(lines)
