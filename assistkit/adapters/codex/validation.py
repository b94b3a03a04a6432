"""
Validation areas as Codex custom prompts (prompts/<area>.md).

Prompts carry name, description, tags and an optional model. Each check
becomes a numbered subsection, and the prompt ends with a report template
listing every check.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assistkit.core.canonical_models import ValidationArea
from ..shared.frontmatter import as_str
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

DESCRIPTION_PHRASE = "validation for release readiness"


class CodexValidationAdapter(ValidationAdapterMixin, MarkdownFormatAdapter):

    @property
    def format_name(self) -> str:
        return "codex"

    @property
    def default_dir(self) -> str:
        return "prompts"

    def default_paths(self) -> List[Path]:
        return [Path.home() / ".codex" / "prompts"]

    def to_canonical(self, frontmatter: Optional[Dict[str, Any]], body: str) -> ValidationArea:
        frontmatter = frontmatter or {}
        name = area_name(as_str(frontmatter.get('name')))
        area = ValidationArea(
            name=name,
            description=undescribe(name, as_str(frontmatter.get('description')), DESCRIPTION_PHRASE),
            model=as_str(frontmatter.get('model')) or None,
            source_format='codex',
        )
        read_document(area, body, self.warn)
        return area

    def from_canonical(self, area: ValidationArea) -> Tuple[Dict[str, Any], str]:
        frontmatter: Dict[str, Any] = {
            'name': validator_name(area.name),
            'description': describe(area, DESCRIPTION_PHRASE),
            'tags': ['validation', 'release', area.name],
        }
        if area.model:
            frontmatter['model'] = area.model
        for key in ('tools', 'skills'):
            if getattr(area, key):
                self.warn(f"Validation area '{area.name}': {key} are not supported by Codex prompts")
        return frontmatter, render_document(area, self._checks(area), self._reporting(area))

    def _checks(self, area: ValidationArea) -> str:
        blocks = []
        for i, check in enumerate(area.checks, 1):
            required = "Required" if check.required else "Optional"
            block = [f"### {i}. {check.name} ({required})"]
            if check.description:
                block.append(check.description)
            if check.command:
                block.append(f"**Command:**\n\n```bash\n{check.command}\n```")
            if check.pattern:
                block.append(f"**Pattern to check:**\n\n```\n{check.pattern}\n```")
            if check.file_pattern:
                block.append(f"**Files:** `{check.file_pattern}`")
            blocks.append('\n\n'.join(block))
        return '\n\n'.join(blocks)

    def _reporting(self, area: ValidationArea) -> str:
        upper = area.name.upper()
        lines = [
            "Report results using the following status indicators:",
            "",
            "| Status | Meaning |",
            "|--------|---------|",
        ]
        lines += status_lines("| {status} | {meaning} |")
        lines += ["", "### Final Report Template", "", "```", f"{upper} VALIDATION REPORT", "", "Checks:"]
        lines += [f"- [ ] {check.name}: [GO/NO-GO/WARN/SKIP]" for check in area.checks]
        lines += ["", f"FINAL STATUS: {upper} VALIDATION [GO/NO-GO]", "```"]
        return '\n'.join(lines)
