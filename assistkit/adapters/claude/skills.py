"""
Claude Code skill adapter (skills/<name>/SKILL.md).
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from assistkit.core.canonical_models import CanonicalSkill, ConfigType
from ..shared.frontmatter import as_str, parse_list
from ..shared.markdown_adapter import MarkdownFormatAdapter

SKILL_FILE_NAME = "SKILL.md"

# Optional list fields written to frontmatter only when non-empty
LIST_FIELDS = ('triggers', 'dependencies', 'scripts', 'references', 'assets')


class ClaudeSkillAdapter(MarkdownFormatAdapter):
    """A skill is a directory holding SKILL.md plus optional resources."""

    @property
    def format_name(self) -> str:
        return "claude"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.SKILL

    def default_paths(self) -> List[Path]:
        return [Path(".claude") / "skills", Path.home() / ".claude" / "skills"]

    def to_canonical(self, frontmatter: Optional[Dict[str, Any]], body: str) -> CanonicalSkill:
        frontmatter = frontmatter or {}
        skill = CanonicalSkill(
            name=as_str(frontmatter.get('name')),
            description=as_str(frontmatter.get('description')),
            instructions=body,
            source_format=self.format_name,
        )
        for field_name in LIST_FIELDS:
            setattr(skill, field_name, parse_list(frontmatter.get(field_name)))
        if 'allowed-tools' in frontmatter:
            skill.add_metadata('allowed_tools', parse_list(frontmatter['allowed-tools']))
        return skill

    def from_canonical(self, skill: CanonicalSkill) -> Tuple[Dict[str, Any], str]:
        frontmatter: Dict[str, Any] = {
            'name': skill.name,
            'description': skill.description,
        }
        for field_name in LIST_FIELDS:
            values = getattr(skill, field_name)
            if values:
                frontmatter[field_name] = list(values)
        if skill.get_metadata('allowed_tools'):
            frontmatter['allowed-tools'] = ', '.join(skill.get_metadata('allowed_tools'))
        return frontmatter, skill.instructions

    def skill_path(self, skill: CanonicalSkill, base_dir: Union[str, Path]) -> Path:
        return Path(base_dir) / skill.name / SKILL_FILE_NAME

    def write_skill_dir(self, skill: CanonicalSkill, base_dir: Union[str, Path]) -> Path:
        """Write <base_dir>/<name>/SKILL.md and return its path."""
        path = self.skill_path(skill, base_dir)
        self.write_file(skill, path)
        return path
