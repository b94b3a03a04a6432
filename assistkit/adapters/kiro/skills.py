"""
Kiro steering adapter.

Kiro has no skill concept; skills become steering documents under
.kiro/steering/<kebab-name>.md::

    # Code Review

    Description paragraph.

    Instructions...
"""

import re
from pathlib import Path
from typing import List, Union

from assistkit.core.adapter_interface import FormatAdapter
from assistkit.core.canonical_models import CanonicalSkill, ConfigType
from assistkit.core.errors import MarshalError

STEERING_DIR = Path(".kiro") / "steering"


def to_kebab_case(name: str) -> str:
    """'Code Review' / 'codeReview' / 'code_review' -> 'code-review'."""
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1-\2', name.strip())
    name = re.sub(r'[\s_]+', '-', name)
    return re.sub(r'-+', '-', name).lower().strip('-')


def to_title_case(name: str) -> str:
    """'code-review' -> 'Code Review'."""
    return ' '.join(word.capitalize() for word in re.split(r'[-_\s]+', name) if word)


def steering_path(skill_name: str) -> Path:
    return STEERING_DIR / f"{to_kebab_case(skill_name)}.md"


class KiroSkillAdapter(FormatAdapter):

    @property
    def format_name(self) -> str:
        return "kiro"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.SKILL

    @property
    def file_extension(self) -> str:
        return ".md"

    def default_paths(self) -> List[Path]:
        return [STEERING_DIR, Path.home() / ".kiro" / "steering"]

    def parse(self, data: bytes) -> CanonicalSkill:
        self.reset_warnings()
        try:
            text = data.decode('utf-8').strip()
        except UnicodeDecodeError as e:
            raise self.parse_error(e) from e

        name = ''
        if text.startswith('# '):
            title, _, text = text.partition('\n')
            name = to_kebab_case(title[2:])

        paragraphs = [p.strip() for p in text.strip().split('\n\n') if p.strip()]
        description = ''
        if len(paragraphs) > 1:
            description = paragraphs.pop(0)

        return CanonicalSkill(
            name=name,
            description=description,
            instructions='\n\n'.join(paragraphs),
            source_format='kiro',
        )

    def marshal(self, skill: CanonicalSkill) -> bytes:
        self.reset_warnings()
        if skill.scripts or skill.assets:
            self.warn(f"Skill '{skill.name}': scripts and assets are not copied into Kiro steering")
        parts = [f"# {to_title_case(skill.name)}"]
        if skill.description:
            parts.append(skill.description)
        if skill.instructions:
            parts.append(skill.instructions)
        try:
            return ('\n\n'.join(parts) + '\n').encode('utf-8')
        except UnicodeEncodeError as e:
            raise MarshalError(self.format_name, e) from e

    def complete_from_path(self, skill: CanonicalSkill, path: Path) -> CanonicalSkill:
        if not skill.name:
            skill.name = path.stem
        return skill

    def skill_path(self, skill: CanonicalSkill, base_dir: Union[str, Path]) -> Path:
        return Path(base_dir) / f"{to_kebab_case(skill.name)}.md"

    def write_skill_dir(self, skill: CanonicalSkill, base_dir: Union[str, Path]) -> Path:
        """Write <base_dir>/<kebab-name>.md and return its path."""
        path = self.skill_path(skill, base_dir)
        self.write_file(skill, path)
        return path
