"""
Claude Code sub-agent adapter (.claude/agents/<name>.md).
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assistkit.core.canonical_models import CanonicalAgent, ConfigType
from ..shared.frontmatter import as_str, parse_list
from ..shared.markdown_adapter import MarkdownFormatAdapter


class ClaudeAgentAdapter(MarkdownFormatAdapter):
    """
    Markdown with YAML frontmatter: name, description, tools, model, skills.

    permissionMode is Claude-only and is kept in metadata.
    """

    @property
    def format_name(self) -> str:
        return "claude"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.AGENT

    def default_paths(self) -> List[Path]:
        return [Path(".claude") / "agents", Path.home() / ".claude" / "agents"]

    def to_canonical(self, frontmatter: Optional[Dict[str, Any]], body: str) -> CanonicalAgent:
        if frontmatter is None:
            raise ValueError("No YAML frontmatter found in Claude agent file")

        agent = CanonicalAgent(
            name=as_str(frontmatter.get('name')),
            description=as_str(frontmatter.get('description')),
            instructions=body,
            tools=parse_list(frontmatter.get('tools')),
            model=self._normalize_model(frontmatter.get('model')),
            skills=parse_list(frontmatter.get('skills')),
            source_format='claude',
        )

        if 'permissionMode' in frontmatter:
            agent.add_metadata('claude_permission_mode', frontmatter['permissionMode'])

        return agent

    def from_canonical(self, agent: CanonicalAgent) -> Tuple[Dict[str, Any], str]:
        frontmatter: Dict[str, Any] = {
            'name': agent.name,
            'description': agent.description,
        }

        # Tools as comma-separated string
        if agent.tools:
            frontmatter['tools'] = ', '.join(agent.tools)
        if agent.model:
            frontmatter['model'] = agent.model
        if agent.skills:
            frontmatter['skills'] = ', '.join(agent.skills)

        if agent.get_metadata('claude_permission_mode'):
            frontmatter['permissionMode'] = agent.get_metadata('claude_permission_mode')

        if agent.dependencies:
            self.warn(f"Agent '{agent.name}': dependencies are not expressible in Claude agent files")

        return frontmatter, agent.instructions

    def _normalize_model(self, model: Any) -> Optional[str]:
        """
        Claude already uses short names (sonnet, opus, haiku) which are the
        canonical form, so just lowercase.
        """
        if not model:
            return None
        return str(model).lower()
