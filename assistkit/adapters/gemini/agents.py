"""
Gemini CLI agent adapter (agents/<name>.toml).

    name = "reviewer"
    description = "Reviews code"
    model = "gemini-2.5-pro"
    tools = ["read_file", "run_shell_command"]
    prompt = \"\"\"You review code.\"\"\"

Tools use Gemini's built-in tool names; unknown names pass through.
"""

from pathlib import Path
from typing import Any, Dict, List

import tomli
import tomli_w

from assistkit.core.adapter_interface import FormatAdapter
from assistkit.core.canonical_models import CanonicalAgent, ConfigType
from assistkit.core.errors import MarshalError

TOOL_TO_GEMINI = {
    'Read': 'read_file',
    'Write': 'write_file',
    'Edit': 'replace',
    'Bash': 'run_shell_command',
    'Grep': 'search_file_content',
    'Glob': 'glob',
    'WebFetch': 'web_fetch',
    'WebSearch': 'google_web_search',
}
TOOL_FROM_GEMINI = {gemini: tool for tool, gemini in TOOL_TO_GEMINI.items()}


class GeminiAgentAdapter(FormatAdapter):

    @property
    def format_name(self) -> str:
        return "gemini"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.AGENT

    @property
    def file_extension(self) -> str:
        return ".toml"

    def default_paths(self) -> List[Path]:
        return [Path(".gemini") / "agents", Path.home() / ".gemini" / "agents"]

    def parse(self, data: bytes) -> CanonicalAgent:
        self.reset_warnings()
        try:
            native = tomli.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, tomli.TOMLDecodeError) as e:
            raise self.parse_error(e) from e

        tools = native.get('tools') or []
        if not isinstance(tools, list) or not isinstance(native.get('prompt', ''), str):
            raise self.parse_error(ValueError("tools must be an array and prompt a string"))

        return CanonicalAgent(
            name=str(native.get('name', '')),
            description=str(native.get('description', '')),
            instructions=native.get('prompt', '').strip(),
            model=str(native['model']) if native.get('model') else None,
            tools=[TOOL_FROM_GEMINI.get(str(t), str(t)) for t in tools],
            source_format='gemini',
        )

    def marshal(self, agent: CanonicalAgent) -> bytes:
        self.reset_warnings()
        native: Dict[str, Any] = {'name': agent.name}
        if agent.description:
            native['description'] = agent.description
        if agent.model:
            native['model'] = agent.model
        if agent.tools:
            native['tools'] = [TOOL_TO_GEMINI.get(t, t) for t in agent.tools]
        native['prompt'] = agent.instructions

        for key in ('skills', 'dependencies'):
            if getattr(agent, key):
                self.warn(f"Agent '{agent.name}': {key} are not supported by Gemini agents")
        try:
            return tomli_w.dumps(native, multiline_strings=True).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise MarshalError(self.format_name, e) from e

    def complete_from_path(self, agent: CanonicalAgent, path: Path) -> CanonicalAgent:
        if not agent.name:
            agent.name = path.stem
        return agent
