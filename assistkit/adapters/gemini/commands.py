"""
Gemini CLI custom command adapter (.gemini/commands/<name>.toml).

    description = "Review a file"
    prompt = \"\"\"Review {{args}} carefully.\"\"\"

Gemini injects user input with {{args}} where Claude uses $ARGUMENTS.
"""

from pathlib import Path
from typing import Any, Dict, List

import tomli
import tomli_w

from assistkit.core.adapter_interface import FormatAdapter
from assistkit.core.canonical_models import CanonicalCommand, ConfigType
from assistkit.core.errors import MarshalError

CANONICAL_ARGS_PLACEHOLDER = "$ARGUMENTS"
GEMINI_ARGS_PLACEHOLDER = "{{args}}"


class GeminiCommandAdapter(FormatAdapter):

    @property
    def format_name(self) -> str:
        return "gemini"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.COMMAND

    @property
    def file_extension(self) -> str:
        return ".toml"

    def default_paths(self) -> List[Path]:
        return [Path(".gemini") / "commands", Path.home() / ".gemini" / "commands"]

    def parse(self, data: bytes) -> CanonicalCommand:
        self.reset_warnings()
        try:
            native = tomli.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, tomli.TOMLDecodeError) as e:
            raise self.parse_error(e) from e

        prompt = native.get('prompt', '')
        if not isinstance(prompt, str):
            raise self.parse_error(ValueError("prompt must be a string"))

        return CanonicalCommand(
            name=native.get('name', ''),
            description=native.get('description', ''),
            prompt=prompt.replace(GEMINI_ARGS_PLACEHOLDER, CANONICAL_ARGS_PLACEHOLDER).strip(),
            source_format='gemini',
        )

    def marshal(self, command: CanonicalCommand) -> bytes:
        self.reset_warnings()
        native: Dict[str, Any] = {}
        if command.description:
            native['description'] = command.description
        native['prompt'] = command.prompt.replace(CANONICAL_ARGS_PLACEHOLDER, GEMINI_ARGS_PLACEHOLDER)

        if command.allowed_tools:
            self.warn(f"Command '{command.name}': allowed tools are not supported by Gemini commands")
        try:
            return tomli_w.dumps(native).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise MarshalError(self.format_name, e) from e

    def complete_from_path(self, command: CanonicalCommand, path: Path) -> CanonicalCommand:
        if not command.name:
            command.name = path.stem
        return command
