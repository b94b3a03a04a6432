"""
Validation areas as Gemini CLI commands (commands/<area>.toml).

    [command]
    name = "qa-validator"
    description = "Qa validation for release readiness. ..."

    [[arguments]]
    name = "target"
    ...

    [content]
    text = \"\"\"# Qa Validator ...\"\"\"
"""

from pathlib import Path
from typing import Any, Dict, List

import tomli
import tomli_w

from assistkit.core.adapter_interface import FormatAdapter
from assistkit.core.canonical_models import ValidationArea
from assistkit.core.errors import MarshalError
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

TARGET_ARGUMENT = {
    'name': 'target',
    'description': 'Target directory to validate',
    'required': False,
    'default': '.',
}


class GeminiValidationAdapter(ValidationAdapterMixin, FormatAdapter):
    """Model, tools and skills have no place in a Gemini command and are dropped."""

    @property
    def format_name(self) -> str:
        return "gemini"

    @property
    def file_extension(self) -> str:
        return ".toml"

    @property
    def default_dir(self) -> str:
        return "commands"

    def default_paths(self) -> List[Path]:
        return [Path(".gemini") / "commands", Path.home() / ".gemini" / "commands"]

    def parse(self, data: bytes) -> ValidationArea:
        self.reset_warnings()
        try:
            native = tomli.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, tomli.TOMLDecodeError) as e:
            raise self.parse_error(e) from e

        command = native.get('command') or {}
        content = native.get('content') or {}
        if not isinstance(command, dict) or not isinstance(content, dict):
            raise self.parse_error(ValueError("[command] and [content] must be tables"))
        text = content.get('text', '')
        if not isinstance(text, str):
            raise self.parse_error(ValueError("content.text must be a string"))

        name = area_name(str(command.get('name', '')))
        area = ValidationArea(
            name=name,
            description=undescribe(name, str(command.get('description', '')), DESCRIPTION_PHRASE),
            source_format='gemini',
        )
        read_document(area, text.strip(), self.warn)
        return area

    def marshal(self, area: ValidationArea) -> bytes:
        self.reset_warnings()
        for key in ('model', 'tools', 'skills'):
            if getattr(area, key):
                self.warn(f"Validation area '{area.name}': {key} not supported by Gemini commands")

        native: Dict[str, Any] = {
            'command': {
                'name': validator_name(area.name),
                'description': describe(area, DESCRIPTION_PHRASE),
            },
            'arguments': [dict(TARGET_ARGUMENT)],
            'content': {
                'text': render_document(area, self._checks(area), self._reporting(area)) + "\n",
            },
        }
        try:
            return tomli_w.dumps(native, multiline_strings=True).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise MarshalError(self.format_name, e) from e

    def _checks(self, area: ValidationArea) -> str:
        lines = []
        for check in area.checks:
            line = f"- **{check.name}** ({'required' if check.required else 'optional'})"
            if check.description:
                line += f": {check.description}"
            lines.append(line)
            if check.command:
                lines.append(f"  Command: `{check.command}`")
            if check.pattern:
                lines.append(f"  Pattern: `{check.pattern}`")
            if check.file_pattern:
                lines.append(f"  Files: `{check.file_pattern}`")
        return '\n'.join(lines)

    def _reporting(self, area: ValidationArea) -> str:
        lines = ["Report results in Go/No-Go format:", ""]
        lines += status_lines("- {status}: {meaning}")
        lines += ["", f"Final status: {area.name.upper()} VALIDATION: GO or NO-GO"]
        return '\n'.join(lines)
