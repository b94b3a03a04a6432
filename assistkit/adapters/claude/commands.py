"""
Claude Code slash command adapter (.claude/commands/<name>.md).

The command name is the file name; the body is the prompt, with
$ARGUMENTS standing in for whatever the user types after the command.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assistkit.core.canonical_models import CanonicalCommand, CommandArgument, ConfigType
from ..shared.frontmatter import as_str, parse_list
from ..shared.markdown_adapter import MarkdownFormatAdapter

ARGUMENT_HINT_PATTERN = re.compile(r'<([^>]+)>|\[([^\]]+)\]')


def parse_argument_hint(hint: str) -> Optional[List[CommandArgument]]:
    """
    '<file> [mode]' -> [file (required), mode (optional)].

    Returns None when the hint is free text rather than a token list.
    """
    arguments = []
    position = 0
    for match in ARGUMENT_HINT_PATTERN.finditer(hint):
        if hint[position:match.start()].strip():
            return None
        required, optional = match.groups()
        arguments.append(CommandArgument(name=(required or optional).strip(), required=required is not None))
        position = match.end()
    if hint[position:].strip():
        return None
    return arguments


class ClaudeCommandAdapter(MarkdownFormatAdapter):

    @property
    def format_name(self) -> str:
        return "claude"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.COMMAND

    def default_paths(self) -> List[Path]:
        return [Path(".claude") / "commands", Path.home() / ".claude" / "commands"]

    def to_canonical(self, frontmatter: Optional[Dict[str, Any]], body: str) -> CanonicalCommand:
        frontmatter = frontmatter or {}
        command = CanonicalCommand(
            name=as_str(frontmatter.get('name')),
            description=as_str(frontmatter.get('description')),
            prompt=body,
            allowed_tools=parse_list(frontmatter.get('allowed-tools')),
            model=frontmatter.get('model'),
            source_format=self.format_name,
        )
        hint = as_str(frontmatter.get('argument-hint'))
        if hint:
            arguments = parse_argument_hint(hint)
            if arguments is None:
                command.add_metadata('argument_hint', hint)
            else:
                command.arguments = arguments
        return command

    def from_canonical(self, command: CanonicalCommand) -> Tuple[Dict[str, Any], str]:
        frontmatter: Dict[str, Any] = {}
        if command.description:
            frontmatter['description'] = command.description
        hint = command.argument_hint() or command.get_metadata('argument_hint')
        if hint:
            frontmatter['argument-hint'] = hint
        if command.allowed_tools:
            frontmatter['allowed-tools'] = ', '.join(command.allowed_tools)
        if command.model:
            frontmatter['model'] = command.model
        return frontmatter, command.prompt

    def marshal(self, command: CanonicalCommand) -> bytes:
        data = super().marshal(command)
        # Commands with no frontmatter fields are plain Markdown
        if data.startswith(b"---\n{}\n---\n"):
            return data[len(b"---\n{}\n---\n"):].lstrip(b"\n")
        return data
