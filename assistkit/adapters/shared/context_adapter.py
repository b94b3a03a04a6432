"""
Project context rendering.

Context adapters read the canonical CONTEXT.json and render it into the
Markdown file each tool loads at session start. Rendering is one-way; the
rendered Markdown is not parsed back.
"""

import json
from pathlib import Path
from typing import List

from assistkit.core.adapter_interface import FormatAdapter
from assistkit.core.canonical_models import CanonicalContext, ConfigType
from assistkit.core.errors import MarshalError

# Common commands first, the rest in insertion order
COMMAND_ORDER = ('build', 'test', 'lint', 'format', 'run')

NOTE_PREFIXES = {
    'warning': "**Warning:** ",
    'critical': "**CRITICAL:** ",
}


class MarkdownContextAdapter(FormatAdapter):
    output_file_name = "CONTEXT.md"
    footer = "---\n*Generated from CONTEXT.json*\n"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.CONTEXT

    @property
    def file_extension(self) -> str:
        return ".md"

    def default_paths(self) -> List[Path]:
        return [Path(self.output_file_name)]

    def parse(self, data: bytes) -> CanonicalContext:
        """Parse canonical CONTEXT.json."""
        self.reset_warnings()
        try:
            return CanonicalContext.from_dict(json.loads(data))
        except (json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError, AttributeError) as e:
            raise self.parse_error(e) from e

    def marshal(self, ctx: CanonicalContext) -> bytes:
        self.reset_warnings()
        if not ctx.name:
            raise MarshalError(self.format_name, ValueError("context name is required"))
        return self.render(ctx).encode('utf-8')

    def render(self, ctx: CanonicalContext) -> str:
        lines: List[str] = [f"# {ctx.name}", ""]

        if ctx.description:
            lines += [ctx.description, ""]

        facts = []
        if ctx.version:
            facts.append(f"**Version:** {ctx.version}")
        if ctx.language:
            facts.append(f"**Language:** {ctx.language}")
        if facts:
            lines += [" | ".join(facts), ""]

        if ctx.architecture_pattern or ctx.architecture_summary:
            lines += ["## Architecture", ""]
            if ctx.architecture_pattern:
                lines += [f"**Pattern:** {ctx.architecture_pattern}", ""]
            if ctx.architecture_summary:
                lines += [ctx.architecture_summary, ""]

        if ctx.packages:
            lines += ["## Packages", "", "| Package | Purpose |", "|---------|---------|"]
            lines += [f"| `{pkg.path}` | {pkg.purpose} |" for pkg in ctx.packages]
            lines.append("")

        if ctx.commands:
            lines += ["## Commands", "", "```bash"]
            ordered = [key for key in COMMAND_ORDER if key in ctx.commands]
            ordered += [key for key in ctx.commands if key not in COMMAND_ORDER]
            for key in ordered:
                lines += [f"# {key}", ctx.commands[key], ""]
            lines += ["```", ""]

        if ctx.conventions:
            lines += ["## Conventions", ""]
            lines += [f"- {convention}" for convention in ctx.conventions]
            lines.append("")

        if ctx.notes:
            lines += ["## Notes", ""]
            for note in ctx.notes:
                prefix = NOTE_PREFIXES.get(note.get_severity(), "")
                if note.title:
                    lines += [f"### {note.title}", "", f"{prefix}{note.content}", ""]
                else:
                    lines.append(f"- {prefix}{note.content}")
            lines.append("")

        if ctx.related:
            lines += ["## Related", ""]
            for link in ctx.related:
                line = f"- [{link.name}]({link.url})" if link.url else f"- {link.name}"
                if link.description:
                    line += f" - {link.description}"
                lines.append(line)
            lines.append("")

        return "\n".join(lines) + "\n" + self.footer
