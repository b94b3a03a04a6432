"""
Rendering helpers shared by the validation-area adapters.

Every tool gets the same document skeleton::

    # Qa Validator

    <description>

    ## Sign-Off Criteria
    ## Validation Checks
    ## Dependencies
    ## Instructions
    ## Reporting Format

Only the check list and the reporting block differ per tool. Parsing
reads the sections back by their headings; other ``##`` headings are
treated as part of the section they appear in.
"""

import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

from assistkit.core.canonical_models import CheckStatus, ConfigType, ValidationArea

VALIDATOR_SUFFIX = "-validator"

SIGN_OFF = "Sign-Off Criteria"
CHECKS = "Validation Checks"
DEPENDENCIES = "Dependencies"
INSTRUCTIONS = "Instructions"
REPORTING = "Reporting Format"
SECTION_HEADINGS = (SIGN_OFF, CHECKS, DEPENDENCIES, INSTRUCTIONS, REPORTING)

STATUS_MEANINGS: Dict[CheckStatus, str] = {
    CheckStatus.GO: "Check passed",
    CheckStatus.NO_GO: "Check failed (blocking)",
    CheckStatus.WARN: "Check failed (non-blocking)",
    CheckStatus.SKIP: "Check skipped",
}

SECTION_PATTERN = re.compile(r'^## (%s)[ \t]*$' % '|'.join(re.escape(h) for h in SECTION_HEADINGS),
                             re.MULTILINE)
TITLE_PATTERN = re.compile(r'\A# .*Validator[ \t]*(?:\n|\Z)')
DEPENDENCY_PATTERN = re.compile(r'^- `?([^`\n]+?)`?[ \t]*$', re.MULTILINE)


def validator_name(area_name: str) -> str:
    return area_name + VALIDATOR_SUFFIX


def area_name(native_name: str) -> str:
    if native_name.endswith(VALIDATOR_SUFFIX):
        return native_name[:-len(VALIDATOR_SUFFIX)]
    return native_name


def area_title(name: str) -> str:
    """'release-notes' -> 'Release Notes'."""
    return name.replace('-', ' ').title()


def describe(area: ValidationArea, phrase: str) -> str:
    """Native description: "<Title> <phrase>. <description>"."""
    return f"{area_title(area.name)} {phrase}. {area.description}".strip()


def undescribe(name: str, description: str, phrase: str) -> str:
    prefix = f"{area_title(name)} {phrase}."
    if description.startswith(prefix):
        return description[len(prefix):].strip()
    return description


def render_document(area: ValidationArea, checks: str, reporting: str) -> str:
    parts = [f"# {area_title(area.name)} Validator", area.description]
    if area.sign_off_criteria:
        parts.append(f"## {SIGN_OFF}\n\n{area.sign_off_criteria}")
    if checks:
        parts.append(f"## {CHECKS}\n\n{checks}")
    if area.dependencies:
        listed = '\n'.join(f"- `{dep}`" for dep in area.dependencies)
        parts.append(f"## {DEPENDENCIES}\n\nRequired CLI tools:\n\n{listed}")
    if area.instructions:
        parts.append(f"## {INSTRUCTIONS}\n\n{area.instructions}")
    parts.append(f"## {REPORTING}\n\n{reporting}")
    return '\n\n'.join(part.strip() for part in parts if part.strip())


def split_sections(body: str) -> Tuple[str, Dict[str, str]]:
    """(text before the first known heading without its title line, {heading: text})."""
    matches = list(SECTION_PATTERN.finditer(body))
    end = matches[0].start() if matches else len(body)
    preamble = TITLE_PATTERN.sub('', body[:end].strip(), count=1).strip()

    sections: Dict[str, str] = {}
    for i, match in enumerate(matches):
        stop = matches[i + 1].start() if i + 1 < len(matches) else len(body)
        sections[match.group(1)] = body[match.end():stop].strip()
    return preamble, sections


def read_document(area: ValidationArea, body: str, warn: Callable[[str], None]):
    """
    Fill sign-off criteria, dependencies and instructions from a rendered
    body. A body without any known section is taken as the instructions.
    """
    preamble, sections = split_sections(body)
    if not sections:
        area.instructions = preamble
        return

    area.sign_off_criteria = sections.get(SIGN_OFF, '')
    area.instructions = sections.get(INSTRUCTIONS, '')
    deps = sections.get(DEPENDENCIES, '')
    area.dependencies = [dep.strip() for dep in DEPENDENCY_PATTERN.findall(deps)]
    if not area.description:
        area.description = preamble
    if sections.get(CHECKS):
        warn(f"Validation area '{area.name}': checks are not read back from rendered files")


class ValidationAdapterMixin:
    """Config type and file-name handling common to validation adapters."""

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.VALIDATION

    @property
    def default_dir(self) -> str:
        """Directory the tool discovers these files in."""
        raise NotImplementedError

    def complete_from_path(self, area: Any, path: Path) -> Any:
        if not area.name:
            area.name = area_name(path.name.split('.')[0])
        return area


def status_lines(fmt: str) -> List[str]:
    """One line per CheckStatus, e.g. fmt="- {status}: {meaning}"."""
    return [fmt.format(status=status, meaning=meaning) for status, meaning in STATUS_MEANINGS.items()]
