"""
YAML frontmatter helpers shared by the Markdown-based adapters.

A frontmatter document looks like::

    ---
    name: reviewer
    tools: [Read, Grep]
    ---

    Body text...
"""

import re
from typing import Any, Dict, List, Optional, Tuple

import yaml

FRONTMATTER_PATTERN = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?(.*)\Z', re.DOTALL | re.MULTILINE)


def split_frontmatter(content: str) -> Tuple[Optional[Dict[str, Any]], str]:
    """
    Split a document into its frontmatter mapping and stripped body.

    Returns (None, body) when the document has no frontmatter block.

    Raises:
        yaml.YAMLError: malformed YAML
        ValueError: frontmatter is not a mapping
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None, content.strip()

    yaml_content, body = match.groups()
    data = yaml.safe_load(yaml_content)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("frontmatter must be a YAML mapping")
    return data, body.strip()


def render_frontmatter(fields: Dict[str, Any], body: str) -> str:
    """Render fields as YAML frontmatter followed by a blank line and the body."""
    yaml_str = yaml.dump(fields, default_flow_style=False, sort_keys=False, allow_unicode=True)
    if not body:
        return f"---\n{yaml_str}---\n"
    return f"---\n{yaml_str}---\n\n{body}\n"


def parse_list(value: Any) -> List[str]:
    """
    Parse a list field written as a YAML list, "a, b" or "[a, b]".
    """
    if isinstance(value, list):
        return [str(item).strip() for item in value if str(item).strip()]
    if isinstance(value, str):
        text = value.strip()
        if text.startswith('[') and text.endswith(']'):
            text = text[1:-1]
        return [item.strip().strip('"\'') for item in text.split(',') if item.strip()]
    return []


def as_str(value: Any) -> str:
    """Scalar frontmatter value as a string (YAML may hand back ints/floats)."""
    if value is None:
        return ''
    return str(value)
