"""
Base class for adapters whose files are Markdown with YAML frontmatter.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from assistkit.core.adapter_interface import FormatAdapter
from assistkit.core.errors import AssistKitError, MarshalError
from .frontmatter import render_frontmatter, split_frontmatter


class MarkdownFormatAdapter(FormatAdapter):
    """
    Decodes UTF-8, splits frontmatter from the body and hands both to
    to_canonical(); marshal() renders from_canonical()'s (fields, body).
    """

    @property
    def file_extension(self) -> str:
        return ".md"

    @abstractmethod
    def to_canonical(self, frontmatter: Optional[Dict[str, Any]], body: str) -> Any:
        pass

    @abstractmethod
    def from_canonical(self, obj: Any) -> Tuple[Dict[str, Any], str]:
        pass

    def parse(self, data: bytes) -> Any:
        self.reset_warnings()
        try:
            frontmatter, body = split_frontmatter(data.decode('utf-8'))
            return self.to_canonical(frontmatter, body)
        except AssistKitError:
            raise
        except (UnicodeDecodeError, yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
            raise self.parse_error(e) from e

    def marshal(self, obj: Any) -> bytes:
        self.reset_warnings()
        try:
            fields, body = self.from_canonical(obj)
            return render_frontmatter(fields, body).encode('utf-8')
        except (yaml.YAMLError, TypeError, ValueError, AttributeError) as e:
            raise MarshalError(self.format_name, e) from e

    def complete_from_path(self, obj: Any, path: Path) -> Any:
        """Artifacts without a name take it from the file name."""
        if hasattr(obj, 'name') and not obj.name:
            obj.name = stem_name(path)
        return obj


def stem_name(path: Path) -> str:
    """File name without its extension; SKILL.md files are named by their directory."""
    if path.name == 'SKILL.md':
        return path.parent.name
    return path.name.split('.')[0]
