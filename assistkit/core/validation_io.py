"""
Canonical validation-area files and batch generation.

Each area is stored as its own JSON file (qa.json, security.json, ...)
and rendered into a tool's format with an adapter from the validation registry.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from .adapter_interface import DEFAULT_DIR_MODE, write_private_file
from .canonical_models import ValidationArea
from .errors import MarshalError, ParseError, ReadError, WriteError
from .registry import FormatRegistry

logger = logging.getLogger(__name__)

CANONICAL_FORMAT = "canonical"

PathLike = Union[str, Path]


def read_canonical_file(path: PathLike) -> ValidationArea:
    """
    Read one canonical area file.

    Raises:
        ReadError: the file cannot be read
        ParseError: invalid JSON or a malformed area
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReadError(str(path), e) from e
    try:
        area = ValidationArea.from_dict(json.loads(data))
    except (json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError, ValueError) as e:
        raise ParseError(CANONICAL_FORMAT, str(path), e) from e
    area.source_format = CANONICAL_FORMAT
    return area


def write_canonical_file(area: ValidationArea, path: PathLike):
    """Write an area as two-space indented JSON with a trailing newline."""
    try:
        data = (json.dumps(area.to_dict(), indent=2, ensure_ascii=False) + "\n").encode('utf-8')
    except (TypeError, ValueError) as e:
        raise MarshalError(CANONICAL_FORMAT, e) from e
    try:
        write_private_file(path, data)
    except OSError as e:
        raise WriteError(str(path), CANONICAL_FORMAT, e) from e


def read_canonical_dir(directory: PathLike) -> List[ValidationArea]:
    """Read every *.json file directly under directory, in file name order."""
    directory = Path(directory)
    try:
        paths = sorted(p for p in directory.iterdir() if p.suffix == '.json' and p.is_file())
    except OSError as e:
        raise ReadError(str(directory), e) from e
    return [read_canonical_file(path) for path in paths]


def write_areas_to_dir(areas: Iterable[ValidationArea], directory: PathLike,
                       registry: FormatRegistry, adapter_name: str) -> List[Path]:
    """
    Render each area with the named adapter as directory/<area><ext>.

    Raises:
        AdapterNotFoundError: no validation adapter by that name
        WriteError: a file or the directory could not be written
    """
    adapter = registry.require_adapter(adapter_name)

    directory = Path(directory)
    try:
        directory.mkdir(mode=DEFAULT_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(str(directory), adapter_name, e) from e

    written = []
    for area in areas:
        path = directory / f"{area.name}{adapter.file_extension}"
        adapter.write_file(area, path)
        written.append(path)
    logger.info("Wrote %d %s validation file(s) to %s", len(written), adapter_name, directory)
    return written
