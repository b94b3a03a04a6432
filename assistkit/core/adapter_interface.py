"""
Abstract interface that every format adapter implements.

An adapter owns one tool's on-disk format for one artifact kind. It turns
raw bytes into a canonical model (parse), turns a canonical model back into
bytes (marshal), and wraps both with file I/O that uses restrictive
permissions.
"""

import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

from .canonical_models import ConfigType
from .errors import AssistKitError, MarshalError, ParseError, ReadError, WriteError

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o600
DEFAULT_DIR_MODE = 0o700

PathLike = Union[str, Path]


def write_private_file(path: PathLike, data: bytes, file_mode: int = DEFAULT_FILE_MODE,
                       dir_mode: int = DEFAULT_DIR_MODE):
    """Write bytes, creating parent directories. Raises OSError."""
    path = Path(path)
    path.parent.mkdir(mode=dir_mode, parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, file_mode)
    with os.fdopen(fd, 'wb') as f:
        f.write(data)
    os.chmod(path, file_mode)


class FormatAdapter(ABC):
    """
    Base class for format adapters.

    Subclasses implement parse() and marshal(); read_file() and write_file()
    are shared. Content the target format cannot express is dropped and
    reported through get_conversion_warnings().

    Warnings are kept per thread and cleared at the start of every parse,
    marshal or to_native call, so a shared adapter only ever reports on
    the current thread's most recent call.
    """

    def __init__(self):
        self._local = threading.local()

    @property
    def warnings(self) -> List[str]:
        if not hasattr(self._local, "warnings"):
            self._local.warnings = []
        return self._local.warnings

    @warnings.setter
    def warnings(self, value: List[str]):
        self._local.warnings = value

    def reset_warnings(self):
        self.warnings = []

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Tool identifier: 'claude', 'cursor', 'kiro', ..."""
        pass

    @property
    @abstractmethod
    def config_type(self) -> ConfigType:
        pass

    @property
    def file_extension(self) -> str:
        return ".json"

    def default_paths(self) -> List[Path]:
        """Conventional locations for this format, most specific first."""
        return []

    @abstractmethod
    def parse(self, data: bytes) -> Any:
        """Bytes in this tool's format -> canonical model. Raises ParseError."""
        pass

    @abstractmethod
    def marshal(self, obj: Any) -> bytes:
        """Canonical model -> bytes in this tool's format. Raises MarshalError."""
        pass

    def read_file(self, path: PathLike) -> Any:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ReadError(str(path), e) from e
        try:
            obj = self.parse(data)
        except ParseError as e:
            if e.path is None:
                raise ParseError(e.format, str(path), e.cause) from e.cause
            raise
        return self.complete_from_path(obj, path)

    def complete_from_path(self, obj: Any, path: Path) -> Any:
        """Fill fields derivable from the file location. Default: unchanged."""
        return obj

    def write_file(self, obj: Any, path: PathLike):
        try:
            data = self.marshal(obj)
        except MarshalError as e:
            raise WriteError(str(path), self.format_name, e) from e
        try:
            write_private_file(path, data)
        except OSError as e:
            raise WriteError(str(path), self.format_name, e) from e
        logger.debug("Wrote %s %s to %s", self.format_name, self.config_type.value, path)

    def parse_error(self, cause: BaseException) -> ParseError:
        return ParseError(self.format_name, cause=cause)

    def get_conversion_warnings(self) -> List[str]:
        """Warnings from this thread's most recent parse or marshal."""
        return list(self.warnings)

    def warn(self, message: str):
        self.warnings.append(message)
        logger.debug("%s: %s", self.format_name, message)


class JSONFormatAdapter(FormatAdapter):
    """
    Adapter for JSON-based formats.

    Subclasses convert between the decoded JSON object and the canonical
    model with to_canonical() / from_canonical().
    """

    @abstractmethod
    def to_canonical(self, native: Dict[str, Any]) -> Any:
        pass

    @abstractmethod
    def from_canonical(self, obj: Any) -> Dict[str, Any]:
        pass

    def parse(self, data: bytes) -> Any:
        self.reset_warnings()
        try:
            native = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise self.parse_error(e) from e
        if not isinstance(native, dict):
            raise self.parse_error(ValueError("expected a JSON object"))
        try:
            return self.to_canonical(native)
        except AssistKitError:
            raise
        except (TypeError, ValueError, AttributeError, KeyError) as e:
            raise self.parse_error(e) from e

    def marshal(self, obj: Any) -> bytes:
        return self.encode(self.to_native(obj))

    def to_native(self, obj: Any) -> Dict[str, Any]:
        """from_canonical() with fresh warnings; use instead of calling from_canonical() directly."""
        self.reset_warnings()
        return self.from_canonical(obj)

    def encode(self, native: Dict[str, Any]) -> bytes:
        """Two-space indented JSON with a trailing newline."""
        try:
            return (json.dumps(native, indent=2, ensure_ascii=False) + "\n").encode('utf-8')
        except (TypeError, ValueError) as e:
            raise MarshalError(self.format_name, e) from e

    def write_native(self, native: Dict[str, Any], path: PathLike):
        """Write an already-converted native document."""
        data = self.encode(native)
        try:
            write_private_file(path, data)
        except OSError as e:
            raise WriteError(str(path), self.format_name, e) from e
