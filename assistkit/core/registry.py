"""
Format registry for adapter discovery and conversion.

One registry exists per artifact kind. Registries are populated explicitly
by the composition root (assistkit.adapters.build_registries); nothing
registers itself at import time.
"""

import logging
import threading
from typing import Dict, List, Optional

from .adapter_interface import FormatAdapter
from .canonical_models import ConfigType
from .errors import AdapterNotFoundError, AssistKitError, ConversionError, HookValidationError

logger = logging.getLogger(__name__)


class FormatRegistry:
    """
    Thread-safe name -> adapter mapping.

    Registering a name twice replaces the earlier adapter.
    """

    def __init__(self, config_type: Optional[ConfigType] = None):
        self.config_type = config_type
        self._adapters: Dict[str, FormatAdapter] = {}
        self._lock = threading.Lock()

    def register(self, adapter: FormatAdapter):
        name = adapter.format_name
        with self._lock:
            if name in self._adapters:
                logger.debug("Replacing registered adapter '%s'", name)
            self._adapters[name] = adapter

    def unregister(self, format_name: str):
        with self._lock:
            self._adapters.pop(format_name, None)

    def get_adapter(self, format_name: str) -> Optional[FormatAdapter]:
        with self._lock:
            return self._adapters.get(format_name)

    def require_adapter(self, format_name: str) -> FormatAdapter:
        """Like get_adapter(), but raises AdapterNotFoundError when missing."""
        adapter = self.get_adapter(format_name)
        if adapter is None:
            raise AdapterNotFoundError(format_name)
        return adapter

    def list_formats(self) -> List[str]:
        with self._lock:
            return sorted(self._adapters)

    def __contains__(self, format_name: str) -> bool:
        return self.get_adapter(format_name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._adapters)

    def convert(self, data: bytes, from_format: str, to_format: str, validate: bool = False) -> bytes:
        """
        Parse data with one adapter and marshal it with another.

        With validate=True the parsed model's validate() runs between the
        two steps (hooks configs reject hooks with no or both payloads).

        Raises:
            ConversionError: wrapping AdapterNotFoundError (with role 'source'
                or 'target') or the parse/validate/marshal failure. When the
                failure belongs to one hook event, ``event`` names it.
        """
        source = self.get_adapter(from_format)
        if source is None:
            cause = AdapterNotFoundError(from_format, role="source")
            raise ConversionError(from_format, to_format, cause=cause) from cause
        target = self.get_adapter(to_format)
        if target is None:
            cause = AdapterNotFoundError(to_format, role="target")
            raise ConversionError(from_format, to_format, cause=cause) from cause

        try:
            canonical = source.parse(data)
            if validate and hasattr(canonical, 'validate'):
                canonical.validate()
            return target.marshal(canonical)
        except AssistKitError as e:
            raise ConversionError(from_format, to_format, event=failed_event(e), cause=e) from e


def failed_event(error: BaseException) -> Optional[str]:
    """Event name carried by a hook validation failure, if any."""
    if isinstance(error, HookValidationError):
        return error.event
    return None
