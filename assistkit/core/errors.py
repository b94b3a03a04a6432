"""
Error types raised by adapters, registries and the bundle generator.

Every error that wraps another keeps it on ``cause`` and is raised with
``raise ... from cause`` so the chain stays inspectable.
"""

from typing import Optional


class AssistKitError(Exception):
    """Base class for all assistkit errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NoCommandOrPromptError(ValueError):
    """A hook has neither a command nor a prompt."""


class BothCommandAndPromptError(ValueError):
    """A hook has both a command and a prompt."""


class ParseError(AssistKitError):
    def __init__(self, format: str, path: Optional[str] = None, cause: Optional[BaseException] = None):
        self.format = format
        self.path = str(path) if path is not None else None
        where = f" from {self.path}" if self.path else ""
        super().__init__(f"failed to parse {format} config{where}: {cause}", cause)


class ReadError(AssistKitError):
    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = str(path)
        super().__init__(f"failed to read {self.path}: {cause}", cause)


class WriteError(AssistKitError):
    def __init__(self, path: str, format: Optional[str] = None, cause: Optional[BaseException] = None):
        self.path = str(path)
        self.format = format
        what = f"{format} config" if format else "file"
        super().__init__(f"failed to write {what} to {self.path}: {cause}", cause)


class MarshalError(AssistKitError):
    def __init__(self, format: str, cause: Optional[BaseException] = None):
        self.format = format
        super().__init__(f"failed to marshal {format} config: {cause}", cause)


class ConversionError(AssistKitError):
    """
    A convert call failed. ``event`` is set when the failure belongs to a
    single hook event (a HookValidationError from a validating convert).
    """

    def __init__(self, from_format: str, to_format: str, event: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        self.from_format = from_format
        self.to_format = to_format
        self.event = event
        subject = f"event {event!r} " if event else ""
        super().__init__(f"failed to convert {subject}from {from_format} to {to_format}: {cause}", cause)


class HookValidationError(AssistKitError):
    def __init__(self, event: str, entry_index: int, hook_index: int,
                 cause: Optional[BaseException] = None):
        self.event = str(event)
        self.entry_index = entry_index
        self.hook_index = hook_index
        super().__init__(
            f"hook validation error for event {self.event!r} "
            f"(entry {entry_index}, hook {hook_index}): {cause}",
            cause,
        )


class AdapterNotFoundError(AssistKitError):
    """No adapter is registered under a name. ``role`` is 'source' or 'target' during conversion."""

    def __init__(self, name: str, role: Optional[str] = None):
        self.name = name
        self.role = role
        prefix = f"unknown {role} adapter" if role else "unknown adapter"
        super().__init__(f"{prefix}: {name}")


class GenerateError(AssistKitError):
    def __init__(self, tool: str, component: Optional[str] = None, cause: Optional[BaseException] = None):
        self.tool = tool
        self.component = component
        where = f"{tool}/{component}" if component else tool
        super().__init__(f"bundle generate {where}: {cause}", cause)
