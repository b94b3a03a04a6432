"""
Core abstractions: canonical models, the adapter interface, the registry
and error types.
"""

from .adapter_interface import (
    DEFAULT_DIR_MODE,
    DEFAULT_FILE_MODE,
    FormatAdapter,
    JSONFormatAdapter,
    write_private_file,
)
from .canonical_models import (
    AREA_DOCUMENTATION,
    AREA_QA,
    AREA_RELEASE,
    AREA_SECURITY,
    CanonicalAgent,
    CanonicalCommand,
    CanonicalContext,
    CanonicalPlugin,
    CanonicalSkill,
    CheckStatus,
    CommandArgument,
    ConfigType,
    Event,
    Hook,
    HookEntry,
    HooksConfig,
    HookType,
    MCPConfig,
    MCPServer,
    ToolSupport,
    ValidationArea,
    ValidationCheck,
    all_events,
)
from .errors import (
    AdapterNotFoundError,
    AssistKitError,
    BothCommandAndPromptError,
    ConversionError,
    GenerateError,
    HookValidationError,
    MarshalError,
    NoCommandOrPromptError,
    ParseError,
    ReadError,
    WriteError,
)
from .registry import FormatRegistry
from .validation_io import (
    read_canonical_dir,
    read_canonical_file,
    write_areas_to_dir,
    write_canonical_file,
)

__all__ = [
    'DEFAULT_DIR_MODE',
    'DEFAULT_FILE_MODE',
    'FormatAdapter',
    'JSONFormatAdapter',
    'write_private_file',
    'AREA_DOCUMENTATION',
    'AREA_QA',
    'AREA_RELEASE',
    'AREA_SECURITY',
    'CanonicalAgent',
    'CanonicalCommand',
    'CanonicalContext',
    'CanonicalPlugin',
    'CanonicalSkill',
    'CheckStatus',
    'CommandArgument',
    'ConfigType',
    'Event',
    'Hook',
    'HookEntry',
    'HooksConfig',
    'HookType',
    'MCPConfig',
    'MCPServer',
    'ToolSupport',
    'ValidationArea',
    'ValidationCheck',
    'all_events',
    'AdapterNotFoundError',
    'AssistKitError',
    'BothCommandAndPromptError',
    'ConversionError',
    'GenerateError',
    'HookValidationError',
    'MarshalError',
    'NoCommandOrPromptError',
    'ParseError',
    'ReadError',
    'WriteError',
    'FormatRegistry',
    'read_canonical_dir',
    'read_canonical_file',
    'write_areas_to_dir',
    'write_canonical_file',
]
