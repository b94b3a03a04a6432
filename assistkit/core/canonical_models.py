"""
Canonical data models for assistant configuration artifacts.

These models are the tool-agnostic representation that every adapter
converts to and from. The hook models carry the event vocabulary and the
classification helpers (before/after, blocking, per-tool support); the
remaining artifact kinds (agents, skills, commands, MCP servers, plugin
manifests, project context) are plain dataclasses with a metadata bag for
format-specific fields that must survive a round-trip.
"""

import copy
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class ConfigType(Enum):
    """Kinds of configuration artifacts handled by the adapters."""
    HOOKS = "hooks"
    AGENT = "agent"
    SKILL = "skill"
    COMMAND = "command"
    MCP = "mcp"
    PLUGIN = "plugin"
    CONTEXT = "context"
    VALIDATION = "validation"


class MetadataMixin:
    """Format-specific fields kept alongside a canonical artifact."""

    metadata: Dict[str, Any]

    def add_metadata(self, key: str, value: Any):
        self.metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def has_metadata(self, key: str) -> bool:
        return key in self.metadata


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------

class Event(str, Enum):
    """
    Canonical lifecycle events.

    Tools name these differently (PreToolUse + matcher, beforeShellExecution,
    pre_run_command, ...) but they all map onto this vocabulary.
    """
    BEFORE_FILE_READ = "before_file_read"
    AFTER_FILE_READ = "after_file_read"
    BEFORE_FILE_WRITE = "before_file_write"
    AFTER_FILE_WRITE = "after_file_write"
    BEFORE_COMMAND = "before_command"
    AFTER_COMMAND = "after_command"
    BEFORE_MCP = "before_mcp"
    AFTER_MCP = "after_mcp"
    BEFORE_PROMPT = "before_prompt"
    ON_STOP = "on_stop"
    ON_SESSION_START = "on_session_start"
    ON_SESSION_END = "on_session_end"
    AFTER_RESPONSE = "after_response"
    AFTER_THOUGHT = "after_thought"
    ON_PERMISSION = "on_permission"
    ON_NOTIFICATION = "on_notification"
    BEFORE_COMPACT = "before_compact"
    ON_SUBAGENT_STOP = "on_subagent_stop"
    BEFORE_TAB_READ = "before_tab_read"
    AFTER_TAB_EDIT = "after_tab_edit"

    def __str__(self) -> str:
        return self.value

    def is_before_event(self) -> bool:
        """True for events that fire before an action takes place."""
        return self in _BEFORE_EVENTS

    def is_after_event(self) -> bool:
        """True for events that observe an action after it happened."""
        return self in _AFTER_EVENTS

    def can_block(self) -> bool:
        """
        True if a hook on this event may veto the action.

        Permission requests are not "before" events but are interactive
        gates, so they are listed separately.
        """
        return self.is_before_event() or self is Event.ON_PERMISSION

    def tool_support(self) -> "ToolSupport":
        """Which hook-capable tools understand this event."""
        return _TOOL_SUPPORT.get(self, ToolSupport())


_BEFORE_EVENTS = frozenset({
    Event.BEFORE_FILE_READ, Event.BEFORE_FILE_WRITE, Event.BEFORE_COMMAND,
    Event.BEFORE_MCP, Event.BEFORE_PROMPT, Event.BEFORE_COMPACT,
    Event.BEFORE_TAB_READ,
})

_AFTER_EVENTS = frozenset({
    Event.AFTER_FILE_READ, Event.AFTER_FILE_WRITE, Event.AFTER_COMMAND,
    Event.AFTER_MCP, Event.AFTER_RESPONSE, Event.AFTER_THOUGHT,
    Event.AFTER_TAB_EDIT,
})


@dataclass(frozen=True)
class ToolSupport:
    """Per-tool support flags for a canonical event."""
    claude: bool = False
    cursor: bool = False
    windsurf: bool = False

    def supports(self, tool: str) -> bool:
        return bool(getattr(self, tool, False))


_TOOL_SUPPORT: Dict[Event, ToolSupport] = {
    Event.BEFORE_FILE_READ: ToolSupport(claude=True, cursor=True, windsurf=True),
    Event.AFTER_FILE_READ: ToolSupport(claude=True, windsurf=True),
    Event.BEFORE_FILE_WRITE: ToolSupport(claude=True, windsurf=True),
    Event.AFTER_FILE_WRITE: ToolSupport(claude=True, cursor=True, windsurf=True),
    Event.BEFORE_COMMAND: ToolSupport(claude=True, cursor=True, windsurf=True),
    Event.AFTER_COMMAND: ToolSupport(claude=True, cursor=True, windsurf=True),
    Event.BEFORE_MCP: ToolSupport(claude=True, cursor=True, windsurf=True),
    Event.AFTER_MCP: ToolSupport(claude=True, cursor=True, windsurf=True),
    Event.BEFORE_PROMPT: ToolSupport(claude=True, cursor=True, windsurf=True),
    Event.ON_STOP: ToolSupport(claude=True, cursor=True),
    Event.ON_SESSION_START: ToolSupport(claude=True),
    Event.ON_SESSION_END: ToolSupport(claude=True),
    Event.AFTER_RESPONSE: ToolSupport(cursor=True),
    Event.AFTER_THOUGHT: ToolSupport(cursor=True),
    Event.ON_PERMISSION: ToolSupport(claude=True),
    Event.ON_NOTIFICATION: ToolSupport(claude=True),
    Event.BEFORE_COMPACT: ToolSupport(claude=True),
    Event.ON_SUBAGENT_STOP: ToolSupport(claude=True),
    Event.BEFORE_TAB_READ: ToolSupport(cursor=True),
    Event.AFTER_TAB_EDIT: ToolSupport(cursor=True),
}


def all_events() -> List[Event]:
    """All canonical events in declaration order."""
    return list(Event)


class HookType(str, Enum):
    COMMAND = "command"
    PROMPT = "prompt"

    def __str__(self) -> str:
        return self.value


@dataclass
class Hook:
    """
    A single hook action.

    Parsing is permissive: a hook may arrive without a type tag, or with
    both or neither payload set. validate() enforces that exactly one of
    command/prompt is present.
    """
    type: Optional[HookType] = None
    command: str = ""
    prompt: str = ""
    timeout: int = 0
    show_output: bool = False
    working_dir: str = ""

    @classmethod
    def command_hook(cls, command: str) -> "Hook":
        return cls(type=HookType.COMMAND, command=command)

    @classmethod
    def prompt_hook(cls, prompt: str) -> "Hook":
        return cls(type=HookType.PROMPT, prompt=prompt)

    def with_timeout(self, seconds: int) -> "Hook":
        self.timeout = seconds
        return self

    def with_show_output(self, show: bool = True) -> "Hook":
        self.show_output = show
        return self

    def with_working_dir(self, directory: str) -> "Hook":
        self.working_dir = directory
        return self

    def effective_type(self) -> Optional[HookType]:
        """
        Declared type, or the type inferred from the payload.

        An untyped hook with a command is a command hook; otherwise an
        untyped hook with a prompt is a prompt hook.
        """
        if self.type is not None:
            return self.type
        if self.command:
            return HookType.COMMAND
        if self.prompt:
            return HookType.PROMPT
        return None

    def is_command(self) -> bool:
        return self.effective_type() is HookType.COMMAND

    def is_prompt(self) -> bool:
        return self.effective_type() is HookType.PROMPT

    def validate(self):
        """Raise if the hook does not carry exactly one payload."""
        from .errors import BothCommandAndPromptError, NoCommandOrPromptError

        if not self.command and not self.prompt:
            raise NoCommandOrPromptError("hook must have either command or prompt")
        if self.command and self.prompt:
            raise BothCommandAndPromptError("hook cannot have both command and prompt")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        hook_type = self.effective_type()
        if hook_type is not None:
            data['type'] = hook_type.value
        if self.command:
            data['command'] = self.command
        if self.prompt:
            data['prompt'] = self.prompt
        if self.timeout:
            data['timeout'] = self.timeout
        if self.show_output:
            data['showOutput'] = True
        if self.working_dir:
            data['workingDir'] = self.working_dir
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hook":
        return cls(
            type=parse_hook_type(data.get('type')),
            command=data.get('command') or '',
            prompt=data.get('prompt') or '',
            timeout=int(data.get('timeout') or 0),
            show_output=bool(data.get('showOutput', False)),
            working_dir=data.get('workingDir') or '',
        )


def parse_hook_type(value: Any) -> Optional[HookType]:
    """Map a native type tag to HookType; unknown or empty tags become None."""
    if isinstance(value, HookType):
        return value
    if value == HookType.COMMAND.value:
        return HookType.COMMAND
    if value == HookType.PROMPT.value:
        return HookType.PROMPT
    return None


@dataclass
class HookEntry:
    """Hooks that share an optional matcher (e.g. "Bash", "Write|Edit")."""
    matcher: str = ""
    hooks: List[Hook] = field(default_factory=list)


@dataclass
class HooksConfig:
    """
    Canonical hooks configuration.

    Maps each event to an ordered list of entries. The two policy flags are
    Claude settings that travel with the hooks section.
    """
    hooks: Dict[Event, List[HookEntry]] = field(default_factory=dict)
    version: int = 0
    disable_all_hooks: bool = False
    allow_managed_hooks_only: bool = False

    def add_hook(self, event: Event, hook: Hook):
        self.add_hook_with_matcher(event, "", hook)

    def add_hook_with_matcher(self, event: Event, matcher: str, hook: Hook):
        """Append to the entry with the same matcher, or start a new entry."""
        entries = self.hooks.setdefault(event, [])
        for entry in entries:
            if entry.matcher == matcher:
                entry.hooks.append(hook)
                return
        entries.append(HookEntry(matcher=matcher, hooks=[hook]))

    def add_entry(self, event: Event, entry: HookEntry):
        self.hooks.setdefault(event, []).append(entry)

    def get_hooks(self, event: Event) -> List[HookEntry]:
        return self.hooks.get(event, [])

    def get_all_hooks_for_event(self, event: Event) -> List[Hook]:
        return [hook for entry in self.get_hooks(event) for hook in entry.hooks]

    def remove_hooks(self, event: Event):
        self.hooks.pop(event, None)

    def events(self) -> List[Event]:
        return list(self.hooks)

    def ordered_items(self) -> List[Tuple[Event, List[HookEntry]]]:
        """(event, entries) pairs in canonical event order."""
        return [(event, self.hooks[event]) for event in Event if event in self.hooks]

    def has_hooks(self) -> bool:
        return bool(self.hooks)

    def hook_count(self) -> int:
        return sum(len(entry.hooks) for entries in self.hooks.values() for entry in entries)

    def merge(self, other: Optional["HooksConfig"]):
        """Append other's entries; the more restrictive policy flags win."""
        if other is None:
            return
        for event, entries in other.hooks.items():
            self.hooks.setdefault(event, []).extend(entries)
        self.disable_all_hooks = self.disable_all_hooks or other.disable_all_hooks
        self.allow_managed_hooks_only = (
            self.allow_managed_hooks_only or other.allow_managed_hooks_only
        )

    def filter_by_tool(self, tool: str) -> "HooksConfig":
        """Independent copy holding only the events the given tool supports."""
        filtered = HooksConfig(
            version=self.version,
            disable_all_hooks=self.disable_all_hooks,
            allow_managed_hooks_only=self.allow_managed_hooks_only,
        )
        for event, entries in self.hooks.items():
            if event.tool_support().supports(tool):
                filtered.hooks[event] = copy.deepcopy(entries)
        return filtered

    def validate(self):
        """Raise HookValidationError for the first hook that fails validation."""
        from .errors import HookValidationError

        for event, entries in self.hooks.items():
            for entry_index, entry in enumerate(entries):
                for hook_index, hook in enumerate(entry.hooks):
                    try:
                        hook.validate()
                    except ValueError as e:
                        raise HookValidationError(event, entry_index, hook_index, e) from e

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.version:
            data['version'] = self.version
        data['hooks'] = {
            event.value: [
                _entry_to_dict(entry) for entry in entries
            ]
            for event, entries in self.hooks.items()
        }
        if self.disable_all_hooks:
            data['disableAllHooks'] = True
        if self.allow_managed_hooks_only:
            data['allowManagedHooksOnly'] = True
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HooksConfig":
        """Build from the canonical JSON form. Unknown event names and malformed shapes raise ValueError."""
        if not isinstance(data, dict):
            raise ValueError("hooks config must be an object")
        cfg = cls(
            version=int(data.get('version') or 0),
            disable_all_hooks=bool(data.get('disableAllHooks', False)),
            allow_managed_hooks_only=bool(data.get('allowManagedHooksOnly', False)),
        )
        hooks = data.get('hooks') or {}
        if not isinstance(hooks, dict):
            raise ValueError("'hooks' must map event names to entry lists")
        for event_name, entries in hooks.items():
            event = Event(event_name)
            if not isinstance(entries, list):
                raise ValueError(f"entries for {event_name!r} must be a list")
            for raw in entries:
                if not isinstance(raw, dict):
                    raise ValueError(f"hook entry for {event_name!r} must be an object")
                raw_hooks = raw.get('hooks') or []
                if not isinstance(raw_hooks, list) or not all(isinstance(h, dict) for h in raw_hooks):
                    raise ValueError(f"hooks for {event_name!r} must be a list of objects")
                cfg.add_entry(event, HookEntry(
                    matcher=raw.get('matcher') or '',
                    hooks=[Hook.from_dict(h) for h in raw_hooks],
                ))
        return cfg


def _entry_to_dict(entry: HookEntry) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if entry.matcher:
        data['matcher'] = entry.matcher
    data['hooks'] = [hook.to_dict() for hook in entry.hooks]
    return data


# ---------------------------------------------------------------------------
# Agents, skills, commands
# ---------------------------------------------------------------------------

@dataclass
class CanonicalAgent(MetadataMixin):
    """Agent / sub-agent definition."""
    name: str
    description: str = ""
    instructions: str = ""
    model: Optional[str] = None
    tools: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    source_format: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalAgent":
        return cls(
            name=data['name'],
            description=data.get('description', ''),
            instructions=data.get('instructions', ''),
            model=data.get('model'),
            tools=list(data.get('tools') or []),
            skills=list(data.get('skills') or []),
            dependencies=list(data.get('dependencies') or []),
        )


@dataclass
class CanonicalSkill(MetadataMixin):
    """Skill definition: instructions plus optional supporting resources."""
    name: str
    description: str = ""
    instructions: str = ""
    triggers: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    scripts: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)
    assets: List[str] = field(default_factory=list)
    source_format: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalSkill":
        return cls(
            name=data['name'],
            description=data.get('description', ''),
            instructions=data.get('instructions', ''),
            triggers=list(data.get('triggers') or []),
            dependencies=list(data.get('dependencies') or []),
            scripts=list(data.get('scripts') or []),
            references=list(data.get('references') or []),
            assets=list(data.get('assets') or []),
        )


@dataclass
class CommandArgument:
    name: str
    description: str = ""
    required: bool = False
    default: str = ""


@dataclass
class CanonicalCommand(MetadataMixin):
    """
    Slash command / saved prompt.

    The prompt uses $ARGUMENTS as its argument placeholder.
    """
    name: str
    description: str = ""
    prompt: str = ""
    arguments: List[CommandArgument] = field(default_factory=list)
    allowed_tools: List[str] = field(default_factory=list)
    model: Optional[str] = None
    source_format: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_argument(self, name: str, description: str = "", required: bool = False):
        self.arguments.append(CommandArgument(name=name, description=description, required=required))

    def argument_hint(self) -> str:
        """Render arguments as '<required> [optional]'."""
        parts = []
        for arg in self.arguments:
            parts.append(f"<{arg.name}>" if arg.required else f"[{arg.name}]")
        return " ".join(parts)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalCommand":
        return cls(
            name=data['name'],
            description=data.get('description', ''),
            prompt=data.get('prompt') or data.get('instructions', ''),
            arguments=[CommandArgument(**arg) for arg in data.get('arguments') or []],
            allowed_tools=list(data.get('allowed_tools') or data.get('allowedTools') or []),
            model=data.get('model'),
        )


# ---------------------------------------------------------------------------
# MCP servers and plugin manifests
# ---------------------------------------------------------------------------

TRANSPORT_STDIO = "stdio"
TRANSPORT_HTTP = "http"
TRANSPORT_SSE = "sse"


@dataclass
class MCPServer:
    command: str = ""
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)
    cwd: str = ""
    url: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    transport: str = TRANSPORT_STDIO
    enabled: bool = True

    def is_enabled(self) -> bool:
        return self.enabled

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MCPServer":
        url = data.get('url', '')
        return cls(
            command=data.get('command', ''),
            args=list(data.get('args') or []),
            env=dict(data.get('env') or {}),
            cwd=data.get('cwd', ''),
            url=url,
            headers=dict(data.get('headers') or {}),
            transport=data.get('transport') or (TRANSPORT_HTTP if url else TRANSPORT_STDIO),
            enabled=bool(data.get('enabled', True)) and not data.get('disabled', False),
        )


@dataclass
class MCPConfig:
    """Named MCP servers."""
    servers: Dict[str, MCPServer] = field(default_factory=dict)

    def add_server(self, name: str, server: MCPServer):
        self.servers[name] = server

    def has_servers(self) -> bool:
        return bool(self.servers)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MCPConfig":
        servers = data.get('servers', data)
        return cls(servers={name: MCPServer.from_dict(raw) for name, raw in servers.items()})


@dataclass
class CanonicalPlugin(MetadataMixin):
    """
    Plugin / extension manifest.

    Component fields (skills, commands, agents, hooks) hold relative paths
    and are normally filled in by the bundle generator.
    """
    name: str
    version: str = ""
    description: str = ""
    author: str = ""
    homepage: str = ""
    repository: str = ""
    license: str = ""
    keywords: List[str] = field(default_factory=list)
    skills: str = ""
    commands: str = ""
    agents: str = ""
    hooks: str = ""
    mcp_servers: Dict[str, MCPServer] = field(default_factory=dict)
    source_format: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_mcp_server(self, name: str, server: MCPServer):
        self.mcp_servers[name] = server

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalPlugin":
        author = data.get('author', '')
        if isinstance(author, dict):
            author = author.get('name', '')
        return cls(
            name=data['name'],
            version=data.get('version', ''),
            description=data.get('description', ''),
            author=author,
            homepage=data.get('homepage', ''),
            repository=data.get('repository', ''),
            license=data.get('license', ''),
            keywords=list(data.get('keywords') or []),
        )


# ---------------------------------------------------------------------------
# Project context
# ---------------------------------------------------------------------------

@dataclass
class ContextPackage:
    path: str
    purpose: str = ""


@dataclass
class ContextNote:
    content: str
    title: str = ""
    severity: str = ""

    def get_severity(self) -> str:
        return self.severity or "info"


@dataclass
class RelatedLink:
    name: str
    url: str = ""
    description: str = ""


@dataclass
class CanonicalContext:
    """
    Project context rendered into CLAUDE.md, AGENTS.md, .cursorrules, ...

    The canonical serialized form is CONTEXT.json.
    """
    name: str
    description: str = ""
    version: str = ""
    language: str = ""
    architecture_pattern: str = ""
    architecture_summary: str = ""
    packages: List[ContextPackage] = field(default_factory=list)
    commands: Dict[str, str] = field(default_factory=dict)
    conventions: List[str] = field(default_factory=list)
    notes: List[ContextNote] = field(default_factory=list)
    related: List[RelatedLink] = field(default_factory=list)

    def add_package(self, path: str, purpose: str):
        self.packages.append(ContextPackage(path=path, purpose=purpose))

    def add_convention(self, convention: str):
        self.conventions.append(convention)

    def add_note(self, content: str, title: str = "", severity: str = ""):
        self.notes.append(ContextNote(content=content, title=title, severity=severity))

    def set_command(self, name: str, command: str):
        self.commands[name] = command

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalContext":
        architecture = data.get('architecture') or {}
        return cls(
            name=data['name'],
            description=data.get('description', ''),
            version=data.get('version', ''),
            language=data.get('language', ''),
            architecture_pattern=data.get('architecture_pattern') or architecture.get('pattern', ''),
            architecture_summary=data.get('architecture_summary') or architecture.get('summary', ''),
            packages=[ContextPackage(**p) for p in data.get('packages') or []],
            commands=dict(data.get('commands') or {}),
            conventions=list(data.get('conventions') or []),
            notes=[ContextNote(**n) for n in data.get('notes') or []],
            related=[RelatedLink(**r) for r in data.get('related') or []],
        )


# ---------------------------------------------------------------------------
# Validation areas
# ---------------------------------------------------------------------------

class CheckStatus(str, Enum):
    """Go/No-Go outcome of a single release check."""
    GO = "GO"
    NO_GO = "NO-GO"
    WARN = "WARN"
    SKIP = "SKIP"

    def __str__(self) -> str:
        return self.value


AREA_QA = "qa"
AREA_DOCUMENTATION = "documentation"
AREA_RELEASE = "release"
AREA_SECURITY = "security"


@dataclass
class ValidationCheck:
    """
    One check in a validation area.

    A failed required check blocks the release (NO-GO); a failed optional
    check only warns. ``pattern`` is a regex whose presence is a failure.
    """
    name: str
    description: str = ""
    command: str = ""
    pattern: str = ""
    file_pattern: str = ""
    required: bool = False

    def failure_status(self) -> CheckStatus:
        return CheckStatus.NO_GO if self.required else CheckStatus.WARN

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'name': self.name}
        for key in ('description', 'command', 'pattern', 'file_pattern'):
            if getattr(self, key):
                data[key] = getattr(self, key)
        data['required'] = self.required
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationCheck":
        return cls(
            name=data['name'],
            description=data.get('description', ''),
            command=data.get('command', ''),
            pattern=data.get('pattern', ''),
            file_pattern=data.get('file_pattern', ''),
            required=bool(data.get('required', False)),
        )


@dataclass
class ValidationArea(MetadataMixin):
    """
    An area of release responsibility (QA, documentation, security, ...).

    Rendered as a Claude sub-agent, a Gemini command or a Codex prompt that
    runs the area's checks and reports Go/No-Go. ``model``, ``tools`` and
    ``skills`` only matter for agent-style targets.
    """
    name: str
    description: str = ""
    sign_off_criteria: str = ""
    checks: List[ValidationCheck] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    instructions: str = ""
    model: Optional[str] = None
    tools: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    source_format: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_check(self, check: ValidationCheck):
        self.checks.append(check)

    def add_dependency(self, dependency: str):
        self.dependencies.append(dependency)

    def add_tool(self, tool: str):
        self.tools.append(tool)

    def add_tools(self, *tools: str):
        self.tools.extend(tools)

    def add_skill(self, skill: str):
        self.skills.append(skill)

    def required_checks(self) -> List[ValidationCheck]:
        return [check for check in self.checks if check.required]

    def to_dict(self) -> Dict[str, Any]:
        """Canonical JSON form (one <area>.json file per area)."""
        data: Dict[str, Any] = {
            'name': self.name,
            'description': self.description,
            'sign_off_criteria': self.sign_off_criteria,
            'checks': [check.to_dict() for check in self.checks],
        }
        if self.dependencies:
            data['dependencies'] = list(self.dependencies)
        data['instructions'] = self.instructions
        if self.model:
            data['model'] = self.model
        if self.tools:
            data['tools'] = list(self.tools)
        if self.skills:
            data['skills'] = list(self.skills)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationArea":
        if not isinstance(data, dict):
            raise ValueError("validation area must be an object")
        return cls(
            name=data['name'],
            description=data.get('description', ''),
            sign_off_criteria=data.get('sign_off_criteria', ''),
            checks=[ValidationCheck.from_dict(c) for c in data.get('checks') or []],
            dependencies=list(data.get('dependencies') or []),
            instructions=data.get('instructions', ''),
            model=data.get('model') or None,
            tools=list(data.get('tools') or []),
            skills=list(data.get('skills') or []),
        )
