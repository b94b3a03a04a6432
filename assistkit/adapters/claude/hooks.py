"""
Claude Code hooks adapter.

Claude keys hooks by native event name, and several canonical events share
PreToolUse/PostToolUse, distinguished by the entry's tool matcher::

    {
      "hooks": {
        "PreToolUse": [
          {"matcher": "Bash", "hooks": [{"type": "command", "command": "check.sh"}]}
        ]
      }
    }

Hooks live in .claude/settings.json alongside unrelated settings, which are
ignored on parse.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assistkit.core.adapter_interface import JSONFormatAdapter
from assistkit.core.canonical_models import (
    ConfigType,
    Event,
    Hook,
    HookEntry,
    HooksConfig,
    parse_hook_type,
)

PRE_TOOL_USE = "PreToolUse"
POST_TOOL_USE = "PostToolUse"
PERMISSION_REQUEST = "PermissionRequest"
USER_PROMPT_SUBMIT = "UserPromptSubmit"
STOP = "Stop"
SESSION_START = "SessionStart"
SESSION_END = "SessionEnd"
NOTIFICATION = "Notification"
PRE_COMPACT = "PreCompact"
SUBAGENT_STOP = "SubagentStop"

# Enterprise policy file, highest precedence
MANAGED_SETTINGS_PATHS: Dict[str, Path] = {
    'linux': Path("/etc/claude-code/managed-settings.json"),
    'darwin': Path("/Library/Application Support/ClaudeCode/managed-settings.json"),
    'win32': Path("C:/ProgramData/ClaudeCode/managed-settings.json"),
}

MATCHER_READ = "Read"
MATCHER_WRITE = "Write"
MATCHER_EDIT = "Edit"
MATCHER_WRITE_EDIT = "Write|Edit"
MATCHER_BASH = "Bash"

# Canonical event -> (native event, default matcher)
EVENT_MAPPING: Dict[Event, Tuple[str, str]] = {
    Event.BEFORE_FILE_READ: (PRE_TOOL_USE, MATCHER_READ),
    Event.AFTER_FILE_READ: (POST_TOOL_USE, MATCHER_READ),
    Event.BEFORE_FILE_WRITE: (PRE_TOOL_USE, MATCHER_WRITE_EDIT),
    Event.AFTER_FILE_WRITE: (POST_TOOL_USE, MATCHER_WRITE_EDIT),
    Event.BEFORE_COMMAND: (PRE_TOOL_USE, MATCHER_BASH),
    Event.AFTER_COMMAND: (POST_TOOL_USE, MATCHER_BASH),
    Event.BEFORE_MCP: (PRE_TOOL_USE, ""),
    Event.AFTER_MCP: (POST_TOOL_USE, ""),
    Event.BEFORE_PROMPT: (USER_PROMPT_SUBMIT, ""),
    Event.ON_STOP: (STOP, ""),
    Event.ON_SESSION_START: (SESSION_START, ""),
    Event.ON_SESSION_END: (SESSION_END, ""),
    Event.ON_PERMISSION: (PERMISSION_REQUEST, ""),
    Event.ON_NOTIFICATION: (NOTIFICATION, ""),
    Event.BEFORE_COMPACT: (PRE_COMPACT, ""),
    Event.ON_SUBAGENT_STOP: (SUBAGENT_STOP, ""),
}

# Native events that map to exactly one canonical event
DIRECT_EVENTS: Dict[str, Event] = {
    USER_PROMPT_SUBMIT: Event.BEFORE_PROMPT,
    STOP: Event.ON_STOP,
    SESSION_START: Event.ON_SESSION_START,
    SESSION_END: Event.ON_SESSION_END,
    PERMISSION_REQUEST: Event.ON_PERMISSION,
    NOTIFICATION: Event.ON_NOTIFICATION,
    PRE_COMPACT: Event.BEFORE_COMPACT,
    SUBAGENT_STOP: Event.ON_SUBAGENT_STOP,
}

# Tool-call events, disambiguated by matcher
MATCHER_EVENTS: Dict[str, Dict[str, Event]] = {
    PRE_TOOL_USE: {
        MATCHER_READ: Event.BEFORE_FILE_READ,
        MATCHER_WRITE: Event.BEFORE_FILE_WRITE,
        MATCHER_EDIT: Event.BEFORE_FILE_WRITE,
        MATCHER_WRITE_EDIT: Event.BEFORE_FILE_WRITE,
        MATCHER_BASH: Event.BEFORE_COMMAND,
    },
    POST_TOOL_USE: {
        MATCHER_READ: Event.AFTER_FILE_READ,
        MATCHER_WRITE: Event.AFTER_FILE_WRITE,
        MATCHER_EDIT: Event.AFTER_FILE_WRITE,
        MATCHER_WRITE_EDIT: Event.AFTER_FILE_WRITE,
        MATCHER_BASH: Event.AFTER_COMMAND,
    },
}

# Any other matcher (mcp__*, empty, Glob, ...) is treated as an MCP tool call
UNMATCHED_TOOL_EVENTS: Dict[str, Event] = {
    PRE_TOOL_USE: Event.BEFORE_MCP,
    POST_TOOL_USE: Event.AFTER_MCP,
}


def native_to_canonical_event(native_event: str, matcher: str) -> Optional[Event]:
    """Resolve a native event + matcher to a canonical event; None if unknown."""
    event = DIRECT_EVENTS.get(native_event)
    if event is not None:
        return event
    by_matcher = MATCHER_EVENTS.get(native_event)
    if by_matcher is None:
        return None
    return by_matcher.get(matcher, UNMATCHED_TOOL_EVENTS[native_event])


class ClaudeHooksAdapter(JSONFormatAdapter):
    """Adapter for the hooks section of Claude Code settings."""

    @property
    def format_name(self) -> str:
        return "claude"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.HOOKS

    def supported_events(self) -> List[Event]:
        return list(EVENT_MAPPING)

    def default_paths(self) -> List[Path]:
        paths = [
            Path(".claude") / "settings.json",
            Path(".claude") / "settings.local.json",
            Path.home() / ".claude" / "settings.json",
        ]
        managed = MANAGED_SETTINGS_PATHS.get(sys.platform)
        if managed is not None:
            paths.append(managed)
        return paths

    def to_canonical(self, native: Dict[str, Any]) -> HooksConfig:
        cfg = HooksConfig(
            disable_all_hooks=bool(native.get('disableAllHooks', False)),
            allow_managed_hooks_only=bool(native.get('allowManagedHooksOnly', False)),
        )
        for native_event, entries in (native.get('hooks') or {}).items():
            for raw_entry in entries:
                matcher = raw_entry.get('matcher') or ''
                event = native_to_canonical_event(native_event, matcher)
                if event is None:
                    self.warn(f"Unknown Claude hook event '{native_event}' skipped")
                    continue
                cfg.add_entry(event, HookEntry(
                    matcher=matcher,
                    hooks=[self._hook_to_canonical(h) for h in raw_entry.get('hooks') or []],
                ))
        return cfg

    def from_canonical(self, cfg: HooksConfig) -> Dict[str, Any]:
        hooks: Dict[str, List[Dict[str, Any]]] = {}
        for event, entries in cfg.ordered_items():
            mapping = EVENT_MAPPING.get(event)
            if mapping is None:
                self.warn(f"Event '{event}' is not supported by Claude and was dropped")
                continue
            native_event, default_matcher = mapping
            for entry in entries:
                native_entry: Dict[str, Any] = {}
                matcher = entry.matcher or default_matcher
                if matcher:
                    native_entry['matcher'] = matcher
                native_entry['hooks'] = [self._hook_from_canonical(h) for h in entry.hooks]
                hooks.setdefault(native_event, []).append(native_entry)

        native: Dict[str, Any] = {'hooks': hooks}
        if cfg.disable_all_hooks:
            native['disableAllHooks'] = True
        if cfg.allow_managed_hooks_only:
            native['allowManagedHooksOnly'] = True
        return native

    def _hook_to_canonical(self, raw: Dict[str, Any]) -> Hook:
        return Hook(
            type=parse_hook_type(raw.get('type')),
            command=raw.get('command') or '',
            prompt=raw.get('prompt') or '',
            timeout=int(raw.get('timeout') or 0),
        )

    def _hook_from_canonical(self, hook: Hook) -> Dict[str, Any]:
        native: Dict[str, Any] = {}
        hook_type = hook.effective_type()
        if hook_type is not None:
            native['type'] = hook_type.value
        if hook.command:
            native['command'] = hook.command
        if hook.prompt:
            native['prompt'] = hook.prompt
        if hook.timeout:
            native['timeout'] = hook.timeout
        return native
