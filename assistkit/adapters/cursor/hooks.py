"""
Cursor hooks adapter.

Cursor's hooks.json is versioned and supports command hooks only::

    {"version": 1, "hooks": {"beforeShellExecution": [{"command": "./check.sh"}]}}
"""

from pathlib import Path
from typing import Any, Dict, List

from assistkit.core.adapter_interface import JSONFormatAdapter
from assistkit.core.canonical_models import ConfigType, Event, Hook, HookEntry, HooksConfig, HookType

CURSOR_HOOKS_VERSION = 1

EVENT_MAPPING: Dict[Event, str] = {
    Event.BEFORE_COMMAND: "beforeShellExecution",
    Event.AFTER_COMMAND: "afterShellExecution",
    Event.BEFORE_MCP: "beforeMCPExecution",
    Event.AFTER_MCP: "afterMCPExecution",
    Event.BEFORE_FILE_READ: "beforeReadFile",
    Event.AFTER_FILE_WRITE: "afterFileEdit",
    Event.BEFORE_PROMPT: "beforeSubmitPrompt",
    Event.AFTER_RESPONSE: "afterAgentResponse",
    Event.AFTER_THOUGHT: "afterAgentThought",
    Event.ON_STOP: "stop",
    Event.BEFORE_TAB_READ: "beforeTabFileRead",
    Event.AFTER_TAB_EDIT: "afterTabFileEdit",
}

REVERSE_EVENT_MAPPING: Dict[str, Event] = {native: event for event, native in EVENT_MAPPING.items()}


class CursorHooksAdapter(JSONFormatAdapter):

    @property
    def format_name(self) -> str:
        return "cursor"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.HOOKS

    def supported_events(self) -> List[Event]:
        return list(EVENT_MAPPING)

    def default_paths(self) -> List[Path]:
        return [
            Path(".cursor") / "hooks.json",
            Path.home() / ".cursor" / "hooks.json",
        ]

    def to_canonical(self, native: Dict[str, Any]) -> HooksConfig:
        cfg = HooksConfig(version=int(native.get('version') or 0))
        for native_event, raw_hooks in (native.get('hooks') or {}).items():
            event = REVERSE_EVENT_MAPPING.get(native_event)
            if event is None:
                self.warn(f"Unknown Cursor hook event '{native_event}' skipped")
                continue
            cfg.add_entry(event, HookEntry(hooks=[
                Hook(type=HookType.COMMAND, command=raw.get('command') or '')
                for raw in raw_hooks
            ]))
        return cfg

    def from_canonical(self, cfg: HooksConfig) -> Dict[str, Any]:
        hooks: Dict[str, List[Dict[str, Any]]] = {}
        for event, entries in cfg.ordered_items():
            native_event = EVENT_MAPPING.get(event)
            if native_event is None:
                self.warn(f"Event '{event}' is not supported by Cursor and was dropped")
                continue
            for entry in entries:
                for hook in entry.hooks:
                    if hook.is_prompt():
                        self.warn(f"Prompt hook on '{event}' dropped: Cursor supports command hooks only")
                        continue
                    if not hook.command:
                        self.warn(f"Hook on '{event}' has no command and was dropped")
                        continue
                    hooks.setdefault(native_event, []).append({'command': hook.command})

        return {
            'version': cfg.version or CURSOR_HOOKS_VERSION,
            'hooks': hooks,
        }
