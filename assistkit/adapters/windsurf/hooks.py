"""
Windsurf (Cascade) hooks adapter.

Windsurf supports command hooks only, with optional output display and
working directory::

    {"hooks": {"pre_run_command": [{"command": "check.sh", "show_output": true}]}}
"""

from pathlib import Path
from typing import Any, Dict, List

from assistkit.core.adapter_interface import JSONFormatAdapter
from assistkit.core.canonical_models import ConfigType, Event, Hook, HookEntry, HooksConfig, HookType

EVENT_MAPPING: Dict[Event, str] = {
    Event.BEFORE_FILE_READ: "pre_read_code",
    Event.AFTER_FILE_READ: "post_read_code",
    Event.BEFORE_FILE_WRITE: "pre_write_code",
    Event.AFTER_FILE_WRITE: "post_write_code",
    Event.BEFORE_COMMAND: "pre_run_command",
    Event.AFTER_COMMAND: "post_run_command",
    Event.BEFORE_MCP: "pre_mcp_tool_use",
    Event.AFTER_MCP: "post_mcp_tool_use",
    Event.BEFORE_PROMPT: "pre_user_prompt",
}

REVERSE_EVENT_MAPPING: Dict[str, Event] = {native: event for event, native in EVENT_MAPPING.items()}


class WindsurfHooksAdapter(JSONFormatAdapter):

    @property
    def format_name(self) -> str:
        return "windsurf"

    @property
    def config_type(self) -> ConfigType:
        return ConfigType.HOOKS

    def supported_events(self) -> List[Event]:
        return list(EVENT_MAPPING)

    def default_paths(self) -> List[Path]:
        return [
            Path(".windsurf") / "hooks.json",
            Path.home() / ".codeium" / "windsurf" / "hooks.json",
        ]

    def to_canonical(self, native: Dict[str, Any]) -> HooksConfig:
        cfg = HooksConfig()
        for native_event, raw_hooks in (native.get('hooks') or {}).items():
            event = REVERSE_EVENT_MAPPING.get(native_event)
            if event is None:
                self.warn(f"Unknown Windsurf hook event '{native_event}' skipped")
                continue
            cfg.add_entry(event, HookEntry(hooks=[
                Hook(
                    type=HookType.COMMAND,
                    command=raw.get('command') or '',
                    show_output=bool(raw.get('show_output', False)),
                    working_dir=raw.get('working_directory') or '',
                )
                for raw in raw_hooks
            ]))
        return cfg

    def from_canonical(self, cfg: HooksConfig) -> Dict[str, Any]:
        hooks: Dict[str, List[Dict[str, Any]]] = {}
        for event, entries in cfg.ordered_items():
            native_event = EVENT_MAPPING.get(event)
            if native_event is None:
                self.warn(f"Event '{event}' is not supported by Windsurf and was dropped")
                continue
            for entry in entries:
                for hook in entry.hooks:
                    if hook.is_prompt():
                        self.warn(f"Prompt hook on '{event}' dropped: Windsurf supports command hooks only")
                        continue
                    if not hook.command:
                        self.warn(f"Hook on '{event}' has no command and was dropped")
                        continue
                    native_hook: Dict[str, Any] = {'command': hook.command}
                    if hook.show_output:
                        native_hook['show_output'] = True
                    if hook.working_dir:
                        native_hook['working_directory'] = hook.working_dir
                    hooks.setdefault(native_event, []).append(native_hook)

        return {'hooks': hooks}
