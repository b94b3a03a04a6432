"""
Bundle generation: route each canonical collection in a Bundle to the
target tool's adapter and output path.
"""

import copy
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Union

from assistkit.core.adapter_interface import DEFAULT_DIR_MODE, FormatAdapter
from assistkit.core.canonical_models import ConfigType
from assistkit.core.errors import AssistKitError, GenerateError
from assistkit.core.registry import FormatRegistry
from .bundle import Bundle
from .tool_config import DEFAULT_TOOL_CONFIGS, SUPPORTED_TOOLS, ToolConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BundleGenerator:
    """
    Writes a Bundle out for one tool or for every supported tool.

    Components are generated in a fixed order (plugin, skills, commands,
    hooks, agents, mcp, context) and the first failure aborts the call.
    Files already written are left in place.
    """

    def __init__(self, registries: Mapping[ConfigType, FormatRegistry],
                 tool_configs: Optional[Mapping[str, ToolConfig]] = None):
        self._registries = registries
        self._tool_configs: Dict[str, ToolConfig] = dict(
            DEFAULT_TOOL_CONFIGS if tool_configs is None else tool_configs
        )

    def tool_config(self, tool: str) -> Optional[ToolConfig]:
        return self._tool_configs.get(tool)

    def generate(self, bundle: Bundle, tool: str, output_dir: PathLike) -> List[Path]:
        """
        Generate the bundle for one tool under output_dir.

        Returns:
            Paths of the files written, in generation order

        Raises:
            GenerateError: unknown tool, or the first component that failed
        """
        config = self._tool_configs.get(tool)
        if config is None:
            raise GenerateError(tool, cause=ValueError(f"unsupported tool: {tool}"))

        output_dir = Path(output_dir)
        with self._component(tool, None):
            output_dir.mkdir(mode=DEFAULT_DIR_MODE, parents=True, exist_ok=True)

        written: List[Path] = []
        self._generate_plugin(bundle, tool, config, output_dir, written)
        self._generate_skills(bundle, tool, config, output_dir, written)
        self._generate_commands(bundle, tool, config, output_dir, written)
        self._generate_hooks(bundle, tool, config, output_dir, written)
        self._generate_agents(bundle, tool, config, output_dir, written)
        self._generate_mcp(bundle, tool, config, output_dir, written)
        self._generate_context(bundle, tool, config, output_dir, written)

        logger.info("Generated %d file(s) for %s in %s", len(written), tool, output_dir)
        return written

    def generate_all(self, bundle: Bundle, output_dir: PathLike) -> Dict[str, List[Path]]:
        """Generate into output_dir/<tool> for every supported tool, stopping at the first failure."""
        output_dir = Path(output_dir)
        results: Dict[str, List[Path]] = {}
        for tool in SUPPORTED_TOOLS:
            results[tool] = self.generate(bundle, tool, output_dir / tool)
        return results

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def _generate_plugin(self, bundle: Bundle, tool: str, config: ToolConfig,
                         output_dir: Path, written: List[Path]):
        if bundle.plugin is None or not config.plugin_file:
            return
        adapter = self._adapter(ConfigType.PLUGIN, tool)
        if adapter is None:
            return

        # Component paths are filled on a copy; the bundle is never mutated
        manifest = copy.deepcopy(bundle.plugin)
        if bundle.skills and config.skills_dir:
            manifest.skills = config.skills_dir
        if bundle.commands and config.commands_dir:
            manifest.commands = config.commands_dir
        if bundle.agents and config.agents_dir:
            manifest.agents = config.agents_dir

        path = output_dir / config.plugin_dir / config.plugin_file
        with self._component(tool, "plugin"):
            if config.embeds_in_manifest:
                native = adapter.to_native(manifest)
                self._embed_hooks(bundle, tool, native)
                self._embed_mcp(bundle, tool, native)
                adapter.write_native(native, path)
            else:
                if bundle.hooks.has_hooks() and config.hooks_file:
                    manifest.hooks = (Path(config.hooks_dir) / config.hooks_file).as_posix()
                adapter.write_file(manifest, path)
        written.append(path)

    def _embed_hooks(self, bundle: Bundle, tool: str, native: dict):
        if not bundle.hooks.has_hooks():
            return
        adapter = self._adapter(ConfigType.HOOKS, tool)
        if adapter is not None:
            native['hooks'] = adapter.to_native(bundle.hooks)['hooks']

    def _embed_mcp(self, bundle: Bundle, tool: str, native: dict):
        if not bundle.mcp.has_servers():
            return
        adapter = self._adapter(ConfigType.MCP, tool)
        if adapter is not None:
            native.update(adapter.to_native(bundle.mcp))

    def _generate_skills(self, bundle: Bundle, tool: str, config: ToolConfig,
                         output_dir: Path, written: List[Path]):
        if not bundle.skills or not config.skills_dir:
            return
        adapter = self._adapter(ConfigType.SKILL, tool)
        if adapter is None:
            return

        skills_dir = output_dir / config.skills_dir
        for skill in bundle.skills:
            with self._component(tool, f"skill:{skill.name}"):
                written.append(adapter.write_skill_dir(skill, skills_dir))

    def _generate_commands(self, bundle: Bundle, tool: str, config: ToolConfig,
                           output_dir: Path, written: List[Path]):
        if not bundle.commands or not config.commands_dir:
            return
        adapter = self._adapter(ConfigType.COMMAND, tool)
        if adapter is None:
            return

        commands_dir = output_dir / config.commands_dir
        for command in bundle.commands:
            path = commands_dir / f"{command.name}{adapter.file_extension}"
            with self._component(tool, f"command:{command.name}"):
                adapter.write_file(command, path)
            written.append(path)

    def _generate_hooks(self, bundle: Bundle, tool: str, config: ToolConfig,
                        output_dir: Path, written: List[Path]):
        if config.embeds_in_manifest:
            return
        if not bundle.hooks.has_hooks() or not config.hooks_file:
            return
        adapter = self._adapter(ConfigType.HOOKS, tool)
        if adapter is None:
            return

        path = output_dir / config.hooks_dir / config.hooks_file
        with self._component(tool, "hooks"):
            adapter.write_file(bundle.hooks, path)
        written.append(path)

    def _generate_agents(self, bundle: Bundle, tool: str, config: ToolConfig,
                         output_dir: Path, written: List[Path]):
        if not bundle.agents or not config.agents_dir:
            return
        adapter = self._adapter(ConfigType.AGENT, tool)
        if adapter is None:
            return

        agents_dir = output_dir / config.agents_dir
        for agent in bundle.agents:
            path = agents_dir / f"{agent.name}{adapter.file_extension}"
            with self._component(tool, f"agent:{agent.name}"):
                adapter.write_file(agent, path)
            written.append(path)

    def _generate_mcp(self, bundle: Bundle, tool: str, config: ToolConfig,
                      output_dir: Path, written: List[Path]):
        if config.embeds_in_manifest:
            return
        if not bundle.mcp.has_servers() or not config.mcp_file:
            return
        adapter = self._adapter(ConfigType.MCP, tool)
        if adapter is None:
            return

        path = output_dir / config.mcp_dir / config.mcp_file
        with self._component(tool, "mcp"):
            adapter.write_file(bundle.mcp, path)
        written.append(path)

    def _generate_context(self, bundle: Bundle, tool: str, config: ToolConfig,
                          output_dir: Path, written: List[Path]):
        if bundle.context is None or not config.context_file:
            return
        adapter = self._adapter(ConfigType.CONTEXT, tool)
        if adapter is None:
            return

        path = output_dir / config.context_dir / config.context_file
        with self._component(tool, "context"):
            adapter.write_file(bundle.context, path)
        written.append(path)

    # ------------------------------------------------------------------

    def _adapter(self, config_type: ConfigType, tool: str) -> Optional[FormatAdapter]:
        registry = self._registries.get(config_type)
        adapter = registry.get_adapter(tool) if registry is not None else None
        if adapter is None:
            logger.debug("No %s adapter registered for %s, skipping", config_type.value, tool)
        return adapter

    @contextmanager
    def _component(self, tool: str, component: Optional[str]) -> Iterator[None]:
        try:
            yield
        except (AssistKitError, OSError) as e:
            raise GenerateError(tool, component, e) from e
