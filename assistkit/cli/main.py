"""
Main CLI entry point for assistkit.

Converts a single configuration file between tools, generates a plugin
bundle for one or all tools, renders validation areas, and lists the
registered formats.

Usage:
    assistkit convert --kind hooks --from claude --to cursor .claude/settings.json
    assistkit generate --spec bundle.json --tool all --output dist/
    assistkit validation --specs specs/ --adapters all --output dist/
    assistkit list
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from assistkit.adapters import Registries, build_registries
from assistkit.bundle import SUPPORTED_TOOLS, Bundle, BundleGenerator
from assistkit.core.adapter_interface import write_private_file
from assistkit.core.canonical_models import ConfigType
from assistkit.core.errors import AssistKitError, ConversionError, HookValidationError, WriteError
from assistkit.core.validation_io import read_canonical_dir, write_areas_to_dir

logger = logging.getLogger(__name__)

# Mapping from CLI string to ConfigType enum (single source of truth)
CONFIG_TYPE_MAP: Dict[str, ConfigType] = {config_type.value: config_type for config_type in ConfigType}


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='assistkit',
        description='Convert AI coding assistant configuration between tools',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Claude hooks to Cursor hooks
  %(prog)s convert --kind hooks --from claude --to cursor .claude/settings.json \\
           -o .cursor/hooks.json

  # Claude agent to Kiro agent, printed to stdout
  %(prog)s convert --kind agent --from claude --to kiro .claude/agents/reviewer.md

  # Generate a bundle for every supported tool
  %(prog)s generate --spec bundle.json --tool all -o dist/

  # Release validation agents for Claude and Gemini from specs/*.json
  %(prog)s validation --specs specs/ --adapters claude,gemini -o dist/
        """
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output with detailed logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    convert = subparsers.add_parser('convert', help='Convert one file between tool formats')
    convert.add_argument(
        '--kind',
        required=True,
        choices=sorted(CONFIG_TYPE_MAP),
        help='Artifact kind'
    )
    convert.add_argument('--from', dest='source_format', required=True, help='Source format name')
    convert.add_argument('--to', dest='target_format', required=True, help='Target format name')
    convert.add_argument('input', type=Path, help='File to convert')
    convert.add_argument(
        '--output', '-o',
        type=Path,
        help='Output file (default: stdout)'
    )
    convert.add_argument(
        '--validate',
        action='store_true',
        help='[hooks] Reject hooks that lack a command/prompt or set both'
    )

    generate = subparsers.add_parser('generate', help='Generate a plugin bundle')
    generate.add_argument('--spec', type=Path, required=True, help='Bundle description (JSON)')
    generate.add_argument(
        '--tool',
        default='all',
        choices=list(SUPPORTED_TOOLS) + ['all'],
        help='Target tool (default: all)'
    )
    generate.add_argument(
        '--output', '-o',
        type=Path,
        required=True,
        help='Output directory'
    )

    validation = subparsers.add_parser('validation', help='Render validation areas for one or more tools')
    validation.add_argument('--specs', type=Path, required=True, help='Directory of canonical <area>.json files')
    validation.add_argument(
        '--adapters',
        default='claude',
        help='Comma-separated adapter names, or "all" (default: claude)'
    )
    validation.add_argument(
        '--output', '-o',
        type=Path,
        required=True,
        help='Output directory; each adapter writes to <output>/<adapter>'
    )

    subparsers.add_parser('list', help='List registered formats per artifact kind')

    return parser


def setup_registries() -> Registries:
    """
    Initialize one format registry per artifact kind.

    Returns:
        Mapping of ConfigType to populated FormatRegistry
    """
    return build_registries()


def convert_file(args, registries: Registries) -> int:
    """
    Convert a single file from one format to another.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    source_file = args.input.expanduser()
    if not source_file.is_file():
        print(f"Error: File not found: {source_file}", file=sys.stderr)
        return 1

    registry = registries[CONFIG_TYPE_MAP[args.kind]]
    source = registry.require_adapter(args.source_format)
    target = registry.require_adapter(args.target_format)

    canonical = source.read_file(source_file)
    if args.validate and args.kind == ConfigType.HOOKS.value:
        try:
            canonical.validate()
        except HookValidationError as e:
            raise ConversionError(args.source_format, args.target_format, event=e.event, cause=e) from e

    try:
        output = target.marshal(canonical)
    except AssistKitError as e:
        raise ConversionError(args.source_format, args.target_format, cause=e) from e

    for warning in target.get_conversion_warnings():
        print(f"Warning: {warning}", file=sys.stderr)

    if args.output:
        try:
            write_private_file(args.output.expanduser(), output)
        except OSError as e:
            raise WriteError(str(args.output), args.target_format, e) from e
        logger.info("Converted %s -> %s", source_file, args.output)
    else:
        sys.stdout.write(output.decode('utf-8'))
    return 0


def generate_bundle(args, registries: Registries) -> int:
    """
    Generate bundle output for one tool or all of them.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    spec_file = args.spec.expanduser()
    try:
        data = json.loads(spec_file.read_text(encoding='utf-8'))
        bundle = Bundle.from_dict(data)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
        print(f"Error: Invalid bundle spec {spec_file}: {e}", file=sys.stderr)
        return 1

    generator = BundleGenerator(registries)
    if args.tool == 'all':
        results = generator.generate_all(bundle, args.output)
    else:
        results = {args.tool: generator.generate(bundle, args.tool, args.output)}

    for tool, paths in results.items():
        print(f"{tool}: {len(paths)} file(s)")
        for path in paths:
            print(f"  {path}")
    return 0


def generate_validation(args, registries: Registries) -> int:
    """
    Render every canonical area under --specs with each requested adapter.

    Unknown adapter names are reported and skipped.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    registry = registries[ConfigType.VALIDATION]
    areas = read_canonical_dir(args.specs.expanduser())
    print(f"Found {len(areas)} validation area(s)")

    if args.adapters.strip() == 'all':
        names = registry.list_formats()
    else:
        names = [name.strip() for name in args.adapters.split(',') if name.strip()]

    for name in names:
        adapter = registry.get_adapter(name)
        if adapter is None:
            print(f"Warning: unknown validation adapter {name!r}, skipping", file=sys.stderr)
            continue
        target = args.output.expanduser() / name
        paths = write_areas_to_dir(areas, target, registry, name)
        print(f"{name}: {len(paths)} file(s) for {adapter.default_dir}/")
        for path in paths:
            print(f"  {path}")
    return 0


def list_formats(registries: Registries) -> int:
    for config_type, registry in registries.items():
        print(f"{config_type.value}: {', '.join(registry.list_formats())}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    registries = setup_registries()
    try:
        if args.command == 'convert':
            return convert_file(args, registries)
        if args.command == 'generate':
            return generate_bundle(args, registries)
        if args.command == 'validation':
            return generate_validation(args, registries)
        return list_formats(registries)
    except AssistKitError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc(file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
