"""Command-line interface for expandkit."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import settings
from .release import ReleaseNotes
from .settings import PathFinder, SettingsParser
from .templates import (
    MacroParser,
    Resolver,
    TemplateExpander,
    resolve_attribute,
    resolve_many,
    resolve_mapping,
    resolve_section,
)
from .text import reindent_block, tabs_to_spaces

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the expandkit CLI."""
    parser = argparse.ArgumentParser(
        prog="expandkit",
        description="expandkit - Template expansion with indentation-preserving macros",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Expand command
    expand_parser = subparsers.add_parser("expand", help="Expand macros in a template")
    expand_parser.add_argument("template", help="Template file ('-' for stdin)")
    expand_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    expand_parser.add_argument(
        "--define",
        "-D",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Macro value (can be specified multiple times)",
    )
    expand_parser.add_argument(
        "--settings", help=f"Settings file (default: nearest {settings.settings_file_name})"
    )
    expand_parser.add_argument(
        "--section", help="Settings section supplying values (default: root section)"
    )
    expand_parser.add_argument(
        "--release-notes",
        help=f"Changelog file (default: nearest {settings.release_notes_file_name})",
    )
    expand_parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Ignore case of release notes attribute names",
    )
    expand_parser.add_argument(
        "--no-env", action="store_true", help="Do not use environment variables as values"
    )
    expand_parser.add_argument(
        "--strict", action="store_true", help="Fail if any macro is left unresolved"
    )

    # Names command
    names_parser = subparsers.add_parser("names", help="List macro names used in a template")
    names_parser.add_argument("template", help="Template file ('-' for stdin)")

    # Reindent command
    reindent_parser = subparsers.add_parser("reindent", help="Reindent a text block")
    reindent_parser.add_argument("file", help="Text file ('-' for stdin)")
    reindent_parser.add_argument("--indent", default="", help="New indent (default: none)")
    reindent_parser.add_argument(
        "--tabs", action="store_true", help="Convert tabs to spaces first"
    )
    reindent_parser.add_argument(
        "--strict", action="store_true", help="Fail on lines which are not properly indented"
    )

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    return parser


def configure_logging(debug: bool = False):
    """Configure logging to stderr (and optionally a log file)."""
    if debug or settings.debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug)

    try:
        if args.command == "expand":
            return run_expand(args)
        elif args.command == "names":
            return run_names(args)
        elif args.command == "reindent":
            return run_reindent(args)
        elif args.command == "serve":
            return run_server(args.host, args.port, args.reload)
    except (OSError, ValueError) as e:
        # settings, format and decoding errors are ValueErrors
        logger.error(str(e))
        return 1

    parser.print_help()
    return 1


def _read_input(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _parse_defines(defines: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE pairs given on the command line."""
    values = {}
    for define in defines:
        key, sep, value = define.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid definition (expected KEY=VALUE): {define}")
        values[key] = value
    return values


def build_resolver(args: argparse.Namespace, base_dir: Path) -> Resolver:
    """
    Build the resolver for the expand command.

    Sources in priority order: command line definitions, settings section,
    release notes attributes, environment variables.
    """
    finder = PathFinder()
    resolvers = [resolve_mapping(_parse_defines(args.define))]

    settings_path = args.settings or finder.try_find_file(base_dir, settings.settings_file_name)
    if settings_path:
        settings_file = SettingsParser().parse_file(settings_path)
        section_name = args.section if args.section is not None else settings.settings_section
        if not settings_file.has_section(section_name):
            logger.warning(f"Section '{section_name}' is empty or missing in {settings_path}")
        resolvers.append(resolve_section(settings_file[section_name]))

    notes_path = args.release_notes or finder.try_find_file(
        base_dir, settings.release_notes_file_name
    )
    if notes_path:
        notes = ReleaseNotes.from_file(notes_path)
        resolvers.append(
            resolve_attribute(notes, ignore_case=args.ignore_case or settings.ignore_case)
        )

    if not args.no_env:
        resolvers.append(resolve_mapping(os.environ))

    return resolve_many(*resolvers)


def run_expand(args: argparse.Namespace) -> int:
    """Expand a template file."""
    template = _read_input(args.template)
    base_dir = Path.cwd() if args.template == "-" else Path(args.template).parent

    try:
        resolver = build_resolver(args, base_dir)
    except ValueError as e:
        logger.error(str(e))
        return 1

    result = TemplateExpander(resolver).expand_with_report(template)

    if result.unresolved:
        logger.warning(f"Unresolved macros: {', '.join(result.unresolved)}")
        if args.strict:
            return 1

    if args.output:
        Path(args.output).write_text(result.expanded, encoding="utf-8")
        logger.info(f"Expanded template written to {args.output}")
    else:
        sys.stdout.write(result.expanded)

    return 0


def run_names(args: argparse.Namespace) -> int:
    """Print macro names used in a template, one per line."""
    template = _read_input(args.template)
    for name in MacroParser().find_names(template):
        print(name)
    return 0


def run_reindent(args: argparse.Namespace) -> int:
    """Reindent a text block and print it."""
    text = _read_input(args.file)
    if args.tabs:
        text = tabs_to_spaces(text, settings.tab_size)

    sys.stdout.write(reindent_block(args.indent, text, args.strict))
    return 0


def run_server(host: str, port: int, reload: bool) -> int:
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting expandkit API on {host}:{port}")
    uvicorn.run(
        "expandkit.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
