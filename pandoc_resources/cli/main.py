"""Command-line interface for pandoc-resources.

This module provides a CLI for inspecting which templates, presets, citation
styles and assets a project would pick up, and for creating the user
directory layout.

Commands:
    paths: Show the project and user pandoc directories
    resolve: Resolve one resource name to a file
    list: List the resources of a kind
    init: Create the user directory layout

Example:
    $ pandoc-resources paths
    $ pandoc-resources resolve template ieee
    $ pandoc-resources list preset --format yaml
    $ pandoc-resources init
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from pandoc_resources.exceptions import PandocResourcesError, ResourceNotFoundError
from pandoc_resources.models import ResourceKind
from pandoc_resources.observability.audit import JSONLAuditSink
from pandoc_resources.runtime.repository import PandocResources

LISTABLE_KINDS = ["template", "preset", "csl"]
ALL_KINDS = [kind.value for kind in ResourceKind]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--project-root",
        type=Path,
        help="Project directory (default: current directory)",
    )
    common.add_argument(
        "--user-dir",
        type=Path,
        help="User pandoc directory (default: $XDG_CONFIG_HOME/opencode/pandoc)",
    )
    common.add_argument(
        "--audit-log",
        type=Path,
        help="Append audit events to this JSONL file (optional)",
    )

    parser = argparse.ArgumentParser(
        prog="pandoc-resources",
        description="Locate pandoc templates, presets, citation styles and assets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "paths",
        parents=[common],
        help="Show search directories",
        description="Print the project and user pandoc directories in search order",
    )

    resolve_parser = subparsers.add_parser(
        "resolve",
        parents=[common],
        help="Resolve a resource name",
        description="Print the file a resource name resolves to and where it came from",
    )
    resolve_parser.add_argument(
        "kind",
        choices=ALL_KINDS,
        help="Resource kind",
    )
    resolve_parser.add_argument(
        "name",
        help="Resource name, relative path or absolute path",
    )
    resolve_parser.add_argument(
        "--show-candidates",
        action="store_true",
        help="Also print every candidate path that was tried",
    )

    list_parser = subparsers.add_parser(
        "list",
        parents=[common],
        help="List resources of a kind",
        description="List resources from both roots, project entries first",
    )
    list_parser.add_argument(
        "kind",
        choices=LISTABLE_KINDS,
        help="Resource kind",
    )
    list_parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    subparsers.add_parser(
        "init",
        parents=[common],
        help="Create the user directory layout",
        description="Create the user pandoc directory and its standard subdirectories",
    )

    return parser


def build_resources(args: argparse.Namespace) -> PandocResources:
    audit_sink = JSONLAuditSink(args.audit_log) if args.audit_log else None
    return PandocResources(
        project_root=args.project_root,
        user_dir=args.user_dir,
        audit_sink=audit_sink,
    )


def cmd_paths(args: argparse.Namespace) -> int:
    """Execute the paths command."""
    try:
        resources = build_resources(args)
        project_dir = resources.project_config_dir
        print(f"project: {project_dir if project_dir else '(none)'}")
        print(f"user:    {resources.user_config_dir}")
        return 0

    except PandocResourcesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_resolve(args: argparse.Namespace) -> int:
    """Execute the resolve command.

    Returns:
        Exit code (0 when found, 1 when not found or on error)
    """
    try:
        resources = build_resources(args)

        if args.show_candidates:
            for path in resources.candidates(args.kind, args.name):
                marker = "✓" if resources.is_match(args.kind, path) else "✗"
                print(f"  {marker} {path}", file=sys.stderr)

        resolved = resources.require(args.kind, args.name)
        print(f"{resolved.path}\t{resolved.source.value}")
        return 0

    except ResourceNotFoundError as e:
        print(f"Not found: {e}", file=sys.stderr)
        return 1
    except PandocResourcesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_list(args: argparse.Namespace) -> int:
    """Execute the list command."""
    try:
        resources = build_resources(args)

        if args.format != "text":
            print(resources.render_listing(args.kind, format=args.format), end="")
            if args.format == "json":
                print()
            return 0

        entries = resources.list(args.kind)
        if not entries:
            print(f"No {args.kind} resources found.")
            return 0

        print(f"Found {len(entries)} {args.kind} resource(s):\n")
        for entry in entries:
            print(f"  {entry.name}")
            print(f"    Source: {entry.source.value}")
            print(f"    Location: {entry.path}")
        return 0

    except PandocResourcesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    try:
        resources = build_resources(args)
        directories = resources.ensure_user_layout()
        print(f"User layout ready at {resources.user_config_dir}")
        for directory in directories[1:]:
            print(f"  {directory.relative_to(resources.user_config_dir)}/")
        return 0

    except OSError as e:
        print(f"Error: could not create user layout: {e}", file=sys.stderr)
        return 1


def main() -> NoReturn:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command == "paths":
        exit_code = cmd_paths(args)
    elif args.command == "resolve":
        exit_code = cmd_resolve(args)
    elif args.command == "list":
        exit_code = cmd_list(args)
    elif args.command == "init":
        exit_code = cmd_init(args)
    else:
        parser.print_help()
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
