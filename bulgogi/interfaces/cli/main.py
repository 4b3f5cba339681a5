#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from bulgogi.__version__ import __version__
from bulgogi.helpers.logging_helper import configure_logging
from bulgogi.interfaces.cli.commands import (
    cmd_clean,
    cmd_generate,
    cmd_init,
    cmd_module_add,
    cmd_module_rm,
    cmd_tree,
)
from bulgogi.services.config_svc import ConfigService


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="bul",
        description="bulgogi - build-description generator for multi-target source trees",
        epilog="Examples:\n"
        "  bul init                                   # Create project.yaml here\n"
        "  bul module add app --entry --create        # Add entry module 'app' to the default target\n"
        "  bul module add util                        # Add module 'util' to the default target\n"
        "  bul module add core libcore                # Add module 'core' to target 'libcore'\n"
        "  bul module rm util --cached                # Drop 'util' from project.yaml, keep its files\n"
        "  bul tree                                   # Show targets and inferred module roles\n"
        "  bul generate                               # Write CMakeLists.txt files\n"
        "  bul clean                                  # Remove generated files and build/",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-C",
        "--project-dir",
        type=Path,
        default=None,
        help="project directory (default: current directory)",
    )
    p.add_argument("-v", "--verbose", action="count", default=0, help="log more (-v info, -vv debug)")
    p.add_argument("--entry-marker", default=None, help="marker identifying entry modules in project.yaml")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'bul <command> --help' for command-specific help)",
    )

    # init: Create project.yaml
    s = sub.add_parser("init", help="Initialize a bulgogi project in the project directory")
    s.set_defaults(func=cmd_init)

    # module: Manage project modules
    s = sub.add_parser("module", help="Manage project modules")
    module_sub = s.add_subparsers(dest="module_cmd", title="module commands", required=True)

    # module add: Add module to a target
    ms = module_sub.add_parser("add", help="Add a module to the project")
    ms.add_argument("module", help="module name / directory")
    ms.add_argument("target", nargs="?", default=None, help="target depending on the module (default: 'default')")
    ms.add_argument("--entry", action="store_true", help="mark the module as the target's executable entry point")
    ms.add_argument("--create", action="store_true", help="create the module directories if missing")
    ms.set_defaults(func=cmd_module_add)

    # module rm: Remove module
    ms = module_sub.add_parser("rm", aliases=["remove"], help="Remove a module from the project")
    ms.add_argument("module", help="module name / directory")
    ms.add_argument("--target", default=None, help="only remove the module from this target")
    ms.add_argument("--cached", action="store_true", help="keep the module directory, only update project.yaml")
    ms.set_defaults(func=cmd_module_rm)

    # tree: Print project tree
    s = sub.add_parser("tree", help="Print the project tree with inferred module roles")
    s.set_defaults(func=cmd_tree)

    # generate: Write build descriptors
    s = sub.add_parser("generate", help="Generate CMakeLists.txt files for the project")
    s.set_defaults(func=cmd_generate)

    # clean: Remove generated files
    s = sub.add_parser("clean", help="Remove generated descriptors and the build directory")
    s.set_defaults(func=cmd_clean)

    return p


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.entry_marker:
        overrides["entry_marker"] = args.entry_marker
    if args.verbose >= 2:
        overrides["log_level"] = "DEBUG"
    elif args.verbose == 1:
        overrides["log_level"] = "INFO"
    return overrides


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    args.project_dir = (args.project_dir or Path.cwd()).resolve()
    config_service = ConfigService(project_dir=args.project_dir, overrides=_overrides(args))
    configure_logging(config_service.get("log_level", "WARNING"))
    args.config = config_service.make_generator_config()

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
