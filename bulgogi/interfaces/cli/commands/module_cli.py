"""
Module commands: Add modules to and remove modules from targets.
"""

from __future__ import annotations

import argparse

from bulgogi.helpers.exceptions import BulgogiError
from bulgogi.interfaces.cli.ui import InfoPanel, print_error, print_success, print_warning
from bulgogi.workflows.project import add_module_workflow, remove_module_workflow


def cmd_module_add(args: argparse.Namespace) -> int:
    """
    Add a module to a target (default target when none is given).
    """
    try:
        result = add_module_workflow(
            args.project_dir,
            args.module,
            args.config,
            target=args.target,
            entry=args.entry,
            create=args.create,
        )
    except BulgogiError as e:
        print_error(str(e))
        return 1

    if result.target_created:
        print_warning(f"Target '{result.target}' did not exist and was added to the project")
    if result.missing_dirs:
        missing = "\n".join(f"  {p}" for p in result.missing_dirs)
        InfoPanel.show(
            "Missing module directories",
            f"{missing}\n\nUse [bold]--create[/bold] to populate the module directories.",
            "yellow",
        )

    content = f"""[bold]Module:[/bold] {result.module}
[bold]Target:[/bold] {result.target}
[bold]Directories created:[/bold] {len(result.created_dirs)}"""
    InfoPanel.show("Module Added", content, "green")
    print_success("Successfully added module to project")
    return 0


def cmd_module_rm(args: argparse.Namespace) -> int:
    """
    Remove a module from the project (or from one target).
    """
    try:
        result = remove_module_workflow(
            args.project_dir,
            args.module,
            args.config,
            target=args.target,
            cached=args.cached,
        )
    except BulgogiError as e:
        print_error(str(e))
        return 1

    targets = ", ".join(result.targets)
    if result.removed_dir is not None:
        print_success(f"Removed '{result.module}' from {targets} and deleted {result.removed_dir}")
    else:
        print_success(f"Removed '{result.module}' from {targets}")
    return 0
