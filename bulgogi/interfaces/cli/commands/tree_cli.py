"""
Tree command: Print targets, dependencies and inferred module roles.
"""

from __future__ import annotations

import argparse

from bulgogi.helpers.exceptions import BulgogiError
from bulgogi.interfaces.cli.ui import print_error, show_project_tree
from bulgogi.workflows.project import project_tree_workflow


def cmd_tree(args: argparse.Namespace) -> int:
    """
    Display the project tree.
    """
    try:
        summary = project_tree_workflow(args.project_dir, args.config)
    except BulgogiError as e:
        print_error(str(e))
        return 1

    show_project_tree(summary)
    return 0
