"""
Init command: Create an empty project.yaml in the project directory.
"""

from __future__ import annotations

import argparse

from bulgogi.helpers.exceptions import ProjectExistsError
from bulgogi.interfaces.cli.ui import print_error, print_info, print_success
from bulgogi.workflows.project import init_project_workflow


def cmd_init(args: argparse.Namespace) -> int:
    """
    Initialize a bulgogi project.
    """
    try:
        path = init_project_workflow(args.project_dir, args.config)
    except ProjectExistsError as e:
        print_info(str(e))
        return 0
    except OSError as e:
        print_error(f"Failed to initialize project -- could not create project file: {e}")
        return 1

    print_success(f"Successfully initialized project ({path})")
    return 0
