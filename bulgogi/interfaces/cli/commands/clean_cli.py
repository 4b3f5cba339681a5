"""
Clean command: Remove generated descriptors and the build directory.
"""

from __future__ import annotations

import argparse

from bulgogi.helpers.exceptions import BulgogiError
from bulgogi.interfaces.cli.ui import print_error, print_info, print_success
from bulgogi.workflows.cmake import clean_workflow


def cmd_clean(args: argparse.Namespace) -> int:
    """
    Clean the local project build files.
    """
    try:
        report = clean_workflow(args.project_dir, args.config)
    except (BulgogiError, OSError) as e:
        print_error(f"Error during clean: {e}")
        return 1

    if report.removed:
        print_success(f"Removed {len(report.removed)} generated paths")
    else:
        print_info("Nothing to clean")
    return 0
