"""
Generate command: Write CMakeLists.txt files for every target and module.
"""

from __future__ import annotations

import argparse

from bulgogi.helpers.exceptions import BulgogiError, GenerationError
from bulgogi.interfaces.cli.ui import TableDisplay, print_error, print_success, show_spinner
from bulgogi.workflows.cmake import generate_cmake_workflow


def cmd_generate(args: argparse.Namespace) -> int:
    """
    Generate build descriptors, or list every unresolved target and write nothing.
    """
    try:
        report = show_spinner("Generating build descriptors...", generate_cmake_workflow, args.project_dir, args.config)
    except GenerationError as e:
        TableDisplay.show_failures(e.failures)
        print_error(f"{e} -- no files were written")
        return 1
    except BulgogiError as e:
        print_error(str(e))
        return 1

    TableDisplay.show_paths(report.written, "Written")
    print_success(f"Generated {len(report.written)} build descriptors")
    return 0
