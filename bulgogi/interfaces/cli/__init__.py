"""
Cli package.
"""

from .ui import (
    COLOR_ERROR,
    COLOR_EXECUTABLE,
    COLOR_INFO,
    COLOR_LIBRARY,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    TableDisplay,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_project_tree,
    show_spinner,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_EXECUTABLE",
    "COLOR_INFO",
    "COLOR_LIBRARY",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "InfoPanel",
    "TableDisplay",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "show_project_tree",
    "show_spinner",
]
