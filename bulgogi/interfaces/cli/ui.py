#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent, professional interface across all commands.
"""

from __future__ import annotations

from collections.abc import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from bulgogi.helpers.dto.cmake_dto import AssemblyFailure, BuildUnitKind
from bulgogi.helpers.dto.usage_dto import Usage
from bulgogi.helpers.dto.workflow_dto import ProjectSummary

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_LIBRARY = "blue"
COLOR_EXECUTABLE = "magenta"

USAGE_COLORS = {
    Usage.LIBMODULE: COLOR_LIBRARY,
    Usage.EXEMODULE: COLOR_EXECUTABLE,
    Usage.AMBIGUOUS: COLOR_ERROR,
}


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for lists (failures, written files).
    """

    @staticmethod
    def show_failures(failures: list[AssemblyFailure], title: str = "Unresolved"):
        """Display every assembly failure of a pass."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Kind", style=COLOR_ERROR, width=28)
        table.add_column("Target", style=COLOR_INFO, width=16)
        table.add_column("Details", overflow="fold")

        for failure in failures:
            table.add_row(failure.kind, failure.target or "", failure.describe())

        console.print(table)

    @staticmethod
    def show_paths(paths: list, title: str):
        """Display a single-column table of paths."""
        table = Table(title=title, box=box.ROUNDED, show_header=False)
        table.add_column("Path", overflow="fold")
        for path in paths:
            table.add_row(str(path))
        console.print(table)


def show_project_tree(summary: ProjectSummary):
    """Render targets and their dependencies as a tree."""
    tree = Tree(f"[bold]{summary.name}[/bold]")
    for target in summary.targets:
        color = COLOR_EXECUTABLE if target.kind is BuildUnitKind.EXECUTABLE else COLOR_LIBRARY
        branch = tree.add(f"[bold {color}]{target.name}[/bold {color}] [dim]({target.kind.value})[/dim]")
        for dep in target.dependencies:
            marker = " [bold]*[/bold]" if dep.is_entry_marker else ""
            if dep.usage is None:
                branch.add(f"{dep.name}{marker} [dim](target)[/dim]")
            else:
                usage_color = USAGE_COLORS[dep.usage]
                branch.add(f"{dep.name}{marker} [{usage_color}]{dep.usage.value}[/{usage_color}]")
    if not summary.targets:
        tree.add("[dim]no targets[/dim]")
    console.print(tree)


def show_spinner(message: str, task_fn: Callable, *args, **kwargs):
    """
    Show a spinner while executing a task.
    Returns the result of task_fn.
    """
    with console.status(f"[bold {COLOR_INFO}]{message}[/bold {COLOR_INFO}]"):
        return task_fn(*args, **kwargs)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
