"""
Project workflows package.
"""

from .init_project_wf import init_project_workflow
from .module_wf import add_module_workflow, remove_module_workflow
from .project_tree_wf import project_tree_workflow

__all__ = [
    "add_module_workflow",
    "init_project_workflow",
    "project_tree_workflow",
    "remove_module_workflow",
]
