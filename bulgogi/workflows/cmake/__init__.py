"""
Cmake workflows package.
"""

from .clean_wf import clean_workflow
from .generate_cmake_wf import assemble_project_workflow, generate_cmake_workflow

__all__ = [
    "assemble_project_workflow",
    "clean_workflow",
    "generate_cmake_workflow",
]
