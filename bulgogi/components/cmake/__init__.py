"""
Cmake package.
"""

from .build_graph_comp import assemble, assemble_with_report, file_build_list
from .cmake_render_comp import TEMPLATES_DIR, make_environment, render_build_list, write_descriptor

__all__ = [
    "TEMPLATES_DIR",
    "assemble",
    "assemble_with_report",
    "file_build_list",
    "make_environment",
    "render_build_list",
    "write_descriptor",
]
