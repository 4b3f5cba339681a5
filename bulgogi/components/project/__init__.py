"""
Project package.
"""

from .dependency_model_comp import (
    any_depends,
    contains_module,
    entry_marked,
    executables,
    is_library_target,
    libraries,
    modules,
    self_dependent_targets,
    targets_using,
)
from .module_dirs_comp import create_module_dirs, missing_module_dirs, remove_module_dirs
from .project_file_comp import (
    check_name,
    add_dependency,
    load_project,
    model_from_mapping,
    model_to_mapping,
    parse_dependency_name,
    remove_module,
    save_project,
)

__all__ = [
    "add_dependency",
    "any_depends",
    "check_name",
    "contains_module",
    "create_module_dirs",
    "entry_marked",
    "executables",
    "is_library_target",
    "libraries",
    "load_project",
    "missing_module_dirs",
    "model_from_mapping",
    "model_to_mapping",
    "modules",
    "parse_dependency_name",
    "remove_module",
    "remove_module_dirs",
    "save_project",
    "self_dependent_targets",
    "targets_using",
]
