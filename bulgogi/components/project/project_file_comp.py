"""project.yaml persistence - load, save and edit the dependency record.

On disk a project is a YAML mapping of target name to a list of dependency
names. A trailing entry marker ("*" by default) flags the module supplying the
target's entry point. A name is a target dependency iff it is also a key of
the mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from bulgogi.components.project.dependency_model_comp import contains_module, self_dependent_targets, targets_using
from bulgogi.helpers.dto.cmake_dto import AMBIGUOUS_SUBDIR, PROJECT_ROOT_SUBDIR
from bulgogi.helpers.dto.project_dto import Dependency, DependencyKind, DependencyModel
from bulgogi.helpers.exceptions import (
    DuplicateModuleError,
    ModuleMissingError,
    ProjectFileError,
    ProjectNotFoundError,
    ReservedNameError,
    TargetNotFoundError,
)

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_MARKER = "*"
RESERVED_NAMES = frozenset({PROJECT_ROOT_SUBDIR, AMBIGUOUS_SUBDIR})


def parse_dependency_name(raw: str, entry_marker: str = DEFAULT_ENTRY_MARKER) -> tuple[str, bool]:
    """
    Strip the trailing entry marker from a stored dependency string.

    Only a suffix counts: with "-" as marker, "my-core" is the unmarked
    module my-core and "main-" is the marked module main.

    Returns:
        (clean name, whether a marker was present)
    """
    if not entry_marker or raw == entry_marker or not raw.endswith(entry_marker):
        return raw, False
    return raw[: -len(entry_marker)], True


def check_name(name: str) -> None:
    """
    Reject target and module names that collide with reserved subdirectories.

    Raises:
        ReservedNameError: If name is PROJECT_ROOT_SUBDIR or AMBIGUOUS_SUBDIR
    """
    if name in RESERVED_NAMES:
        raise ReservedNameError(f"'{name}' is reserved and cannot name a target or module")


def model_from_mapping(
    mapping: Mapping[str, list[str] | None],
    entry_marker: str = DEFAULT_ENTRY_MARKER,
) -> DependencyModel:
    """
    Convert the stored target -> [dependency strings] mapping into a model.

    Target-kind dependencies never carry the entry marker even if the stored
    string has one.

    Raises:
        ReservedNameError: If a target or dependency uses a reserved name
    """
    targets: dict[str, tuple[Dependency, ...]] = {}
    for target, raw_deps in mapping.items():
        check_name(str(target))
        deps: list[Dependency] = []
        for raw in raw_deps or []:
            name, marked = parse_dependency_name(str(raw), entry_marker)
            check_name(name)
            if name in mapping:
                deps.append(Dependency(DependencyKind.TARGET, name))
            else:
                deps.append(Dependency(DependencyKind.MODULE, name, is_entry_marker=marked))
        targets[str(target)] = tuple(deps)
    return DependencyModel(targets=targets)


def model_to_mapping(model: DependencyModel, entry_marker: str = DEFAULT_ENTRY_MARKER) -> dict[str, list[str]]:
    """Inverse of model_from_mapping; markers are written as a suffix."""
    return {
        target: [f"{dep.name}{entry_marker}" if dep.is_entry_marker else dep.name for dep in deps]
        for target, deps in model.targets.items()
    }


def _validate_mapping(raw: Any, path: Path) -> dict[str, list[str] | None]:
    if not isinstance(raw, dict):
        raise ProjectFileError(f"{path}: expected a mapping of target -> dependency list, got {type(raw).__name__}")
    for target, deps in raw.items():
        if not isinstance(target, str):
            raise ProjectFileError(f"{path}: target name {target!r} is not a string")
        if deps is None:
            continue
        if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
            raise ProjectFileError(f"{path}: dependencies of '{target}' must be a list of names")
    return raw


def load_project(path: Path, entry_marker: str = DEFAULT_ENTRY_MARKER) -> DependencyModel:
    """
    Load a project file.

    Args:
        path: Location of project.yaml
        entry_marker: Marker string identifying entry modules

    Returns:
        DependencyModel (empty for an empty file)

    Raises:
        ProjectNotFoundError: If the file does not exist
        ProjectFileError: If the content is not valid YAML of the expected shape,
            or uses a reserved name
    """
    if not path.exists():
        raise ProjectNotFoundError(f"Cannot find {path.name} in {path.parent}")

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProjectFileError(f"{path}: failed to parse YAML: {e}") from e

    if raw is None:
        logger.debug(f"[project_file] {path} is empty, loading empty project")
        return DependencyModel()

    try:
        model = model_from_mapping(_validate_mapping(raw, path), entry_marker)
    except ReservedNameError as e:
        raise ProjectFileError(f"{path}: {e}") from e
    for target in self_dependent_targets(model):
        logger.warning(f"[project_file] Target '{target}' depends on itself")
    logger.debug(f"[project_file] Loaded {len(model)} targets from {path}")
    return model


def save_project(model: DependencyModel, path: Path, entry_marker: str = DEFAULT_ENTRY_MARKER) -> None:
    """Write the model back to project.yaml, preserving target and dependency order."""
    mapping = model_to_mapping(model, entry_marker)
    with path.open("w", encoding="utf-8") as f:
        if mapping:
            yaml.safe_dump(mapping, f, sort_keys=False, default_flow_style=False)
    logger.debug(f"[project_file] Saved {len(model)} targets to {path}")


def add_dependency(model: DependencyModel, target: str, name: str, entry: bool = False) -> DependencyModel:
    """
    Return a new model where target depends on name.

    A name matching a target becomes a target dependency, anything else a
    module. An unknown target is created; if other targets referenced its name
    as a module, those references become target dependencies, exactly as a
    reload of the saved file would see them.

    Raises:
        ReservedNameError: If target or name is a reserved subdirectory name
        DuplicateModuleError: If target already depends on name
    """
    check_name(target)
    check_name(name)
    targets = dict(model.targets)
    deps = targets.get(target, ())
    if any(d.name == name for d in deps):
        raise DuplicateModuleError(f"'{name}' is already a dependency of '{target}'")
    targets[target] = (*deps, Dependency(DependencyKind.MODULE, name, is_entry_marker=entry))
    return _reclassify(targets)


def _reclassify(targets: dict[str, tuple[Dependency, ...]]) -> DependencyModel:
    """Recompute dependency kinds after the set of target names changed."""
    fixed: dict[str, tuple[Dependency, ...]] = {}
    for owner, deps in targets.items():
        fixed[owner] = tuple(
            Dependency(DependencyKind.TARGET, d.name)
            if d.name in targets
            else Dependency(DependencyKind.MODULE, d.name, is_entry_marker=d.is_entry_marker)
            for d in deps
        )
    return DependencyModel(targets=fixed)


def remove_module(model: DependencyModel, module: str, target: str | None = None) -> DependencyModel:
    """
    Return a new model without module.

    Args:
        model: Current model
        module: Module to drop
        target: Only drop it from this target (None drops it everywhere)

    Raises:
        TargetNotFoundError: If target is given but not declared
        ModuleMissingError: If no (selected) target depends on module
    """
    if target is not None and target not in model:
        raise TargetNotFoundError(f"Target '{target}' is not declared in the project")

    owners = [target] if target is not None else targets_using(model, module)
    if not owners or not all(contains_module(model, module, t) for t in owners):
        where = f"target '{target}'" if target is not None else "the project"
        raise ModuleMissingError(f"Module '{module}' is not a dependency of {where}")

    targets = dict(model.targets)
    for owner in owners:
        targets[owner] = tuple(d for d in targets[owner] if not (d.is_module and d.name == module))
    return DependencyModel(targets=targets)
