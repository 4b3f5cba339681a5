"""Module workflows - add and remove modules with their directories."""

from __future__ import annotations

import logging
from pathlib import Path

from bulgogi.components.project import (
    add_dependency,
    create_module_dirs,
    load_project,
    missing_module_dirs,
    remove_module,
    remove_module_dirs,
    save_project,
    targets_using,
)
from bulgogi.helpers.dto.config_dto import GeneratorConfig
from bulgogi.helpers.dto.workflow_dto import AddModuleResult, RemoveModuleResult

logger = logging.getLogger(__name__)


def add_module_workflow(
    root: Path,
    module: str,
    config: GeneratorConfig,
    target: str | None = None,
    entry: bool = False,
    create: bool = False,
) -> AddModuleResult:
    """
    Add module as a dependency of target and save the project.

    Business rules:
    - target defaults to config.default_target and is created if undeclared
    - with create, the module's src/inc directories are scaffolded
    - without create, missing directories are reported, never created
    - the project file is only written after scaffolding succeeded

    Args:
        root: Project directory
        module: Module (or target) name to depend on
        config: Generator configuration
        target: Target that depends on module
        entry: Mark module as the target's entry point
        create: Create missing module directories

    Returns:
        AddModuleResult describing what changed

    Raises:
        ProjectNotFoundError: If root holds no project file
        DuplicateModuleError: If target already depends on module
        ReservedNameError: If target or module uses a reserved name
        ModuleDirectoryError: If scaffolding fails
    """
    target = target or config.default_target
    path = config.project_path(root)
    model = load_project(path, config.entry_marker)

    target_created = target not in model
    updated = add_dependency(model, target, module, entry=entry)
    is_module = any(d.is_module and d.name == module for d in updated.dependencies(target))

    created: list[Path] = []
    missing: list[Path] = []
    if is_module:
        if create:
            created = create_module_dirs(root, module, config.module_subdirs)
        else:
            missing = missing_module_dirs(root, module, config.module_subdirs)
            if missing:
                logger.warning(
                    f"[module_wf] Module '{module}' has {len(missing)} missing directories (use --create)"
                )

    save_project(updated, path, config.entry_marker)
    logger.info(f"[module_wf] Added '{module}' to target '{target}'")

    return AddModuleResult(
        target=target,
        module=module,
        target_created=target_created,
        created_dirs=tuple(created),
        missing_dirs=tuple(missing),
    )


def remove_module_workflow(
    root: Path,
    module: str,
    config: GeneratorConfig,
    target: str | None = None,
    cached: bool = False,
) -> RemoveModuleResult:
    """
    Remove module from the project.

    Business rules:
    - without target the module is dropped from every target using it
    - the module directory is deleted only when no target uses the module
      anymore and cached is False (cached keeps files, drops the record)

    Raises:
        ProjectNotFoundError: If root holds no project file
        TargetNotFoundError: If target is given but not declared
        ModuleMissingError: If the module is not a dependency
        ModuleDirectoryError: If the directory cannot be removed
    """
    path = config.project_path(root)
    model = load_project(path, config.entry_marker)

    owners = [target] if target is not None else targets_using(model, module)
    updated = remove_module(model, module, target)

    # Files go only after the record no longer lists the module
    save_project(updated, path, config.entry_marker)

    removed_dir: Path | None = None
    if not cached and not targets_using(updated, module):
        removed_dir = remove_module_dirs(root, module)

    logger.info(f"[module_wf] Removed '{module}' from {len(owners)} target(s)")

    return RemoveModuleResult(module=module, targets=tuple(owners), removed_dir=removed_dir)
