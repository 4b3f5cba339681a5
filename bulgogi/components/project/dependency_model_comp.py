"""Dependency model queries - structural questions about targets and modules.

No inference here: everything answers from the dependency lists alone.
"""

from __future__ import annotations

from bulgogi.helpers.dto.project_dto import Dependency, DependencyKind, DependencyModel


def any_depends(model: DependencyModel, name: str, kind: DependencyKind | None = None) -> bool:
    """
    Whether any target lists name as a dependency.

    Args:
        model: Project dependency model
        name: Target or module name to look for
        kind: Restrict the match to one dependency kind (None matches both)
    """
    for deps in model.targets.values():
        for dep in deps:
            if dep.name == name and (kind is None or dep.kind is kind):
                return True
    return False


def is_library_target(model: DependencyModel, target: str) -> bool:
    """A target is a library iff another target depends on it."""
    return any(
        dep.is_target and dep.name == target
        for owner, deps in model.targets.items()
        if owner != target
        for dep in deps
    )


def libraries(model: DependencyModel) -> list[str]:
    """Library targets, in declaration order."""
    return [t for t in model.targets if is_library_target(model, t)]


def executables(model: DependencyModel) -> list[str]:
    """Executable targets (nothing depends on them), in declaration order."""
    return [t for t in model.targets if not is_library_target(model, t)]


def modules(model: DependencyModel, target: str | None = None) -> list[str]:
    """
    Module names referenced by the project.

    Args:
        model: Project dependency model
        target: Only modules of this target, in dependency order. When None,
            every module of the project, sorted and unique.
    """
    if target is not None:
        return [dep.name for dep in model.dependencies(target) if dep.is_module]
    return sorted({dep.name for deps in model.targets.values() for dep in deps if dep.is_module})


def contains_module(model: DependencyModel, module: str, target: str | None = None) -> bool:
    """Whether target (or any target, when None) depends on module."""
    probe = Dependency(DependencyKind.MODULE, module)
    if target is not None:
        return probe in model.dependencies(target)
    return any(probe in deps for deps in model.targets.values())


def targets_using(model: DependencyModel, module: str) -> list[str]:
    """Targets that list module as a dependency, in declaration order."""
    return [t for t in model.targets if contains_module(model, module, t)]


def entry_marked(model: DependencyModel, target: str) -> list[str]:
    """Distinct entry-marked module names of target, in dependency order."""
    marked: list[str] = []
    for dep in model.dependencies(target):
        if dep.is_module and dep.is_entry_marker and dep.name not in marked:
            marked.append(dep.name)
    return marked


def self_dependent_targets(model: DependencyModel) -> list[str]:
    """Targets listing themselves as a dependency (caller error, never fixed up)."""
    return [t for t, deps in model.targets.items() if any(dep.is_target and dep.name == t for dep in deps)]
