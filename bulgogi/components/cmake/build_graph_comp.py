"""Build graph assembly - turn targets and module verdicts into descriptor contents."""

from __future__ import annotations

import logging

from bulgogi.components.inference.usage_inference_comp import find_entry_conflicts, resolve
from bulgogi.components.project.dependency_model_comp import is_library_target, modules
from bulgogi.helpers.dto.cmake_dto import (
    AMBIGUOUS_SUBDIR,
    PROJECT_ROOT_SUBDIR,
    AssemblyFailure,
    AssemblyResult,
    BuildGraph,
    BuildList,
    BuildUnit,
    BuildUnitKind,
)
from bulgogi.helpers.dto.project_dto import DependencyModel
from bulgogi.helpers.dto.usage_dto import Usage, UsageLedger

logger = logging.getLogger(__name__)


def file_build_list(graph: BuildGraph, subdir: str, build_list: BuildList) -> None:
    """Add build_list under subdir, merging with whatever is already filed there."""
    if subdir in graph:
        graph[subdir] = graph[subdir] + build_list
    else:
        graph[subdir] = build_list


def assemble_with_report(model: DependencyModel) -> AssemblyResult:
    """
    Assemble the build graph and collect every failure in one pass.

    Library targets are filed at the project root and link every dependency.
    Executable targets are filed under the subdirectory of their one Exemodule
    and link everything else. Every Libmodule also gets its own library list
    under its own name. An executable target without exactly one Exemodule, or
    with conflicting entry markers, is filed under AMBIGUOUS_SUBDIR.

    Never raises; callers check result.ok (or the sentinel key) before
    rendering anything.
    """
    ledger: UsageLedger = {}
    graph: BuildGraph = {}
    failures: list[AssemblyFailure] = []
    conflicts = {c.target: c for c in find_entry_conflicts(model)}

    for target in sorted(model.targets):
        deps = model.dependencies(target)

        if is_library_target(model, target):
            unit = BuildUnit(BuildUnitKind.LIBRARY, target)
            file_build_list(graph, PROJECT_ROOT_SUBDIR, BuildList.single(unit, tuple(d.name for d in deps)))
            continue

        unit = BuildUnit(BuildUnitKind.EXECUTABLE, target)
        entries: list[str] = []
        for dep in deps:
            if dep.is_module and dep.name not in entries and resolve(model, dep.name, ledger) is Usage.EXEMODULE:
                entries.append(dep.name)

        if target in conflicts:
            failures.append(
                AssemblyFailure("ConflictingEntryMarkers", target=target, modules=conflicts[target].modules)
            )
        elif not entries:
            failures.append(AssemblyFailure("MissingExecutableComponent", target=target))
        elif len(entries) > 1:
            failures.append(AssemblyFailure("AmbiguousUsage", target=target, modules=tuple(entries)))
        else:
            entry = entries[0]
            links = tuple(d.name for d in deps if not (d.is_module and d.name == entry))
            file_build_list(graph, entry, BuildList.single(unit, links))
            continue

        logger.debug(f"[build_graph] Executable target '{target}' left unresolved")
        file_build_list(graph, AMBIGUOUS_SUBDIR, BuildList.single(unit, tuple(d.name for d in deps)))

    for module in modules(model):
        usage = resolve(model, module, ledger)
        if usage is Usage.LIBMODULE:
            file_build_list(graph, module, BuildList.single(BuildUnit(BuildUnitKind.LIBRARY, module)))
        elif usage is Usage.AMBIGUOUS:
            failures.append(AssemblyFailure("AmbiguousUsage", modules=(module,)))

    if failures:
        logger.info(f"[build_graph] Assembly failed with {len(failures)} problem(s)")
    else:
        logger.debug(f"[build_graph] Assembled {len(graph)} descriptor lists from {len(model)} targets")

    return AssemblyResult(graph=graph, usages=dict(ledger), failures=failures)


def assemble(model: DependencyModel) -> BuildGraph:
    """
    Build graph of the project.

    A pure function of the model. The presence of AMBIGUOUS_SUBDIR among its
    keys is the only failure signal.
    """
    return assemble_with_report(model).graph
