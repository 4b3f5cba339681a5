"""Project tree workflow - targets, kinds and module verdicts for display."""

from __future__ import annotations

import logging
from pathlib import Path

from bulgogi.components.inference import infer_usages
from bulgogi.components.project import is_library_target, load_project
from bulgogi.helpers.dto.cmake_dto import BuildUnitKind
from bulgogi.helpers.dto.config_dto import GeneratorConfig
from bulgogi.helpers.dto.workflow_dto import DependencySummary, ProjectSummary, TargetSummary

logger = logging.getLogger(__name__)


def project_tree_workflow(root: Path, config: GeneratorConfig) -> ProjectSummary:
    """
    Summarize the project as a tree of targets and dependencies.

    Raises:
        ProjectNotFoundError: If root holds no project file
        ProjectFileError: If the project file is malformed
    """
    model = load_project(config.project_path(root), config.entry_marker)
    usages = infer_usages(model)

    targets = []
    for name, deps in model.targets.items():
        kind = BuildUnitKind.LIBRARY if is_library_target(model, name) else BuildUnitKind.EXECUTABLE
        targets.append(
            TargetSummary(
                name=name,
                kind=kind,
                dependencies=tuple(
                    DependencySummary(
                        name=d.name,
                        kind=d.kind,
                        is_entry_marker=d.is_entry_marker,
                        usage=usages.get(d.name) if d.is_module else None,
                    )
                    for d in deps
                ),
            )
        )

    logger.debug(f"[project_tree_wf] Summarized {len(targets)} targets")
    return ProjectSummary(name=config.resolved_project_name(root), targets=tuple(targets))
