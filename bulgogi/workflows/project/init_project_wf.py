"""Init project workflow - create an empty project.yaml."""

from __future__ import annotations

import logging
from pathlib import Path

from bulgogi.components.project import save_project
from bulgogi.helpers.dto.config_dto import GeneratorConfig
from bulgogi.helpers.dto.project_dto import DependencyModel
from bulgogi.helpers.exceptions import ProjectExistsError

logger = logging.getLogger(__name__)


def init_project_workflow(root: Path, config: GeneratorConfig) -> Path:
    """
    Initialize a bulgogi project in root.

    Returns:
        Path of the created project file

    Raises:
        ProjectExistsError: If root already holds a project file
    """
    path = config.project_path(root)
    if path.exists():
        raise ProjectExistsError(f"Found {path.name} in {root} -- no need to initialize")

    save_project(DependencyModel(), path, config.entry_marker)
    logger.info(f"[init_project_wf] Initialized project at {path}")
    return path
