"""Clean workflow - remove generated descriptors and the build directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from bulgogi.components.cmake import assemble
from bulgogi.components.project import load_project
from bulgogi.helpers.dto.cmake_dto import AMBIGUOUS_SUBDIR, PROJECT_ROOT_SUBDIR
from bulgogi.helpers.dto.config_dto import GeneratorConfig
from bulgogi.helpers.dto.workflow_dto import CleanReport

logger = logging.getLogger(__name__)

GENERATED_HEADER = "# Generated by bulgogi"


def _is_generated(path: Path) -> bool:
    try:
        with path.open(encoding="utf-8") as f:
            return f.readline().startswith(GENERATED_HEADER)
    except (OSError, UnicodeDecodeError):
        return False


def clean_workflow(root: Path, config: GeneratorConfig) -> CleanReport:
    """
    Remove build artifacts of the project.

    Business rules:
    - only descriptors carrying the generated header are deleted
    - descriptor locations come from a fresh assembly; an unresolved project
      still cleans every resolvable subdirectory
    - the build directory is removed as a whole

    Raises:
        ProjectNotFoundError: If root holds no project file
    """
    model = load_project(config.project_path(root), config.entry_marker)
    report = CleanReport()

    # The root descriptor is generated even when no library target is filed there
    for subdir in sorted({PROJECT_ROOT_SUBDIR, *assemble(model)}):
        if subdir == AMBIGUOUS_SUBDIR:
            continue
        descriptor = root / subdir / config.descriptor_name
        if descriptor.is_file() and _is_generated(descriptor):
            descriptor.unlink()
            report.removed.append(descriptor)

    build_dir = root / config.build_dir
    if build_dir.is_dir():
        shutil.rmtree(build_dir)
        report.removed.append(build_dir)

    logger.info(f"[clean_wf] Removed {len(report.removed)} paths")
    return report
