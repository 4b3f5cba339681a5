"""Generate CMake workflow - project.yaml in, CMakeLists.txt files out."""

from __future__ import annotations

import logging
from pathlib import Path

from bulgogi.components.cmake import assemble_with_report, make_environment, render_build_list, write_descriptor
from bulgogi.components.project import load_project
from bulgogi.helpers.dto.cmake_dto import PROJECT_ROOT_SUBDIR, AssemblyResult, BuildList
from bulgogi.helpers.dto.config_dto import GeneratorConfig
from bulgogi.helpers.dto.workflow_dto import GenerationReport
from bulgogi.helpers.exceptions import GenerationError, ModuleDirectoryError

logger = logging.getLogger(__name__)


def assemble_project_workflow(root: Path, config: GeneratorConfig) -> AssemblyResult:
    """Load the project and assemble its build graph without rendering."""
    model = load_project(config.project_path(root), config.entry_marker)
    return assemble_with_report(model)


def generate_cmake_workflow(root: Path, config: GeneratorConfig) -> GenerationReport:
    """
    Generate every build descriptor of the project.

    Business rules:
    - nothing is rendered or written while any target is unresolved
    - every failure of the pass is reported at once (GenerationError.failures)
    - every descriptor is rendered before the first file is written
    - module directories must exist; generation never creates them

    Returns:
        GenerationReport listing the written descriptor paths

    Raises:
        ProjectNotFoundError: If root holds no project file
        ProjectFileError: If the project file is malformed
        GenerationError: If the build graph contains the ambiguity sentinel
        ModuleDirectoryError: If a subdirectory to write into is missing
    """
    result = assemble_project_workflow(root, config)
    if not result.ok:
        for failure in result.failures:
            logger.error(f"[generate_cmake_wf] {failure.describe()}")
        raise GenerationError(result.failures)

    missing = sorted(s for s in result.graph if s != PROJECT_ROOT_SUBDIR and not (root / s).is_dir())
    if missing:
        raise ModuleDirectoryError(
            f"Missing module directories: {', '.join(missing)} (use 'bul module add --create' to scaffold them)"
        )

    env = make_environment(config.templates_dir)
    project_name = config.resolved_project_name(root)

    rendered: dict[str, str] = {}
    # The root descriptor exists even without library targets: it holds add_subdirectory()
    for subdir in [PROJECT_ROOT_SUBDIR, *sorted(s for s in result.graph if s != PROJECT_ROOT_SUBDIR)]:
        rendered[subdir] = render_build_list(
            env,
            subdir,
            result.graph.get(subdir, BuildList()),
            project_name=project_name,
            project_file=config.project_file,
            cmake_minimum_version=config.cmake_minimum_version,
            languages=config.languages,
            subdirs=result.graph.keys(),
        )

    report = GenerationReport(subdirectories=sorted(rendered))
    for subdir, text in rendered.items():
        report.written.append(write_descriptor(root, subdir, text, config.descriptor_name))

    logger.info(f"[generate_cmake_wf] Wrote {len(report.written)} descriptor files")
    return report
