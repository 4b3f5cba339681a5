"""Configuration DTOs handed from ConfigService to workflows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Settings a workflow needs, extracted from the composed config dict.

    Built by ConfigService.make_generator_config(); construct directly only in tests.
    """

    project_file: str = "project.yaml"
    entry_marker: str = "*"
    default_target: str = "default"
    module_subdirs: tuple[str, ...] = ("src", "inc", "src/inc")
    descriptor_name: str = "CMakeLists.txt"
    project_name: str | None = None  # None: use the project directory name
    cmake_minimum_version: str = "3.16"
    languages: str = "C CXX"
    templates_dir: Path | None = None  # None: templates shipped with the package
    build_dir: str = "build"

    def project_path(self, root: Path) -> Path:
        return root / self.project_file

    def resolved_project_name(self, root: Path) -> str:
        return self.project_name or root.resolve().name
