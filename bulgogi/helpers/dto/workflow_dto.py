"""Workflow result DTOs returned to the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from bulgogi.helpers.dto.cmake_dto import BuildUnitKind
from bulgogi.helpers.dto.project_dto import DependencyKind
from bulgogi.helpers.dto.usage_dto import Usage


@dataclass(frozen=True)
class AddModuleResult:
    target: str
    module: str
    target_created: bool
    created_dirs: tuple[Path, ...] = ()
    missing_dirs: tuple[Path, ...] = ()


@dataclass(frozen=True)
class RemoveModuleResult:
    module: str
    targets: tuple[str, ...]
    removed_dir: Path | None = None


@dataclass(frozen=True)
class DependencySummary:
    name: str
    kind: DependencyKind
    is_entry_marker: bool
    usage: Usage | None  # None for target-kind dependencies


@dataclass(frozen=True)
class TargetSummary:
    name: str
    kind: BuildUnitKind
    dependencies: tuple[DependencySummary, ...]


@dataclass(frozen=True)
class ProjectSummary:
    """Everything `bul tree` shows."""

    name: str
    targets: tuple[TargetSummary, ...]


@dataclass
class GenerationReport:
    """Descriptor files written by one generation pass."""

    written: list[Path] = field(default_factory=list)
    subdirectories: list[str] = field(default_factory=list)


@dataclass
class CleanReport:
    removed: list[Path] = field(default_factory=list)
