"""
Domain DTOs (Data Transfer Objects) shared by every layer.

Rules for DTO modules:
- Import only stdlib, typing and other DTO modules
- Contain ONLY dataclass/enum definitions, reserved constants and simple type aliases
- No I/O, no business logic (inference and assembly live in components)
"""

from __future__ import annotations

from bulgogi.helpers.dto.cmake_dto import (
    AMBIGUOUS_SUBDIR,
    PROJECT_ROOT_SUBDIR,
    AssemblyFailure,
    AssemblyResult,
    BuildGraph,
    BuildList,
    BuildUnit,
    BuildUnitKind,
    EntryConflict,
    FailureKind,
)
from bulgogi.helpers.dto.config_dto import GeneratorConfig
from bulgogi.helpers.dto.project_dto import Dependency, DependencyKind, DependencyModel
from bulgogi.helpers.dto.usage_dto import Usage, UsageLedger
from bulgogi.helpers.dto.workflow_dto import (
    AddModuleResult,
    CleanReport,
    DependencySummary,
    GenerationReport,
    ProjectSummary,
    RemoveModuleResult,
    TargetSummary,
)

__all__ = [
    "AMBIGUOUS_SUBDIR",
    "PROJECT_ROOT_SUBDIR",
    "AddModuleResult",
    "AssemblyFailure",
    "AssemblyResult",
    "BuildGraph",
    "BuildList",
    "BuildUnit",
    "BuildUnitKind",
    "CleanReport",
    "Dependency",
    "DependencyKind",
    "DependencyModel",
    "DependencySummary",
    "EntryConflict",
    "FailureKind",
    "GenerationReport",
    "GeneratorConfig",
    "ProjectSummary",
    "RemoveModuleResult",
    "TargetSummary",
    "Usage",
    "UsageLedger",
]
