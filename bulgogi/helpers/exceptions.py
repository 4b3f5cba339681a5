"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.

Classification failures (ambiguous modules, missing entry points) are data, not
exceptions: see AssemblyFailure in helpers/dto/cmake_dto.py. GenerationError is
the single place where they turn into an exception, at the workflow boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bulgogi.helpers.dto.cmake_dto import AssemblyFailure


class BulgogiError(Exception):
    """Base class for every error bulgogi reports to the user."""


class ProjectNotFoundError(BulgogiError):
    """Raised when no project.yaml exists where one is expected."""


class ProjectExistsError(BulgogiError):
    """Raised when initializing a directory that already holds a project."""


class ProjectFileError(BulgogiError):
    """Raised when project.yaml cannot be parsed into a target -> dependencies mapping."""


class TargetNotFoundError(BulgogiError):
    """Raised when a command names a target the project does not declare."""


class DuplicateModuleError(BulgogiError):
    """Raised when adding a module a target already depends on."""


class ModuleMissingError(BulgogiError):
    """Raised when removing a module no target depends on."""


class ModuleDirectoryError(BulgogiError):
    """Raised when a module directory cannot be created or removed."""


class ReservedNameError(BulgogiError):
    """Raised when a target or module would be named after a reserved subdirectory ("." or "?ambiguous")."""


class GenerationError(BulgogiError):
    """Raised when the build graph has unresolved targets and nothing may be rendered."""

    def __init__(self, failures: list[AssemblyFailure]) -> None:
        self.failures = list(failures)
        super().__init__(f"Cannot generate build descriptors: {len(self.failures)} unresolved problem(s)")
