"""Project DTOs - the in-memory dependency record of a bulgogi project."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum


class DependencyKind(str, Enum):
    """Whether a dependency names another declared target or a source module."""

    TARGET = "target"
    MODULE = "module"


@dataclass(frozen=True)
class Dependency:
    """
    One entry of a target's dependency list.

    Equality and hashing only look at (kind, name): an entry-marked module and
    the same module without the marker are the same dependency.
    """

    kind: DependencyKind
    name: str
    is_entry_marker: bool = field(default=False, compare=False)

    @property
    def is_module(self) -> bool:
        return self.kind is DependencyKind.MODULE

    @property
    def is_target(self) -> bool:
        return self.kind is DependencyKind.TARGET


@dataclass(frozen=True)
class DependencyModel:
    """
    Mapping of target name to its ordered dependencies.

    Pure data: the structural queries (libraries, executables, modules, ...)
    live in bulgogi.components.project.dependency_model_comp.

    Dependency order is insignificant for inference but preserved so a loaded
    project.yaml saves back unchanged.
    """

    targets: Mapping[str, tuple[Dependency, ...]] = field(default_factory=dict)

    @classmethod
    def from_targets(cls, targets: Mapping[str, Iterable[Dependency]]) -> DependencyModel:
        """Build a model from any mapping of target name to dependencies."""
        return cls(targets={name: tuple(deps) for name, deps in targets.items()})

    def __contains__(self, target: object) -> bool:
        return target in self.targets

    def __iter__(self) -> Iterator[str]:
        return iter(self.targets)

    def __len__(self) -> int:
        return len(self.targets)

    def dependencies(self, target: str) -> tuple[Dependency, ...]:
        """Dependencies of target, empty for unknown targets."""
        return self.targets.get(target, ())
