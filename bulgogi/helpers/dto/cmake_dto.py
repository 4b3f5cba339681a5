"""CMake DTOs - the assembled, renderer-agnostic build description."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from bulgogi.helpers.dto.usage_dto import Usage

# Reserved subdirectory names. Both are visible to renderers and callers:
# - PROJECT_ROOT_SUBDIR: emit the top-level descriptor
# - AMBIGUOUS_SUBDIR: classification failed, render nothing
PROJECT_ROOT_SUBDIR = "."
AMBIGUOUS_SUBDIR = "?ambiguous"

FailureKind = Literal["AmbiguousUsage", "ConflictingEntryMarkers", "MissingExecutableComponent"]


class BuildUnitKind(str, Enum):
    LIBRARY = "library"
    EXECUTABLE = "executable"


@dataclass(frozen=True)
class BuildUnit:
    """One CMake target (add_library / add_executable)."""

    kind: BuildUnitKind
    name: str

    @property
    def is_executable(self) -> bool:
        return self.kind is BuildUnitKind.EXECUTABLE


@dataclass(frozen=True)
class BuildList:
    """
    Contents of one descriptor file: its units and each unit's link list.

    units behaves as an ordered set. links maps unit name to the names the
    unit links against, in dependency order.
    """

    units: tuple[BuildUnit, ...] = ()
    links: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def single(cls, unit: BuildUnit, links: tuple[str, ...] = ()) -> BuildList:
        return cls(units=(unit,), links={unit.name: links})

    def merge(self, other: BuildList) -> BuildList:
        """
        Combine two lists filed under the same subdirectory.

        Units are concatenated without duplicates; links are unioned with
        other's entries winning on collision.
        """
        units = list(self.units)
        for unit in other.units:
            if unit not in units:
                units.append(unit)
        return BuildList(units=tuple(units), links={**self.links, **other.links})

    def __add__(self, other: BuildList) -> BuildList:
        return self.merge(other)

    def links_for(self, name: str) -> tuple[str, ...]:
        return tuple(self.links.get(name, ()))

    def to_template_context(self) -> dict[str, Any]:
        """Plain data for the descriptor templates."""
        return {
            "targets": [
                {"name": unit.name, "exe": unit.is_executable, "links": list(self.links_for(unit.name))}
                for unit in self.units
            ]
        }


# Subdirectory -> BuildList
BuildGraph = dict[str, BuildList]


@dataclass(frozen=True)
class EntryConflict:
    """A target whose dependencies carry more than one entry marker."""

    target: str
    modules: tuple[str, ...]


@dataclass(frozen=True)
class AssemblyFailure:
    """
    One reason the build graph cannot be rendered.

    kind meanings:
    - "AmbiguousUsage": module could not be classified (target set when a
      target ended with more than one entry candidate)
    - "ConflictingEntryMarkers": target marks several modules as its entry
    - "MissingExecutableComponent": executable target has no entry module
    """

    kind: FailureKind
    target: str | None = None
    modules: tuple[str, ...] = ()

    def describe(self) -> str:
        """Human readable one-liner used by the CLI."""
        names = ", ".join(self.modules)
        if self.kind == "ConflictingEntryMarkers":
            return f"target '{self.target}' marks more than one entry module: {names}"
        if self.kind == "MissingExecutableComponent":
            return f"executable target '{self.target}' has no module resolving to an entry point"
        if self.target is not None:
            return f"target '{self.target}' has more than one entry candidate: {names}"
        return f"module '{names}' could not be classified as library or executable"


@dataclass
class AssemblyResult:
    """Build graph plus everything that went wrong while assembling it."""

    graph: BuildGraph
    usages: dict[str, Usage] = field(default_factory=dict)
    failures: list[AssemblyFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return AMBIGUOUS_SUBDIR not in self.graph
