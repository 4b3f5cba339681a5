"""Tests for dependency_model_comp.py."""

from __future__ import annotations

import pytest

from bulgogi.components.project import (
    any_depends,
    contains_module,
    entry_marked,
    executables,
    is_library_target,
    libraries,
    model_from_mapping,
    modules,
    self_dependent_targets,
    targets_using,
)
from bulgogi.helpers.dto.project_dto import DependencyKind


class TestTargetClassification:
    """Tests for is_library_target() / libraries() / executables()."""

    @pytest.mark.unit
    def test_target_depended_on_is_library(self, library_model) -> None:
        """lib is listed by app, so lib is a library."""
        assert is_library_target(library_model, "lib") is True
        assert is_library_target(library_model, "app") is False

    @pytest.mark.unit
    def test_libraries_and_executables_partition_targets(self, library_model) -> None:
        """Every target is exactly one of library or executable."""
        assert libraries(library_model) == ["lib"]
        assert executables(library_model) == ["app"]

    @pytest.mark.unit
    def test_self_dependency_does_not_make_a_library(self) -> None:
        """A target listing only itself stays an executable."""
        model = model_from_mapping({"app": ["app", "main"]})
        assert is_library_target(model, "app") is False
        assert self_dependent_targets(model) == ["app"]

    @pytest.mark.unit
    def test_target_with_no_dependencies(self) -> None:
        """An empty target is an executable with no modules."""
        model = model_from_mapping({"app": None})
        assert executables(model) == ["app"]
        assert modules(model, "app") == []


class TestModuleQueries:
    """Tests for modules() and friends."""

    @pytest.mark.unit
    def test_modules_of_target_keep_dependency_order(self, library_model) -> None:
        """Per-target modules follow the dependency list and skip targets."""
        assert modules(library_model, "app") == ["main", "util"]

    @pytest.mark.unit
    def test_modules_of_project_are_sorted_and_unique(self, library_model) -> None:
        """Project-wide modules are deduplicated and sorted."""
        assert modules(library_model) == ["core", "main", "util"]

    @pytest.mark.unit
    def test_contains_module_ignores_marker(self, library_model) -> None:
        """main is marked in app but is still found."""
        assert contains_module(library_model, "main", "app") is True
        assert contains_module(library_model, "main", "lib") is False
        assert contains_module(library_model, "lib") is False

    @pytest.mark.unit
    def test_targets_using(self, library_model) -> None:
        """targets_using() lists every target with the module, in declaration order."""
        assert targets_using(library_model, "util") == ["app", "lib"]
        assert targets_using(library_model, "missing") == []

    @pytest.mark.unit
    def test_any_depends_with_kind(self, library_model) -> None:
        """any_depends() can be restricted to one dependency kind."""
        assert any_depends(library_model, "lib") is True
        assert any_depends(library_model, "lib", DependencyKind.MODULE) is False
        assert any_depends(library_model, "core", DependencyKind.MODULE) is True


class TestEntryMarked:
    """Tests for entry_marked()."""

    @pytest.mark.unit
    def test_single_marker(self, library_model) -> None:
        assert entry_marked(library_model, "app") == ["main"]

    @pytest.mark.unit
    def test_repeated_marker_counts_once(self) -> None:
        """The same module marked twice is one entry."""
        model = model_from_mapping({"app": ["main*", "main*"]})
        assert entry_marked(model, "app") == ["main"]

    @pytest.mark.unit
    def test_several_markers(self, conflicting_markers_model) -> None:
        assert entry_marked(conflicting_markers_model, "app") == ["a", "b"]
