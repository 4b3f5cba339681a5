"""Tests for usage_inference_comp.py."""

from __future__ import annotations

import itertools

import pytest

from bulgogi.components.inference import find_entry_conflicts, infer_usages, resolve
from bulgogi.components.project import model_from_mapping
from bulgogi.helpers.dto.cmake_dto import EntryConflict
from bulgogi.helpers.dto.usage_dto import Usage


class TestInferUsagesScenarios:
    """Tests for infer_usages() on the canonical project shapes."""

    @pytest.mark.unit
    def test_marked_entry_and_sibling(self) -> None:
        """A marked module is the entry; its sibling is a library."""
        model = model_from_mapping({"default": ["moduleA*", "moduleB"]})
        assert infer_usages(model) == {"moduleA": Usage.EXEMODULE, "moduleB": Usage.LIBMODULE}

    @pytest.mark.unit
    def test_library_target_modules_are_libmodules(self) -> None:
        """Modules of a library target resolve Libmodule."""
        model = model_from_mapping({"app": ["libcore"], "libcore": ["moduleX"]})
        assert infer_usages(model) == {"moduleX": Usage.LIBMODULE}

    @pytest.mark.unit
    def test_two_unmarked_modules_are_ambiguous(self) -> None:
        """Nothing decides between two unmarked siblings."""
        model = model_from_mapping({"default": ["moduleA", "moduleB"]})
        assert infer_usages(model) == {"moduleA": Usage.AMBIGUOUS, "moduleB": Usage.AMBIGUOUS}

    @pytest.mark.unit
    def test_shared_module_across_executables(self) -> None:
        """A module shared by two executables with their own entries is a library."""
        model = model_from_mapping({"first": ["X", "Y*"], "second": ["X", "Z*"]})
        assert infer_usages(model) == {
            "X": Usage.LIBMODULE,
            "Y": Usage.EXEMODULE,
            "Z": Usage.EXEMODULE,
        }

    @pytest.mark.unit
    def test_single_module_is_entry(self, single_module_model) -> None:
        """The only module of an executable target is its entry."""
        assert infer_usages(single_module_model) == {"main": Usage.EXEMODULE}


class TestInferUsagesRules:
    """Tests for the individual inference rules."""

    @pytest.mark.unit
    def test_library_dominance_beats_entry_marker(self, caplog) -> None:
        """A module used by a library target stays a library even when marked elsewhere."""
        model = model_from_mapping({"app": ["main*", "lib"], "lib": ["main"]})
        assert infer_usages(model) == {"main": Usage.LIBMODULE}
        assert "ignored" in caplog.text

    @pytest.mark.unit
    def test_propagation_across_targets(self) -> None:
        """A verdict reached in one target unlocks a sibling in another."""
        model = model_from_mapping({"app1": ["x*", "y"], "app2": ["y", "z"]})
        assert infer_usages(model) == {
            "x": Usage.EXEMODULE,
            "y": Usage.LIBMODULE,
            "z": Usage.EXEMODULE,
        }

    @pytest.mark.unit
    def test_conflicting_verdicts_are_ambiguous(self) -> None:
        """A module that one target needs as entry and another links is ambiguous."""
        model = model_from_mapping({"app1": ["s"], "app2": ["m*", "s"]})
        usages = infer_usages(model)
        assert usages["m"] is Usage.EXEMODULE
        assert usages["s"] is Usage.AMBIGUOUS

    @pytest.mark.unit
    def test_conflicting_markers_are_ignored(self, conflicting_markers_model) -> None:
        """Markers of a target marking several modules decide nothing."""
        assert infer_usages(conflicting_markers_model) == {"a": Usage.AMBIGUOUS, "b": Usage.AMBIGUOUS}

    @pytest.mark.unit
    def test_every_module_gets_a_verdict(self, library_model) -> None:
        usages = infer_usages(library_model)
        assert set(usages) == {"core", "main", "util"}
        assert usages["main"] is Usage.EXEMODULE

    @pytest.mark.unit
    def test_empty_model(self) -> None:
        assert infer_usages(model_from_mapping({})) == {}


class TestInferUsagesDeterminism:
    """Verdicts must not depend on declaration order."""

    MAPPING = {
        "app1": ["x*", "y", "lib"],
        "app2": ["y", "z"],
        "app3": ["s"],
        "app4": ["m*", "s"],
        "lib": ["core", "w"],
        "tool": ["p", "q"],
    }

    @pytest.mark.unit
    def test_target_order_is_irrelevant(self) -> None:
        expected = infer_usages(model_from_mapping(self.MAPPING))
        for names in itertools.islice(itertools.permutations(self.MAPPING), 120):
            permuted = {name: self.MAPPING[name] for name in names}
            assert infer_usages(model_from_mapping(permuted)) == expected

    @pytest.mark.unit
    def test_dependency_order_is_irrelevant(self) -> None:
        expected = infer_usages(model_from_mapping(self.MAPPING))
        reversed_deps = {name: list(reversed(deps)) for name, deps in self.MAPPING.items()}
        assert infer_usages(model_from_mapping(reversed_deps)) == expected


class TestLedger:
    """Tests for ledger threading and resolve()."""

    @pytest.mark.unit
    def test_existing_verdicts_are_kept(self) -> None:
        """Verdicts already in the ledger are not recomputed."""
        model = model_from_mapping({"app": ["main"]})
        ledger = {"main": Usage.LIBMODULE}
        assert infer_usages(model, ledger) == {"main": Usage.LIBMODULE}

    @pytest.mark.unit
    def test_existing_verdicts_feed_propagation(self) -> None:
        """A known Libmodule sibling lets the last open module become the entry."""
        model = model_from_mapping({"app": ["main", "util"]})
        ledger = {"util": Usage.LIBMODULE}
        infer_usages(model, ledger)
        assert ledger["main"] is Usage.EXEMODULE

    @pytest.mark.unit
    def test_resolve_fills_the_whole_ledger(self, library_model) -> None:
        """The first miss resolves every module of the project."""
        ledger: dict[str, Usage] = {}
        assert resolve(library_model, "util", ledger) is Usage.LIBMODULE
        assert set(ledger) == {"core", "main", "util"}

    @pytest.mark.unit
    def test_resolve_returns_ledger_entry(self, library_model) -> None:
        ledger = {"util": Usage.AMBIGUOUS}
        assert resolve(library_model, "util", ledger) is Usage.AMBIGUOUS

    @pytest.mark.unit
    def test_resolve_unreferenced_module_is_ambiguous(self, library_model) -> None:
        ledger: dict[str, Usage] = {}
        assert resolve(library_model, "ghost", ledger) is Usage.AMBIGUOUS
        assert ledger["ghost"] is Usage.AMBIGUOUS


class TestFindEntryConflicts:
    """Tests for find_entry_conflicts()."""

    @pytest.mark.unit
    def test_reports_targets_with_several_markers(self, conflicting_markers_model) -> None:
        assert find_entry_conflicts(conflicting_markers_model) == [EntryConflict("app", ("a", "b"))]

    @pytest.mark.unit
    def test_library_targets_are_ignored(self) -> None:
        model = model_from_mapping({"app": ["main*", "lib"], "lib": ["a*", "b*"]})
        assert find_entry_conflicts(model) == []

    @pytest.mark.unit
    def test_no_conflicts(self, library_model) -> None:
        assert find_entry_conflicts(library_model) == []
