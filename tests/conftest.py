"""
Pytest fixtures and configuration for the test suite.

Models are built in memory with the same parser project.yaml goes through, so
fixtures read like the files users write.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from bulgogi.components.project import model_from_mapping, save_project
from bulgogi.helpers.dto.config_dto import GeneratorConfig
from bulgogi.helpers.dto.project_dto import DependencyModel


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests touching the filesystem through several layers")
    config.addinivalue_line("markers", "slow: slow running tests")


def make_model(mapping: dict[str, list[str] | None]) -> DependencyModel:
    """Build a model from a project.yaml-shaped mapping."""
    return model_from_mapping(mapping)


# === SCENARIO MODELS ===


@pytest.fixture
def single_module_model() -> DependencyModel:
    """One executable target with one unmarked module."""
    return make_model({"app": ["main"]})


@pytest.fixture
def library_model() -> DependencyModel:
    """Executable app using library target lib; app marks its entry."""
    return make_model({"app": ["main*", "util", "lib"], "lib": ["util", "core"]})


@pytest.fixture
def conflicting_markers_model() -> DependencyModel:
    """Executable target marking two entry modules."""
    return make_model({"app": ["a*", "b*"]})


@pytest.fixture
def shared_entry_model() -> DependencyModel:
    """Two executables sharing an unmarked module next to their own entries."""
    return make_model({"app1": ["m1*", "shared"], "app2": ["m2*", "shared"]})


# === FILESYSTEM ===


@pytest.fixture
def generator_config() -> GeneratorConfig:
    """Default generator configuration."""
    return GeneratorConfig()


@pytest.fixture
def project_dir(tmp_path: Path, generator_config: GeneratorConfig) -> Generator[Path, None, None]:
    """Directory holding an empty project.yaml."""
    save_project(DependencyModel(), generator_config.project_path(tmp_path))
    yield tmp_path


@pytest.fixture
def write_project(tmp_path: Path, generator_config: GeneratorConfig):
    """
    Factory writing a project.yaml (and optionally module directories) into tmp_path.

    Usage:
        root = write_project({"app": ["main*"]}, dirs=["main"])
    """

    def _write(mapping: dict[str, list[str] | None], dirs: list[str] | None = None) -> Path:
        save_project(make_model(mapping), generator_config.project_path(tmp_path))
        for name in dirs or []:
            for sub in generator_config.module_subdirs:
                (tmp_path / name / sub).mkdir(parents=True, exist_ok=True)
        return tmp_path

    return _write
