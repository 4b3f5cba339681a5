"""Tests for cmake_render_comp.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from bulgogi.__version__ import __version__
from bulgogi.components.cmake import make_environment, render_build_list, write_descriptor
from bulgogi.helpers.dto.cmake_dto import (
    AMBIGUOUS_SUBDIR,
    PROJECT_ROOT_SUBDIR,
    BuildList,
    BuildUnit,
    BuildUnitKind,
)


@pytest.fixture
def env():
    return make_environment()


class TestRenderRoot:
    """Tests for the top-level descriptor."""

    @pytest.mark.unit
    def test_header_and_project(self, env) -> None:
        text = render_build_list(env, PROJECT_ROOT_SUBDIR, BuildList(), project_name="demo")
        assert text.startswith(f"# Generated by bulgogi {__version__} from project.yaml.")
        assert "cmake_minimum_required(VERSION 3.16)" in text
        assert "project(demo LANGUAGES C CXX)" in text

    @pytest.mark.unit
    def test_subdirectories_sorted_without_reserved_names(self, env) -> None:
        text = render_build_list(
            env,
            PROJECT_ROOT_SUBDIR,
            BuildList(),
            project_name="demo",
            subdirs=["util", PROJECT_ROOT_SUBDIR, "main", AMBIGUOUS_SUBDIR],
        )
        assert text.index("add_subdirectory(main)") < text.index("add_subdirectory(util)")
        assert "add_subdirectory(.)" not in text
        assert AMBIGUOUS_SUBDIR not in text

    @pytest.mark.unit
    def test_library_targets_are_interface_libraries(self, env) -> None:
        bl = BuildList.single(BuildUnit(BuildUnitKind.LIBRARY, "libcore"), ("moduleX",))
        text = render_build_list(env, PROJECT_ROOT_SUBDIR, bl, project_name="demo")
        assert "add_library(libcore INTERFACE)" in text
        assert "target_link_libraries(libcore INTERFACE\n    moduleX\n)" in text

    @pytest.mark.unit
    def test_settings_are_applied(self, env) -> None:
        text = render_build_list(
            env,
            PROJECT_ROOT_SUBDIR,
            BuildList(),
            project_name="demo",
            project_file="deps.yaml",
            cmake_minimum_version="3.25",
            languages="CXX",
        )
        assert "from deps.yaml." in text
        assert "cmake_minimum_required(VERSION 3.25)" in text
        assert "project(demo LANGUAGES CXX)" in text


class TestRenderModule:
    """Tests for module descriptors."""

    @pytest.mark.unit
    def test_executable_links_privately(self, env) -> None:
        bl = BuildList.single(BuildUnit(BuildUnitKind.EXECUTABLE, "app"), ("util", "libcore"))
        text = render_build_list(env, "main", bl, project_name="demo")
        assert "add_executable(app ${MODULE_SOURCES})" in text
        assert "target_link_libraries(app PRIVATE\n    util\n    libcore\n)" in text
        assert "project(" not in text

    @pytest.mark.unit
    def test_library_is_static_with_public_headers(self, env) -> None:
        bl = BuildList.single(BuildUnit(BuildUnitKind.LIBRARY, "util"))
        text = render_build_list(env, "util", bl, project_name="demo")
        assert "add_library(util STATIC ${MODULE_SOURCES})" in text
        assert "PUBLIC ${CMAKE_CURRENT_SOURCE_DIR}/inc" in text
        assert "target_link_libraries" not in text

    @pytest.mark.unit
    def test_merged_list_renders_every_unit(self, env) -> None:
        bl = BuildList.single(BuildUnit(BuildUnitKind.EXECUTABLE, "app1")) + BuildList.single(
            BuildUnit(BuildUnitKind.EXECUTABLE, "app2"), ("b",)
        )
        text = render_build_list(env, "a", bl, project_name="demo")
        assert "add_executable(app1 " in text
        assert "add_executable(app2 " in text
        assert "target_link_libraries(app2 PRIVATE\n    b\n)" in text

    @pytest.mark.unit
    def test_sentinel_is_never_rendered(self, env) -> None:
        bl = BuildList.single(BuildUnit(BuildUnitKind.EXECUTABLE, "app"))
        with pytest.raises(ValueError, match="sentinel"):
            render_build_list(env, AMBIGUOUS_SUBDIR, bl, project_name="demo")


class TestTemplateOverrides:
    """Tests for make_environment() with a custom templates directory."""

    @pytest.mark.unit
    def test_user_templates_take_precedence(self, tmp_path: Path) -> None:
        (tmp_path / "module.cmake.j2").write_text("{% for t in targets %}{{ t.name }};{% endfor %}", encoding="utf-8")
        bl = BuildList.single(BuildUnit(BuildUnitKind.LIBRARY, "util"))
        text = render_build_list(make_environment(tmp_path), "util", bl, project_name="demo")
        assert text == "util;"


class TestWriteDescriptor:
    """Tests for write_descriptor()."""

    @pytest.mark.unit
    def test_writes_into_existing_subdir(self, tmp_path: Path) -> None:
        (tmp_path / "util").mkdir()
        path = write_descriptor(tmp_path, "util", "text\n")
        assert path == tmp_path / "util" / "CMakeLists.txt"
        assert path.read_text(encoding="utf-8") == "text\n"

    @pytest.mark.unit
    def test_root_subdir(self, tmp_path: Path) -> None:
        path = write_descriptor(tmp_path, PROJECT_ROOT_SUBDIR, "root\n", "Build.cmake")
        assert path.read_text(encoding="utf-8") == "root\n"
        assert path.name == "Build.cmake"

    @pytest.mark.unit
    def test_missing_subdir_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            write_descriptor(tmp_path, "util", "text\n")
