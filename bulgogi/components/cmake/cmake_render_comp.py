"""CMake descriptor rendering - one BuildList in, one CMakeLists.txt out."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from bulgogi.__version__ import __version__
from bulgogi.helpers.dto.cmake_dto import AMBIGUOUS_SUBDIR, PROJECT_ROOT_SUBDIR, BuildList

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = PACKAGE_ROOT / "templates"

TEMPLATE_PROJECT = "project.cmake.j2"
TEMPLATE_MODULE = "module.cmake.j2"


def make_environment(templates_dir: Path | None = None) -> Environment:
    """Jinja2 environment over the packaged templates (or a user override directory)."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=()),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_build_list(
    env: Environment,
    subdir: str,
    build_list: BuildList,
    *,
    project_name: str,
    project_file: str = "project.yaml",
    cmake_minimum_version: str = "3.16",
    languages: str = "C CXX",
    subdirs: Iterable[str] = (),
) -> str:
    """
    Render the descriptor text for one subdirectory.

    The project root uses the top-level template and gets every other
    subdirectory for add_subdirectory(); all others use the module template.

    Raises:
        ValueError: If asked to render the ambiguity sentinel
    """
    if subdir == AMBIGUOUS_SUBDIR:
        raise ValueError("Refusing to render the ambiguity sentinel; resolve the project first")

    context = build_list.to_template_context()
    context.update(
        {
            "bulgogi_version": __version__,
            "project_file": project_file,
            "subdir": subdir,
        }
    )

    if subdir == PROJECT_ROOT_SUBDIR:
        context.update(
            {
                "project_name": project_name,
                "cmake_minimum_version": cmake_minimum_version,
                "languages": languages,
                "subdirs": sorted(s for s in subdirs if s not in (PROJECT_ROOT_SUBDIR, AMBIGUOUS_SUBDIR)),
            }
        )
        template = env.get_template(TEMPLATE_PROJECT)
    else:
        template = env.get_template(TEMPLATE_MODULE)

    return template.render(**context)


def write_descriptor(root: Path, subdir: str, text: str, descriptor_name: str = "CMakeLists.txt") -> Path:
    """
    Write rendered text into root/subdir/descriptor_name.

    The subdirectory must already exist: creating module trees is the job of
    `bul module add --create`, not of generation.
    """
    directory = root / subdir
    if not directory.is_dir():
        raise FileNotFoundError(f"Subdirectory '{subdir}' does not exist under {root}")

    path = directory / descriptor_name
    path.write_text(text, encoding="utf-8")
    logger.debug(f"[cmake_render] Wrote {path}")
    return path
