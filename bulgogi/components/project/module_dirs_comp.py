"""Module directory scaffolding - the src/inc layout every module lives in."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from bulgogi.helpers.exceptions import ModuleDirectoryError

logger = logging.getLogger(__name__)

DEFAULT_MODULE_SUBDIRS: tuple[str, ...] = ("src", "inc", "src/inc")


def module_dir(root: Path, module: str) -> Path:
    return root / module


def missing_module_dirs(root: Path, module: str, subdirs: Sequence[str] = DEFAULT_MODULE_SUBDIRS) -> list[Path]:
    """Expected module directories that do not exist (module dir itself first)."""
    base = module_dir(root, module)
    expected = [base, *(base / sub for sub in subdirs)]
    return [p for p in expected if not p.is_dir()]


def create_module_dirs(root: Path, module: str, subdirs: Sequence[str] = DEFAULT_MODULE_SUBDIRS) -> list[Path]:
    """
    Create the module directory and its subdirectories.

    Existing directories are left alone.

    Returns:
        Directories that were actually created

    Raises:
        ModuleDirectoryError: If a directory cannot be created
    """
    created = missing_module_dirs(root, module, subdirs)
    try:
        for path in created:
            path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ModuleDirectoryError(f"Failed to create directories for module '{module}': {e}") from e

    if created:
        logger.info(f"[module_dirs] Created {len(created)} directories for module '{module}'")
    return created


def remove_module_dirs(root: Path, module: str) -> Path | None:
    """
    Delete a module directory tree.

    Returns:
        The removed directory, or None if it did not exist

    Raises:
        ModuleDirectoryError: If the path is not a directory inside root or cannot be removed
    """
    path = module_dir(root, module)
    if not path.exists():
        return None

    resolved_root = root.resolve()
    resolved = path.resolve()
    if resolved == resolved_root or resolved_root not in resolved.parents or not path.is_dir():
        raise ModuleDirectoryError(f"Refusing to remove '{path}': not a module directory inside {root}")

    try:
        shutil.rmtree(path)
    except OSError as e:
        raise ModuleDirectoryError(f"Failed to remove module directory '{path}': {e}") from e

    logger.info(f"[module_dirs] Removed module directory {path}")
    return path
