"""
Logging helpers shared by the CLI entry point and tests.

Components and workflows only ever call logging.getLogger(__name__); the
process-wide handler is configured once here.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: str | int) -> int:
    """
    Turn a config value ("debug", "INFO", 20) into a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure logging once for the whole process."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
    logging.getLogger("bulgogi").setLevel(resolve_log_level(level))
