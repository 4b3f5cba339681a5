#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and BULGOGI_* env vars
#  - Caches composed config for the lifetime of one command
#  - Provides reload() after overrides change
# ======================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from bulgogi.helpers.dto.config_dto import GeneratorConfig

USER_CONFIG_PATH = Path("~/.config/bulgogi/config.yaml")
PROJECT_CONFIG_NAME = "bulgogi.yaml"
ENV_PREFIX = "BULGOGI_"


class ConfigService:
    """
    Service for loading and caching bulgogi configuration.

    Loads config from multiple sources (defaults → user YAML → project YAML →
    $BULGOGI_CONFIG_PATH → overrides → env), caches the result, and provides
    reload capability.
    """

    def __init__(self, project_dir: Path | None = None, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self.project_dir = project_dir or Path.cwd()
        self._overrides = dict(overrides or {})
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Composed configuration, built on first use and cached.

        Pass force_reload=True to re-read every source.
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("entry_marker")
            '*'
            >>> service.get("templates.dir", None)
        """
        cfg = self.get_config()
        node: Any = cfg
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ---- source composition ----

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ~/.config/bulgogi/config.yaml
          3) <project_dir>/bulgogi.yaml
          4) $BULGOGI_CONFIG_PATH (if set)
          5) overrides dict passed in
          6) Environment variables (BULGOGI_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        # 1) User-wide YAML
        self._deep_merge(cfg, self._load_yaml(USER_CONFIG_PATH.expanduser()))

        # 2) Project-local YAML
        self._deep_merge(cfg, self._load_yaml(self.project_dir / PROJECT_CONFIG_NAME))

        # 3) Optional path via env
        env_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(Path(env_path)))

        # 4) Direct overrides
        if overrides:
            self._deep_merge(cfg, overrides)

        # 5) Environment variable overrides
        self._apply_env_overrides(cfg)

        self._logger.debug(f"Composed config for {self.project_dir}: log_level={cfg.get('log_level')}")

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            # Project record
            "project_file": "project.yaml",
            "entry_marker": "*",  # Trailing marker on the entry module of a target
            "default_target": "default",
            # Module scaffolding
            "module_subdirs": ["src", "inc", "src/inc"],
            # Descriptor rendering
            "descriptor_name": "CMakeLists.txt",
            "project_name": None,  # Optional; defaults to the project directory name
            "cmake_minimum_version": "3.16",
            "languages": "C CXX",
            "templates_dir": None,  # Optional; packaged templates when unset
            "build_dir": "build",
            # Diagnostics
            "log_level": "WARNING",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path.is_file():
            return {}
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        self._logger.debug(f"Loaded config from {path}")
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          BULGOGI_ENTRY_MARKER=!
          BULGOGI_LOG_LEVEL=debug
          BULGOGI_MODULE_SUBDIRS=src,include
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == f"{ENV_PREFIX}CONFIG_PATH":
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in cfg:
                continue

            val: Any
            # List keys stay lists whatever the value looks like
            if isinstance(cfg[key], list):
                val = [part.strip() for part in v.split(",") if part.strip()]
            elif v.lower() in ("true", "false"):
                val = v.lower() == "true"
            elif v.isdigit():
                val = int(v)
            else:
                val = v
            cfg[key] = val

    def make_generator_config(self) -> GeneratorConfig:
        """
        Build a GeneratorConfig from the current configuration.

        This is the boundary where raw config values are validated and typed
        before being handed to workflows.
        """
        cfg = self.get_config()

        templates_dir = cfg.get("templates_dir")
        project_name = cfg.get("project_name")

        return GeneratorConfig(
            project_file=str(cfg["project_file"]),
            entry_marker=str(cfg["entry_marker"]),
            default_target=str(cfg["default_target"]),
            module_subdirs=tuple(str(s) for s in cfg["module_subdirs"]),
            descriptor_name=str(cfg["descriptor_name"]),
            project_name=str(project_name) if project_name else None,
            cmake_minimum_version=str(cfg["cmake_minimum_version"]),
            languages=str(cfg["languages"]),
            templates_dir=Path(templates_dir).expanduser() if templates_dir else None,
            build_dir=str(cfg["build_dir"]),
        )
