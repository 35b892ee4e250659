# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Usermgr Contributors
#
# This file is part of Usermgr.
#
# Usermgr is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Usermgr is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

"""
Application configuration.

Values come from, in order of precedence:
  1. command-line flags (--store, --log-level)
  2. a config file (--config, or ./usermgr.yaml when present)
  3. built-in defaults

Config file keys (YAML or JSON):

  store: data/users.json     # relative to the config file; ":memory:" for no file
  log_level: INFO
  log_file: usermgr.log      # optional, relative to the config file
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from usermgr.repository.json_store import default_store_path

DEFAULT_CONFIG_FILENAME = "usermgr.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
MEMORY_STORE = ":memory:"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class ConfigLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(frozen=True, slots=True)
class AppConfig:
    store_path: Path | None = None
    in_memory: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    def store_location(self) -> Path:
        return self.store_path if self.store_path is not None else default_store_path()


def _read_config_file(path: Path) -> Any:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(code="config_unreadable", message=f"Cannot read config file: {path}") from e

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            return json.loads(raw)
        # YAML is a superset of JSON, so unknown extensions go through it too
        return yaml.safe_load(raw)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigLoadError(
            code="config_parse_error",
            message=f"Cannot parse config file: {path}",
            details={"error": str(e)},
        ) from e


def _parse_log_level(value: Any) -> str:
    if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
        raise ConfigLoadError(
            code="invalid_log_level",
            message=f"'log_level' must be one of {', '.join(_LOG_LEVELS)}.",
            details={"value": value},
        )
    return value.upper()


def _resolve_path(value: Any, base_dir: Path, key: str) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ConfigLoadError(code=f"invalid_{key}", message=f"'{key}' must be a non-empty string.")
    p = Path(value).expanduser()
    return p if p.is_absolute() else (base_dir / p)


def _check_log_file(path: Path) -> None:
    try:
        with path.open("a", encoding="utf-8"):
            pass
    except OSError as e:
        raise ConfigLoadError(
            code="log_file_unwritable",
            message=f"Cannot open log file: {path}",
            details={"error": str(e)},
        ) from e


def load_config(path: str | Path) -> AppConfig:
    """Load an AppConfig from a YAML/JSON file. Missing keys keep their defaults."""
    path = Path(path)
    if not path.exists():
        raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

    data = _read_config_file(path)
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigLoadError(code="invalid_config", message="Config root must be a mapping/object.")

    base_dir = path.resolve().parent
    cfg = AppConfig()

    store = data.get("store")
    if store is not None:
        if store == MEMORY_STORE:
            cfg = replace(cfg, in_memory=True)
        else:
            cfg = replace(cfg, store_path=_resolve_path(store, base_dir, "store"))

    if data.get("log_level") is not None:
        cfg = replace(cfg, log_level=_parse_log_level(data["log_level"]))

    if data.get("log_file") is not None:
        log_file = _resolve_path(data["log_file"], base_dir, "log_file")
        _check_log_file(log_file)
        cfg = replace(cfg, log_file=log_file)

    return cfg


def resolve_config(
    *,
    config_file: str | None = None,
    store: str | None = None,
    log_level: str | None = None,
    cwd: Path | None = None,
) -> AppConfig:
    """
    Merge command-line values over the config file over defaults.

    Without an explicit config_file, ./usermgr.yaml is used when it exists.
    """
    if config_file is not None:
        cfg = load_config(config_file)
    else:
        candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME
        cfg = load_config(candidate) if candidate.exists() else AppConfig()

    if store is not None:
        if store == MEMORY_STORE:
            cfg = replace(cfg, store_path=None, in_memory=True)
        else:
            cfg = replace(cfg, store_path=Path(store).expanduser(), in_memory=False)

    if log_level is not None:
        cfg = replace(cfg, log_level=_parse_log_level(log_level))

    return cfg
