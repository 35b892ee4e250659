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

import argparse
import logging
import sys

from usermgr._version import __version__
from usermgr.cli._io import ConsoleLineReader, LineReader
from usermgr.cli.console import ConsoleController
from usermgr.cli.exitcodes import EXIT_CONFIG_ERROR, EXIT_OK
from usermgr.core.config import MEMORY_STORE, AppConfig, ConfigLoadError, resolve_config
from usermgr.core.logging import setup_logging
from usermgr.repository import InMemoryUserRepository, JsonFileUserRepository, UserRepository
from usermgr.service import UserService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="usermgr", description="Console manager for user records (name + email).")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--store",
        default=None,
        help=f"Backing JSON file (default: <tempdir>/users.json; '{MEMORY_STORE}' keeps users in memory only).",
    )
    p.add_argument("--config", default=None, help="Config file (YAML or JSON). Default: ./usermgr.yaml if present.")
    p.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Diagnostic log level (default: WARNING).",
    )
    return p


def build_repository(cfg: AppConfig) -> UserRepository:
    if cfg.in_memory:
        return InMemoryUserRepository()
    return JsonFileUserRepository(cfg.store_location())


def main(argv: list[str] | None = None, *, reader: LineReader | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = resolve_config(config_file=args.config, store=args.store, log_level=args.log_level)
        try:
            setup_logging(cfg.log_level, cfg.log_file)
        except OSError as e:
            raise ConfigLoadError(
                code="log_file_unwritable",
                message=f"Cannot open log file: {cfg.log_file}",
                details={"error": str(e)},
            ) from e
    except ConfigLoadError as e:
        print(f"usermgr: error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger.debug("Resolved configuration: %s", cfg)

    repository = build_repository(cfg)
    controller = ConsoleController(UserService(repository), reader or ConsoleLineReader())
    controller.run()
    return EXIT_OK


def entrypoint() -> None:
    sys.exit(main())
