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
File-backed user repository.

Storage layout: a single UTF-8 JSON file holding an array of user objects,
in insertion order:

  [
    {"name": "Ann", "email": "ann@x.co"},
    ...
  ]

The file is read once when the repository is created and rewritten in full
after every successful add/delete. Writes go to a sibling temporary file that
is then renamed over the target, so readers never see a half-written file.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from usermgr.model.types import User
from usermgr.repository.errors import UserStoreError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "users.json"


def default_store_path() -> Path:
    """Location used when nothing is configured: <tempdir>/users.json."""
    return Path(tempfile.gettempdir()) / DEFAULT_FILENAME


def decode_users(data: Any, *, path: str | None = None) -> list[User]:
    """Turn parsed JSON into users. Raises UserStoreError on a bad shape."""
    if not isinstance(data, list):
        raise UserStoreError(
            "Store root must be a JSON array.",
            code="invalid_store",
            path=path,
            details={"type": type(data).__name__},
        )
    users: list[User] = []
    for idx, item in enumerate(data):
        try:
            users.append(User.from_dict(item))
        except ValueError as e:
            raise UserStoreError(str(e), code="invalid_record", path=path, details={"index": idx}) from e
    return users


def encode_users(users: tuple[User, ...] | list[User]) -> str:
    return json.dumps([u.to_dict() for u in users], indent=2, ensure_ascii=False) + "\n"


class JsonFileUserRepository:
    """
    Users mirrored to a JSON file.

    I/O problems never propagate: a store that cannot be loaded starts empty,
    a failed save is logged and the in-memory list stays authoritative.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._users: list[User] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> list[User]:
        if not self._path.exists():
            logger.info("Store %s does not exist, starting with an empty user list", self._path)
            return []
        try:
            raw = self._path.read_text(encoding="utf-8")
            users = decode_users(json.loads(raw), path=str(self._path))
        except (OSError, ValueError, RecursionError, UserStoreError) as e:
            logger.error("Failed to load users from %s: %s", self._path, e)
            return []
        logger.info("Loaded %d user(s) from %s", len(users), self._path)
        return users

    def get_users(self) -> tuple[User, ...]:
        return tuple(self._users)

    def add_user(self, user: User) -> bool:
        if any(u.email == user.email for u in self._users):
            return False
        self._users.append(user)
        self.save()
        return True

    def delete_user(self, email: str) -> bool:
        kept = [u for u in self._users if u.email != email]
        if len(kept) == len(self._users):
            return False
        self._users = kept
        self.save()
        return True

    def save(self) -> bool:
        try:
            payload = encode_users(self._users)
            self._write_atomic(payload)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save users to %s: %s", self._path, e)
            return False
        logger.info("Saved %d user(s) to %s", len(self._users), self._path)
        return True

    def _write_atomic(self, payload: str) -> None:
        parent = self._path.parent
        parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=parent)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
