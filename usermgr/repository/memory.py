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

from collections.abc import Iterable

from usermgr.model.types import User


class InMemoryUserRepository:
    """
    Repository without a backing file.

    Same add/delete semantics as the file-backed one; save() is a no-op that
    always succeeds.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: list[User] = list(users)

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
        return True
