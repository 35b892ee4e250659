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

from typing import Protocol

from usermgr.model.types import User


class UserRepository(Protocol):
    """
    Storage contract used by the service layer.

    Implementations own the list of users exclusively. Callers only ever see
    snapshots returned by get_users().
    """

    def get_users(self) -> tuple[User, ...]:
        """
        Current users in insertion order. The returned tuple does not change
        when the repository is mutated afterwards.
        """
        raise NotImplementedError()

    def add_user(self, user: User) -> bool:
        """
        Append user and persist. Returns False (and changes nothing) when a
        user with the same email already exists.
        """
        raise NotImplementedError()

    def delete_user(self, email: str) -> bool:
        """
        Remove every user whose email matches exactly and persist.
        Returns True iff at least one record was removed.
        """
        raise NotImplementedError()

    def save(self) -> bool:
        """
        Write the whole sequence to the backing store.
        Returns False if the write failed; in-memory state is kept either way.
        """
        raise NotImplementedError()
