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

from collections.abc import Sequence

from usermgr.model.types import User

MENU_LINES = (
    "",
    "===== MENU =====",
    "1. List users",
    "2. Add user",
    "3. Delete user",
    "0. Exit",
)

MSG_LIST_EMPTY = "User list is empty"


def format_user_line(position: int, user: User) -> str:
    """position is 1-based."""
    return f"{position}. Name: {user.name}, Email: {user.email}"


def render_user_list(users: Sequence[User]) -> list[str]:
    if not users:
        return [MSG_LIST_EMPTY]
    lines = ["", "===== USER LIST ====="]
    lines.extend(format_user_line(i, u) for i, u in enumerate(users, start=1))
    return lines
