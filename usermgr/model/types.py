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

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class User:
    """
    A single user record.

    The email is the identity: two records with the same email (exact,
    case-sensitive match) are the same user as far as the store is concerned.
    """

    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "User":
        if not isinstance(data, Mapping):
            raise ValueError(f"User record must be an object, got {type(data).__name__}")
        name = data.get("name")
        email = data.get("email")
        if not isinstance(name, str) or not isinstance(email, str):
            raise ValueError("User record requires string 'name' and 'email'")
        return User(name=name, email=email)
