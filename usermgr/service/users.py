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

from usermgr.model.types import User
from usermgr.repository.interfaces import UserRepository
from usermgr.service.types import ServiceResult
from usermgr.service.validation import is_valid_email

MSG_NAME_EMPTY = "Name cannot be empty"
MSG_INVALID_EMAIL = "Invalid email format"


class UserService:
    """
    Validates input and applies the add/remove rules on top of a repository.

    Uniqueness by email is enforced by the repository; this layer only turns
    the repository's bool answers into user-facing messages.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def get_all_users(self) -> tuple[User, ...]:
        return self._repository.get_users()

    def create_user(self, name: str, email: str) -> ServiceResult:
        if not name:
            return ServiceResult.fail(MSG_NAME_EMPTY)

        if not is_valid_email(email):
            return ServiceResult.fail(MSG_INVALID_EMAIL)

        if not self._repository.add_user(User(name=name, email=email)):
            return ServiceResult.fail(f"User with email {email} already exists")

        return ServiceResult.ok(f"User {name} added successfully")

    def remove_user(self, email: str) -> ServiceResult:
        if self._repository.delete_user(email):
            return ServiceResult.ok(f"User with email {email} removed")
        return ServiceResult.fail(f"User with email {email} not found")
