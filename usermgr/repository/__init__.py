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

from usermgr.repository.errors import UserStoreError
from usermgr.repository.interfaces import UserRepository
from usermgr.repository.json_store import JsonFileUserRepository, default_store_path
from usermgr.repository.memory import InMemoryUserRepository

__all__ = [
    "UserRepository",
    "UserStoreError",
    "JsonFileUserRepository",
    "InMemoryUserRepository",
    "default_store_path",
]
