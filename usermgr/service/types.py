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

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServiceResult:
    """
    Outcome of a service operation together with the message to show the user.

    Unpacks as a pair, so callers can write ``ok, message = service.create_user(...)``.
    """

    success: bool
    message: str

    def __iter__(self) -> Iterator[bool | str]:
        yield self.success
        yield self.message

    @staticmethod
    def ok(message: str) -> "ServiceResult":
        return ServiceResult(success=True, message=message)

    @staticmethod
    def fail(message: str) -> "ServiceResult":
        return ServiceResult(success=False, message=message)
