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

import string

# ASCII only: str.isalnum() would also accept non-Latin letters and digits.
_ALNUM = frozenset(string.ascii_letters + string.digits)
LOCAL_PART_CHARS = _ALNUM | frozenset(".-_+%")
DOMAIN_PART_CHARS = _ALNUM | frozenset(".-")

MIN_TLD_LENGTH = 2


def is_valid_email(email: str) -> bool:
    """
    Permissive syntactic email check.

    Accepts local@domain where:
      - there is exactly one '@' and both sides are non-empty
      - the domain contains a '.' and its last label has 2+ characters
      - local uses [A-Za-z0-9._+%-], domain uses [A-Za-z0-9.-]

    This is an approximation, not RFC 5322: "a..b@x.co" or "a@-x.co" pass.
    """
    parts = email.split("@")
    if len(parts) != 2:
        return False

    local, domain = parts
    if not local or not domain:
        return False

    if "." not in domain:
        return False

    tld = domain.split(".")[-1]
    if len(tld) < MIN_TLD_LENGTH:
        return False

    if any(ch not in LOCAL_PART_CHARS for ch in local):
        return False

    return all(ch in DOMAIN_PART_CHARS for ch in domain)
