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
from typing import Protocol


class LineReader(Protocol):
    """Source of input lines for the console controller."""

    def read_line(self, prompt: str) -> str | None:
        """
        Show prompt (if the reader is interactive) and return the next line
        without its trailing newline, or None when input is exhausted.
        """
        raise NotImplementedError()


class ConsoleLineReader:
    """Reads from stdin with input(); EOF and Ctrl-C both end input."""

    def read_line(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None


class ScriptedLineReader:
    """
    Feeds a fixed sequence of lines, then reports end of input.

    Prompts are recorded in `prompts` so tests can assert on what was asked.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self._pos = 0
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if self._pos >= len(self._lines):
            return None
        line = self._lines[self._pos]
        self._pos += 1
        return line

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._pos
