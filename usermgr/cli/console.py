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
Interactive menu over a UserServiceProtocol.

The loop is an explicit state machine:

  MENU --"1"--> LIST   --> MENU
  MENU --"2"--> ADD    --> MENU
  MENU --"3"--> DELETE --> MENU
  MENU --"0"--> EXIT

Bad menu input stays in MENU. End of input from the reader at any prompt
moves to EXIT.
"""

import re
from collections.abc import Callable
from enum import StrEnum

from usermgr.cli._io import LineReader
from usermgr.cli.render import MENU_LINES, render_user_list
from usermgr.service.interfaces import UserServiceProtocol

Writer = Callable[[str], None]

BANNER = "User management console started!"
MENU_PROMPT = "Choose an option (0-3): "
MSG_GOODBYE = "Goodbye!"
MSG_INVALID_INPUT = "Invalid input. Please try again."
MSG_INVALID_OPTION = "Invalid option. Please try again."
MSG_NAME_EMPTY = "Name cannot be empty"
MSG_EMAIL_EMPTY = "Email cannot be empty"

# ASCII digits only, no surrounding whitespace or "_" separators
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class State(StrEnum):
    MENU = "menu"
    LIST = "list"
    ADD = "add"
    DELETE = "delete"
    EXIT = "exit"


_MENU_CHOICES: dict[int, State] = {
    0: State.EXIT,
    1: State.LIST,
    2: State.ADD,
    3: State.DELETE,
}


class ConsoleController:
    def __init__(
        self,
        service: UserServiceProtocol,
        reader: LineReader,
        writer: Writer = print,
    ) -> None:
        self._service = service
        self._reader = reader
        self._write = writer
        self._handlers: dict[State, Callable[[], State]] = {
            State.MENU: self._menu,
            State.LIST: self._list_users,
            State.ADD: self._add_user,
            State.DELETE: self._delete_user,
        }

    def run(self) -> int:
        """Run until the user exits or input ends. Returns the number of actions performed."""
        self._write(BANNER)
        state = State.MENU
        actions = 0
        while state is not State.EXIT:
            if state is not State.MENU:
                actions += 1
            state = self._handlers[state]()
        return actions

    def _menu(self) -> State:
        for line in MENU_LINES:
            self._write(line)

        choice = self._reader.read_line(MENU_PROMPT)
        if choice is None:
            return State.EXIT

        if not _INTEGER_RE.fullmatch(choice):
            self._write(MSG_INVALID_INPUT)
            return State.MENU
        option = int(choice)

        next_state = _MENU_CHOICES.get(option)
        if next_state is None:
            self._write(MSG_INVALID_OPTION)
            return State.MENU
        if next_state is State.EXIT:
            self._write(MSG_GOODBYE)
        return next_state

    def _list_users(self) -> State:
        for line in render_user_list(self._service.get_all_users()):
            self._write(line)
        return State.MENU

    def _add_user(self) -> State:
        self._write("")
        self._write("===== ADD USER =====")
        name = self._reader.read_line("Enter name: ")
        if name is None:
            return State.EXIT
        if not name:
            self._write(MSG_NAME_EMPTY)
            return State.MENU

        email = self._reader.read_line("Enter email: ")
        if email is None:
            return State.EXIT
        if not email:
            self._write(MSG_EMAIL_EMPTY)
            return State.MENU

        result = self._service.create_user(name, email)
        self._write(result.message)
        return State.MENU

    def _delete_user(self) -> State:
        self._write("")
        self._write("===== DELETE USER =====")
        email = self._reader.read_line("Enter email of the user to delete: ")
        if email is None:
            return State.EXIT
        if not email:
            self._write(MSG_EMAIL_EMPTY)
            return State.MENU

        result = self._service.remove_user(email)
        self._write(result.message)
        return State.MENU
