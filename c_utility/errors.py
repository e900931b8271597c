# SPDX-FileCopyrightText: 2026 MetaMachines LLC
#
# SPDX-License-Identifier: MIT

# Errors raised while generating C text. All of them are ValueErrors so a
# caller can treat any bad input the same way.

from __future__ import annotations

from typing import Any


class CUtilityError(ValueError):
    pass


class NotACFileError(CUtilityError):
    def __init__(self, file_name: str):
        super().__init__(f"{file_name} is not a C file name")
        self.file_name = file_name


class InvalidIdentifierError(CUtilityError):
    def __init__(self, name: Any, message: str = ""):
        super().__init__(message or f"Bad identifier '{name}'")
        self.name = name


class InvalidVariableNameError(InvalidIdentifierError):
    def __init__(self, name: Any):
        super().__init__(name, f"bad variable {name}")


class InvalidLineNumberError(CUtilityError):
    def __init__(self, line_number: Any):
        super().__init__(f"{line_number} is not a real line number")
        self.line_number = line_number
