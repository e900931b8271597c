# SPDX-FileCopyrightText: 2026 MetaMachines LLC
#
# SPDX-License-Identifier: MIT

"""Utilities for generating C programs: string literals, include guards,
#line directives and const char * declaration pairs."""

__version__ = "0.2.0"

from .errors import (
    CUtilityError,
    InvalidIdentifierError,
    InvalidLineNumberError,
    InvalidVariableNameError,
    NotACFileError,
)
from .strings import encode, encode_lines, encode_pc, escape_string
from .identifiers import (
    RESERVED_WORDS,
    check_identifier,
    derive_header_name,
    derive_wrapper_name,
    is_valid_identifier,
)
from .declarations import (
    emit_declaration_pair,
    emit_include,
    emit_include_guard_close,
    emit_include_guard_open,
    emit_line_directive,
    write_declaration_pair,
)
from .lines import add_lines, brute_force_line, brute_force_text

__all__ = [
    "CUtilityError",
    "InvalidIdentifierError",
    "InvalidLineNumberError",
    "InvalidVariableNameError",
    "NotACFileError",
    "encode",
    "encode_lines",
    "encode_pc",
    "escape_string",
    "RESERVED_WORDS",
    "check_identifier",
    "derive_header_name",
    "derive_wrapper_name",
    "is_valid_identifier",
    "emit_declaration_pair",
    "emit_include",
    "emit_include_guard_close",
    "emit_include_guard_open",
    "emit_line_directive",
    "write_declaration_pair",
    "add_lines",
    "brute_force_line",
    "brute_force_text",
]
