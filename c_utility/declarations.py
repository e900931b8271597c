# SPDX-FileCopyrightText: 2026 MetaMachines LLC
#
# SPDX-License-Identifier: MIT

# Preprocessor boilerplate and const char * declaration pairs.
#
#   c_text, h_text = emit_declaration_pair("my.c", {"version": "0.01"})
#
# c_text:
#   #include "my.h"
#   const char * version = "0.01";
# h_text:
#   #ifndef MY_H
#   #define MY_H
#   extern const char * version; /* 0.01 */
#   #endif /* MY_H */

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Tuple

from .errors import InvalidLineNumberError, InvalidVariableNameError
from .identifiers import derive_header_name, derive_wrapper_name, is_valid_identifier
from .strings import escape_string

_LINE_NUMBER_RE = re.compile(r"[0-9]+")


# -------------------------
# Preprocessor lines
# -------------------------

def emit_include_guard_open(file_name: str) -> str:
    wrapper = derive_wrapper_name(file_name)
    return f"#ifndef {wrapper}\n#define {wrapper}\n"


def emit_include_guard_close(file_name: str) -> str:
    wrapper = derive_wrapper_name(file_name)
    return f"#endif /* {wrapper} */\n"


def emit_include(header_file_name: str) -> str:
    return f'#include "{header_file_name}"\n'


def _check_line_number(line_number: Any) -> str:
    # bool is an int subclass but never a line number
    if isinstance(line_number, bool):
        raise InvalidLineNumberError(line_number)
    if isinstance(line_number, int):
        if line_number < 0:
            raise InvalidLineNumberError(line_number)
        return str(line_number)
    if isinstance(line_number, str) and _LINE_NUMBER_RE.fullmatch(line_number):
        return line_number
    raise InvalidLineNumberError(line_number)


def emit_line_directive(line_number: Any, file_name: str) -> str:
    """
    `#line 42 "file.x"`. line_number is an int >= 0 or a string of digits;
    a string is emitted as given, leading zeros included.
    """
    return f'#line {_check_line_number(line_number)} "{file_name}"\n'


# -------------------------
# Declaration pairs
# -------------------------

def emit_declaration_pair(
    c_file_name: str,
    mapping: Mapping,
    prefix: str = "",
) -> Tuple[str, str]:
    """
    Output a mapping as a set of const char * strings in a .c file, with
    matching extern declarations in the .h file.

    Returns (c_text, h_text). Keys are emitted in sorted order; every key is
    checked before any text is produced.
    """
    if not isinstance(mapping, Mapping):
        raise TypeError(f"Expected a mapping, got {type(mapping).__name__}")
    # a .c file in another directory still includes its header by bare name
    h_file_name = os.path.basename(derive_header_name(c_file_name))
    # keys may be of any type until checked, so sort by their text
    invalid = sorted((key for key in mapping if not is_valid_identifier(key)), key=str)
    if invalid:
        raise InvalidVariableNameError(invalid[0])
    variables = sorted(mapping)
    prefix = prefix or ""

    c: List[str] = [emit_include(h_file_name)]
    h: List[str] = [emit_include_guard_open(h_file_name)]
    for variable in variables:
        value = escape_string(str(mapping[variable]))
        c.append(f'const char * {prefix}{variable} = "{value}";\n')
        h.append(f"extern const char * {prefix}{variable}; /* {value} */\n")
    h.append(emit_include_guard_close(h_file_name))
    return "".join(c), "".join(h)


def _write_text(path: str, text: str):
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def write_declaration_pair(
    c_file_name: str,
    mapping: Mapping,
    prefix: str = "",
    backup: Optional[Callable[[str], Any]] = None,
) -> str:
    """
    Write the output of emit_declaration_pair to c_file_name and its .h
    file, .c first. Existing files are overwritten; if given, backup(path)
    is called for each of them beforehand. Returns the .h file name.
    """
    c_text, h_text = emit_declaration_pair(c_file_name, mapping, prefix)
    h_file_name = derive_header_name(c_file_name)
    if backup is not None:
        for path in (c_file_name, h_file_name):
            if os.path.exists(path):
                backup(path)
    _write_text(c_file_name, c_text)
    _write_text(h_file_name, h_text)
    return h_file_name
