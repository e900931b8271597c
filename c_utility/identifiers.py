# SPDX-FileCopyrightText: 2026 MetaMachines LLC
#
# SPDX-License-Identifier: MIT

# C identifiers: validation and the names derived from file names.

from __future__ import annotations

import re
from typing import Any, FrozenSet

from .errors import InvalidIdentifierError, NotACFileError

# Reserved words of C, from
# http://crasseux.com/books/ctutorial/Reserved-words-in-C.html
RESERVED_WORDS: FrozenSet[str] = frozenset("""
    auto if break int case long char register continue return default
    short do sizeof double static else struct entry switch extern typedef
    float union for unsigned goto while enum void const signed volatile
""".split())

# At least two characters: a lone letter is rejected.
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z_0-9]+")


def is_valid_identifier(name: Any) -> bool:
    if not isinstance(name, str):
        return False
    return _IDENTIFIER_RE.fullmatch(name) is not None and name not in RESERVED_WORDS


def check_identifier(name: Any) -> str:
    if not is_valid_identifier(name):
        raise InvalidIdentifierError(name)
    return name


def derive_wrapper_name(file_name: str) -> str:
    """
    Given a file name, return a C preprocessor wrapper name for it:
    "my-file.h" -> "MY_FILE_H". Paths are not stripped, pass a bare name.
    """
    wrapper = re.sub(r"[.-]", "_", file_name).upper()
    return check_identifier(wrapper)


def derive_header_name(c_file_name: str) -> str:
    """Make a .h file name from a .c file name: "frog.c" -> "frog.h"."""
    if not c_file_name.endswith(".c"):
        raise NotACFileError(c_file_name)
    return c_file_name[:-len(".c")] + ".h"
