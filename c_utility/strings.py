# SPDX-FileCopyrightText: 2026 MetaMachines LLC
#
# SPDX-License-Identifier: MIT

"""Conversion of arbitrary text into C string literals.

    >>> print(encode('The quick "brown" fox\\njumped over the lazy dog.\\n'))
    "The quick \\"brown\\" fox\\n"
    "jumped over the lazy dog.\\n"

Escaping is an ordered list of pure steps (``ENCODE_STEPS``). The order
matters: backslashes are doubled before quotes are escaped, otherwise the
backslash added in front of each quote would be doubled too.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

EMPTY_LITERAL = '""'


def escape_string(text: str) -> str:
    """Escape double quotes (") in a string with a backslash."""
    return text.replace('"', '\\"')


def _double_percent(text: str) -> str:
    return text.replace("%", "%%")


def _double_backslashes(text: str) -> str:
    return text.replace("\\", "\\\\")


def _escape_controls(text: str) -> str:
    return text.replace("\r", "\\r").replace("\t", "\\t")


def _collapse_escaped_quotes(text: str) -> str:
    # \" in the input has become \\\" by now; keep it a single escaped quote
    return text.replace('\\\\\\"', '\\"')


def _unescape_at(text: str) -> str:
    # \@ in the input has been doubled to \\@
    return text.replace("\\\\@", "@")


Step = Tuple[str, Callable[[str], str]]

ENCODE_STEPS: List[Step] = [
    ("double_backslashes", _double_backslashes),
    ("escape_quotes", escape_string),
    ("escape_controls", _escape_controls),
    ("collapse_escaped_quotes", _collapse_escaped_quotes),
    ("unescape_at", _unescape_at),
]


def _quote_lines(text: str) -> List[str]:
    lines = text.split("\n")
    # a text ending in a newline leaves an empty remainder
    tail = lines.pop()
    quoted = [f'"{line}\\n"' for line in lines]
    if tail:
        quoted.append(f'"{tail}"')
    return quoted


def encode_lines(
    text: str,
    percent_escape: bool = False,
    unescape_at: bool = False,
) -> List[str]:
    """
    Convert text into a list of C string literals, one per line of input.
    Lines which ended in a newline get a trailing \\n escape.
    """
    if len(text) == 0:
        return [EMPTY_LITERAL]
    if percent_escape:
        text = _double_percent(text)
    for name, step in ENCODE_STEPS:
        if name == "unescape_at" and not unescape_at:
            continue
        text = step(text)
    return _quote_lines(text)


def encode(
    text: str,
    percent_escape: bool = False,
    unescape_at: bool = False,
) -> str:
    """
    Convert text into C string literals, joined by newlines so the C
    compiler concatenates them.

    percent_escape: also turn % into %%, for text used as a format string.
    unescape_at: remove the backslash from \\@ (legacy template sources).

    Carriage returns and tabs become \\r and \\t. Other control characters
    are copied as they are.
    """
    return "\n".join(encode_lines(text, percent_escape, unescape_at))


def encode_pc(text: str) -> str:
    """As encode, with % converted to %%."""
    return encode(text, percent_escape=True)
