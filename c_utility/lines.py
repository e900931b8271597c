# SPDX-FileCopyrightText: 2026 MetaMachines LLC
#
# SPDX-License-Identifier: MIT

# Forcing #line directives into template sources, so that diagnostics from
# the C compiler point back at the template rather than the generated file.

from __future__ import annotations

import os

from .declarations import emit_line_directive


def brute_force_text(input_file: str) -> str:
    """Return the text of input_file with a #line directive before every line."""
    out = []
    with open(input_file, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            out.append(emit_line_directive(line_number, input_file))
            out.append(line)
    return "".join(out)


def brute_force_line(input_file: str, output_file: str):
    """Copy input_file to output_file with a #line directive before every line."""
    text = brute_force_text(input_file)
    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def add_lines(input_file: str) -> str:
    """
    Return the text of input_file with each line starting with "#line"
    replaced by a directive for the line after it, and a "#line 1" directive
    before the first line. The absolute path of the file is used.
    """
    full_name = os.path.abspath(input_file)
    out = []
    append = out.append
    with open(input_file, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if line.startswith("#line"):
                append(emit_line_directive(line_number + 1, full_name))
            elif line_number == 1:
                append(emit_line_directive(1, full_name))
                append(line)
            else:
                append(line)
    return "".join(out)
