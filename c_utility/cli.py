#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 MetaMachines LLC
#
# SPDX-License-Identifier: MIT

# c-utility command line
#
# Usage:
#   c-utility string --input template.txt --varname usage --output usage.c
#   c-utility hash --input info.json --c-file version.c --prefix super_
#   c-utility line --number 42 --file parser.y
#   c-utility guard my.h --include other.h
#   c-utility brute-lines template.c.tmpl lined.c.tmpl
#   c-utility add-lines template.c.tmpl --output lined.c.tmpl

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from . import __version__
from .declarations import (
    emit_include,
    emit_include_guard_close,
    emit_include_guard_open,
    emit_line_directive,
    write_declaration_pair,
)
from .identifiers import check_identifier
from .lines import add_lines, brute_force_text
from .strings import encode

# Exit statuses, one per stage
EXIT_READ = 2
EXIT_VALIDATE = 3
EXIT_GENERATE = 4
EXIT_WRITE = 5


# -------------------------
# Input / output
# -------------------------

def _read_input(path: Optional[str]) -> str:
    if path == "-" or path is None:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_output(path: Optional[str], text: str):
    if path == "-" or path is None:
        sys.stdout.write(text)
    else:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)


def _load_mapping(raw_text: str) -> dict:
    mapping = json.loads(raw_text)
    if not isinstance(mapping, dict):
        raise ValueError("Expected a JSON object of name/value pairs")
    for name, value in mapping.items():
        if not isinstance(value, str):
            raise ValueError(f"Value of '{name}' is not a string: {value!r}")
    return mapping


# -------------------------
# Commands
# -------------------------

def _cmd_string(args: argparse.Namespace) -> int:
    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_READ

    try:
        if args.varname is not None:
            check_identifier(args.varname)
    except ValueError as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return EXIT_VALIDATE

    literal = encode(text, percent_escape=args.percent, unescape_at=args.unescape_at)
    if args.varname is not None:
        out = f"const char * {args.varname} =\n{literal};\n"
    else:
        out = literal + "\n"

    try:
        _write_output(args.output, out)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_WRITE
    return 0


def _cmd_hash(args: argparse.Namespace) -> int:
    try:
        raw_text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_READ

    try:
        mapping = _load_mapping(raw_text)
    except ValueError as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return EXIT_VALIDATE

    try:
        h_file_name = write_declaration_pair(args.c_file, mapping, args.prefix)
    except ValueError as e:
        print(f"Generation error: {e}", file=sys.stderr)
        return EXIT_GENERATE
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_WRITE

    if args.verbose:
        print(f"[c-utility] wrote {args.c_file} and {h_file_name} ({len(mapping)} strings)",
              file=sys.stderr)
    return 0


def _cmd_line(args: argparse.Namespace) -> int:
    try:
        directive = emit_line_directive(args.number, args.file)
    except ValueError as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return EXIT_VALIDATE
    sys.stdout.write(directive)
    return 0


def _cmd_guard(args: argparse.Namespace) -> int:
    try:
        parts = [emit_include_guard_open(args.header)]
        for include in args.include:
            parts.append(emit_include(include))
        parts.append(emit_include_guard_close(args.header))
    except ValueError as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return EXIT_VALIDATE
    sys.stdout.write("".join(parts))
    return 0


def _cmd_brute_lines(args: argparse.Namespace) -> int:
    try:
        text = brute_force_text(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_READ
    try:
        _write_output(args.output, text)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_WRITE
    if args.verbose:
        print(f"[c-utility] {args.input} -> {args.output}", file=sys.stderr)
    return 0


def _cmd_add_lines(args: argparse.Namespace) -> int:
    try:
        text = add_lines(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_READ
    try:
        _write_output(args.output, text)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_WRITE
    return 0


# -------------------------
# CLI
# -------------------------

def _parse_args(argv: List[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="c-utility", description="Helpers for generating C source.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("string", help="Convert text to a C string literal.")
    s.add_argument("--input", "-i", default="-", help="Input text file (or '-' for stdin).")
    s.add_argument("--output", "-o", default="-", help="Output path (or '-' for stdout).")
    s.add_argument("--percent", action="store_true", help="Convert %% to %%%% for format strings.")
    s.add_argument("--unescape-at", action="store_true", help="Turn \\@ into @ (legacy templates).")
    s.add_argument("--varname", default=None, help="Emit a const char * definition with this name.")
    s.set_defaults(func=_cmd_string)

    h = sub.add_parser("hash", help="Write a .c/.h pair of const char * strings from a JSON object.")
    h.add_argument("--input", "-i", default="-", help="JSON object of name/value strings (or '-' for stdin).")
    h.add_argument("--c-file", "-c", required=True, help="Name of the .c file; the .h name is derived from it.")
    h.add_argument("--prefix", "-p", default="", help="Prefix added to every variable name.")
    h.add_argument("--verbose", "-v", action="store_true", help="Report the files written.")
    h.set_defaults(func=_cmd_hash)

    ln = sub.add_parser("line", help="Print a #line directive.")
    ln.add_argument("--number", "-n", required=True, help="Line number.")
    ln.add_argument("--file", "-f", required=True, help="File name for the directive.")
    ln.set_defaults(func=_cmd_line)

    g = sub.add_parser("guard", help="Print an include guard for a header file.")
    g.add_argument("header", help="Header file name, e.g. my-file.h")
    g.add_argument("--include", action="append", default=[], help="Header to #include inside the guard.")
    g.set_defaults(func=_cmd_guard)

    b = sub.add_parser("brute-lines", help="Put a #line directive before every line of a file.")
    b.add_argument("input", help="Input file.")
    b.add_argument("output", help="Output file.")
    b.add_argument("--verbose", "-v", action="store_true", help="Report the file written.")
    b.set_defaults(func=_cmd_brute_lines)

    a = sub.add_parser("add-lines", help="Expand #line markers in a template into C line directives.")
    a.add_argument("input", help="Input file.")
    a.add_argument("--output", "-o", default="-", help="Output path (or '-' for stdout).")
    a.set_defaults(func=_cmd_add_lines)

    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
