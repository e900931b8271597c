import re

import pytest

from c_utility.strings import ENCODE_STEPS, encode, encode_lines, encode_pc, escape_string

ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


def decode(literal):
    """Undo encode: strip the quotes and the backslash escapes of each line."""
    out = []
    for line in literal.split("\n"):
        assert line.startswith('"') and line.endswith('"')
        body = line[1:-1]
        out.append(re.sub(r'\\(.)', lambda m: ESCAPES.get(m.group(1), m.group(1)), body))
    return "".join(out)


def test_empty():
    assert encode("") == '""'
    assert encode("", percent_escape=True) == '""'
    assert encode_lines("") == ['""']


def test_multiline_with_quotes():
    text = 'The quick "brown" fox\njumped over the lazy dog.\n'
    assert encode(text) == (
        '"The quick \\"brown\\" fox\\n"\n'
        '"jumped over the lazy dog.\\n"'
    )


def test_no_trailing_newline():
    assert encode("abc") == '"abc"'
    assert encode_lines("a\nb") == ['"a\\n"', '"b"']


def test_only_newline():
    assert encode("\n") == '"\\n"'


def test_blank_lines():
    assert encode_lines("a\n\nb\n") == ['"a\\n"', '"\\n"', '"b\\n"']


def test_backslashes_doubled():
    assert encode("C:\\dir") == '"C:\\\\dir"'
    assert encode("trail\\") == '"trail\\\\"'


def test_pre_escaped_quote_stays_single():
    result = encode('say \\"hi\\"')
    assert result == '"say \\"hi\\""'
    assert '\\\\"' not in result


def test_percent_untouched_by_default():
    assert encode("100% sure, 5%d") == '"100% sure, 5%d"'


def test_percent_doubled():
    assert encode("%d%%", percent_escape=True) == '"%%d%%%%"'
    assert encode_pc("50% off\n") == '"50%% off\\n"'


@pytest.mark.parametrize("text", ["%", "a % b % c\n", "no percent", "%%\n%"])
def test_percent_counts(text):
    assert encode(text).count("%") == text.count("%")
    escaped = encode(text, percent_escape=True)
    assert escaped.count("%") == 2 * text.count("%")
    assert re.sub("%%", "", escaped).count("%") == 0


def test_at_sign_kept_by_default():
    assert encode("user@host") == '"user@host"'
    assert encode("a\\@b") == '"a\\\\@b"'


def test_unescape_at():
    assert encode("a\\@b", unescape_at=True) == '"a@b"'


@pytest.mark.parametrize("text", [
    "plain",
    "two\nlines\n",
    'quote "x" here',
    "back\\slash",
    "trail\\",
    "50% off\n",
    "unicode \u00e9 \u2713\n",
    "\n\n",
    "literal \\n is not a newline",
    "crlf\r\nand\ttab\n",
    "lone\rcarriage return",
])
def test_round_trip(text):
    assert decode(encode(text)) == text


def test_escape_string_only_touches_quotes():
    assert escape_string('a "b" \\c\n') == 'a \\"b\\" \\c\n'


def test_steps_in_order():
    assert [name for name, _ in ENCODE_STEPS] == [
        "double_backslashes",
        "escape_quotes",
        "escape_controls",
        "collapse_escaped_quotes",
        "unescape_at",
    ]
    steps = dict(ENCODE_STEPS)
    assert steps["double_backslashes"]("a\\b") == "a\\\\b"
    assert steps["escape_quotes"]('"') == '\\"'
    assert steps["collapse_escaped_quotes"]('\\\\\\"') == '\\"'
    assert steps["unescape_at"]("\\\\@") == "@"
    assert steps["escape_controls"]("a\r\tb") == "a\\r\\tb"


def test_carriage_return_and_tab_escaped():
    assert encode("lone\rreturn") == '"lone\\rreturn"'
    assert encode("a\tb\r\n") == '"a\\tb\\r\\n"'
    assert "\r" not in encode("x\ry\r")
