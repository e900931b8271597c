import os

from c_utility.lines import add_lines, brute_force_line, brute_force_text


def test_brute_force_line(tmp_path):
    source = tmp_path / "t.c.tmpl"
    source.write_text("int a;\nint b;\n", encoding="utf-8")
    target = tmp_path / "t.c"
    brute_force_line(str(source), str(target))
    assert target.read_text(encoding="utf-8") == (
        f'#line 1 "{source}"\n'
        "int a;\n"
        f'#line 2 "{source}"\n'
        "int b;\n"
    )


def test_brute_force_line_empty(tmp_path):
    source = tmp_path / "empty.tmpl"
    source.write_text("", encoding="utf-8")
    target = tmp_path / "empty.c"
    brute_force_line(str(source), str(target))
    assert target.read_text(encoding="utf-8") == ""


def test_add_lines(tmp_path):
    source = tmp_path / "t.c.tmpl"
    source.write_text("first\n#line\nthird\nfourth\n", encoding="utf-8")
    full = os.path.abspath(str(source))
    assert add_lines(str(source)) == (
        f'#line 1 "{full}"\n'
        "first\n"
        f'#line 3 "{full}"\n'
        "third\n"
        "fourth\n"
    )


def test_add_lines_marker_on_first_line(tmp_path):
    source = tmp_path / "t.c.tmpl"
    source.write_text("#line\nsecond\n", encoding="utf-8")
    full = os.path.abspath(str(source))
    assert add_lines(str(source)) == f'#line 2 "{full}"\nsecond\n'


def test_add_lines_relative_path(tmp_path, monkeypatch):
    (tmp_path / "rel.tmpl").write_text("x\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    full = os.path.abspath("rel.tmpl")
    assert add_lines("rel.tmpl") == f'#line 1 "{full}"\nx\n'


def test_brute_force_text(tmp_path):
    source = tmp_path / "t.c.tmpl"
    source.write_text("x\n", encoding="utf-8")
    assert brute_force_text(str(source)) == f'#line 1 "{source}"\nx\n'
