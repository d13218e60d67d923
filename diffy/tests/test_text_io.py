import json
import pytest
from diffy.core import Alignment, Link
from diffy.io import (
    expand_tabs_and_strip_line_endings,
    load_alignment,
    read_lines,
    save_alignment,
    save_json,
    split_lines,
)


@pytest.mark.parametrize("raw,expected", [
    ("", ""),
    ("\t", "    "),
    ("a\tb", "a   b"),
    ("abcd\te", "abcd    e"),
    ("ab\t\tc", "ab      c"),
    ("line\r\n", "line"),
    ("a\rb\nc", "abc"),
])
def test_expand_tabs(raw, expected):
    assert expand_tabs_and_strip_line_endings(raw) == expected


def test_expand_tabs_custom_size():
    assert expand_tabs_and_strip_line_endings("a\tb", tab_size=8) == "a       b"
    assert expand_tabs_and_strip_line_endings("\tx", tab_size=1) == " x"
    with pytest.raises(ValueError):
        expand_tabs_and_strip_line_endings("x", tab_size=0)


def test_split_lines():
    assert split_lines("").texts() == []
    assert split_lines("one").texts() == ["one"]
    assert split_lines("one\n").texts() == ["one"]
    assert split_lines("one\n\n").texts() == ["one", ""]
    assert split_lines("a\r\nb\r\n").texts() == ["a", "b"]
    assert split_lines("\tx\ny").texts() == ["    x", "y"]


def test_read_lines(tmp_path):
    p = tmp_path / "left.txt"
    p.write_bytes(b"first\r\n\tsecond\nthird")
    lines = read_lines(p)
    assert lines.texts() == ["first", "    second", "third"]
    assert read_lines(p, tab_size=2).texts()[1] == "  second"


def test_read_lines_missing_and_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")
    with pytest.raises(IsADirectoryError):
        read_lines(tmp_path)


def test_read_lines_bad_encoding(tmp_path):
    p = tmp_path / "latin.txt"
    p.write_bytes("café\n".encode("latin-1"))
    with pytest.raises(UnicodeDecodeError):
        read_lines(p)
    assert read_lines(p, encoding="latin-1").texts() == ["café"]


def test_alignment_json_round_trip(tmp_path):
    alignment = Alignment([Link.matching(0, 0), Link.left_only(1), Link.right_only(1)])
    p = tmp_path / "out" / "alignment.json"
    save_alignment(p, alignment)
    assert load_alignment(p) == alignment


def test_alignment_json_list_form(tmp_path):
    p = tmp_path / "links.json"
    p.write_text(json.dumps([{"kind": "different", "left": 0, "right": 0}]), encoding="utf-8")
    assert load_alignment(p) == Alignment([Link.different(0, 0)])


def test_alignment_json_unknown_form(tmp_path):
    p = tmp_path / "bad.json"
    save_json(p, {"something": "else"})
    with pytest.raises(ValueError):
        load_alignment(p)


@pytest.mark.parametrize("links", [
    [{"kind": "sideways", "left": 0, "right": 0}],
    [{"kind": "left_only", "left": 0, "right": 0}],
    [{"kind": "matching", "left": "0", "right": 0}],
    [{"kind": "left_only", "left": True}],
    ["left_only"],
])
def test_alignment_json_bad_links(tmp_path, links):
    p = tmp_path / "links.json"
    p.write_text(json.dumps(links), encoding="utf-8")
    with pytest.raises(ValueError):
        load_alignment(p)


def test_alignment_json_checked_against_lengths(tmp_path):
    p = tmp_path / "alignment.json"
    save_alignment(p, Alignment([Link.matching(0, 0), Link.left_only(1)]))
    assert len(load_alignment(p, left_length=2, right_length=1)) == 2
    with pytest.raises(ValueError):
        load_alignment(p, left_length=3, right_length=1)
