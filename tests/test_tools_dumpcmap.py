import logging

import pytest

from cmapcontent import settings
from cmapcontent.cmapexceptions import CMapValueError
from cmapcontent.cmapobject import CMapObject, ObjectType
from tests.helpers import absolute_sample_path
from tools import dumpcmap


def run(tmp_path, filename, options=None):
    output_file_name = tmp_path / "out.txt"
    absolute_path = absolute_sample_path(filename)
    if options:
        s = f"dumpcmap -o {output_file_name} {options} {absolute_path}"
    else:
        s = f"dumpcmap -o {output_file_name} {absolute_path}"
    assert dumpcmap.main(s.split(" ")[1:]) == 0
    return output_file_name.read_text(encoding="utf-8").splitlines()


@pytest.fixture(autouse=True)
def restore_settings(monkeypatch):
    monkeypatch.setattr(settings, "STRICT", settings.STRICT)


def test_simple_tounicode(tmp_path):
    lines = run(tmp_path, "cmap/simple-tounicode.cmap")
    assert len(lines) == 21
    assert lines[0] == "/CIDInit /ProcSet findresource"
    assert (
        lines[5]
        == "/CIDSystemInfo << /Registry (Adobe) /Ordering (UCS) /Supplement 0 >> def"
    )
    assert lines[9] == "<0000> <ffff> endcodespacerange"
    assert lines[13] == "<0024> <0026> [<0041> <0042> <0043>] endbfrange"


def test_unicode(tmp_path):
    lines = run(tmp_path, "cmap/simple-tounicode.cmap", "-u")
    assert lines[11] == "'\\x03' ' ' '\\x11' '\U0001d400' endbfchar"


def test_debug(tmp_path):
    root = logging.getLogger()
    level = root.level
    try:
        lines = run(tmp_path, "cmap/simple-tounicode.cmap", "-d")
    finally:
        root.setLevel(level)
    assert lines[-1] == "end"


def test_invalid_hex_digit(tmp_path):
    lines = run(tmp_path, "cmap/invalid-hexdigit.cmap")
    assert lines[1] == "<0000> <0041> endbfchar"


def test_invalid_hex_digit_strict(tmp_path):
    with pytest.raises(CMapValueError):
        run(tmp_path, "cmap/invalid-hexdigit.cmap", "-s")


@pytest.mark.parametrize(
    ("obj", "expected"),
    [
        (CMapObject(ObjectType.NAME, "Adobe-Identity-UCS"), "/Adobe-Identity-UCS"),
        (CMapObject(ObjectType.NUMBER, 12), "12"),
        (CMapObject(ObjectType.LITERAL, "usecmap"), "usecmap"),
        (CMapObject(ObjectType.HEX_STRING, "\xd8\x35"), "<d835>"),
        (CMapObject(ObjectType.ARRAY, []), "[]"),
        (CMapObject(ObjectType.DICTIONARY, {}), "<<  >>"),
        (CMapObject(ObjectType.STRING, "Adobe"), "(Adobe)"),
        (CMapObject(ObjectType.STRING, "\x01\xff\x00"), r"(\001\377\000)"),
        (CMapObject(ObjectType.STRING, "a(b)\\c"), r"(a\(b\)\\c)"),
        (CMapObject(ObjectType.STRING, "\n"), r"(\012)"),
    ],
)
def test_to_text(obj, expected):
    assert dumpcmap.to_text(obj) == expected
