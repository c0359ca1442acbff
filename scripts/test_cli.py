"""
Tests for the `u8_wc` and `u8_split` command-line tools.
"""

import pytest

from cli import split, wc
from utf8str import String

SAMPLE = "hello wörld\nsecond line 日本\n"


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_bytes(SAMPLE.encode("utf-8"))
    return path


def test_count_text():
    counts = wc.count_text(String(SAMPLE))
    assert counts == {
        "line_count": 2,
        "word_count": 5,
        "char_count": 27,
        "byte_count": 32,
        "max_line_length": 16,
    }


def test_count_text_unicode_whitespace():
    counts = wc.count_text(String("a　b c d"))
    assert counts["word_count"] == 4
    assert counts["line_count"] == 0
    assert counts["char_count"] == 7


def test_wc_all_counts(sample_file, capsys):
    assert wc.main(["-l", "-w", "-m", "-c", "-L", str(sample_file)]) == 0
    output = capsys.readouterr().out
    assert output.split() == ["2", "5", "27", "32", "16", str(sample_file)]


def test_wc_defaults_and_total(sample_file, tmp_path, capsys):
    other = tmp_path / "other.txt"
    other.write_bytes("😊\n".encode("utf-8"))
    assert wc.main([str(sample_file), str(other)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["2", "5", "32", str(sample_file)]
    assert lines[1].split() == ["1", "1", "5", str(other)]
    assert lines[2].split() == ["3", "6", "37", "total"]


def test_wc_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert wc.main([str(missing)]) == 1
    assert f"No such file: {missing}" in capsys.readouterr().out


@pytest.mark.parametrize("content", ["café olé\n".encode("latin-1"), b"ab\xff\xfecd\n"])
def test_wc_invalid_utf8(tmp_path, sample_file, capsys, content: bytes):
    legacy = tmp_path / "legacy.txt"
    legacy.write_bytes(content)
    assert wc.main([str(legacy), str(sample_file)]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith(f"Invalid UTF-8 in {legacy}: ")
    assert lines[1].split() == ["2", "5", "32", str(sample_file)]


def test_wc_files0_from_missing(tmp_path, capsys):
    missing = tmp_path / "names"
    assert wc.main(["--files0-from", str(missing)]) == 1
    assert f"No such file: {missing}" in capsys.readouterr().out


def test_wc_files0_from(sample_file, tmp_path, capsys):
    names = tmp_path / "names"
    names.write_bytes(str(sample_file).encode("utf-8") + b"\0")
    assert wc.main(["-m", "--files0-from", str(names)]) == 0
    assert capsys.readouterr().out.split() == ["27", str(sample_file)]


def test_split_by_lines(tmp_path):
    source = tmp_path / "lines.txt"
    source.write_bytes("a\nβ\nc\n".encode("utf-8"))
    prefix = str(tmp_path / "x")
    assert split.main([str(source), prefix, "-l", "2"]) == 0
    assert (tmp_path / "x0").read_bytes() == "a\nβ\n".encode("utf-8")
    assert (tmp_path / "x1").read_bytes() == b"c\n"
    assert not (tmp_path / "x2").exists()


def test_split_by_separator(tmp_path):
    source = tmp_path / "records.bin"
    source.write_bytes(b"a\0b\0")
    prefix = str(tmp_path / "r")
    assert split.split_file(str(source), 1, prefix, "\\0", None) == 2
    assert (tmp_path / "r0").read_bytes() == b"a\0"
    assert (tmp_path / "r1").read_bytes() == b"b\0"


def test_split_by_characters(tmp_path):
    source = tmp_path / "chars.txt"
    source.write_bytes("a😊bé!".encode("utf-8"))
    prefix = str(tmp_path / "c")
    assert split.main([str(source), prefix, "-n", "2"]) == 0
    assert (tmp_path / "c0").read_bytes() == "a😊".encode("utf-8")
    assert (tmp_path / "c1").read_bytes() == "bé".encode("utf-8")
    assert (tmp_path / "c2").read_bytes() == b"!"


def test_split_errors(tmp_path, capsys):
    assert split.main([str(tmp_path / "missing.txt"), str(tmp_path / "x")]) == 1
    assert "missing.txt" in capsys.readouterr().out

    source = tmp_path / "chars.txt"
    source.write_bytes(b"abc")
    assert split.main([str(source), str(tmp_path / "x"), "-n", "0"]) == 1
    assert "must be positive" in capsys.readouterr().out
