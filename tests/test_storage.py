from __future__ import annotations

from pathlib import Path

import pytest

from termedit.buffer import Buffer, FileAccessError, read_lines, write_text
from termedit.buffer.storage import split_lines
from termedit.syntax import FileType, TokenClass


def test_missing_file_reads_as_empty(tmp_path: Path) -> None:
    assert read_lines(str(tmp_path / "nope.c")) == []

    buffer = Buffer.from_file(str(tmp_path / "nope.c"))
    assert buffer.text_lines() == [""]
    assert buffer.file_type is FileType.C


def test_read_splits_on_newline_and_strips_one_carriage_return(tmp_path: Path) -> None:
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"one\r\ntwo\nthree\r\r\n\nfour")

    assert read_lines(str(path)) == ["one", "two", "three\r", "", "four"]


def test_form_feed_and_unicode_separators_stay_in_line(tmp_path: Path) -> None:
    path = tmp_path / "gnu.c"
    original = "int a;\n\x0cint b;\nx\u2028y\u2029z\x0b\x85\n"
    path.write_bytes(original.encode("utf-8"))

    lines = read_lines(str(path))
    assert lines == ["int a;", "\x0cint b;", "x\u2028y\u2029z\x0b\x85"]

    copy = tmp_path / "copy.c"
    Buffer.from_file(str(path)).write(str(copy))
    assert copy.read_bytes().decode("utf-8") == original


def test_split_lines_final_newline() -> None:
    assert split_lines("a\n") == ["a"]
    assert split_lines("a\n\n") == ["a", ""]
    assert split_lines("\n") == [""]
    assert split_lines("") == []


def test_empty_file_gives_single_empty_line(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    assert Buffer.from_file(str(path)).text_lines() == [""]


def test_reading_a_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as info:
        read_lines(str(tmp_path))
    assert info.value.path == str(tmp_path)


def test_write_into_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        write_text(str(tmp_path / "missing" / "out.txt"), "x\n")


def test_write_appends_newline_to_every_line(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    buffer = Buffer.from_lines("Untitled", ["a", "", "b"])
    buffer.insert_rune("x")

    buffer.write(str(path))

    assert path.read_text(encoding="utf-8") == "xa\n\nb\n"
    assert buffer.is_dirty is False
    assert buffer.path == str(path)


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "round.c"
    lines = ["#include <stdio.h>", "", "\tint x = 5; // five"]
    Buffer.from_lines("Untitled", lines).write(str(path))

    assert Buffer.from_file(str(path)).text_lines() == lines


def test_write_reinfers_file_type_and_retokenizes(tmp_path: Path) -> None:
    buffer = Buffer.from_lines("Untitled", ["int x;"])
    assert buffer.file_type is FileType.UNKNOWN
    assert set(buffer.focused_line().tokens) == {TokenClass.TEXT}

    buffer.write(str(tmp_path / "typed.c"))

    assert buffer.file_type is FileType.C
    assert buffer.focused_line().tokens[:3] == (TokenClass.KEYWORD,) * 3


def test_failed_write_leaves_buffer_untouched(tmp_path: Path) -> None:
    buffer = Buffer.from_lines("keep.txt", ["a"])
    buffer.insert_rune("b")

    with pytest.raises(FileAccessError):
        buffer.write(str(tmp_path / "missing" / "x.c"))

    assert buffer.path == "keep.txt"
    assert buffer.is_dirty is True
    assert buffer.file_type is FileType.PLAINTEXT
