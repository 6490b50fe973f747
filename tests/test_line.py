from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from termedit.buffer import Line
from termedit.runtime.settings import Settings
from termedit.syntax import LANGUAGE_C, LanguageDefinition, TokenClass


@dataclass
class Host:
    settings: Settings = field(default_factory=Settings)
    lang: Optional[LanguageDefinition] = LANGUAGE_C

    def language(self) -> Optional[LanguageDefinition]:
        return self.lang


def make_line(text: str = "", **settings: object) -> Line:
    return Line(Host(settings=Settings(**settings)), text)  # type: ignore[arg-type]


def assert_consistent(line: Line) -> None:
    assert len(line.display_text) == len(line.tokens)
    assert line.adjusted_display_column(len(line.text)) == len(line.display_text)


def test_tabs_expand_to_next_tab_stop() -> None:
    line = make_line("\tx\ty", tab_width=4)

    assert line.display_text == "    x   y"
    assert line.adjusted_display_column(0) == 0
    assert line.adjusted_display_column(1) == 4
    assert line.adjusted_display_column(2) == 5
    assert line.adjusted_display_column(3) == 8
    assert_consistent(line)


def test_column_transform_without_tabs_is_identity() -> None:
    line = make_line("abc")
    assert [line.adjusted_display_column(x) for x in range(4)] == [0, 1, 2, 3]


def test_insert_and_delete_keep_display_in_sync() -> None:
    line = make_line("int x;")

    assert line.insert_rune(0, "\t") == 1
    assert line.text == "\tint x;"
    assert_consistent(line)
    assert line.tokens[4:7] == (TokenClass.KEYWORD,) * 3

    line.delete_rune(0)
    assert line.text == "int x;"
    assert_consistent(line)


def test_soft_tab_inserts_tab_width_spaces() -> None:
    line = make_line("", tab_width=4, use_soft_tabs=True)

    assert line.insert_rune(0, "\t") == 4
    assert line.text == "    "
    assert_consistent(line)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_delete_out_of_range_is_noop(index: int) -> None:
    line = make_line("abc")
    line.delete_rune(index)
    assert line.text == "abc"


def test_append_string_retokenizes() -> None:
    line = make_line("x = ")
    line.append_string("42")

    assert line.text == "x = 42"
    assert line.tokens[-2:] == (TokenClass.NUMBER, TokenClass.NUMBER)


def test_highlighting_disabled_gives_plain_text() -> None:
    line = make_line("int x = 5; // c", use_highlighting=False)
    assert set(line.tokens) == {TokenClass.TEXT}


def test_unknown_language_gives_plain_text() -> None:
    line = Line(Host(lang=None), "int x = 5;")  # type: ignore[arg-type]
    assert set(line.tokens) == {TokenClass.TEXT}


def test_cells_pair_runes_with_tokens() -> None:
    line = make_line("if")
    assert [(cell.rune, cell.token) for cell in line.cells] == [
        ("i", TokenClass.KEYWORD),
        ("f", TokenClass.KEYWORD),
    ]


def test_indent_length_counts_spaces_and_tabs() -> None:
    assert make_line("\t  x").indent_length() == 3
    assert make_line("x  ").indent_length() == 0
    assert make_line("   ").indent_length() == 3
