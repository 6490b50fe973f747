from __future__ import annotations

from typing import List

from termedit.syntax import (
    LANGUAGE_C,
    LANGUAGE_GO,
    LanguageDefinition,
    TokenClass,
    is_separator,
    tokenize,
)

T = TokenClass.TEXT
K = TokenClass.KEYWORD
N = TokenClass.NUMBER
S = TokenClass.STRING
C = TokenClass.COMMENT


def classes(text: str, language: LanguageDefinition = LANGUAGE_C) -> List[TokenClass]:
    tokens = tokenize(text, language)
    assert len(tokens) == len(text)
    return tokens


def test_number_then_comment() -> None:
    assert classes("x = 5 // done") == [T, T, T, T, N, T] + [C] * 7


def test_keyword_needs_following_separator() -> None:
    assert classes("if (a)") == [K, K, T, T, T, T]


def test_keyword_prefix_of_identifier_is_text() -> None:
    assert classes("integer") == [T] * 7


def test_keyword_at_end_of_line() -> None:
    assert classes("x return") == [T, T] + [K] * 6


def test_keyword_only_after_separator() -> None:
    assert classes("xif (a)")[:3] == [T, T, T]


def test_decimal_number() -> None:
    assert classes("3.14;") == [N, N, N, N, T]


def test_digit_inside_identifier_is_text() -> None:
    assert classes("x1 = 2") == [T, T, T, T, T, N]


def test_double_quoted_string() -> None:
    assert classes('"hi" x') == [S, S, S, S, T, T]


def test_unterminated_string_runs_to_end_of_line() -> None:
    assert classes('x = "abc') == [T, T, T, T, S, S, S, S]


def test_single_quote_does_not_close_string() -> None:
    assert classes("'a' int") == [S] * 7


def test_comment_marker_inside_string_is_string() -> None:
    assert classes('"a // b"') == [S] * 8


def test_comment_at_line_start() -> None:
    assert classes("// int x") == [C] * 8


def test_go_keywords() -> None:
    tokens = classes("func main() {", LANGUAGE_GO)
    assert tokens[:4] == [K] * 4
    assert tokens[5:9] == [T] * 4


def test_empty_comment_marker_never_matches() -> None:
    plain = LanguageDefinition(name="Plain", keywords=("let",))
    assert classes("let x", plain) == [K, K, K, T, T]


def test_empty_line() -> None:
    assert tokenize("", LANGUAGE_C) == []


def test_separator_set() -> None:
    for rune in " ,.;()[]+-/*=%":
        assert is_separator(rune)
    for rune in "a_{}\"'\t":
        assert not is_separator(rune)


def test_only_decimal_digits_are_numbers() -> None:
    assert classes("x = ²") == [T] * 5
    assert classes("x = ①") == [T] * 5
    assert classes("x = ٣") == [T, T, T, T, N]


def test_first_keyword_in_list_order_wins() -> None:
    dotted_first = LanguageDefinition(name="Dotted", keywords=("x.y", "x"))
    short_first = LanguageDefinition(name="Short", keywords=("x", "x.y"))

    assert classes("x.y z", dotted_first) == [K, K, K, T, T]
    assert classes("x.y z", short_first) == [K, T, T, T, T]
