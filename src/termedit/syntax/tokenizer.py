"""Single-pass, per-line lexical highlighter."""

from __future__ import annotations

from typing import List

from .languages import LanguageDefinition, TokenClass

SEPARATORS = frozenset(" ,.;()[]+-/*=%")


def is_separator(rune: str) -> bool:
    return rune in SEPARATORS


def _keyword_at(text: str, i: int, language: LanguageDefinition) -> int:
    """Length of the first keyword starting at ``i`` and ending on a boundary."""

    length = len(text)
    for keyword in language.keywords:
        end = i + len(keyword)
        if end > length:
            continue
        if end < length and not is_separator(text[end]):
            continue
        if text[i:end] == keyword:
            return len(keyword)
    return 0


def tokenize(display_text: str, language: LanguageDefinition) -> List[TokenClass]:
    """Assign a token class to every character of ``display_text``.

    Scanning state never crosses a line boundary: an unterminated string
    colours the rest of its own line only. Strings close on a double quote
    even when a single quote opened them.
    """

    length = len(display_text)
    tokens = [TokenClass.TEXT] * length
    marker = language.single_line_comment_start

    inside_string = False
    after_separator = True

    for i, rune in enumerate(display_text):
        previous = tokens[i - 1] if i > 0 else TokenClass.TEXT

        if inside_string:
            tokens[i] = TokenClass.STRING
            inside_string = rune != '"'
            continue

        if marker and display_text.startswith(marker, i):
            tokens[i:] = [TokenClass.COMMENT] * (length - i)
            break

        if rune in "\"'":
            tokens[i] = TokenClass.STRING
            inside_string = True
            continue

        if (rune.isdecimal() and (after_separator or previous == TokenClass.NUMBER)) or (
            rune == "." and previous == TokenClass.NUMBER
        ):
            tokens[i] = TokenClass.NUMBER
            continue

        if after_separator:
            matched = _keyword_at(display_text, i, language)
            if matched:
                tokens[i : i + matched] = [TokenClass.KEYWORD] * matched

        after_separator = is_separator(rune)

    return tokens


__all__ = ["SEPARATORS", "is_separator", "tokenize"]
