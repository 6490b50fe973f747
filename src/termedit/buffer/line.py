"""A single logical line and its derived display cells."""

from __future__ import annotations

from typing import NamedTuple, Optional, Protocol, Tuple

from termedit.runtime.settings import Settings
from termedit.syntax import LanguageDefinition, TokenClass, tokenize


class LineHost(Protocol):
    """What a line needs from the buffer that owns it."""

    settings: Settings

    def language(self) -> Optional[LanguageDefinition]: ...


class Cell(NamedTuple):
    """One display character paired with its token class."""

    rune: str
    token: TokenClass


class Line:
    """Raw text plus the tab-expanded, tokenized cells derived from it.

    Display text and tokens are both read off the same cell tuple, so they
    always have equal length. Only the owning buffer mutates a line.
    """

    __slots__ = ("_host", "_text", "_cells")

    def __init__(self, host: LineHost, text: str = "") -> None:
        self._host = host
        self._text = text
        self._cells: Tuple[Cell, ...] = ()
        self.recompute()

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._cells

    @property
    def display_text(self) -> str:
        return "".join(cell.rune for cell in self._cells)

    @property
    def tokens(self) -> Tuple[TokenClass, ...]:
        return tuple(cell.token for cell in self._cells)

    def set_text(self, text: str) -> None:
        self._text = text
        self.recompute()

    def insert_rune(self, at: int, rune: str) -> int:
        """Insert ``rune`` before index ``at``; return how many characters went in.

        With soft tabs enabled a tab becomes ``tab_width`` spaces.
        """

        settings = self._host.settings
        if rune == "\t" and settings.use_soft_tabs:
            inserted = " " * settings.tab_width
        else:
            inserted = rune
        self._text = self._text[:at] + inserted + self._text[at:]
        self.recompute()
        return len(inserted)

    def delete_rune(self, at: int) -> None:
        if at < 0 or at >= len(self._text):
            return
        self._text = self._text[:at] + self._text[at + 1 :]
        self.recompute()

    def append_string(self, s: str) -> None:
        self._text += s
        self.recompute()

    def recompute(self) -> None:
        settings = self._host.settings
        display = self._text.expandtabs(settings.tab_width)
        language = self._host.language() if settings.use_highlighting else None
        if language is None:
            tokens = [TokenClass.TEXT] * len(display)
        else:
            tokens = tokenize(display, language)
        self._cells = tuple(Cell(rune, token) for rune, token in zip(display, tokens))

    def adjusted_display_column(self, x: int) -> int:
        """Display column of raw offset ``x`` once tabs are expanded."""

        tab_width = self._host.settings.tab_width
        delta = 0
        for rune in self._text[:x]:
            if rune == "\t":
                delta += (tab_width - 1) - (delta % tab_width)
            delta += 1
        return delta

    def indent_length(self) -> int:
        return len(self._text) - len(self._text.lstrip(" \t"))


__all__ = ["Cell", "Line", "LineHost"]
