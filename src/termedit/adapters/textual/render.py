"""Paint a ``Frame`` as rich ``Text``: title bar, buffer rows, status bar."""

from __future__ import annotations

from typing import Dict, List

from rich.style import Style
from rich.text import Text

from termedit.syntax import TokenClass

from .controller import Frame

BAR_STYLE = Style(color="black", bgcolor="white")
CURSOR_STYLE = Style(reverse=True)

TOKEN_STYLES: Dict[TokenClass, Style] = {
    TokenClass.TEXT: Style(),
    TokenClass.KEYWORD: Style(color="magenta"),
    TokenClass.NUMBER: Style(color="blue"),
    TokenClass.STRING: Style(color="green"),
    TokenClass.COMMENT: Style(color="cyan"),
}


def _bar(width: int, left: str, right: str, center: str = "") -> Text:
    cells = [" "] * width

    def place(start: int, text: str) -> None:
        for offset, char in enumerate(text):
            x = start + offset
            if 0 <= x < width:
                cells[x] = char

    place(0, left)
    if center:
        place((width - len(center)) // 2, center)
    place(width - len(right), right)
    return Text("".join(cells), style=BAR_STYLE, no_wrap=True)


def _buffer_row(frame: Frame, y: int) -> Text:
    view = frame.buffer
    row = Text(no_wrap=True)
    index = y + view.offset_y
    if index < len(view.lines):
        line = view.lines[index]
        visible = line.display_text[view.offset_x : view.offset_x + frame.width]
        for x, char in enumerate(visible):
            row.append(char, TOKEN_STYLES[line.tokens[view.offset_x + x]])
    row.pad_right(frame.width - len(row))
    return row


def render_frame(frame: Frame, *, clock: str = "") -> Text:
    """Return ``frame.height`` rows of exactly ``frame.width`` cells."""

    width = frame.width
    text_rows = max(frame.height - 2, 0)
    rows: List[Text] = [_bar(width, frame.banner, clock, frame.title)]
    rows.extend(_buffer_row(frame, y) for y in range(text_rows))
    rows.append(_bar(width, frame.status, frame.position))

    x, y = frame.cursor
    if 0 <= y < len(rows) and 0 <= x < width:
        rows[y].stylize(CURSOR_STYLE, x, x + 1)

    return Text("\n", no_wrap=True).join(rows)


__all__ = ["TOKEN_STYLES", "render_frame"]
