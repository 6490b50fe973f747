"""Viewport offsets derived from the cursor, one render frame at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .buffer import Buffer

# Title bar above the text, status bar below it.
CHROME_ROWS = 2


@dataclass(frozen=True, slots=True)
class Viewport:
    offset_x: int
    offset_y: int
    cursor_dx: int


def scroll_view(buffer: "Buffer", width: int, height: int) -> Viewport:
    """Return offsets that keep the cursor on screen; ``buffer`` is not touched.

    ``width`` and ``height`` are the full terminal size in cells.
    """

    cursor_dx = buffer.focused_line().adjusted_display_column(buffer.cursor_x)
    visible_rows = max(height - CHROME_ROWS, 1)
    width = max(width, 1)
    offset_x = buffer.offset_x
    offset_y = buffer.offset_y
    row = buffer.cursor_row - 1

    if row < offset_y:
        offset_y = row
    if row >= offset_y + visible_rows:
        offset_y = row - visible_rows + 1
    offset_y = max(offset_y, 0)

    if cursor_dx < offset_x:
        offset_x = cursor_dx
    if cursor_dx >= offset_x + width:
        offset_x = cursor_dx - width + 1

    return Viewport(offset_x=offset_x, offset_y=offset_y, cursor_dx=cursor_dx)


__all__ = ["CHROME_ROWS", "Viewport", "scroll_view"]
