"""Buffers, lines, viewport maths and the file boundary."""

from .buffer import Buffer, BufferView, CursorMove, LineView, is_insertable
from .line import Cell, Line
from .storage import FileAccessError, read_lines, write_text
from .viewport import Viewport, scroll_view

__all__ = [
    "Buffer",
    "BufferView",
    "Cell",
    "CursorMove",
    "FileAccessError",
    "Line",
    "LineView",
    "Viewport",
    "is_insertable",
    "read_lines",
    "scroll_view",
    "write_text",
]
