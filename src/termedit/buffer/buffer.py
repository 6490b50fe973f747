"""Buffer: an ordered list of lines, a cursor and a file identity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from termedit.runtime import telemetry
from termedit.runtime.settings import Settings
from termedit.syntax import (
    FileType,
    LanguageDefinition,
    LanguageRegistry,
    TokenClass,
    default_languages,
    guess_file_type,
)

from . import storage
from .line import Line
from .viewport import Viewport

_INSERTABLE = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
    "!@#$%^&*()`~-_=+[{]}\\|;:'\",<.>/? \t"
)


def is_insertable(rune: str) -> bool:
    """True for the printable ASCII allow-list plus space and tab."""

    return len(rune) == 1 and rune in _INSERTABLE


class CursorMove(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    LINE_START = "line_start"
    LINE_END = "line_end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True, slots=True)
class LineView:
    display_text: str
    tokens: Tuple[TokenClass, ...]


@dataclass(frozen=True, slots=True)
class BufferView:
    """Host-facing snapshot of a buffer for one render frame."""

    name: str
    file_type: FileType
    lines: Tuple[LineView, ...]
    cursor_row: int
    cursor_x: int
    cursor_dx: int
    offset_x: int
    offset_y: int
    is_dirty: bool
    is_read_only: bool


class Buffer:
    """Text of one document plus its cursor and viewport state.

    ``cursor_row`` is 1-based so it lines up with the screen row below the
    title bar; ``focused_line()`` subtracts one. Every mutating operation is a
    silent no-op on a read-only buffer.
    """

    def __init__(
        self,
        *,
        path: str = "Untitled",
        settings: Optional[Settings] = None,
        languages: Optional[LanguageRegistry] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.languages = languages if languages is not None else default_languages()
        self.path = path
        self.file_type = guess_file_type(path)
        self.lines: List[Line] = []
        self.is_dirty = False
        self.is_read_only = False
        self.cursor_x = 0
        self.cursor_dx = 0
        self.cursor_row = 1
        self.offset_x = 0
        self.offset_y = 0

    @classmethod
    def from_lines(
        cls,
        name: str,
        raw_lines: Iterable[str],
        *,
        settings: Optional[Settings] = None,
        languages: Optional[LanguageRegistry] = None,
    ) -> "Buffer":
        buffer = cls(path=name, settings=settings, languages=languages)
        for text in raw_lines:
            buffer.insert_line(buffer.length, text)
        if buffer.length == 0:
            buffer.insert_line(0, "")
        return buffer

    @classmethod
    def from_file(
        cls,
        path: str,
        *,
        settings: Optional[Settings] = None,
        languages: Optional[LanguageRegistry] = None,
    ) -> "Buffer":
        """Load ``path``; a file that does not exist yet gives one empty line.

        Raises ``storage.FileAccessError`` for any other read failure.
        """

        with telemetry.span(
            "buffer::load", component="buffer", metadata={"path": path}
        ) as handle:
            raw_lines = storage.read_lines(path)
            handle.add_metadata("lines", len(raw_lines))
        return cls.from_lines(path, raw_lines, settings=settings, languages=languages)

    # -- queries -----------------------------------------------------------

    @property
    def length(self) -> int:
        return len(self.lines)

    @property
    def file_name(self) -> str:
        return storage.display_name(self.path)

    def language(self) -> Optional[LanguageDefinition]:
        return self.languages.lookup(self.file_type)

    def focused_line(self) -> Line:
        # Cursor movement keeps cursor_row within [1, length].
        return self.lines[self.cursor_row - 1]

    def text_lines(self) -> List[str]:
        return [line.text for line in self.lines]

    def view(self) -> BufferView:
        return BufferView(
            name=self.file_name,
            file_type=self.file_type,
            lines=tuple(LineView(line.display_text, line.tokens) for line in self.lines),
            cursor_row=self.cursor_row,
            cursor_x=self.cursor_x,
            cursor_dx=self.cursor_dx,
            offset_x=self.offset_x,
            offset_y=self.offset_y,
            is_dirty=self.is_dirty,
            is_read_only=self.is_read_only,
        )

    # -- line operations ---------------------------------------------------

    def insert_line(self, i: int, text: str) -> None:
        if self.is_read_only:
            return
        if 0 <= i <= self.length:
            self.lines.insert(i, Line(self, text))

    def remove_line(self, i: int) -> None:
        if self.is_read_only:
            return
        if 0 <= i < self.length:
            del self.lines[i]
            self.is_dirty = True

    def break_line(self) -> None:
        """Split the focused line at the cursor, carrying its indentation."""

        if self.is_read_only:
            return

        if self.cursor_x == 0:
            self.insert_line(self.cursor_row - 1, "")
        else:
            line = self.focused_line()
            text = line.text
            indent = line.indent_length()
            self.insert_line(self.cursor_row, text[:indent] + text[self.cursor_x :])
            line.set_text(text[: self.cursor_x])
            self.cursor_x = indent

        self.cursor_row += 1
        self.is_dirty = True

    # -- rune operations ---------------------------------------------------

    def insert_rune(self, rune: str) -> None:
        if self.is_read_only or not is_insertable(rune):
            return
        inserted = self.focused_line().insert_rune(self.cursor_x, rune)
        self.cursor_x += inserted
        self.is_dirty = True

    def delete_rune(self) -> None:
        """Backspace: delete left of the cursor or join with the line above."""

        if self.is_read_only:
            return

        if self.cursor_x == 0 and self.cursor_row == 1:
            return

        if self.cursor_x > 0:
            self.focused_line().delete_rune(self.cursor_x - 1)
            self.cursor_x -= 1
        else:
            previous = self.lines[self.cursor_row - 2]
            self.cursor_x = len(previous.text)
            previous.append_string(self.focused_line().text)
            self.remove_line(self.cursor_row - 1)
            self.cursor_row -= 1

        self.is_dirty = True

    # -- cursor ------------------------------------------------------------

    def move_cursor(self, move: CursorMove, *, height: int = 0) -> None:
        """Apply one cursor transition; ``height`` is the screen height in rows."""

        # Same floor as Workspace.resize: a page is at least one row.
        height = max(height, 3)
        line_length = len(self.focused_line().text)

        if move is CursorMove.UP:
            if self.cursor_row > 1:
                self.cursor_row -= 1
        elif move is CursorMove.DOWN:
            if self.cursor_row < self.length:
                self.cursor_row += 1
        elif move is CursorMove.LEFT:
            if self.cursor_x != 0:
                self.cursor_x -= 1
            elif self.cursor_row > 1:
                self.cursor_row -= 1
                self.cursor_x = len(self.focused_line().text)
        elif move is CursorMove.RIGHT:
            if self.cursor_x < line_length:
                self.cursor_x += 1
            elif self.cursor_row != self.length:
                self.cursor_x = 0
                self.cursor_row += 1
        elif move is CursorMove.LINE_START:
            indent = self.focused_line().indent_length()
            self.cursor_x = indent if self.cursor_x != indent else 0
        elif move is CursorMove.LINE_END:
            self.cursor_x = line_length
        elif move is CursorMove.PAGE_UP:
            if height > self.cursor_row:
                self.cursor_row = 1
            else:
                self.cursor_row -= height - 2
        elif move is CursorMove.PAGE_DOWN:
            self.cursor_row += height - 2
            self.offset_y += height
            if self.cursor_row > self.length:
                self.cursor_row = max(self.length - 1, 1)

        self.cursor_row = min(max(self.cursor_row, 1), self.length)
        self.cursor_x = min(self.cursor_x, len(self.focused_line().text))

    def apply_viewport(self, viewport: "Viewport") -> None:
        self.cursor_dx = viewport.cursor_dx
        self.offset_x = viewport.offset_x
        self.offset_y = viewport.offset_y

    def set_cursor(self, row: int, x: int) -> None:
        self.cursor_row = min(max(row, 1), self.length)
        self.cursor_x = min(max(x, 0), len(self.focused_line().text))

    # -- persistence -------------------------------------------------------

    def serialize(self) -> str:
        return "".join(line.text + "\n" for line in self.lines)

    def write(self, path: str) -> None:
        """Write every line plus a trailing newline, then adopt ``path``.

        On failure ``storage.FileAccessError`` propagates and the buffer is
        left exactly as it was.
        """

        with telemetry.span(
            "buffer::write", component="buffer", metadata={"path": path}
        ) as handle:
            text = self.serialize()
            storage.write_text(path, text)
            handle.add_metadata("bytes", len(text.encode("utf-8")))

        previous_type = self.file_type
        self.path = path
        self.file_type = guess_file_type(path)
        self.is_dirty = False
        if self.file_type is not previous_type:
            for line in self.lines:
                line.recompute()
        telemetry.record_event(
            "buffer.saved", data={"path": path, "file_type": self.file_type.value}
        )


__all__ = [
    "Buffer",
    "BufferView",
    "CursorMove",
    "LineView",
    "is_insertable",
]
