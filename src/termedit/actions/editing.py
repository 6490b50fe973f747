"""Cursor movement and text editing verbs for the focused buffer."""

from __future__ import annotations

from functools import partial

from termedit.buffer import CursorMove
from termedit.keymaps import ResolutionMatch
from termedit.modes.base_mode import ModeContext, ModeResult


def move_cursor(
    context: ModeContext, match: ResolutionMatch, *, move: CursorMove
) -> ModeResult:
    del match
    workspace = context.workspace
    workspace.focused_buffer().move_cursor(move, height=workspace.height)
    return ModeResult(consumed=True, status="move")


move_up = partial(move_cursor, move=CursorMove.UP)
move_down = partial(move_cursor, move=CursorMove.DOWN)
move_left = partial(move_cursor, move=CursorMove.LEFT)
move_right = partial(move_cursor, move=CursorMove.RIGHT)
move_line_start = partial(move_cursor, move=CursorMove.LINE_START)
move_line_end = partial(move_cursor, move=CursorMove.LINE_END)
page_up = partial(move_cursor, move=CursorMove.PAGE_UP)
page_down = partial(move_cursor, move=CursorMove.PAGE_DOWN)


def break_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.focused_buffer().break_line()
    return ModeResult(consumed=True, status="edit")


def delete_rune(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.focused_buffer().delete_rune()
    return ModeResult(consumed=True, status="edit")


def insert_tab(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.focused_buffer().insert_rune("\t")
    return ModeResult(consumed=True, status="edit")


def read_only_notice(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.set_status("Warning: buffer is read-only.")
    return ModeResult(consumed=True, status="read_only")


__all__ = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_line_start",
    "move_line_end",
    "page_up",
    "page_down",
    "break_line",
    "delete_rune",
    "insert_tab",
    "read_only_notice",
]
