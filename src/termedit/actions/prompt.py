"""Actions available while a prompt is open."""

from __future__ import annotations

from termedit.buffer import CursorMove
from termedit.keymaps import ResolutionMatch
from termedit.modes.base_mode import ModeContext, ModeResult


def submit(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.submit_prompt()
    return ModeResult(consumed=True, status="prompt_submit")


def cancel(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.cancel_prompt()
    return ModeResult(consumed=True, status="prompt_cancel")


def backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.prompt_delete()
    return ModeResult(consumed=True, status="editing")


def cursor_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.prompt_move(CursorMove.LEFT)
    return ModeResult(consumed=True, status="editing")


def cursor_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.prompt_move(CursorMove.RIGHT)
    return ModeResult(consumed=True, status="editing")


__all__ = ["submit", "cancel", "backspace", "cursor_left", "cursor_right"]
