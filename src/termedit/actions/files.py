"""Workspace-level verbs: open, save, close and switch buffers."""

from __future__ import annotations

from termedit.keymaps import ResolutionMatch
from termedit.modes.base_mode import ModeContext, ModeResult


def _after(context: ModeContext, status: str) -> ModeResult:
    workspace = context.workspace
    switch_to = "prompt" if workspace.prompt is not None else None
    return ModeResult(consumed=True, switch_to=switch_to, status=status)


def open_file(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.request_open()
    return _after(context, "open")


def save_file(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.save_buffer()
    return _after(context, "save")


def close_buffer(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.close_buffer()
    return _after(context, "close")


def next_buffer(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.focus_next()
    return ModeResult(consumed=True, status="focus")


def previous_buffer(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.focus_previous()
    return ModeResult(consumed=True, status="focus")


def show_help(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.show_help()
    return ModeResult(consumed=True, status="help")


def quit_editor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.workspace.request_quit()
    return _after(context, "quit")


__all__ = [
    "open_file",
    "save_file",
    "close_buffer",
    "next_buffer",
    "previous_buffer",
    "show_help",
    "quit_editor",
]
