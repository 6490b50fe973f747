"""Built-in key bindings for the edit and prompt modes."""

from __future__ import annotations

from typing import Iterable

from termedit.actions import editing, files, prompt

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("cursor.up", editing.move_up, "Move up one row"),
    ActionRef("cursor.down", editing.move_down, "Move down one row"),
    ActionRef("cursor.left", editing.move_left, "Move left, wrapping to the previous line"),
    ActionRef("cursor.right", editing.move_right, "Move right, wrapping to the next line"),
    ActionRef("cursor.line_start", editing.move_line_start, "Toggle indent end / column 0"),
    ActionRef("cursor.line_end", editing.move_line_end, "Move to end of line"),
    ActionRef("cursor.page_up", editing.page_up, "Scroll up one screen"),
    ActionRef("cursor.page_down", editing.page_down, "Scroll down one screen"),
    ActionRef("edit.break_line", editing.break_line, "Split the line at the cursor"),
    ActionRef("edit.delete_rune", editing.delete_rune, "Delete left of the cursor"),
    ActionRef("edit.insert_tab", editing.insert_tab, "Insert a tab or soft tab"),
    ActionRef("edit.read_only", editing.read_only_notice, "Refuse edits on read-only buffers"),
    ActionRef("buffer.open", files.open_file, "Open a file in a new buffer"),
    ActionRef("buffer.save", files.save_file, "Save the focused buffer"),
    ActionRef("buffer.close", files.close_buffer, "Close the focused buffer"),
    ActionRef("buffer.next", files.next_buffer, "Focus the next buffer"),
    ActionRef("buffer.previous", files.previous_buffer, "Focus the previous buffer"),
    ActionRef("buffer.help", files.show_help, "Open the help buffer"),
    ActionRef("editor.quit", files.quit_editor, "Quit the editor"),
    ActionRef("prompt.submit", prompt.submit, "Answer the prompt"),
    ActionRef("prompt.cancel", prompt.cancel, "Cancel the prompt"),
    ActionRef("prompt.backspace", prompt.backspace, "Delete left of the prompt cursor"),
    ActionRef("prompt.left", prompt.cursor_left, "Move the prompt cursor left"),
    ActionRef("prompt.right", prompt.cursor_right, "Move the prompt cursor right"),
)

# (mode, key spec, action id, when clauses)
_BINDING_TABLE: tuple[tuple[str, str, str, tuple[str, ...]], ...] = (
    ("edit", "up", "cursor.up", ()),
    ("edit", "down", "cursor.down", ()),
    ("edit", "left", "cursor.left", ()),
    ("edit", "right", "cursor.right", ()),
    ("edit", "pageup", "cursor.page_up", ()),
    ("edit", "pagedown", "cursor.page_down", ()),
    ("edit", "home", "cursor.line_start", ()),
    ("edit", "end", "cursor.line_end", ()),
    ("edit", "ctrl+a", "cursor.line_start", ()),
    ("edit", "ctrl+e", "cursor.line_end", ()),
    ("edit", "enter", "edit.break_line", ("!read_only",)),
    ("edit", "backspace", "edit.delete_rune", ("!read_only",)),
    ("edit", "tab", "edit.insert_tab", ("!read_only",)),
    ("edit", "enter", "edit.read_only", ("read_only",)),
    ("edit", "backspace", "edit.read_only", ("read_only",)),
    ("edit", "tab", "edit.read_only", ("read_only",)),
    ("edit", "ctrl+r", "buffer.open", ()),
    ("edit", "ctrl+o", "buffer.save", ()),
    ("edit", "ctrl+w", "buffer.close", ()),
    ("edit", "ctrl+p", "buffer.next", ()),
    ("edit", "ctrl+l", "buffer.previous", ()),
    ("edit", "ctrl+h", "buffer.help", ()),
    ("edit", "f1", "buffer.help", ()),
    ("edit", "ctrl+q", "editor.quit", ()),
    ("prompt", "enter", "prompt.submit", ()),
    ("prompt", "escape", "prompt.cancel", ()),
    ("prompt", "ctrl+c", "prompt.cancel", ()),
    ("prompt", "backspace", "prompt.backspace", ()),
    ("prompt", "left", "prompt.left", ()),
    ("prompt", "right", "prompt.right", ()),
)


def _binding_id(mode: str, spec: str, when: Iterable[str]) -> str:
    suffix = "".join(f"[{clause}]" for clause in when)
    return f"{mode}.{spec}{suffix}"


DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=_binding_id(mode, spec, when),
        mode=mode,
        stroke=KeyStroke.parse(spec),
        action_id=action_id,
        when=when,  # type: ignore[arg-type]
    )
    for mode, spec, action_id, when in _BINDING_TABLE
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    actions: Iterable[ActionRef] = DEFAULT_ACTIONS,
    bindings: Iterable[Binding] = DEFAULT_BINDINGS,
) -> None:
    for action in actions:
        registry.register_action(action, replace=True)
    for binding in bindings:
        registry.register_binding(binding, replace=True)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
