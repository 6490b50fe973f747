from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import pytest

from termedit.buffer import Buffer
from termedit.keymaps import KeymapRegistry, KeymapResolver
from termedit.keymaps.defaults import load_default_keymaps
from termedit.modes import EditMode, KeyInput, ModeContext, ModeResult, PromptMode
from termedit.modes.mode_manager import ModeManager
from termedit.workspace import Workspace


def make_manager(
    lines: Iterable[str] = ("hello",), *, name: str = "x.txt"
) -> ModeManager:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)
    workspace = Workspace()
    workspace.add_buffer(Buffer.from_lines(name, list(lines)))
    context = ModeContext(workspace=workspace, bus=workspace.bus, extras={})
    manager = ModeManager(
        context,
        keymap_registry=registry,
        keymap_resolver=resolver,
        load_defaults=False,
    )
    manager.register_mode(EditMode)
    manager.register_mode(PromptMode)
    return manager


def press(
    manager: ModeManager,
    key: str,
    *,
    text: Optional[str] = None,
    modifiers: tuple[str, ...] = (),
) -> ModeResult:
    return manager.handle_key(KeyInput(key=key, modifiers=modifiers, text=text))


def type_text(manager: ModeManager, text: str) -> None:
    for rune in text:
        press(manager, rune, text=rune)


def workspace_of(manager: ModeManager) -> Workspace:
    return manager.context.workspace


def test_edit_mode_is_active_first() -> None:
    manager = make_manager()
    assert manager.active_mode is not None
    assert manager.active_mode.name == "edit"


def test_printable_keys_are_inserted() -> None:
    manager = make_manager([""])

    type_text(manager, "int x;")

    buffer = workspace_of(manager).focused_buffer()
    assert buffer.text_lines() == ["int x;"]
    assert buffer.cursor_x == 6


def test_modified_keys_are_not_inserted() -> None:
    manager = make_manager([""])

    result = press(manager, "k", text="k", modifiers=("ctrl",))

    assert result.consumed is False
    assert workspace_of(manager).focused_buffer().text_lines() == [""]


def test_bound_keys_run_actions() -> None:
    manager = make_manager(["abc"])

    press(manager, "end")
    press(manager, "enter")
    type_text(manager, "d")
    press(manager, "up")

    buffer = workspace_of(manager).focused_buffer()
    assert buffer.text_lines() == ["abc", "d"]
    assert (buffer.cursor_row, buffer.cursor_x) == (1, 1)

    press(manager, "a", modifiers=("ctrl",))
    assert buffer.cursor_x == 0
    press(manager, "e", modifiers=("ctrl",))
    assert buffer.cursor_x == 3


def test_backspace_and_tab_bindings() -> None:
    manager = make_manager(["ab"])
    press(manager, "end")

    press(manager, "backspace")
    press(manager, "tab")

    assert workspace_of(manager).focused_buffer().text_lines() == ["a\t"]


def test_read_only_buffer_reports_notice() -> None:
    manager = make_manager(["ab"])
    workspace = workspace_of(manager)
    workspace.show_help()
    before = workspace.focused_buffer().text_lines()

    result = press(manager, "enter")

    assert result.status == "read_only"
    assert workspace.focused_buffer().text_lines() == before
    assert workspace.status_text() == "Warning: buffer is read-only."


def test_open_prompt_switches_modes_and_back() -> None:
    manager = make_manager()
    workspace = workspace_of(manager)

    result = press(manager, "r", modifiers=("ctrl",))
    assert result.switch_to == "prompt"
    assert manager.active_mode is not None and manager.active_mode.name == "prompt"

    type_text(manager, "abc")
    press(manager, "backspace")
    assert workspace.prompt is not None and workspace.prompt.answer == "ab"

    result = press(manager, "escape")
    assert result.switch_to == "edit"
    assert manager.active_mode is not None and manager.active_mode.name == "edit"
    assert workspace.status_text() == "User cancelled operation."


def test_ctrl_c_cancels_prompt() -> None:
    manager = make_manager()

    press(manager, "o", modifiers=("ctrl",))
    press(manager, "c", modifiers=("ctrl",))

    assert workspace_of(manager).status_text() == "Save cancelled."
    assert manager.active_mode is not None and manager.active_mode.name == "edit"


def test_save_via_keys(tmp_path: Path) -> None:
    path = tmp_path / "saved.c"
    manager = make_manager(["int x;"], name=str(path))

    press(manager, "o", modifiers=("ctrl",))
    press(manager, "enter")

    assert path.read_text(encoding="utf-8") == "int x;\n"
    assert manager.active_mode is not None and manager.active_mode.name == "edit"


def test_close_dirty_then_yes_stays_in_prompt_for_path(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    manager = make_manager(["a"], name=str(path))
    workspace = workspace_of(manager)
    workspace.add_buffer(Buffer.from_lines("b.txt", ["b"]))
    workspace.focus_index = 0
    type_text(manager, "x")

    press(manager, "w", modifiers=("ctrl",))
    result = press(manager, "y", text="y")

    assert result.switch_to is None
    assert manager.active_mode is not None and manager.active_mode.name == "prompt"
    assert workspace.status_text() == f"Save: {path}"

    press(manager, "enter")

    assert [b.path for b in workspace.buffers] == ["b.txt"]
    assert manager.active_mode is not None and manager.active_mode.name == "edit"


def test_buffer_switching_and_help() -> None:
    manager = make_manager()
    workspace = workspace_of(manager)

    press(manager, "f1")
    assert workspace.focus_index == 1
    press(manager, "l", modifiers=("ctrl",))
    assert workspace.focus_index == 0
    press(manager, "p", modifiers=("ctrl",))
    assert workspace.focus_index == 1


def test_quit_clean_workspace() -> None:
    manager = make_manager()

    press(manager, "q", modifiers=("ctrl",))

    assert workspace_of(manager).should_exit is True


def test_prompt_mode_without_prompt_returns_to_edit() -> None:
    manager = make_manager()
    manager.switch_mode("prompt")

    result = press(manager, "a", text="a")

    assert result.status == "no_prompt"
    assert manager.active_mode is not None and manager.active_mode.name == "edit"


def test_mode_manager_rejects_unknown_and_duplicate_modes() -> None:
    manager = make_manager()

    with pytest.raises(KeyError):
        manager.switch_mode("visual")
    with pytest.raises(ValueError):
        manager.register_mode(EditMode)


def test_edit_mode_requires_resolver() -> None:
    workspace = Workspace()
    context = ModeContext(workspace=workspace, bus=workspace.bus, extras={})

    with pytest.raises(RuntimeError):
        EditMode(context)
