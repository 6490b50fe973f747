"""Bridges host key events to the mode manager and frames back to the host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from termedit.buffer import BufferView
from termedit.keymaps import KeymapRegistry, KeymapResolver
from termedit.keymaps.defaults import load_default_keymaps
from termedit.modes import EditMode, KeyInput, ModeContext, ModeResult, PromptMode
from termedit.modes.mode_manager import ModeManager
from termedit.workspace import Workspace

# Host key names that differ from the keymap's spelling.
_KEY_ALIASES = {
    "return": "enter",
    "esc": "escape",
    "page_up": "pageup",
    "page_down": "pagedown",
    "ctrl+i": "tab",
    "ctrl+m": "enter",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything a host needs to paint one screen."""

    width: int
    height: int
    banner: str
    title: str
    buffer: BufferView
    status: str
    position: str
    cursor: Tuple[int, int]
    prompt_active: bool


@dataclass(slots=True)
class UIHooks:
    update_frame: Callable[[Frame], None]
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


def build_manager(workspace: Workspace) -> ModeManager:
    """ModeManager with the edit and prompt modes and the default keymap."""

    registry = KeymapRegistry(logger_name="termedit.keymaps")
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)
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


def split_key(key: str) -> Tuple[str, Tuple[str, ...]]:
    """``"ctrl+shift+x"`` -> ``("x", ("ctrl", "shift"))``."""

    key = _KEY_ALIASES.get(key.lower(), key.lower())
    if key == "+" or "+" not in key:
        return key, ()
    *modifiers, name = key.split("+")
    return name, tuple(modifiers)


class TextualEditorAdapter:
    """Feeds normalized keys to the manager and pushes a ``Frame`` after each."""

    def __init__(self, manager: ModeManager, hooks: UIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()

    @property
    def workspace(self) -> Workspace:
        return self.manager.context.workspace

    def handle_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        name, embedded = split_key(key)
        all_modifiers = tuple(
            dict.fromkeys(m.lower() for m in (*embedded, *modifiers))
        )
        if all_modifiers:
            text = None
        self._log_state("key ->", key=name, text=text, mods=all_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=name, modifiers=all_modifiers, text=text)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            switch_to=result.switch_to,
        )
        self.refresh()
        if self.workspace.should_exit:
            self.hooks.request_exit()
        return result

    def resize(self, width: int, height: int) -> None:
        self.workspace.resize(width, height)
        self.refresh()

    def refresh(self) -> Optional[Frame]:
        workspace = self.workspace
        if not workspace.buffers:
            return None
        workspace.frame()
        frame = self.build_frame()
        self.hooks.update_frame(frame)
        return frame

    def build_frame(self) -> Frame:
        workspace = self.workspace
        buffer = workspace.focused_buffer()
        prompt = workspace.prompt
        if prompt is not None:
            cursor = (len(prompt.question) + prompt.cursor, workspace.height - 1)
        else:
            cursor = (
                buffer.cursor_dx - buffer.offset_x,
                buffer.cursor_row - buffer.offset_y,
            )
        return Frame(
            width=workspace.width,
            height=workspace.height,
            banner=workspace.banner(),
            title=workspace.title_text(),
            buffer=buffer.view(),
            status=workspace.status_text(),
            position=workspace.position_text(),
            cursor=cursor,
            prompt_active=prompt is not None,
        )

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "buffer.opened",
            "buffer.saved",
            "buffer.closed",
            "prompt.open",
            "prompt.close",
            "status",
            "workspace.exit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        workspace = self.workspace
        active = self.manager.active_mode
        metadata: Dict[str, object] = {
            "mode": active.name if active else "?",
            "buffers": workspace.buffer_count,
            "focus": workspace.focus_index,
        }
        if workspace.buffers:
            buffer = workspace.focused_buffer()
            metadata["cursor"] = (buffer.cursor_row, buffer.cursor_x)
        return metadata


__all__ = [
    "Frame",
    "TextualEditorAdapter",
    "UIHooks",
    "build_manager",
    "split_key",
]
