"""Executable Textual app hosting the editor."""

from __future__ import annotations

import argparse
import time
from typing import Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget

from termedit import __version__
from termedit.runtime import telemetry
from termedit.runtime.settings import load_settings
from termedit.workspace import Workspace

from .controller import Frame, TextualEditorAdapter, UIHooks, build_manager
from .render import render_frame


class EditorView(Widget, can_focus=True):
    """Full-screen widget that paints the latest frame."""

    DEFAULT_CSS = """
    EditorView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="editor")
        self.frame: Frame | None = None

    def show(self, frame: Frame) -> None:
        self.frame = frame
        self.refresh()

    def render(self) -> Text:
        if self.frame is None:
            return Text("")
        return render_frame(self.frame, clock=time.strftime("%Y-%m-%d %H:%M"))


class TermEditApp(App[None]):
    """Textual host: forwards keys to the adapter and repaints on every frame."""

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    # ctrl+p switches buffers here.
    ENABLE_COMMAND_PALETTE = False

    # Keys Textual would otherwise claim for itself.
    BINDINGS = [
        Binding("ctrl+q", "forward('ctrl+q')", "Quit", show=False, priority=True),
        Binding("ctrl+c", "forward('ctrl+c')", show=False, priority=True),
        Binding("tab", "forward('tab')", show=False, priority=True),
    ]

    def __init__(self, workspace: Workspace, *, startup_message: str = "") -> None:
        super().__init__()
        self.workspace = workspace
        self._startup_message = startup_message
        self._view: EditorView | None = None
        self.adapter: TextualEditorAdapter | None = None
        self.logger = telemetry.get_logger("termedit.app")

    def compose(self) -> ComposeResult:
        self._view = EditorView()
        yield self._view

    def on_mount(self) -> None:
        hooks = UIHooks(
            update_frame=self._update_frame,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(build_manager(self.workspace), hooks)
        if self._startup_message:
            self.workspace.set_status(self._startup_message)
        if self._view is not None:
            self._view.focus()
        self.adapter.resize(self.size.width, self.size.height)
        # Expire transient status messages without waiting for a key press.
        self.set_interval(1.0, self._tick)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, event.size.height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        event.stop()
        event.prevent_default()
        self.adapter.handle_key(event.key, text=event.character)

    def action_forward(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_key(key, text="\t" if key == "tab" else None)

    def _tick(self) -> None:
        if self.adapter:
            self.adapter.refresh()

    def _update_frame(self, frame: Frame) -> None:
        if self._view is not None:
            self._view.show(frame)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="termedit", description="A small terminal text editor."
    )
    parser.add_argument("files", nargs="*", help="Files to open, one buffer each")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the YAML config (default: ~/.termedit/config.yml)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="editor")

    loaded = load_settings(args.config)
    workspace = Workspace(settings=loaded.settings)
    workspace.open_paths(args.files)

    startup = ""
    if loaded.error:
        startup = f"Failed to load config! ({loaded.error})"
    elif workspace.status.text:
        startup = workspace.status.text

    TermEditApp(workspace, startup_message=startup).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
