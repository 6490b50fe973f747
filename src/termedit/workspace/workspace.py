"""The set of open buffers, the focused one, prompts and the status line."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from termedit import __version__
from termedit.buffer import Buffer, CursorMove, FileAccessError, scroll_view
from termedit.buffer.buffer import is_insertable
from termedit.runtime import telemetry
from termedit.runtime.settings import Settings
from termedit.syntax import LanguageRegistry, default_languages

from .events import EventBus
from .help import HELP_BUFFER_NAME, HELP_MESSAGE

STATUS_MESSAGE_SECONDS = 3.0
UNTITLED = "Untitled"


class Cancelled:
    """Answer delivered when the user aborts a prompt.

    Distinct from ``""`` so callers can tell "typed nothing" from "gave up".
    """

    _instance: Optional["Cancelled"] = None

    def __new__(cls) -> "Cancelled":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "CANCELLED"


CANCELLED = Cancelled()


class PromptKind(Enum):
    TEXT = "text"
    YES_NO = "yes_no"


@dataclass
class Prompt:
    """An open question on the status line.

    ``on_answer`` receives a ``str`` (text prompts), a ``bool`` (yes/no
    prompts) or ``CANCELLED``.
    """

    question: str
    on_answer: Callable[[object], None]
    kind: PromptKind = PromptKind.TEXT
    answer: str = ""
    cursor: int = 0
    saved_cursor: Tuple[int, int] = (1, 0)

    @property
    def text(self) -> str:
        return self.question + self.answer


@dataclass
class StatusMessage:
    text: str = ""
    timestamp: float = field(default=float("-inf"))


class Workspace:
    """Open buffers plus everything the host needs to draw one frame.

    Nothing here blocks: prompts are opened, then fed keys by the prompt mode
    until they are submitted or cancelled, at which point ``on_answer`` runs.
    """

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        languages: Optional[LanguageRegistry] = None,
        bus: Optional[EventBus] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or Settings()
        self.languages = languages if languages is not None else default_languages()
        self.bus = bus or EventBus()
        self.buffers: List[Buffer] = []
        self.focus_index = 0
        self.width = 80
        self.height = 24
        self.prompt: Optional[Prompt] = None
        self.status = StatusMessage()
        self.should_exit = False
        self._clock = clock
        self.logger = telemetry.get_logger("termedit.workspace")

    # -- buffers -----------------------------------------------------------

    @property
    def buffer_count(self) -> int:
        return len(self.buffers)

    def focused_buffer(self) -> Buffer:
        return self.buffers[self.focus_index]

    def add_buffer(self, buffer: Buffer) -> Buffer:
        self.buffers.append(buffer)
        self.focus_index = self.buffer_count - 1
        self.bus.emit("buffer.opened", buffer.path)
        return buffer

    def open_buffer(self, path: str) -> Optional[Buffer]:
        """Load ``path`` into a new focused buffer; errors become a status message."""

        try:
            buffer = Buffer.from_file(
                path, settings=self.settings, languages=self.languages
            )
        except FileAccessError as exc:
            self.set_status("Error: %s", exc)
            return None
        return self.add_buffer(buffer)

    def open_paths(self, paths: Iterable[str]) -> None:
        """Open every path from the command line, or an untitled buffer."""

        for path in paths:
            self.open_buffer(path)
        if not self.buffers:
            self.add_buffer(
                Buffer.from_lines(
                    UNTITLED, [], settings=self.settings, languages=self.languages
                )
            )
        self.focus_index = 0

    def show_help(self) -> Buffer:
        buffer = Buffer.from_lines(
            HELP_BUFFER_NAME,
            HELP_MESSAGE,
            settings=self.settings,
            languages=self.languages,
        )
        buffer.is_read_only = True
        return self.add_buffer(buffer)

    def focus_next(self) -> None:
        if self.focus_index + 1 < self.buffer_count:
            self.focus_index += 1

    def focus_previous(self) -> None:
        if self.focus_index > 0:
            self.focus_index -= 1

    def request_open(self) -> None:
        def on_answer(answer: object) -> None:
            if isinstance(answer, Cancelled):
                self.set_status("User cancelled operation.")
                return
            self.open_buffer(str(answer))

        self.ask("Open file: ", on_answer)

    def save_buffer(
        self, index: Optional[int] = None, *, then: Optional[Callable[[], None]] = None
    ) -> None:
        """Ask for a path (pre-filled) and write the buffer there.

        ``then`` runs only after a successful write.
        """

        target = self.buffers[self.focus_index if index is None else index]
        if target.is_read_only:
            self.set_status("Warning: Read-only buffers cannot be saved.")
            return

        def on_answer(answer: object) -> None:
            if isinstance(answer, Cancelled):
                self.set_status("Save cancelled.")
                return
            path = str(answer)
            try:
                target.write(path)
            except FileAccessError as exc:
                self.set_status("Error: %s.", exc)
                return
            self.set_status("File saved successfully. (%s)", path)
            self.bus.emit("buffer.saved", path)
            if then is not None:
                then()

        self.ask("Save: ", on_answer, answer=target.path)

    def close_buffer(self, index: Optional[int] = None) -> None:
        """Close a buffer, offering to save it first when it is dirty."""

        target = self.buffers[self.focus_index if index is None else index]
        if not target.is_dirty:
            self._remove_buffer(target)
            return

        def on_answer(answer: object) -> None:
            if isinstance(answer, Cancelled):
                return
            if answer:
                self.save_buffer(
                    self.buffers.index(target), then=lambda: self._remove_buffer(target)
                )
            else:
                self._remove_buffer(target)

        self.ask_yes_no("Save changes? [Y/N]: ", on_answer)

    def request_quit(self) -> None:
        if not any(buffer.is_dirty for buffer in self.buffers):
            self._exit()
            return

        def on_answer(answer: object) -> None:
            if answer is True:
                self._exit()

        self.ask_yes_no("Discard unsaved changes and quit? [Y/N]: ", on_answer)

    def _remove_buffer(self, buffer: Buffer) -> None:
        if buffer not in self.buffers:
            return
        self.buffers.remove(buffer)
        self.bus.emit("buffer.closed", buffer.path)
        if not self.buffers:
            self._exit()
            return
        if self.focus_index >= self.buffer_count:
            self.focus_index = self.buffer_count - 1

    def _exit(self) -> None:
        self.should_exit = True
        self.bus.emit("workspace.exit", None)

    # -- prompts -----------------------------------------------------------

    def ask(
        self, question: str, on_answer: Callable[[object], None], *, answer: str = ""
    ) -> Prompt:
        return self._open_prompt(
            Prompt(question=question, on_answer=on_answer, answer=answer)
        )

    def ask_yes_no(self, question: str, on_answer: Callable[[object], None]) -> Prompt:
        return self._open_prompt(
            Prompt(question=question, on_answer=on_answer, kind=PromptKind.YES_NO)
        )

    def _open_prompt(self, prompt: Prompt) -> Prompt:
        if self.buffers:
            buffer = self.focused_buffer()
            prompt.saved_cursor = (buffer.cursor_row, buffer.cursor_x)
        prompt.cursor = len(prompt.answer)
        self.prompt = prompt
        self.bus.emit("prompt.open", prompt.question)
        return prompt

    def prompt_insert(self, rune: str) -> bool:
        prompt = self.prompt
        if prompt is None:
            return False
        if prompt.kind is PromptKind.YES_NO:
            choice = rune.upper()
            if choice == "Y":
                self._close_prompt(True)
            elif choice == "N":
                self._close_prompt(False)
            return True
        if not is_insertable(rune):
            return False
        prompt.answer = prompt.answer[: prompt.cursor] + rune + prompt.answer[prompt.cursor :]
        prompt.cursor += 1
        return True

    def prompt_delete(self) -> None:
        prompt = self.prompt
        if prompt is None or prompt.kind is PromptKind.YES_NO:
            return
        x = prompt.cursor - 1
        if 0 <= x < len(prompt.answer):
            prompt.answer = prompt.answer[:x] + prompt.answer[x + 1 :]
            prompt.cursor -= 1

    def prompt_move(self, move: CursorMove) -> None:
        prompt = self.prompt
        if prompt is None:
            return
        if move is CursorMove.LEFT and prompt.cursor != 0:
            prompt.cursor -= 1
        elif move is CursorMove.RIGHT and prompt.cursor < len(prompt.answer):
            prompt.cursor += 1

    def submit_prompt(self) -> None:
        prompt = self.prompt
        if prompt is None or prompt.kind is PromptKind.YES_NO:
            return
        self._close_prompt(prompt.answer)

    def cancel_prompt(self) -> None:
        if self.prompt is not None:
            self._close_prompt(CANCELLED)

    def _close_prompt(self, answer: object) -> None:
        prompt = self.prompt
        if prompt is None:
            return
        self.prompt = None
        if self.buffers:
            self.focused_buffer().set_cursor(*prompt.saved_cursor)
        telemetry.record_event(
            "prompt.closed",
            level="debug",
            data={"question": prompt.question, "cancelled": answer is CANCELLED},
        )
        self.bus.emit("prompt.close", answer)
        # The callback may open the next prompt (close -> save).
        prompt.on_answer(answer)

    # -- status and frame --------------------------------------------------

    def set_status(self, fmt: str, *args: object) -> None:
        text = fmt % args if args else fmt
        self.status = StatusMessage(text=text, timestamp=self._clock())
        self.bus.emit("status", text)

    def status_text(self) -> str:
        """Prompt text if a prompt is open, else the message until it expires."""

        if self.prompt is not None:
            return self.prompt.text
        if self._clock() < self.status.timestamp + STATUS_MESSAGE_SECONDS:
            return self.status.text
        return ""

    def position_text(self) -> str:
        buffer = self.focused_buffer()
        return (
            f" | {buffer.file_type.value} | Line {buffer.cursor_row},"
            f" Column {buffer.cursor_dx + 1}"
        )

    def title_text(self) -> str:
        buffer = self.focused_buffer()
        name = f"{buffer.file_name} ({self.focus_index + 1}/{self.buffer_count})"
        if buffer.is_dirty:
            name = "*" + name
        return name

    @staticmethod
    def banner() -> str:
        return f"termedit {__version__}"

    def resize(self, width: int, height: int) -> None:
        self.width = max(width, 1)
        self.height = max(height, 3)

    def frame(self) -> None:
        """Recompute the focused buffer's viewport for the next draw."""

        if self.prompt is not None or not self.buffers:
            return
        buffer = self.focused_buffer()
        buffer.apply_viewport(scroll_view(buffer, self.width, self.height))


__all__ = [
    "CANCELLED",
    "Cancelled",
    "Prompt",
    "PromptKind",
    "STATUS_MESSAGE_SECONDS",
    "StatusMessage",
    "Workspace",
]
