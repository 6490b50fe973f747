"""Default mode: bound keys run actions, printable keys are typed."""

from __future__ import annotations

from typing import Dict

from termedit.buffer import is_insertable
from termedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class EditMode(Mode):
    name = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termedit.modes.edit")
        self._resolver = require_keymap_resolver(context)

    def flags(self) -> Dict[str, bool]:
        workspace = self.context.workspace
        read_only = bool(workspace.buffers) and workspace.focused_buffer().is_read_only
        return {"read_only": read_only}

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(
            self.name, key_to_token(key), context=self.flags()
        )
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)

        if key.text and not key.modifiers and is_insertable(key.text):
            buffer = self.context.workspace.focused_buffer()
            buffer.insert_rune(key.text)
            return ModeResult(consumed=True, status="insert")

        return ModeResult(consumed=False, status="miss")


__all__ = ["EditMode"]
