"""Mode active while the workspace has an open prompt."""

from __future__ import annotations

from termedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class PromptMode(Mode):
    """Routes keys to the open prompt until it is answered or cancelled."""

    name = "prompt"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termedit.modes.prompt")
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        workspace = self.context.workspace
        if workspace.prompt is None:
            return ModeResult(consumed=False, switch_to="edit", status="no_prompt")

        result = self._resolver.resolve(
            self.name, key_to_token(key), context=self.flags()
        )
        if result.status == "match" and result.match:
            outcome = execute_match(self.context, result.match)
        elif key.text and not key.modifiers:
            consumed = workspace.prompt_insert(key.text)
            outcome = ModeResult(consumed=consumed, status="editing")
        else:
            outcome = ModeResult(consumed=False, status="miss")

        if workspace.prompt is None and outcome.switch_to is None:
            outcome.switch_to = "edit"
        return outcome


__all__ = ["PromptMode"]
