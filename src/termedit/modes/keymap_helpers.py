"""Helpers shared by keymap-driven modes."""

from __future__ import annotations

from termedit.keymaps import KeymapResolver, KeyStroke, ResolutionMatch
from termedit.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return KeyStroke(key.key.lower(), key.modifiers).token


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


__all__ = ["key_to_token", "require_keymap_resolver", "execute_match"]
