"""Base classes and shared types for input modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from termedit.workspace import EventBus, Workspace


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    ``key`` is a lower-case name (``"up"``, ``"enter"``, ``"o"``) and ``text``
    the printable character, if any.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can reach."""

    workspace: Workspace
    bus: EventBus
    extras: Dict[str, object] = field(default_factory=dict)


class Mode:
    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:  # pragma: no cover
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:  # pragma: no cover
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover
        raise NotImplementedError

    def flags(self) -> Dict[str, bool]:
        """Flags consulted by ``when`` clauses of this mode's bindings."""

        return {}


__all__ = ["KeyInput", "ModeResult", "ModeContext", "Mode"]
