"""Resolve a keystroke in a mode to the binding that should fire."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Picks the highest-priority binding whose ``when`` clauses hold."""

    def __init__(self, registry: KeymapRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(
        self,
        mode: str,
        token: str,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        flags = context or {}
        allowed = [
            binding
            for binding in self._registry.candidates(mode, token)
            if binding.allows(flags)
        ]
        if not allowed:
            return ResolutionResult(status="miss")

        allowed.sort(key=lambda b: (-b.priority, b.id))
        binding = allowed[0]
        action = self._registry.get_action(binding.action_id)
        return ResolutionResult(
            status="match", match=ResolutionMatch(binding=binding, action=action)
        )


__all__ = [
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
]
