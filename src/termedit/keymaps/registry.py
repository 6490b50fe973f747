"""Registry of editor actions and the keys bound to them."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from termedit.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a binding would shadow another one in the same context."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        super().__init__(
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and an index of bindings by mode and key."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._index: Dict[str, Dict[str, list[str]]] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                raise KeymapConflictError(binding, conflicts)

            if replace:
                for conflict in conflicts:
                    self.unregister_binding(conflict.id)
                self.unregister_binding(binding.id)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._index.setdefault(binding.mode, {}).setdefault(
                binding.token, []
            ).append(binding.id)
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is None:
            return None
        by_token = self._index.get(binding.mode, {})
        ids = by_token.get(binding.token, [])
        if binding_id in ids:
            ids.remove(binding_id)
        if not ids:
            by_token.pop(binding.token, None)
        if not by_token:
            self._index.pop(binding.mode, None)
        return binding

    def candidates(self, mode: str, token: str) -> list[Binding]:
        ids = self._index.get(mode, {}).get(token, [])
        return [self._bindings[binding_id] for binding_id in ids]

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        return [
            existing
            for existing in self.candidates(binding.mode, binding.token)
            if existing.id != binding.id and _contexts_overlap(binding, existing)
        ]


def _contexts_overlap(left: Binding, right: Binding) -> bool:
    """Two bindings overlap unless some flag is required with opposite values."""

    left_map = left.when_map
    right_map = right.when_map
    for flag, expected in left_map.items():
        if flag in right_map and right_map[flag] != expected:
            return False
    return True


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
]
