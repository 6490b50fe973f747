"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press, e.g. ``KeyStroke("o", ("ctrl",))``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers) + "+" + self.key
        return self.key

    @classmethod
    def parse(cls, spec: str) -> "KeyStroke":
        """Parse ``"ctrl+o"`` style specs; the last segment is the key."""

        if spec == "+":
            return cls("+")
        *modifiers, key = spec.split("+")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Boolean flag gate; ``!flag`` requires the flag to be false."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        expr = expression.strip()
        if not expr:
            raise ValueError("expression cannot be empty")
        if expr.startswith("!"):
            return cls(expr[1:], False)
        return cls(expr, True)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named callable invoked when a binding fires."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one keystroke in one mode with an action."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        normalized = tuple(
            clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
            for clause in self.when
        )
        object.__setattr__(self, "when", normalized)

    @property
    def token(self) -> str:
        return self.stroke.token

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)


__all__ = [
    "KeyStroke",
    "WhenClause",
    "ActionRef",
    "Binding",
]
