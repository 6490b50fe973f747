"""Keyboard bindings for the editor's modes.

The built-in table lives in ``termedit.keymaps.defaults``; it pulls in the
action handlers, so it is not imported here.
"""

from .models import ActionRef, Binding, KeyStroke, WhenClause
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "WhenClause",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
