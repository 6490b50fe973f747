"""Textual host: key forwarding, frame building and rendering."""

from .controller import Frame, TextualEditorAdapter, UIHooks, build_manager, split_key

__all__ = [
    "Frame",
    "TextualEditorAdapter",
    "UIHooks",
    "build_manager",
    "split_key",
]
