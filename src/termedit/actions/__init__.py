"""Verbs bound to keys by the default keymap."""

from . import editing, files, prompt

__all__ = ["editing", "files", "prompt"]
