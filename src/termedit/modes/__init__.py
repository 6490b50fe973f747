"""Input modes: plain editing and answering prompts."""

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .edit_mode import EditMode
from .prompt_mode import PromptMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeContext",
    "ModeResult",
    "EditMode",
    "PromptMode",
]
