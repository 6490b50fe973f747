"""Multiple open buffers, prompts and status for one editing session."""

from .events import EventBus
from .help import HELP_BUFFER_NAME, HELP_MESSAGE
from .workspace import (
    CANCELLED,
    STATUS_MESSAGE_SECONDS,
    Cancelled,
    Prompt,
    PromptKind,
    Workspace,
)

__all__ = [
    "CANCELLED",
    "Cancelled",
    "EventBus",
    "HELP_BUFFER_NAME",
    "HELP_MESSAGE",
    "Prompt",
    "PromptKind",
    "STATUS_MESSAGE_SECONDS",
    "Workspace",
]
