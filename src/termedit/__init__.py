"""Line-oriented terminal text editing engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "modes",
    "runtime",
    "syntax",
    "workspace",
]

__version__ = "0.5.0"
