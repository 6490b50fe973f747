"""Contents of the read-only help buffer."""

from __future__ import annotations

from termedit import __version__

HELP_BUFFER_NAME = "Help.txt"

HELP_MESSAGE = (
    f"termedit {__version__}",
    "",
    "1.  Usage",
    "",
    "    $ termedit <files>",
    "",
    "2.  Shortcuts",
    "",
    "      - Ctrl+R: Open buffer",
    "      - Ctrl+O: Save buffer",
    "      - Ctrl+W: Close buffer",
    "      - Ctrl+P: Next buffer",
    "      - Ctrl+L: Previous buffer",
    "      - Ctrl+A: Toggle line start / indent",
    "      - Ctrl+E: Line end",
    "      - Ctrl+H or F1: Show help",
    "      - Ctrl+Q: Quit",
    "",
    "3.  Configuration",
    "",
    "    Preferences live in '~/.termedit/config.yml' (or $TERMEDIT_CONFIG):",
    "    tab_width, use_soft_tabs and use_highlighting.",
    "",
)

__all__ = ["HELP_BUFFER_NAME", "HELP_MESSAGE"]
