"""Guess a buffer's file type from its name."""

from __future__ import annotations

import os
from enum import Enum


class FileType(str, Enum):
    MAKEFILE = "Makefile"
    CMAKE = "CMake"
    GO = "Go"
    GO_MODULE = "Go Module"
    C = "C"
    CPP = "C++"
    MARKDOWN = "Markdown"
    PLAINTEXT = "Plaintext"
    UNKNOWN = "Unknown"


_SPECIAL_NAMES = {
    "Makefile": FileType.MAKEFILE,
    "CMakeLists.txt": FileType.CMAKE,
}

_EXTENSIONS = {
    "go": FileType.GO,
    "mod": FileType.GO_MODULE,
    "c": FileType.C,
    "h": FileType.C,
    "cpp": FileType.CPP,
    "cc": FileType.CPP,
    "hpp": FileType.CPP,
    "md": FileType.MARKDOWN,
    "txt": FileType.PLAINTEXT,
}


def guess_file_type(name: str) -> FileType:
    """Full names win over extensions; anything unmatched is ``UNKNOWN``."""

    base = os.path.basename(name)
    special = _SPECIAL_NAMES.get(base)
    if special is not None:
        return special

    stem, dot, extension = base.rpartition(".")
    if not dot or not stem:
        return FileType.UNKNOWN
    return _EXTENSIONS.get(extension, FileType.UNKNOWN)


__all__ = ["FileType", "guess_file_type"]
