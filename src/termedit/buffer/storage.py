"""File read/write boundary used by buffers."""

from __future__ import annotations

import os
from typing import List


class FileAccessError(RuntimeError):
    """Raised when a file cannot be read or written."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


def read_lines(path: str) -> List[str]:
    """Return the file's lines without terminators; a missing file is empty."""

    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"{path} ({_reason(exc)})", path=path) from exc
    return split_lines(text)


def split_lines(text: str) -> List[str]:
    r"""Split on "\n" only, dropping one trailing "\r" per line.

    Form feeds and Unicode line separators stay part of their line.
    """

    if not text:
        return []
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]


def write_text(path: str, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise FileAccessError(f"{path} ({_reason(exc)})", path=path) from exc


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


def display_name(path: str) -> str:
    return os.path.basename(path) or path


__all__ = ["FileAccessError", "read_lines", "split_lines", "write_text", "display_name"]
