"""Token classes and the per-file-type language table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, Optional, Tuple

from .filetype import FileType


class TokenClass(IntEnum):
    """Lexical category of one display character."""

    TEXT = 0
    KEYWORD = 1
    NUMBER = 2
    STRING = 3
    COMMENT = 4


@dataclass(frozen=True, slots=True)
class LanguageDefinition:
    """Keywords and comment markers for one language.

    The multi-line markers are recorded for completeness only; the tokenizer
    works one line at a time and never consults them.
    """

    name: str
    keywords: Tuple[str, ...]
    single_line_comment_start: str = ""
    multi_line_comment_start: str = ""
    multi_line_comment_end: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("language name cannot be empty")
        object.__setattr__(
            self, "keywords", tuple(word for word in self.keywords if word)
        )


class LanguageRegistry:
    """Maps file types to language definitions for the whole session."""

    def __init__(self) -> None:
        self._languages: Dict[FileType, LanguageDefinition] = {}

    def register(
        self,
        file_type: FileType,
        language: LanguageDefinition,
        *,
        replace: bool = False,
    ) -> LanguageDefinition:
        if not replace and file_type in self._languages:
            raise ValueError(f"File type '{file_type.value}' already has a language")
        self._languages[file_type] = language
        return language

    def lookup(self, file_type: FileType) -> Optional[LanguageDefinition]:
        return self._languages.get(file_type)

    def __contains__(self, file_type: object) -> bool:
        return file_type in self._languages

    def __iter__(self) -> Iterator[FileType]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)


LANGUAGE_C = LanguageDefinition(
    name="C",
    keywords=(
        "#define", "#include", "NULL", "auto", "break", "case", "char", "const",
        "continue", "default", "do", "double", "else", "enum", "extern", "float",
        "for", "goto", "if", "int", "long", "register", "return", "short",
        "signed", "sizeof", "static", "struct", "switch", "typedef", "union",
        "unsigned", "void", "volatile", "while",
    ),
    single_line_comment_start="//",
    multi_line_comment_start="/*",
    multi_line_comment_end="*/",
)

LANGUAGE_GO = LanguageDefinition(
    name="Go",
    keywords=(
        "append", "bool", "break", "byte", "cap", "case", "chan", "close",
        "complex", "complex128", "complex64", "const", "continue", "copy",
        "default", "defer", "delete", "else", "error", "fallthrough", "false",
        "float32", "float64", "for", "func", "go", "goto", "if", "imag",
        "import", "int", "int16", "int32", "int64", "int8", "interface", "len",
        "make", "map", "new", "nil", "package", "panic", "range", "real",
        "recover", "return", "rune", "select", "string", "struct", "switch",
        "true", "type", "uint", "uint16", "uint32", "uint64", "uint8", "uintptr",
        "var",
    ),
    single_line_comment_start="//",
    multi_line_comment_start="/*",
    multi_line_comment_end="*/",
)


def default_languages() -> LanguageRegistry:
    registry = LanguageRegistry()
    registry.register(FileType.C, LANGUAGE_C)
    registry.register(FileType.CPP, LANGUAGE_C)
    registry.register(FileType.GO, LANGUAGE_GO)
    return registry


__all__ = [
    "TokenClass",
    "LanguageDefinition",
    "LanguageRegistry",
    "LANGUAGE_C",
    "LANGUAGE_GO",
    "default_languages",
]
