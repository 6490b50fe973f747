"""File-type inference, language definitions and the line tokenizer."""

from .filetype import FileType, guess_file_type
from .languages import (
    LANGUAGE_C,
    LANGUAGE_GO,
    LanguageDefinition,
    LanguageRegistry,
    TokenClass,
    default_languages,
)
from .tokenizer import is_separator, tokenize

__all__ = [
    "FileType",
    "guess_file_type",
    "TokenClass",
    "LanguageDefinition",
    "LanguageRegistry",
    "LANGUAGE_C",
    "LANGUAGE_GO",
    "default_languages",
    "is_separator",
    "tokenize",
]
