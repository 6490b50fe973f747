from __future__ import annotations

import pytest

from termedit.syntax import (
    LANGUAGE_C,
    LANGUAGE_GO,
    FileType,
    LanguageDefinition,
    LanguageRegistry,
    default_languages,
    guess_file_type,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Makefile", FileType.MAKEFILE),
        ("src/CMakeLists.txt", FileType.CMAKE),
        ("main.go", FileType.GO),
        ("go.mod", FileType.GO_MODULE),
        ("lib.c", FileType.C),
        ("lib.h", FileType.C),
        ("app.cpp", FileType.CPP),
        ("app.cc", FileType.CPP),
        ("app.hpp", FileType.CPP),
        ("README.md", FileType.MARKDOWN),
        ("notes.txt", FileType.PLAINTEXT),
        ("archive.tar.go", FileType.GO),
        ("script.py", FileType.UNKNOWN),
        ("Untitled", FileType.UNKNOWN),
        (".bashrc", FileType.UNKNOWN),
    ],
)
def test_guess_file_type(name: str, expected: FileType) -> None:
    assert guess_file_type(name) is expected


def test_special_names_match_basename_only() -> None:
    assert guess_file_type("Makefile.txt") is FileType.PLAINTEXT
    assert guess_file_type("build/Makefile") is FileType.MAKEFILE


def test_default_languages_cover_c_family_and_go() -> None:
    registry = default_languages()

    assert registry.lookup(FileType.C) is LANGUAGE_C
    assert registry.lookup(FileType.CPP) is LANGUAGE_C
    assert registry.lookup(FileType.GO) is LANGUAGE_GO
    assert registry.lookup(FileType.MARKDOWN) is None
    assert FileType.GO in registry
    assert len(registry) == 3


def test_registry_rejects_duplicates_unless_replacing() -> None:
    registry = LanguageRegistry()
    registry.register(FileType.GO, LANGUAGE_GO)

    with pytest.raises(ValueError):
        registry.register(FileType.GO, LANGUAGE_C)

    registry.register(FileType.GO, LANGUAGE_C, replace=True)
    assert registry.lookup(FileType.GO) is LANGUAGE_C


def test_language_definition_drops_empty_keywords() -> None:
    language = LanguageDefinition(name="Tiny", keywords=("let", "", "in"))
    assert language.keywords == ("let", "in")

    with pytest.raises(ValueError):
        LanguageDefinition(name="", keywords=())
