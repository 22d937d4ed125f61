"""Tests for file type and language classification."""

from __future__ import annotations

import pytest

from codebase_analyzer.analyzers.classifier import FileClassifier, file_type


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("src/App.TSX", "tsx"),
        ("archive.tar.gz", "gz"),
        (".gitignore", "gitignore"),
        ("C:\\code\\main.c", "c"),
        ("Makefile", None),
        ("dir.v2/Makefile", None),
        ("trailing.", None),
    ],
)
def test_file_type(path: str, expected: str | None) -> None:
    assert file_type(path) == expected


def test_suffix_table_is_case_insensitive() -> None:
    classifier = FileClassifier()
    assert classifier.classify("app.JS", "") == "JavaScript"
    assert classifier.classify("component.tsx", "") == "TypeScript"
    assert classifier.classify("config.yml", "") == "YAML"
    assert classifier.classify("lib.rs", "def nothing(): pass") == "Rust"


def test_content_fallback_prefers_javascript() -> None:
    classifier = FileClassifier()
    assert classifier.classify("script", "let total = 5") == "JavaScript"
    assert classifier.classify("script", "import os\nconst x = 1") == "JavaScript"


def test_content_fallback_detects_python() -> None:
    classifier = FileClassifier()
    assert classifier.classify("tool", "def run():\n    pass\n") == "Python"
    assert classifier.classify("notes.txt", "class Widget:\n    pass\n") == "Python"


def test_unknown_when_nothing_matches() -> None:
    classifier = FileClassifier()
    assert classifier.classify("Makefile", "x = 1") == "Unknown"
    assert classifier.classify("file", "") == "Unknown"


def test_content_fallback_ignores_non_ascii_identifiers() -> None:
    classifier = FileClassifier()
    assert classifier.classify("script", "let é = 1") == "Unknown"
    assert classifier.classify("script", "def ñ():\n    pass\n") == "Unknown"
