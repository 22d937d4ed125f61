"""File type and language classification by suffix and content heuristics."""

from __future__ import annotations

import re
from typing import Pattern, Tuple

UNKNOWN_LANGUAGE = "Unknown"

_LANGUAGE_BY_SUFFIX = {
    "js": "JavaScript",
    "jsx": "JavaScript",
    "ts": "TypeScript",
    "tsx": "TypeScript",
    "py": "Python",
    "java": "Java",
    "cpp": "C++",
    "c": "C",
    "cs": "C#",
    "php": "PHP",
    "rb": "Ruby",
    "go": "Go",
    "rs": "Rust",
    "swift": "Swift",
    "kt": "Kotlin",
    "html": "HTML",
    "css": "CSS",
    "scss": "SCSS",
    "json": "JSON",
    "xml": "XML",
    "yaml": "YAML",
    "yml": "YAML",
    "md": "Markdown",
    "sh": "Shell",
    "sql": "SQL",
}

# Evaluated in order; first match wins.
_CONTENT_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"function\s+\w+|const\s+\w+\s*=|let\s+\w+\s*=", re.ASCII), "JavaScript"),
    (re.compile(r"def\s+\w+\s*\(|import\s+\w+|class\s+\w+", re.ASCII), "Python"),
)

_SUFFIX_PATTERN = re.compile(r"\.([^.]+)$")


def file_type(path: str) -> str | None:
    """Return the lowercased suffix of the final path component, if any."""
    name = re.split(r"[\\/]", path)[-1]
    match = _SUFFIX_PATTERN.search(name)
    return match.group(1).lower() if match else None


class FileClassifier:
    """Resolves a best-guess language label for a file."""

    def classify(self, path: str, content: str) -> str:
        suffix = file_type(path)
        if suffix is not None and suffix in _LANGUAGE_BY_SUFFIX:
            return _LANGUAGE_BY_SUFFIX[suffix]
        return self._detect_from_content(content)

    def _detect_from_content(self, content: str) -> str:
        for pattern, language in _CONTENT_RULES:
            if pattern.search(content):
                return language
        return UNKNOWN_LANGUAGE


__all__ = ["FileClassifier", "UNKNOWN_LANGUAGE", "file_type"]
