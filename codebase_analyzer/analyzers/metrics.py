"""Per-file size, line-category and structural-signal extraction."""

from __future__ import annotations

import re
from typing import Pattern, Sequence, Tuple

from .classifier import FileClassifier, file_type
from ..models import FileAnalysis, FileMetrics

_COMMENT_MARKERS = ("//", "/*", "*")

# Whitespace and line terminators trimmed by ECMAScript String.prototype.trim,
# including the byte order mark that str.strip() keeps.
_TRIM_CHARS = " \t\n\v\f\r" + "".join(
    chr(code)
    for code in (0x00A0, 0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF)
)

# re.ASCII keeps \w to [A-Za-z0-9_] as in ECMAScript patterns.
_FUNCTION_PATTERN = re.compile(r"function\s+\w+|const\s+\w+\s*=\s*\(|=>\s*\{", re.ASCII)
_CLASS_PATTERN = re.compile(r"class\s+\w+", re.ASCII)
_IMPORT_PATTERN = re.compile(r"import\s+.*from|require\(", re.ASCII)
_EXPORT_PATTERN = re.compile(r"export\s+|module\.exports", re.ASCII)


def _signal(pattern: Pattern[str], content: str) -> Tuple[bool, int]:
    count = len(pattern.findall(content))
    return count > 0, count


def _count_line_categories(lines: Sequence[str]) -> Tuple[int, int, int]:
    code = comment = blank = 0
    for line in lines:
        stripped = line.strip(_TRIM_CHARS)
        if not stripped:
            blank += 1
        elif stripped.startswith(_COMMENT_MARKERS):
            comment += 1
        else:
            code += 1
    return code, comment, blank


class MetricsExtractor:
    """Computes a :class:`FileAnalysis` for one file record."""

    def __init__(self, classifier: FileClassifier | None = None) -> None:
        self.classifier = classifier or FileClassifier()

    def extract(self, path: str, content: str) -> FileAnalysis:
        lines = content.split("\n")
        # Strict UTF-8: content that cannot be encoded is an internal fault.
        size = len(content.encode("utf-8"))
        code_lines, comment_lines, blank_lines = _count_line_categories(lines)

        has_functions, function_count = _signal(_FUNCTION_PATTERN, content)
        has_classes, class_count = _signal(_CLASS_PATTERN, content)
        has_imports, import_count = _signal(_IMPORT_PATTERN, content)
        has_exports, _ = _signal(_EXPORT_PATTERN, content)

        return FileAnalysis(
            path=path,
            lines=len(lines),
            size=size,
            code_lines=code_lines,
            comment_lines=comment_lines,
            blank_lines=blank_lines,
            metrics=FileMetrics(
                has_functions=has_functions,
                has_classes=has_classes,
                has_imports=has_imports,
                has_exports=has_exports,
                function_count=function_count,
                class_count=class_count,
                import_count=import_count,
            ),
            language=self.classifier.classify(path, content),
            file_type=file_type(path),
        )


__all__ = ["MetricsExtractor"]
