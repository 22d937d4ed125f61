"""Core data models shared across the analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class FileRecord:
    """Normalized `path`/`content` pair extracted from a submission."""

    path: str
    content: str


@dataclass(frozen=True)
class FileMetrics:
    """Structural signals detected by pattern search over a file."""

    has_functions: bool = False
    has_classes: bool = False
    has_imports: bool = False
    has_exports: bool = False
    function_count: int = 0
    class_count: int = 0
    import_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hasFunctions": self.has_functions,
            "hasClasses": self.has_classes,
            "hasImports": self.has_imports,
            "hasExports": self.has_exports,
            "functionCount": self.function_count,
            "classCount": self.class_count,
            "importCount": self.import_count,
        }


@dataclass(frozen=True)
class FileAnalysis:
    """Per-file result produced by the metrics extractor."""

    path: str
    lines: int
    size: int
    code_lines: int
    comment_lines: int
    blank_lines: int
    metrics: FileMetrics
    language: str
    file_type: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        # file_type only feeds the statistics roll-up; it is not part of the payload.
        return {
            "path": self.path,
            "lines": self.lines,
            "size": self.size,
            "codeLines": self.code_lines,
            "commentLines": self.comment_lines,
            "blankLines": self.blank_lines,
            "metrics": self.metrics.to_dict(),
            "language": self.language,
        }


@dataclass
class Statistics:
    """Aggregate counts across every file of a submission."""

    total_lines: int = 0
    total_size: int = 0
    file_types: Dict[str, int] = field(default_factory=dict)
    languages: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalLines": self.total_lines,
            "totalSize": self.total_size,
            "fileTypes": dict(self.file_types),
            "languages": dict(self.languages),
        }


@dataclass(frozen=True)
class Insight:
    """Advisory message synthesized from aggregate or per-file results."""

    type: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "message": self.message}


@dataclass(frozen=True)
class Summary:
    total_files: int
    analyzed_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {"totalFiles": self.total_files, "analyzedAt": self.analyzed_at}


@dataclass
class AnalysisReport:
    """Top-level result returned once per analysis call."""

    summary: Summary
    files: List[FileAnalysis]
    statistics: Statistics
    insights: List[Insight] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready representation using the public camelCase keys."""
        return {
            "summary": self.summary.to_dict(),
            "files": [analysis.to_dict() for analysis in self.files],
            "statistics": self.statistics.to_dict(),
            "insights": [insight.to_dict() for insight in self.insights],
        }
