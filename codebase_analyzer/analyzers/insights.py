"""Rule-based insight synthesis over a report in progress."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .base import InsightRule
from ..config import InsightConfig
from ..models import AnalysisReport, Insight

INFO = "info"
WARNING = "warning"


class EmptyCodebaseRule(InsightRule):
    terminal = True

    def evaluate(self, report: AnalysisReport) -> Optional[Insight]:
        if report.summary.total_files == 0:
            return Insight(WARNING, "No files found in codebase")
        return None


class LargeCodebaseRule(InsightRule):
    def __init__(self, threshold: int) -> None:
        self.threshold = threshold

    def evaluate(self, report: AnalysisReport) -> Optional[Insight]:
        total = report.summary.total_files
        if total > self.threshold:
            return Insight(INFO, f"Large codebase detected with {total} files")
        return None


class MultiLanguageRule(InsightRule):
    def __init__(self, threshold: int) -> None:
        self.threshold = threshold

    def evaluate(self, report: AnalysisReport) -> Optional[Insight]:
        count = len(report.statistics.languages)
        if count > self.threshold:
            return Insight(
                INFO, f"Multi-language project detected with {count} different languages"
            )
        return None


class MostCommonFileTypeRule(InsightRule):
    """Names the most frequent suffix; ties go to the first suffix encountered."""

    def evaluate(self, report: AnalysisReport) -> Optional[Insight]:
        file_types = report.statistics.file_types
        if not file_types:
            return None
        # max() keeps the first maximal item in insertion order.
        suffix, count = max(file_types.items(), key=lambda item: item[1])
        return Insight(INFO, f"Most common file type: .{suffix} ({count} files)")


class LargeFilesRule(InsightRule):
    def __init__(self, threshold: int) -> None:
        self.threshold = threshold

    def evaluate(self, report: AnalysisReport) -> Optional[Insight]:
        total = report.summary.total_files
        if total <= 0:
            return None
        if report.statistics.total_size / total > self.threshold:
            return Insight(
                WARNING,
                "Some files are quite large. Consider splitting them for better maintainability.",
            )
        return None


class ComplexFilesRule(InsightRule):
    def __init__(self, threshold: int) -> None:
        self.threshold = threshold

    def evaluate(self, report: AnalysisReport) -> Optional[Insight]:
        complex_files = [
            analysis
            for analysis in report.files
            if analysis.metrics.function_count > self.threshold
        ]
        if complex_files:
            return Insight(
                WARNING,
                f"{len(complex_files)} file(s) have more than {self.threshold} functions. "
                "Consider refactoring.",
            )
        return None


def default_rules(config: InsightConfig | None = None) -> List[InsightRule]:
    """Return the built-in rules in evaluation order."""
    config = config or InsightConfig()
    return [
        EmptyCodebaseRule(),
        LargeCodebaseRule(config.large_codebase_files),
        MultiLanguageRule(config.multi_language_threshold),
        MostCommonFileTypeRule(),
        LargeFilesRule(config.large_average_file_bytes),
        ComplexFilesRule(config.complex_file_functions),
    ]


class InsightEngine:
    """Evaluates insight rules in a fixed order."""

    def __init__(
        self,
        rules: Sequence[InsightRule] | None = None,
        config: InsightConfig | None = None,
    ) -> None:
        self.rules = list(rules) if rules is not None else default_rules(config)

    def generate(self, report: AnalysisReport) -> List[Insight]:
        insights: List[Insight] = []
        for rule in self.rules:
            insight = rule.evaluate(report)
            if insight is None:
                continue
            insights.append(insight)
            if rule.terminal:
                break
        return insights


__all__ = [
    "ComplexFilesRule",
    "EmptyCodebaseRule",
    "InsightEngine",
    "LargeCodebaseRule",
    "LargeFilesRule",
    "MostCommonFileTypeRule",
    "MultiLanguageRule",
    "default_rules",
]
