"""Pipeline orchestration: normalize, extract, aggregate, synthesize insights."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Callable, List

from .analyzers import InsightEngine, MetricsExtractor, fold_statistics
from .config import AnalyzerSettings
from .logging import get_logger
from .models import AnalysisReport, FileAnalysis, Summary
from .normalizer import normalize_submission

Clock = Callable[[], datetime]


class AnalysisError(RuntimeError):
    """Raised when the pipeline hits an unrecoverable internal fault."""


def _utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Orchestrator:
    """Coordinates the analysis pipeline for a single submission.

    Instances hold only configuration and stateless collaborators, so one
    orchestrator may serve concurrent calls.
    """

    def __init__(
        self,
        settings: AnalyzerSettings | None = None,
        extractor: MetricsExtractor | None = None,
        insight_engine: InsightEngine | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings or AnalyzerSettings()
        self.extractor = extractor or MetricsExtractor()
        self.insight_engine = insight_engine or InsightEngine(config=self.settings.insights)
        self.clock = clock or _utc_now
        self.logger = get_logger("orchestrator")

    def analyze(self, submission: Any) -> AnalysisReport:
        """Analyze a submission of any shape and return the full report."""
        try:
            return self._run(submission)
        except AnalysisError:
            raise
        except Exception as exc:
            self.logger.debug("Analysis aborted", exc_info=True)
            raise AnalysisError(f"Codebase analysis failed: {exc}") from exc

    def _run(self, submission: Any) -> AnalysisReport:
        records = normalize_submission(submission)
        self.logger.info("Analyzing %d file(s)", len(records))

        files: List[FileAnalysis] = []
        for record in records:
            analysis = self.extractor.extract(record.path, record.content)
            self.logger.debug(
                "Analyzed %s: %d lines, %d bytes, language=%s",
                analysis.path,
                analysis.lines,
                analysis.size,
                analysis.language,
            )
            files.append(analysis)

        report = AnalysisReport(
            summary=Summary(
                total_files=len(records),
                analyzed_at=format_timestamp(self.clock()),
            ),
            files=files,
            statistics=fold_statistics(files),
        )
        report.insights = self.insight_engine.generate(report)
        self.logger.info(
            "Analysis complete: %d lines, %d insight(s)",
            report.statistics.total_lines,
            len(report.insights),
        )
        return report


def analyze(submission: Any) -> AnalysisReport:
    """Analyze a submission with default settings."""
    return Orchestrator().analyze(submission)


__all__ = ["AnalysisError", "Orchestrator", "analyze", "format_timestamp"]
