"""Heuristic codebase analysis: per-file metrics, statistics and insights."""

from .models import (
    AnalysisReport,
    FileAnalysis,
    FileMetrics,
    FileRecord,
    Insight,
    Statistics,
    Summary,
)
from .orchestrator import AnalysisError, Orchestrator, analyze

__version__ = "1.0.0"

__all__ = [
    "AnalysisError",
    "AnalysisReport",
    "FileAnalysis",
    "FileMetrics",
    "FileRecord",
    "Insight",
    "Orchestrator",
    "Statistics",
    "Summary",
    "analyze",
]
