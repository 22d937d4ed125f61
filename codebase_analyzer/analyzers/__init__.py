"""Classification, metric, statistics and insight components of the pipeline."""

from __future__ import annotations

from .base import InsightRule
from .classifier import FileClassifier, UNKNOWN_LANGUAGE, file_type
from .insights import InsightEngine, default_rules
from .metrics import MetricsExtractor
from .statistics import fold_statistics

__all__ = [
    "FileClassifier",
    "InsightEngine",
    "InsightRule",
    "MetricsExtractor",
    "UNKNOWN_LANGUAGE",
    "default_rules",
    "file_type",
    "fold_statistics",
]
