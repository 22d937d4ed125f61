"""Aggregate roll-up of per-file results."""

from __future__ import annotations

from typing import Iterable

from ..models import FileAnalysis, Statistics


def fold_statistics(analyses: Iterable[FileAnalysis]) -> Statistics:
    """Sum sizes and count file types and languages across all analyses.

    Mapping keys keep first-encountered order, which the most-common file
    type insight relies on for tie-breaks.
    """
    statistics = Statistics()
    for analysis in analyses:
        statistics.total_lines += analysis.lines
        statistics.total_size += analysis.size
        if analysis.file_type:
            statistics.file_types[analysis.file_type] = (
                statistics.file_types.get(analysis.file_type, 0) + 1
            )
        statistics.languages[analysis.language] = (
            statistics.languages.get(analysis.language, 0) + 1
        )
    return statistics


__all__ = ["fold_statistics"]
