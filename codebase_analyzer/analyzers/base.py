"""Base classes for insight rules."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import AnalysisReport, Insight


class InsightRule(ABC):
    """Contract for rules that derive an advisory message from a report."""

    #: When True and the rule fires, no later rule is evaluated.
    terminal: bool = False

    @abstractmethod
    def evaluate(self, report: AnalysisReport) -> Optional[Insight]:
        """Return an insight when the rule's condition holds, else None."""
