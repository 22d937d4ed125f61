from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Iterator

import pytest

from codebase_analyzer.orchestrator import Orchestrator

FIXED_MOMENT = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)


@pytest.fixture
def orchestrator() -> Orchestrator:
    """Orchestrator with a frozen clock so reports compare equal across runs."""
    return Orchestrator(clock=lambda: FIXED_MOMENT)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    # CLI tests install stream handlers bound to captured streams.
    yield
    logger = logging.getLogger("codebase_analyzer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
