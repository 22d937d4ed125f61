"""Normalization of heterogeneous submissions into file records."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Sequence, Union

from .logging import get_logger
from .models import FileRecord

RAW_TEXT_PATH = "file"
UNKNOWN_PATH = "unknown"

_PATH_FIELDS = ("path", "name")
_CONTENT_FIELDS = ("content", "code")

logger = get_logger("normalizer")


@dataclass(frozen=True)
class RawText:
    """Text that is not a structured document; analyzed as a single file."""

    text: str


@dataclass(frozen=True)
class RecordSequence:
    items: Sequence[Any]


@dataclass(frozen=True)
class SingleRecord:
    item: Mapping[str, Any]


@dataclass(frozen=True)
class EmptySubmission:
    """Shape that carries no files at all (e.g. ``None`` or a bare number)."""


Submission = Union[RawText, RecordSequence, SingleRecord, EmptySubmission]


def classify_submission(value: Any) -> Submission:
    """Return the tagged shape of a decoded submission value."""
    if isinstance(value, str):
        return _classify_text(value)
    if isinstance(value, (list, tuple)):
        return RecordSequence(value)
    if isinstance(value, Mapping):
        return SingleRecord(value)
    return EmptySubmission()


def _classify_text(text: str) -> Submission:
    try:
        parsed = json.loads(text)
    except ValueError:
        return RawText(text)
    if isinstance(parsed, list):
        return RecordSequence(parsed)
    if isinstance(parsed, dict):
        return SingleRecord(parsed)
    # Parsed scalars such as `42` become a one-element sequence of a non-record.
    return RecordSequence([parsed])


def normalize_submission(value: Any) -> List[FileRecord]:
    """Produce an ordered list of file records; never raises for any input shape."""
    shape = classify_submission(value)
    logger.debug("Submission classified as %s", type(shape).__name__)

    if isinstance(shape, RawText):
        return [FileRecord(path=RAW_TEXT_PATH, content=shape.text)]
    if isinstance(shape, RecordSequence):
        return [_to_record(item) for item in shape.items]
    if isinstance(shape, SingleRecord):
        return [_to_record(shape.item)]
    return []


def _to_record(item: Any) -> FileRecord:
    if not isinstance(item, Mapping):
        return FileRecord(path=UNKNOWN_PATH, content="")
    return FileRecord(
        path=_first_text(item, _PATH_FIELDS, UNKNOWN_PATH),
        content=_first_text(item, _CONTENT_FIELDS, ""),
    )


def _first_text(item: Mapping[str, Any], keys: Sequence[str], default: str) -> str:
    for key in keys:
        value = item.get(key)
        if isinstance(value, str) and value:
            return value
    return default


__all__ = [
    "EmptySubmission",
    "RawText",
    "RecordSequence",
    "SingleRecord",
    "Submission",
    "classify_submission",
    "normalize_submission",
]
