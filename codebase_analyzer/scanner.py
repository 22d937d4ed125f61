"""Build a submission from a local directory tree."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, Tuple

from .logging import get_logger

_SKIPPED_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".venv",
        "venv",
        "node_modules",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".idea",
        ".vscode",
    }
)

_SKIPPED_FILES = frozenset({".DS_Store", "Thumbs.db"})

_BINARY_SNIFF_BYTES = 8192

logger = get_logger("scanner")


def _split_patterns(patterns: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate `dir/` patterns from file patterns."""
    dir_patterns: List[str] = []
    file_patterns: List[str] = []
    for raw in patterns:
        pattern = raw.strip().lstrip("/")
        if not pattern:
            continue
        if pattern.endswith("/"):
            dir_patterns.append(pattern.rstrip("/"))
        else:
            file_patterns.append(pattern)
    return dir_patterns, file_patterns


def _excluded(rel_path: str, patterns: Sequence[str]) -> bool:
    # Patterns with a slash match the whole relative path, others any single component.
    for pattern in patterns:
        if "/" in pattern:
            if fnmatchcase(rel_path, pattern):
                return True
        elif fnmatchcase(rel_path.rsplit("/", 1)[-1], pattern):
            return True
    return False


def _walk(root: Path, exclude_paths: Sequence[str]) -> Iterator[Tuple[str, Path]]:
    dir_patterns, file_patterns = _split_patterns(exclude_paths)
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        prefix = current.relative_to(root).as_posix() if current != root else ""

        dirnames[:] = [
            name
            for name in dirnames
            if name not in _SKIPPED_DIRS
            and not _excluded(f"{prefix}/{name}" if prefix else name, dir_patterns + file_patterns)
        ]

        for filename in filenames:
            if filename in _SKIPPED_FILES:
                continue
            rel_path = f"{prefix}/{filename}" if prefix else filename
            if _excluded(rel_path, file_patterns):
                continue
            yield rel_path, current / filename


def _is_binary(path: Path) -> bool:
    with path.open("rb") as handle:
        return b"\x00" in handle.read(_BINARY_SNIFF_BYTES)


def scan_directory(root: str | Path, exclude_paths: Sequence[str] = ()) -> List[Dict[str, str]]:
    """Return `{path, content}` records for the text files under *root*.

    ``exclude_paths`` holds glob patterns; a trailing ``/`` restricts a
    pattern to directories. Records are sorted by relative POSIX path.
    """
    root_path = Path(root).expanduser().resolve()
    if not root_path.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root}")

    records: List[Dict[str, str]] = []
    for rel_path, path in _walk(root_path, exclude_paths):
        if _is_binary(path):
            logger.debug("Skipping binary file %s", rel_path)
            continue
        records.append(
            {"path": rel_path, "content": path.read_text(encoding="utf-8", errors="replace")}
        )

    records.sort(key=lambda record: record["path"])
    logger.debug("Collected %d file(s) from %s", len(records), root_path)
    return records


__all__ = ["scan_directory"]
