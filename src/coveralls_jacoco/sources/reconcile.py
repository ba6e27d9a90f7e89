"""Match report entries to files on disk and build per-file coverage."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import TYPE_CHECKING

from coveralls_jacoco._meta import logger
from coveralls_jacoco.model import SourceReport

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from coveralls_jacoco.model import CoverageReport, FileKey


def find_source_file(key: FileKey, source_roots: Sequence[Path]) -> Path | None:
    """Return ``root/key`` for the first root in which it exists, else ``None``."""
    # keys start with "/" when the whole package was stripped as root package
    parts = [p for p in key.split("/") if p]
    for root in source_roots:
        candidate = root.joinpath(*parts)
        if candidate.is_file():
            return candidate
    return None


def count_lines(content: bytes) -> int:
    """Number of physical lines; an unterminated last line still counts."""
    return len(content.splitlines())


def source_digest(content: bytes) -> str:
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


def relative_name(path: Path, project_root: Path) -> str:
    """Return *path* relative to *project_root* using forward slashes.

    Symlinks are not followed when the file was reached through *project_root*,
    so a linked source directory keeps its in-project name. Names are plain
    paths, never percent-encoded: ``My Dir/A.java`` stays as is. Files outside
    the project root keep their absolute path.
    """
    try:
        return Path(os.path.abspath(path)).relative_to(os.path.abspath(project_root)).as_posix()
    except ValueError:
        pass
    resolved = path.resolve()
    try:
        return resolved.relative_to(project_root.resolve()).as_posix()
    except ValueError:
        return resolved.as_posix()


def build_coverage(hits: Mapping[int, int], line_count: int, *, name: str = "") -> tuple[int | None, ...]:
    """Spread sparse *hits* over a dense array of *line_count* slots."""
    coverage: list[int | None] = [None] * line_count
    for index, hit in hits.items():
        if 0 <= index < line_count:
            coverage[index] = hit
        else:
            logger.debug("%s: ignoring line %d beyond end of file (%d lines)", name, index + 1, line_count)
    return tuple(coverage)


def reconcile(
    coverage_report: CoverageReport,
    source_roots: Sequence[Path],
    project_root: Path,
) -> list[SourceReport]:
    """Resolve every report entry against *source_roots* in order.

    The first root containing a file wins. Entries with no matching file are
    logged and skipped; the result keeps the report's key order.
    """
    if not source_roots:
        return []

    logger.info("using source directories: %s", ", ".join(str(r) for r in source_roots))

    reports: list[SourceReport] = []
    skipped = 0
    for key, hits in coverage_report.items():
        path = find_source_file(key, source_roots)
        if path is None:
            logger.info("%s could not be found in any of the source directories, skipping", key)
            skipped += 1
            continue

        logger.debug("found file: %s", path)
        content = path.read_bytes()
        name = relative_name(path, project_root)
        reports.append(
            SourceReport(
                name=name,
                source_digest=source_digest(content),
                coverage=build_coverage(hits, count_lines(content), name=name),
            )
        )

    logger.info("reporting %d source files, %d not reportable", len(reports), skipped)
    return reports


__all__ = [
    "build_coverage",
    "count_lines",
    "find_source_file",
    "reconcile",
    "relative_name",
    "source_digest",
]
