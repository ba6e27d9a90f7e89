from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

FileKey: TypeAlias = str
"""Package-relative path of a source file, e.g. ``com/foo/Bar.java``."""

LineHits: TypeAlias = dict[int, int]
"""Zero-based line index -> hit flag (``0`` missed, ``1`` executed)."""

CoverageReport: TypeAlias = dict[FileKey, LineHits]
"""Sparse line coverage for every file in a report, in report order."""


@dataclass(frozen=True, slots=True)
class SourceReport:
    """Coverage for one source file, as submitted to Coveralls.

    ``coverage`` has one slot per physical line of the file; ``None`` marks
    lines without instrumentation data (blank lines, imports, comments).
    """

    name: str
    source_digest: str
    coverage: tuple[int | None, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "source_digest": self.source_digest,
            "coverage": list(self.coverage),
        }


__all__ = ["CoverageReport", "FileKey", "LineHits", "SourceReport"]
