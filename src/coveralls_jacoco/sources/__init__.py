from coveralls_jacoco.sources.reconcile import (
    build_coverage,
    count_lines,
    find_source_file,
    reconcile,
    relative_name,
    source_digest,
)

__all__ = [
    "build_coverage",
    "count_lines",
    "find_source_file",
    "reconcile",
    "relative_name",
    "source_digest",
]
