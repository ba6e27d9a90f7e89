from __future__ import annotations

from typing import TYPE_CHECKING

from coveralls_jacoco._meta import logger
from coveralls_jacoco.errors import InvalidCoverageReportError
from coveralls_jacoco.report.xml_reader import read_root

if TYPE_CHECKING:
    from pathlib import Path

    from coveralls_jacoco.model import CoverageReport
    from coveralls_jacoco.report.types import ReportElement


def package_path(name: str) -> str:
    """Convert a package name to a slash-separated path: ``com.foo`` -> ``com/foo``."""
    return name.replace(".", "/")


def strip_root_package(path: str, root_path: str | None) -> str:
    """Remove *root_path* from the start of *path*.

    Paths that do not start with the prefix are returned unchanged, so
    ``strip_root_package("com/foo/bar", "com/foo")`` gives ``"/bar"``.
    """
    if root_path and path.startswith(root_path):
        return path[len(root_path) :]
    return path


def _required(elem: ReportElement, attr: str, report_path: Path) -> str:
    value = elem.get(attr)
    if value is None:
        msg = f"invalid coverage report {report_path}: <{elem.tag}> is missing the {attr!r} attribute"
        raise InvalidCoverageReportError(msg)
    return value


def _required_int(elem: ReportElement, attr: str, report_path: Path) -> int:
    raw = _required(elem, attr, report_path)
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"invalid coverage report {report_path}: <{elem.tag}> has non-numeric {attr}={raw!r}"
        raise InvalidCoverageReportError(msg) from exc


def read_coverage(root: ReportElement, report_path: Path, root_package: str | None = None) -> CoverageReport:
    """Collect line hits from the ``package`` elements directly below *root*."""
    root_path = package_path(root_package) if root_package else None

    coverage: CoverageReport = {}
    for pkg in root.findall("package"):
        path = strip_root_package(package_path(_required(pkg, "name", report_path)), root_path)

        for sf in pkg.findall("sourcefile"):
            key = f"{path}/{_required(sf, 'name', report_path)}"
            hits = coverage.setdefault(key, {})

            for line in sf.findall("line"):
                index = _required_int(line, "nr", report_path) - 1
                # jacoco reports covered instructions, not hit counts
                hits[index] = 1 if _required_int(line, "ci", report_path) > 0 else 0

    return coverage


def parse_report(report_path: Path, root_package: str | None = None) -> CoverageReport:
    """Parse the JaCoCo XML at *report_path* into a sparse coverage mapping.

    Keys are ``<package path>/<source file>`` with *root_package* (dot
    separated) stripped from the start of each package path. Values map
    zero-based line indexes to ``1`` (covered) or ``0`` (missed).
    """
    coverage = read_coverage(read_root(report_path), report_path, root_package)
    logger.info("parsed coverage at %s", report_path)
    return coverage


__all__ = ["package_path", "parse_report", "read_coverage", "strip_root_package"]
