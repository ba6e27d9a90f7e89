from __future__ import annotations

from typing import TYPE_CHECKING

from defusedxml import DefusedXmlException, ElementTree

from coveralls_jacoco.errors import CoverageReportNotFoundError, InvalidCoverageReportError

if TYPE_CHECKING:
    from pathlib import Path

    from coveralls_jacoco.report.types import ReportElement


def read_root(path: Path) -> ReportElement:
    """Parse a JaCoCo XML report and return the root element.

    JaCoCo writes a ``<!DOCTYPE report ...>`` header pointing at ``report.dtd``.
    The DTD is never fetched; entity declarations and external references are
    rejected outright.
    """
    try:
        with path.open("rb") as f:
            tree = ElementTree.parse(f, forbid_dtd=False, forbid_entities=True, forbid_external=True)
    except FileNotFoundError as exc:
        msg = f"coverage report not found: {path}"
        raise CoverageReportNotFoundError(msg) from exc
    except OSError as exc:
        msg = f"failed to read coverage report {path}: {exc}"
        raise CoverageReportNotFoundError(msg) from exc
    except (ElementTree.ParseError, DefusedXmlException) as exc:
        msg = f"invalid coverage report {path}: {exc}"
        raise InvalidCoverageReportError(msg) from exc
    return tree.getroot()


__all__ = ["read_root"]
