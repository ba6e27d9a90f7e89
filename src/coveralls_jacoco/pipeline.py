from __future__ import annotations

from typing import TYPE_CHECKING

from coveralls_jacoco._meta import logger
from coveralls_jacoco.config import load_settings, resolve_report_path, resolve_source_roots
from coveralls_jacoco.errors import ConfigError, CoverageReportNotFoundError, InvalidCoverageReportError
from coveralls_jacoco.report import parse_report
from coveralls_jacoco.sources import reconcile

if TYPE_CHECKING:
    from pathlib import Path

    from coveralls_jacoco.config import Settings
    from coveralls_jacoco.model import SourceReport


class PipelineError(Exception):
    """Base class for errors emitted by the pipeline."""


class NoInputError(PipelineError):
    """JaCoCo XML report was missing or could not be read."""


class DataError(PipelineError):
    """JaCoCo XML data is malformed or could not be parsed."""


class ConfigurationError(PipelineError):
    """Project configuration is invalid."""


def resolve_settings(project_root: Path, settings: Settings | None = None) -> Settings:
    if settings is not None:
        return settings
    try:
        return load_settings(project_root)
    except ConfigError as exc:
        raise ConfigurationError(str(exc)) from exc


def collect_source_reports(project_root: Path, settings: Settings | None = None) -> list[SourceReport]:
    """Parse the configured JaCoCo report and reconcile it with the project's sources."""
    settings = resolve_settings(project_root, settings)

    source_roots = resolve_source_roots(settings, project_root)
    if not source_roots:
        logger.info("no source directories configured, nothing to report")
        return []

    report_path = resolve_report_path(settings, project_root)
    try:
        coverage = parse_report(report_path, settings.root_package)
    except CoverageReportNotFoundError as exc:
        raise NoInputError(str(exc)) from exc
    except InvalidCoverageReportError as exc:
        raise DataError(str(exc)) from exc

    return reconcile(coverage, source_roots, project_root)


__all__ = [
    "ConfigurationError",
    "DataError",
    "NoInputError",
    "PipelineError",
    "collect_source_reports",
    "resolve_settings",
]
