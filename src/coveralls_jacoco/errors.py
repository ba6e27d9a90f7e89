"""Centralised exception hierarchy for coveralls-jacoco."""

from __future__ import annotations


class CoverallsJacocoError(Exception):
    """Base class for all custom coveralls-jacoco exceptions."""


class CoverageReportError(CoverallsJacocoError):
    """Base class for errors related to JaCoCo report handling."""


class CoverageReportNotFoundError(CoverageReportError):
    """JaCoCo XML report could not be located or opened."""


class InvalidCoverageReportError(CoverageReportError):
    """JaCoCo XML report was found but does not contain a valid report."""


class ConfigError(CoverallsJacocoError):
    """The ``[tool.coveralls-jacoco]`` configuration is invalid."""


__all__ = [
    "ConfigError",
    "CoverageReportError",
    "CoverageReportNotFoundError",
    "CoverallsJacocoError",
    "InvalidCoverageReportError",
]
