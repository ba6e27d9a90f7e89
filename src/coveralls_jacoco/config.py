"""Project configuration read from ``[tool.coveralls-jacoco]`` in ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING

from coveralls_jacoco._meta import logger
from coveralls_jacoco.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

CONFIG_TABLE = "coveralls-jacoco"

DEFAULT_REPORT_PATH = "build/reports/jacoco/test/jacocoTestReport.xml"
DEFAULT_SOURCE_SETS: tuple[str, ...] = ("main",)

# Gradle source-set layout: src/<name>/java, plus src/<name>/kotlin with the kotlin plugin.
SOURCE_SET_LANGUAGES: tuple[str, ...] = ("java", "kotlin")


@dataclass(frozen=True, slots=True)
class Settings:
    """Inputs to a single reconciliation run."""

    report_path: str = DEFAULT_REPORT_PATH
    root_package: str | None = None
    source_sets: tuple[str, ...] = DEFAULT_SOURCE_SETS
    # explicit directories take precedence over source_sets
    source_dirs: tuple[str, ...] | None = None

    def override(
        self,
        *,
        report_path: str | None = None,
        root_package: str | None = None,
        source_sets: Sequence[str] | None = None,
        source_dirs: Sequence[str] | None = None,
    ) -> Settings:
        """Return a copy with every non-``None`` argument applied."""
        changes: dict[str, object] = {}
        if report_path is not None:
            changes["report_path"] = report_path
        if root_package is not None:
            changes["root_package"] = root_package
        if source_sets:
            changes["source_sets"] = tuple(source_sets)
        if source_dirs:
            changes["source_dirs"] = tuple(source_dirs)
        return replace(self, **changes)


def _str_option(table: dict[str, object], key: str) -> str | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"[tool.{CONFIG_TABLE}] {key} must be a string, got {type(value).__name__}"
        raise ConfigError(msg)
    return value


def _str_list_option(table: dict[str, object], key: str) -> tuple[str, ...] | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"[tool.{CONFIG_TABLE}] {key} must be a list of strings"
        raise ConfigError(msg)
    return tuple(value)


def settings_from_table(table: dict[str, object]) -> Settings:
    """Build :class:`Settings` from the contents of a ``[tool.coveralls-jacoco]`` table."""
    settings = Settings()
    report_path = _str_option(table, "report_path")
    root_package = _str_option(table, "root_package")
    source_sets = _str_list_option(table, "source_sets")
    source_dirs = _str_list_option(table, "source_dirs")

    known = {"report_path", "root_package", "source_sets", "source_dirs"}
    unknown = sorted(set(table) - known)
    if unknown:
        logger.warning("ignoring unknown [tool.%s] keys: %s", CONFIG_TABLE, ", ".join(unknown))

    return replace(
        settings,
        report_path=report_path or settings.report_path,
        root_package=root_package or None,
        source_sets=settings.source_sets if source_sets is None else source_sets,
        # an explicit empty list is kept: it means "nothing to report"
        source_dirs=source_dirs,
    )


def load_settings(project_root: Path) -> Settings:
    """Read settings from ``<project_root>/pyproject.toml``.

    A missing or unparsable file yields the defaults.
    """
    pyproject = project_root / "pyproject.toml"
    if not pyproject.is_file():
        return Settings()
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return Settings()

    table = data.get("tool", {}).get(CONFIG_TABLE)
    if table is None:
        return Settings()
    if not isinstance(table, dict):
        msg = f"[tool.{CONFIG_TABLE}] in {pyproject} must be a table"
        raise ConfigError(msg)
    logger.debug("using configuration from %s", pyproject)
    return settings_from_table(table)


def resolve_report_path(settings: Settings, project_root: Path) -> Path:
    return project_root / settings.report_path


def resolve_source_roots(settings: Settings, project_root: Path) -> list[Path]:
    """Ordered, de-duplicated list of directories to search for sources."""
    if settings.source_dirs is not None:
        candidates = [project_root / d for d in settings.source_dirs]
    else:
        candidates = [
            project_root / "src" / name / language
            for name in settings.source_sets
            for language in SOURCE_SET_LANGUAGES
        ]

    roots: list[Path] = []
    for candidate in candidates:
        if candidate not in roots:
            roots.append(candidate)
    return roots


__all__ = [
    "CONFIG_TABLE",
    "DEFAULT_REPORT_PATH",
    "DEFAULT_SOURCE_SETS",
    "LOG_FORMAT",
    "Settings",
    "load_settings",
    "resolve_report_path",
    "resolve_source_roots",
    "settings_from_table",
]
