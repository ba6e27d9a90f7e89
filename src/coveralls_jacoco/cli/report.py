from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from coveralls_jacoco._meta import logger
from coveralls_jacoco.cli.exit_codes import (
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_GENERIC,
    EXIT_NOINPUT,
    EXIT_OK,
)
from coveralls_jacoco.config import LOG_FORMAT
from coveralls_jacoco.io import write_output
from coveralls_jacoco.payload import render_payload
from coveralls_jacoco.pipeline import (
    ConfigurationError,
    DataError,
    NoInputError,
    collect_source_reports,
    resolve_settings,
)

_BOOL_FALSE = False


def _configure_runtime(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.debug("debug logging enabled")


def report_cmd(
    project_root: Annotated[
        Path,
        typer.Option(
            "--project-root",
            help="Project directory; file names in the output are relative to it.",
            file_okay=False,
        ),
    ] = Path(),
    report: Annotated[
        str | None,
        typer.Option("--report", help="JaCoCo XML report, relative to the project root."),
    ] = None,
    root_package: Annotated[
        str | None,
        typer.Option("--root-package", help="Dot-separated package prefix to strip from report paths."),
    ] = None,
    source_sets: Annotated[
        list[str] | None,
        typer.Option("--source-set", help="Source set to search, e.g. 'main' (repeatable)."),
    ] = None,
    source_dirs: Annotated[
        list[str] | None,
        typer.Option("--source-dir", help="Source directory to search; overrides --source-set (repeatable)."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Emit diagnostic logging."),
    ] = _BOOL_FALSE,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Suppress INFO logs, emit only errors."),
    ] = _BOOL_FALSE,
) -> None:
    """Reconcile a JaCoCo report with the project sources and print the source_files payload."""
    _configure_runtime(quiet=quiet, verbose=verbose)

    try:
        settings = resolve_settings(project_root).override(
            report_path=report,
            root_package=root_package,
            source_sets=source_sets,
            source_dirs=source_dirs,
        )
        reports = collect_source_reports(project_root, settings)
    except ConfigurationError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc
    except NoInputError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except DataError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    except OSError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_GENERIC) from exc

    write_output(render_payload(reports), output)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("report")(report_cmd)


__all__ = ["register", "report_cmd"]
