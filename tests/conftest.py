from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

# package name -> sourcefile name -> {line number: covered instructions}
PackagesSpec = Mapping[str, Mapping[str, Mapping[int, int]]]

JACOCO_DOCTYPE = '<!DOCTYPE report PUBLIC "-//JACOCO//DTD Report 1.1//EN" "report.dtd">'


def jacoco_xml(packages: PackagesSpec | Sequence[tuple[str, Mapping[str, Mapping[int, int]]]]) -> str:
    """Build a minimal JaCoCo report; a sequence of pairs allows repeated package names."""
    items = packages.items() if isinstance(packages, Mapping) else packages
    parts: list[str] = []
    for pkg, files in items:
        sourcefiles = []
        for name, lines in files.items():
            lines_xml = "".join(
                f'<line nr="{nr}" mi="{0 if ci else 1}" ci="{ci}" mb="0" cb="0"/>' for nr, ci in lines.items()
            )
            sourcefiles.append(f'<sourcefile name="{name}">{lines_xml}</sourcefile>')
        parts.append(f'<package name="{pkg}">{"".join(sourcefiles)}</package>')
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f"{JACOCO_DOCTYPE}"
        f'<report name="demo">{"".join(parts)}</report>'
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def jacoco_report(tmp_path: Path) -> Callable[..., Path]:
    def write(packages: PackagesSpec, *, filename: str = "jacoco.xml") -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(jacoco_xml(packages), encoding="utf-8")
        return path

    return write


@pytest.fixture
def source_file(tmp_path: Path) -> Callable[..., Path]:
    def write(relpath: str, content: str | bytes) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return write
