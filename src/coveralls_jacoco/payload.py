from __future__ import annotations

import json
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING, Any

from jsonschema import validate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coveralls_jacoco.model import SourceReport


@cache
def get_schema() -> dict[str, object]:
    """Load and cache the JSON schema for the ``source_files`` payload."""
    return json.loads(resources.files("coveralls_jacoco.data").joinpath("schema.json").read_text(encoding="utf-8"))


def build_payload(reports: Iterable[SourceReport]) -> dict[str, Any]:
    return {"source_files": [r.to_dict() for r in reports]}


def render_payload(reports: Iterable[SourceReport]) -> str:
    """Serialise *reports* as the ``source_files`` part of a Coveralls job."""
    payload = build_payload(reports)
    validate(payload, get_schema())
    return json.dumps(payload, indent=2)


__all__ = ["build_payload", "get_schema", "render_payload"]
