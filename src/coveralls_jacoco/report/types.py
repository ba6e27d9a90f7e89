from __future__ import annotations

from typing import Protocol


class ReportElement(Protocol):
    """A node of a parsed JaCoCo report (``report``, ``package``, ``sourcefile`` or ``line``)."""

    tag: str

    def findall(self, path: str) -> list[ReportElement]: ...

    def get(self, key: str) -> str | None: ...


__all__ = ["ReportElement"]
