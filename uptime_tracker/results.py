from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from uptime_tracker.models import ResultSet

FailureKind = Literal["transport", "http", "parse", "config", "superseded"]


@dataclass
class CheckOutcome:
    ok: bool
    seq: int
    results: ResultSet | None = None
    kind: FailureKind | None = None
    error: str | None = None

    @classmethod
    def success(cls, seq: int, results: ResultSet) -> CheckOutcome:
        return cls(ok=True, seq=seq, results=results)

    @classmethod
    def failure(cls, seq: int, kind: FailureKind, error: str) -> CheckOutcome:
        return cls(ok=False, seq=seq, kind=kind, error=error)
