from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from uptime_tracker.models import ResultSet


@dataclass
class UIState:
    loading: bool = False
    results: ResultSet | None = None
    request_seq: int = 0
    last_completed_seq: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "loading": self.loading,
            "results": (
                None
                if self.results is None
                else [r.model_dump(by_alias=True) for r in self.results]
            ),
            "request_seq": self.request_seq,
        }


class UIStateStore:
    """Owns the loading flag and the latest result set.

    Each ``begin()`` hands out a sequence number; only the holder of the
    latest number may complete the request; older completions are ignored.
    """

    def __init__(self) -> None:
        self._state = UIState()
        self._lock = threading.Lock()

    def begin(self) -> int:
        with self._lock:
            self._state.request_seq += 1
            self._state.loading = True
            return self._state.request_seq

    def succeed(self, seq: int, results: ResultSet) -> bool:
        with self._lock:
            if seq != self._state.request_seq:
                return False
            self._state.results = list(results)
            self._state.loading = False
            self._state.last_completed_seq = seq
            return True

    def fail(self, seq: int) -> bool:
        with self._lock:
            if seq != self._state.request_seq:
                return False
            self._state.loading = False
            self._state.last_completed_seq = seq
            return True

    def snapshot(self) -> UIState:
        with self._lock:
            return UIState(
                loading=self._state.loading,
                results=(
                    None if self._state.results is None else list(self._state.results)
                ),
                request_seq=self._state.request_seq,
                last_completed_seq=self._state.last_completed_seq,
            )
