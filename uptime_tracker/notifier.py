from __future__ import annotations

import threading
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

GENERIC_ERROR_MESSAGE = "Error checking uptime. Please try again."


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Notice:
    id: int
    level: str
    message: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class BannerNotifier:
    """Holds the one dismissible banner shown above the results.

    Raising a new notice replaces the previous one; nothing blocks while a
    notice is displayed.
    """

    def __init__(self) -> None:
        self._current: Notice | None = None
        self._next_id = 1
        self._lock = threading.Lock()

    def send_error(self, message: str = GENERIC_ERROR_MESSAGE) -> Notice:
        with self._lock:
            notice = Notice(
                id=self._next_id,
                level="error",
                message=message,
                created_at=now_iso(),
            )
            self._next_id += 1
            self._current = notice
            return notice

    def current(self) -> Notice | None:
        with self._lock:
            return self._current

    def dismiss(self, notice_id: int | None = None) -> bool:
        with self._lock:
            if self._current is None:
                return False
            if notice_id is not None and notice_id != self._current.id:
                return False
            self._current = None
            return True
