from __future__ import annotations

import threading

from pydantic import ValidationError

from uptime_tracker.models import CheckRequest


class InputValidationError(ValueError):
    pass


class UrlForm:
    """Draft URL behind the page's input field.

    The draft survives submission so the field keeps showing what was
    checked last.
    """

    def __init__(self, value: str = "") -> None:
        self._value = value
        self._lock = threading.Lock()

    @property
    def value(self) -> str:
        with self._lock:
            return self._value

    def update_url(self, value: str) -> None:
        with self._lock:
            self._value = value

    def submit(self) -> CheckRequest:
        try:
            return CheckRequest(url=self.value)
        except ValidationError as exc:
            raise InputValidationError(exc.errors()[0]["msg"]) from exc
