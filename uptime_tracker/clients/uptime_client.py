from __future__ import annotations

import requests
from pydantic import ValidationError

from uptime_tracker.models import RESULT_SET_ADAPTER, CheckRequest, ResultSet


class UptimeClientError(RuntimeError):
    kind = "transport"


class UptimeHTTPError(UptimeClientError):
    kind = "http"

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResultParseError(UptimeClientError):
    kind = "parse"


class UptimeConfigError(UptimeClientError):
    kind = "config"


def _snippet(text: str) -> str:
    return text[:240].replace("\n", "\\n")


def post_check(
    request: CheckRequest,
    *,
    endpoint: str | None,
    timeout_s: float | None = None,
) -> ResultSet:
    if not endpoint:
        raise UptimeConfigError("UPTIME_API_URL is not configured")

    try:
        resp = requests.post(endpoint, json={"url": request.url}, timeout=timeout_s)
    except requests.Timeout as exc:
        raise UptimeClientError(f"Uptime API timed out after {timeout_s}s") from exc
    except requests.ConnectionError as exc:
        raise UptimeClientError(
            f"Uptime API connection error: {exc.__class__.__name__}: {exc}"
        ) from exc
    except requests.RequestException as exc:
        raise UptimeClientError(
            f"Failed to reach uptime API: {exc.__class__.__name__}: {exc}"
        ) from exc

    if not 200 <= resp.status_code < 300:
        raise UptimeHTTPError(
            f"Uptime API returned HTTP {resp.status_code}: {_snippet(resp.text)}",
            status_code=resp.status_code,
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ResultParseError(
            f"Uptime API returned invalid JSON: {_snippet(resp.text)}"
        ) from exc

    try:
        return RESULT_SET_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise ResultParseError(
            f"Uptime API returned an unexpected payload: {exc.error_count()} error(s), "
            f"first: {exc.errors()[0]['msg']}"
        ) from exc
