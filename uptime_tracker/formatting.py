from __future__ import annotations

from typing import Iterable

from uptime_tracker.models import RegionResult


def format_response_time(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value} ms"


def format_region_line(result: RegionResult) -> str:
    line = f"{result.region}: {result.status}"
    # None means not measured; the suffix is omitted, not shown as "N/A".
    if result.response_time is not None:
        line += f" (Response Time: {format_response_time(result.response_time)})"
    return line


def format_results(results: Iterable[RegionResult]) -> list[str]:
    return [format_region_line(r) for r in results]
