from __future__ import annotations

from datetime import datetime
from html import escape
from typing import Iterable

from uptime_tracker.formatting import format_response_time
from uptime_tracker.models import RegionResult
from uptime_tracker.notifier import Notice
from uptime_tracker.state import UIState

APP_TITLE = "Global Uptime Tracker"

STYLE = """
body{font-family:sans-serif;margin:24px;max-width:720px}
header h1{margin-bottom:4px}
form{display:flex;gap:8px;margin:16px 0}
form input{flex:1;padding:6px}
.hint{color:#a33;font-size:12px}
.notice{display:flex;justify-content:space-between;align-items:center;border:1px solid #f5c2c7;background:#ffebe6;border-radius:8px;padding:8px 12px}
.notice form{margin:0}
.loading{color:#555}
.results li{margin:4px 0}
footer{margin-top:32px;color:#666;font-size:12px}
"""


def render_region_item(result: RegionResult) -> str:
    line = f"<strong>{escape(result.region)}:</strong> {escape(result.status)}"
    if result.response_time is not None:
        line += f" (Response Time: {escape(format_response_time(result.response_time))})"
    return f'<li data-region="{escape(result.region)}">{line}</li>'


def render_results_html(results: Iterable[RegionResult]) -> str:
    items = "".join(render_region_item(r) for r in results)
    return f'<div class="results"><h2>Uptime Results:</h2><ul>{items}</ul></div>'


def render_notice_html(notice: Notice | None) -> str:
    if notice is None:
        return ""
    return (
        f'<div class="notice" role="alert" data-notice-id="{notice.id}">'
        f"<span>{escape(notice.message)}</span>"
        '<form method="post" action="/notice/dismiss">'
        f'<input type="hidden" name="notice_id" value="{notice.id}">'
        '<button type="submit" aria-label="Dismiss">Dismiss</button>'
        "</form></div>"
    )


def render_form_html(draft: str, invalid_message: str | None = None) -> str:
    hint = (
        f'<div class="hint">{escape(invalid_message)}</div>' if invalid_message else ""
    )
    return (
        '<form method="post" action="/check">'
        f'<input type="url" name="url" value="{escape(draft)}" '
        'placeholder="Enter website URL" required>'
        '<button type="submit">Check Uptime</button>'
        f"</form>{hint}"
    )


def render_page(
    state: UIState,
    notice: Notice | None = None,
    draft: str = "",
    invalid_message: str | None = None,
    refresh_seconds: int = 2,
    year: int | None = None,
) -> str:
    year = year or datetime.now().year
    refresh = (
        f'<meta http-equiv="refresh" content="{int(refresh_seconds)}">'
        if state.loading
        else ""
    )
    parts = [
        f'<!doctype html><html><head><meta charset="utf-8">{refresh}',
        f"<title>{APP_TITLE}</title><style>{STYLE}</style></head>",
        f'<body><div class="App"><header><h1>{APP_TITLE}</h1></header>',
        render_notice_html(notice),
        render_form_html(draft, invalid_message),
    ]
    if state.loading:
        parts.append('<p class="loading">Checking uptime...</p>')
    if state.results is not None:
        parts.append(render_results_html(state.results))
    parts.append(f"<footer><p>&copy; {year} {APP_TITLE}</p></footer></div></body></html>")
    return "".join(parts)
