import logging

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from uptime_tracker.api_schemas import (
    CheckOutcomeResponse,
    CheckRequestBody,
    ConfigResponse,
    HealthResponse,
    NoticeDismissRequest,
    NoticeDismissResponse,
    UIStateResponse,
)
from uptime_tracker.config import settings
from uptime_tracker.forms import InputValidationError, UrlForm
from uptime_tracker.models import CheckRequest
from uptime_tracker.notifier import GENERIC_ERROR_MESSAGE, BannerNotifier
from uptime_tracker.runner import run_check, start_check
from uptime_tracker.state import UIStateStore
from uptime_tracker.ui import render_page

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

store = UIStateStore()
notifier = BannerNotifier()
form = UrlForm()

app = FastAPI(
    title="Global Uptime Tracker",
    version="1.0.0",
    description=(
        "Submit a website URL, forward it to the configured uptime-checking "
        "service, and show the per-region results."
    ),
)


def _page(invalid_message: str | None = None, status_code: int = 200) -> HTMLResponse:
    html = render_page(
        store.snapshot(),
        notice=notifier.current(),
        draft=form.value,
        invalid_message=invalid_message,
        refresh_seconds=settings.UI_REFRESH_SECONDS,
    )
    return HTMLResponse(html, status_code=status_code)


@app.get("/", response_class=HTMLResponse, tags=["page"], summary="Uptime Tracker Page")
def index():
    return _page()


@app.post(
    "/check",
    response_class=HTMLResponse,
    tags=["page"],
    summary="Submit URL From Page",
    description="Starts a check in the background and redirects back to the page.",
)
def check_submit(url: str = Form(default="")):
    form.update_url(url)
    try:
        request = form.submit()
    except InputValidationError as exc:
        logger.info("Rejected URL input %r: %s", url, exc)
        return _page(invalid_message="Enter a valid website URL.", status_code=422)

    start_check(request, store, notifier)
    return RedirectResponse("/", status_code=303)


@app.post("/notice/dismiss", response_class=HTMLResponse, tags=["page"], summary="Dismiss Notice")
def notice_dismiss_submit(notice_id: int | None = Form(default=None)):
    notifier.dismiss(notice_id)
    return RedirectResponse("/", status_code=303)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Returns non-secret runtime config values.",
)
def config():
    return {
        "uptime_api_url": settings.UPTIME_API_URL,
        "uptime_api_timeout_seconds": settings.UPTIME_API_TIMEOUT_SECONDS,
        "ui_refresh_seconds": settings.UI_REFRESH_SECONDS,
    }


@app.get(
    "/api/state",
    response_model=UIStateResponse,
    tags=["api"],
    summary="Current UI State",
    description="Loading flag, latest results and the active notice, if any.",
)
def api_state():
    payload = store.snapshot().to_dict()
    notice = notifier.current()
    payload["notice"] = notice.to_dict() if notice else None
    return payload


@app.post(
    "/api/check",
    response_model=CheckOutcomeResponse,
    tags=["api"],
    summary="Run Uptime Check",
    description=(
        "Runs one check and waits for it. Failures come back as ok=false with a "
        "generic message; the detail is only logged."
    ),
)
def api_check(body: CheckRequestBody):
    try:
        request = CheckRequest(url=body.url)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors()[0]["msg"]) from exc

    outcome = run_check(request, store, notifier)
    return {
        "ok": outcome.ok,
        "seq": outcome.seq,
        "results": (
            None
            if outcome.results is None
            else [r.model_dump(by_alias=True) for r in outcome.results]
        ),
        "kind": outcome.kind,
        "error": None if outcome.ok else GENERIC_ERROR_MESSAGE,
    }


@app.post(
    "/api/notice/dismiss",
    response_model=NoticeDismissResponse,
    tags=["api"],
    summary="Dismiss Notice",
)
def api_notice_dismiss(body: NoticeDismissRequest):
    return {"dismissed": notifier.dismiss(body.notice_id)}
