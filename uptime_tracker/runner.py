from __future__ import annotations

import logging
import threading
from typing import Callable

from uptime_tracker.clients.uptime_client import UptimeClientError, post_check
from uptime_tracker.config import settings
from uptime_tracker.formatting import format_results
from uptime_tracker.models import CheckRequest, ResultSet
from uptime_tracker.notifier import GENERIC_ERROR_MESSAGE, BannerNotifier
from uptime_tracker.results import CheckOutcome
from uptime_tracker.state import UIStateStore

logger = logging.getLogger(__name__)

CheckClient = Callable[[CheckRequest], ResultSet]


def default_client(request: CheckRequest) -> ResultSet:
    return post_check(
        request,
        endpoint=settings.UPTIME_API_URL,
        timeout_s=settings.UPTIME_API_TIMEOUT_SECONDS,
    )


def begin_check(store: UIStateStore, notifier: BannerNotifier) -> int:
    # A new submission resets the page: the previous error no longer applies.
    notifier.dismiss()
    return store.begin()


def _superseded(seq: int) -> CheckOutcome:
    logger.info("Discarding response for superseded check #%s", seq)
    return CheckOutcome.failure(seq, "superseded", "superseded by a newer check")


def run_check(
    request: CheckRequest,
    store: UIStateStore,
    notifier: BannerNotifier,
    client: CheckClient = default_client,
    seq: int | None = None,
) -> CheckOutcome:
    if seq is None:
        seq = begin_check(store, notifier)
    logger.info("Check #%s started for %s", seq, request.url)

    try:
        results = client(request)
    except UptimeClientError as exc:
        logger.error("Check #%s for %s failed (%s): %s", seq, request.url, exc.kind, exc)
        if not store.fail(seq):
            return _superseded(seq)
        notifier.send_error(GENERIC_ERROR_MESSAGE)
        return CheckOutcome.failure(seq, exc.kind, str(exc))
    except Exception as exc:
        logger.exception("Check #%s for %s crashed", seq, request.url)
        if not store.fail(seq):
            return _superseded(seq)
        notifier.send_error(GENERIC_ERROR_MESSAGE)
        return CheckOutcome.failure(seq, "transport", f"{exc.__class__.__name__}: {exc}")

    if not store.succeed(seq, results):
        return _superseded(seq)
    logger.info("Check #%s for %s returned %d region(s)", seq, request.url, len(results))
    logger.debug("Check #%s results: %s", seq, "; ".join(format_results(results)))
    return CheckOutcome.success(seq, results)


def start_check(
    request: CheckRequest,
    store: UIStateStore,
    notifier: BannerNotifier,
    client: CheckClient = default_client,
) -> int:
    # Enter Loading before the thread starts so the next page render sees it.
    seq = begin_check(store, notifier)
    t = threading.Thread(
        target=run_check,
        args=(request, store, notifier, client, seq),
        name=f"uptime-check-{seq}",
        daemon=True,
    )
    t.start()
    return seq
