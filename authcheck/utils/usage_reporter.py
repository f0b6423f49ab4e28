import logging
from concurrent.futures import Future, ThreadPoolExecutor

import requests

from authcheck.models.report import AuthenticationReport

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="usage-log")


def build_log_payload(report: AuthenticationReport) -> dict:
    payload = report.to_dict()
    body = {"results": payload["results"], "score": payload["score"]}
    if report.email:
        body["email"] = report.email
    body["domain"] = report.domain
    return body


def _post(endpoint: str, payload: dict) -> None:
    resp = requests.post(endpoint, json=payload, timeout=10)
    resp.raise_for_status()


def _log_failure(future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.warning("Usage log dispatch failed: %s", exc)


def dispatch_report(endpoint: str | None, report: AuthenticationReport) -> Future | None:
    """Send the report to the usage log endpoint without waiting for it.

    Failures are only logged; they never reach the caller.
    """
    if not endpoint:
        return None
    future = _executor.submit(_post, endpoint, build_log_payload(report))
    future.add_done_callback(_log_failure)
    return future
