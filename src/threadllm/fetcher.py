"""Reddit thread JSON fetch using httpx."""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from tenacity import Retrying, stop_after_attempt, wait_exponential

from threadllm.settings import Settings
from threadllm.urls import thread_json_url

RETRY_STATUSES = (429, 503)


def _should_retry(retry_state) -> bool:
    exc = retry_state.outcome.exception()
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code in RETRY_STATUSES


def _get_json(client: httpx.Client, url: str, log: structlog.stdlib.BoundLogger) -> Any:
    resp = client.get(url, params={"raw_json": 1})
    if resp.status_code == 429:
        log.warning("reddit.429", url=url, retry_after=resp.headers.get("retry-after"))
    resp.raise_for_status()
    return resp.json()


def fetch_thread_json(
    client: httpx.Client,
    thread_id: str,
    settings: Settings,
    log: structlog.stdlib.BoundLogger,
) -> Any:
    """GET the thread listing pair with unescaped text.

    Raises httpx.HTTPStatusError on a non-2xx response and httpx.TransportError when
    the request can't complete. 429/503 are retried only when max_attempts > 1.
    """
    url = thread_json_url(settings.base_url, thread_id)
    max_wait = settings.retry_max_wait
    retryer = Retrying(
        retry=_should_retry,
        stop=stop_after_attempt(max(1, settings.max_attempts)),
        wait=wait_exponential(multiplier=2, min=min(4, max_wait), max=max_wait),
        reraise=True,
    )
    log.info("thread.fetching", thread_id=thread_id, url=url)
    return retryer(_get_json, client, url, log)
