"""Thread loader: input -> normalize -> fetch -> pipeline, with explicit state transitions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ConfigDict

from threadllm.errors import InvalidInputError
from threadllm.fetcher import fetch_thread_json
from threadllm.models import PostSummary, Stats, ThreadOutputs
from threadllm.pipeline import build_outputs, parse_thread_payload
from threadllm.settings import Settings
from threadllm.statuses import ERROR_MESSAGES, ErrorKind, FetchState, RenderMode
from threadllm.urls import initial_input_from_query, normalize_thread_id
from threadllm.utils.http import create_http_client

FetchFn = Callable[[str], Any]


class AppState(BaseModel):
    """Snapshot of the loader. Replaced wholesale on every transition."""

    model_config = ConfigDict(frozen=True)

    input: str = ""
    mode: RenderMode = RenderMode.TXT
    status: FetchState = FetchState.IDLE
    error: str = ""
    error_kind: ErrorKind | None = None
    post: PostSummary | None = None
    outputs: ThreadOutputs | None = None

    @property
    def loading(self) -> bool:
        return self.status == FetchState.FETCHING

    @property
    def stats(self) -> Stats | None:
        return self.outputs.stats if self.outputs else None

    @property
    def display_text(self) -> str:
        return self.outputs.for_mode(self.mode) if self.outputs else ""


class ThreadLoader:
    """Owns AppState and runs one fetch at a time.

    ``fetch`` maps a thread id to the raw JSON payload; by default it's an httpx GET
    against settings.base_url.
    """

    def __init__(
        self,
        settings: Settings,
        log: structlog.stdlib.BoundLogger,
        fetch: FetchFn | None = None,
    ) -> None:
        self.settings = settings
        self.log = log
        self._fetch = fetch or self._http_fetch
        self._auto_loaded = False
        self.state = AppState(mode=settings.default_format)

    def _http_fetch(self, thread_id: str) -> Any:
        client = create_http_client(
            proxy_url=self.settings.proxy_url or None,
            user_agent=self.settings.user_agent,
            timeout=self.settings.timeout,
        )
        try:
            return fetch_thread_json(client, thread_id, self.settings, self.log)
        finally:
            client.close()

    def _transition(self, **changes: Any) -> AppState:
        self.state = self.state.model_copy(update=changes)
        return self.state

    def _fail(self, kind: ErrorKind) -> AppState:
        return self._transition(status=FetchState.FAILED, error=ERROR_MESSAGES[kind], error_kind=kind)

    def set_mode(self, mode: RenderMode | str) -> AppState:
        return self._transition(mode=RenderMode(mode))

    def submit(self, raw: str) -> AppState:
        """User-triggered fetch. Blank input is rejected; ignored while a fetch is running."""
        if self.state.loading:
            self.log.info("thread.fetch_ignored", reason="in_flight")
            return self.state
        if not raw.strip():
            # Earlier outputs stay on display; only the error changes
            self._transition(input=raw)
            return self._fail(ErrorKind.EMPTY_INPUT)
        return self.load(raw)

    def auto_load(self, query: str | None) -> AppState:
        """Load from a launch query's ``url`` or ``id`` parameter. Runs at most once."""
        if self._auto_loaded:
            return self.state
        self._auto_loaded = True
        initial = initial_input_from_query(query)
        if not initial:
            return self.state
        self.log.info("thread.auto_load", input=initial)
        return self.load(initial)

    def load(self, raw: str) -> AppState:
        """Run the full pipeline for one input. Never raises."""
        self._transition(
            input=raw,
            status=FetchState.FETCHING,
            error="",
            error_kind=None,
            post=None,
            outputs=None,
        )

        try:
            thread_id = normalize_thread_id(raw)
        except InvalidInputError as exc:
            self.log.info("thread.invalid_input", input=raw, reason=str(exc))
            return self._fail(ErrorKind.INVALID_INPUT)

        try:
            payload = self._fetch(thread_id)
        except httpx.HTTPStatusError as exc:
            self.log.warning("thread.fetch_failed", thread_id=thread_id, status=exc.response.status_code)
            return self._fail(ErrorKind.FETCH_FAILED)
        except Exception:
            self.log.exception("thread.network_error", thread_id=thread_id)
            return self._fail(ErrorKind.NETWORK_ERROR)

        try:
            post, comments = parse_thread_payload(payload)
            outputs = build_outputs(post, comments)
        except Exception:
            self.log.exception("thread.pipeline_error", thread_id=thread_id)
            return self._fail(ErrorKind.NETWORK_ERROR)

        self.log.info(
            "thread.loaded",
            thread_id=thread_id,
            comments=outputs.stats.total_comments,
            comment_score=outputs.stats.total_comment_score,
        )
        return self._transition(status=FetchState.SUCCESS, post=post, outputs=outputs)
