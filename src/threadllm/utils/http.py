"""Shared HTTP client factory."""

from __future__ import annotations

import httpx

from threadllm.settings import Settings

DEFAULT_USER_AGENT = Settings.model_fields["user_agent"].default


def create_http_client(
    *,
    proxy_url: str | None = None,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = 30.0,
    follow_redirects: bool = True,
) -> httpx.Client:
    """Create an httpx.Client with a descriptive User-Agent and optional proxy."""
    headers = {"User-Agent": user_agent}
    return httpx.Client(
        headers=headers,
        timeout=timeout,
        proxy=proxy_url,
        follow_redirects=follow_redirects,
    )
