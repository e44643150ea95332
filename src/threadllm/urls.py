"""Thread identifier extraction and Reddit URL helpers."""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse

from threadllm.errors import InvalidInputError

# Query parameters checked, in order, when a thread is auto-loaded from a link
AUTOLOAD_PARAMS = ("url", "id")


def normalize_thread_id(raw: str) -> str:
    """Return the thread id from a bare id or a thread URL.

    ``abc123`` is returned as-is; ``https://www.reddit.com/r/x/comments/abc123/slug/``
    yields ``abc123``. Raises InvalidInputError when neither form applies.
    """
    trimmed = raw.strip()
    if not trimmed:
        raise InvalidInputError("empty input")
    if "/" not in trimmed and not any(ch.isspace() for ch in trimmed):
        return trimmed

    try:
        parsed = urlparse(trimmed)
    except ValueError as exc:
        raise InvalidInputError(f"not a URL: {trimmed!r}") from exc
    if not parsed.scheme or not parsed.netloc or any(ch.isspace() for ch in parsed.netloc):
        raise InvalidInputError(f"not a URL: {trimmed!r}")

    parts = [p for p in parsed.path.split("/") if p]
    try:
        idx = parts.index("comments")
    except ValueError:
        raise InvalidInputError(f"no comments segment in {trimmed!r}") from None
    if idx + 1 >= len(parts):
        raise InvalidInputError(f"no thread id after comments in {trimmed!r}")
    return parts[idx + 1]


def initial_input_from_query(query: str | None) -> str | None:
    """Pick the auto-load input from a query string or launch URL (``url`` wins over ``id``)."""
    if not query:
        return None
    head, sep, tail = query.partition("?")
    if sep and "=" not in head:
        query = tail
    params = parse_qs(query)
    for name in AUTOLOAD_PARAMS:
        values = params.get(name)
        if values and values[0]:
            return values[0]
    return None


def thread_json_url(base_url: str, thread_id: str) -> str:
    return f"{base_url.rstrip('/')}/comments/{thread_id}.json"
