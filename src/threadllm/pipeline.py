"""Payload parsing and the flatten -> sort -> stats -> render pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from threadllm.errors import PayloadError
from threadllm.flatten import flatten_comments
from threadllm.models import UNKNOWN_AUTHOR, CommentRecord, PostSummary, ThreadOutputs
from threadllm.render import render_compact_text, render_json, render_llm_text
from threadllm.stats import compute_stats


def parse_thread_payload(payload: Any) -> tuple[PostSummary, list[CommentRecord]]:
    """Split the ``[post_listing, comment_listing]`` response into the post and its flattened comments."""
    try:
        post_data = payload[0]["data"]["children"][0]["data"]
        comment_children = payload[1]["data"]["children"]
    except (KeyError, IndexError, TypeError) as exc:
        raise PayloadError(f"unexpected thread payload shape: {exc!r}") from exc
    if not isinstance(post_data, dict):
        raise PayloadError("post data is not an object")

    return PostSummary.from_api(post_data), flatten_comments(comment_children, depth=0)


def sort_by_score(comments: Sequence[CommentRecord]) -> list[CommentRecord]:
    """Highest score first. Stable: ties keep thread order. Missing scores sort as 0."""
    return sorted(comments, key=lambda c: c.score or 0, reverse=True)


def post_author_display(post: PostSummary) -> str:
    return f"u/{post.author}" if post.author else UNKNOWN_AUTHOR


def build_outputs(post: PostSummary, comments: Sequence[CommentRecord]) -> ThreadOutputs:
    """Sort once, aggregate, then render all three formats from the same list."""
    ordered = sort_by_score(comments)
    stats = compute_stats(post, ordered)
    author = post_author_display(post)
    body = post.selftext.strip()

    return ThreadOutputs(
        stats=stats,
        txt=render_llm_text(post, author, body, ordered),
        toon=render_compact_text(post, author, body, ordered),
        json_text=render_json(post, author, body, ordered, stats),
    )
