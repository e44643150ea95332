"""Linearize Reddit's nested reply listing into depth-annotated comment records."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from threadllm.models import CommentRecord

COMMENT_KIND = "t1"


def _reply_children(comment: dict[str, Any]) -> list:
    # Reddit sends "" rather than a listing when a comment has no replies
    replies = comment.get("replies")
    if isinstance(replies, dict):
        return (replies.get("data") or {}).get("children") or []
    return []


def flatten_comments(children: Sequence[Any] | None, depth: int = 0) -> list[CommentRecord]:
    """Walk the reply tree depth-first, pre-order, emitting only t1 comment nodes.

    Non-comment nodes ("more" placeholders) are dropped along with anything under
    them. Uses an explicit stack, so deep threads don't hit the recursion limit.
    """
    out: list[CommentRecord] = []
    stack: list[tuple[Iterator[Any], int]] = [(iter(children or []), depth)]

    while stack:
        nodes, level = stack[-1]
        for node in nodes:
            if not isinstance(node, dict) or node.get("kind") != COMMENT_KIND:
                continue
            comment = node.get("data") or {}
            out.append(CommentRecord.from_api(comment, level))

            replies = _reply_children(comment)
            if replies:
                stack.append((iter(replies), level + 1))
                break
        else:
            stack.pop()

    return out
