"""Text renderers for a flattened thread: LLM text, compact text, JSON.

All three take the same inputs: the post, the post author display string, the
trimmed self-text and the comments already sorted by score.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence

from threadllm.models import CommentRecord, PostSummary, Stats

NO_BODY = "(no body)"

_NEWLINE_RUNS = re.compile(r"\n{2,}")
_WHITESPACE_RUNS = re.compile(r"\s+")


def collapse_newlines(text: str) -> str:
    """Squeeze every run of two or more newlines into one."""
    return _NEWLINE_RUNS.sub("\n", text)


def _header(post: PostSummary, post_author: str) -> str:
    return f"TITLE: {post.title}\nSUBREDDIT: r/{post.subreddit}\nPOST_AUTHOR: {post_author}\n\n"


def format_comment_llm(c: CommentRecord) -> str:
    body = c.body.strip()
    if not body:
        return ""
    return f"[d{c.depth}] u/{c.author}\n{body}\n\n"


def format_comment_compact(c: CommentRecord) -> str:
    one_line = _WHITESPACE_RUNS.sub(" ", c.body).strip()
    if not one_line:
        return ""
    return f"d{c.depth} · u/{c.author}: {one_line}\n"


def render_llm_text(post: PostSummary, post_author: str, body: str, comments: Sequence[CommentRecord]) -> str:
    parts = [_header(post, post_author), "POST_BODY:\n"]
    parts.append(f"{body}\n\n" if body else f"{NO_BODY}\n\n")
    parts.append("COMMENTS:\n")
    parts.append("# [dX] u/author\n# comment text\n\n")
    parts.extend(format_comment_llm(c) for c in comments)
    return collapse_newlines("".join(parts))


def render_compact_text(post: PostSummary, post_author: str, body: str, comments: Sequence[CommentRecord]) -> str:
    parts = [_header(post, post_author), "POST_BODY: "]
    parts.append(f"{body}\n\n" if body else f"{NO_BODY}\n\n")
    parts.append("COMMENTS:\n")
    parts.extend(format_comment_compact(c) for c in comments)
    return collapse_newlines("".join(parts))


def render_json(
    post: PostSummary,
    post_author: str,
    body: str,
    comments: Sequence[CommentRecord],
    stats: Stats,
) -> str:
    doc = {
        "title": post.title,
        "subreddit": post.subreddit,
        "postAuthor": post_author,
        "body": body,
        "stats": stats.model_dump(by_alias=True),
        "comments": [
            {
                "id": c.id,
                "author": c.author,
                "body": c.body,
                "score": c.score,
                "depth": c.depth,
                "parent_id": c.parent_id,
            }
            for c in comments
        ],
    }
    return json.dumps(doc, indent=2, ensure_ascii=False)

