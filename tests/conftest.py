"""Shared test fixtures: a canned thread payload and logging isolation."""

from __future__ import annotations

import logging

import pytest


def _comment(comment_id: str, author: str | None, body: str, score: int | None, parent_id: str, replies=None) -> dict:
    data = {
        "id": comment_id,
        "name": f"t1_{comment_id}",
        "author": author,
        "body": body,
        "score": score,
        "parent_id": parent_id,
        "replies": {"kind": "Listing", "data": {"children": replies}} if replies else "",
    }
    return {"kind": "t1", "data": data}


@pytest.fixture
def thread_payload() -> list:
    """Post 'Hello' in r/test with a nested reply, a deleted author and a 'more' stub."""
    post = {
        "kind": "t3",
        "data": {
            "id": "abc123",
            "title": "Hello",
            "subreddit": "test",
            "author": "op",
            "selftext": "",
            "score": 10,
        },
    }
    comments = [
        _comment(
            "c1",
            "alice",
            "First!",
            5,
            "t3_abc123",
            replies=[_comment("c2", None, "reply  to\n\nalice", 2, "t1_c1")],
        ),
        _comment("c3", "bob", "meh", -3, "t3_abc123"),
        {"kind": "more", "data": {"count": 12, "children": ["x1", "x2"]}},
    ]
    return [
        {"kind": "Listing", "data": {"children": [post]}},
        {"kind": "Listing", "data": {"children": comments}},
    ]


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
