"""Pydantic models for the flattened thread and its derived outputs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from threadllm.statuses import RenderMode

DELETED_AUTHOR = "[deleted]"
UNKNOWN_AUTHOR = "[unknown]"


class CommentRecord(BaseModel):
    """One comment from the reply tree, with the depth assigned by the walk."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    author: str = DELETED_AUTHOR
    score: int | None = None
    body: str = ""
    parent_id: str | None = None
    depth: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any], depth: int) -> CommentRecord:
        return cls(
            id=data.get("id"),
            author=data.get("author") or DELETED_AUTHOR,
            score=data.get("score"),
            body=data.get("body") or "",
            parent_id=data.get("parent_id"),
            depth=depth,
        )


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    subreddit: str = ""
    author: str | None = None
    selftext: str = ""
    score: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PostSummary:
        return cls(
            title=data.get("title") or "",
            subreddit=data.get("subreddit") or "",
            author=data.get("author") or None,
            selftext=data.get("selftext") or "",
            score=data.get("score") or 0,
        )


class Stats(BaseModel):
    """Aggregate metrics for one fetched thread. Dumps with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    post_score: int
    total_comments: int
    total_comment_score: int
    avg_comment_score: float
    comments_per_score_point: float


class ThreadOutputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    stats: Stats
    txt: str
    toon: str
    json_text: str

    def for_mode(self, mode: RenderMode | str) -> str:
        return {
            RenderMode.TXT: self.txt,
            RenderMode.TOON: self.toon,
            RenderMode.JSON: self.json_text,
        }[RenderMode(mode)]
