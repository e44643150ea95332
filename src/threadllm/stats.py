"""Summary metrics over a flattened thread."""

from __future__ import annotations

from collections.abc import Sequence

from threadllm.models import CommentRecord, PostSummary, Stats


def compute_stats(post: PostSummary, comments: Sequence[CommentRecord]) -> Stats:
    """Aggregate comment scores; missing scores count as 0 and empty denominators yield 0.

    comments_per_score_point is only zeroed when the score total is exactly 0, so a
    negative total gives a negative ratio (the web UI showed 0 for any total below 1).
    """
    total_comments = len(comments)
    total_comment_score = sum(c.score or 0 for c in comments)

    avg_comment_score = total_comment_score / total_comments if total_comments else 0.0
    comments_per_score_point = total_comments / total_comment_score if total_comment_score else 0.0

    return Stats(
        post_score=post.score,
        total_comments=total_comments,
        total_comment_score=total_comment_score,
        avg_comment_score=avg_comment_score,
        comments_per_score_point=comments_per_score_point,
    )
