"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from forum.domain.model import (
    Comment,
    CommentRow,
    Reply,
    ReplyRow,
    Thread,
    ThreadRow,
)
from forum.domain.value import CommentId, ReplyId, ThreadId


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread to database dict."""
    return {
        "id": thread.id,
        "title": thread.title,
        "body": thread.body,
        "owner": thread.owner,
        "created_at": thread.created_at,
    }


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment to database dict."""
    return {
        "id": comment.id,
        "thread_id": comment.thread_id,
        "content": comment.content,
        "owner": comment.owner,
        "created_at": comment.created_at,
        "is_deleted": comment.is_deleted,
        "like_count": comment.like_count,
    }


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply to database dict."""
    return {
        "id": reply.id,
        "comment_id": reply.comment_id,
        "content": reply.content,
        "owner": reply.owner,
        "created_at": reply.created_at,
        "is_deleted": reply.is_deleted,
    }


def row_to_thread_row(row: Dict[str, Any]) -> ThreadRow:
    """Convert a joined thread row to ThreadRow."""
    return ThreadRow(
        id=ThreadId(row["id"]),
        title=row["title"],
        body=row["body"],
        date=row["date"],
        username=row["username"],
    )


def row_to_comment_row(row: Dict[str, Any]) -> CommentRow:
    """Convert a joined comment row to CommentRow."""
    return CommentRow(
        id=CommentId(row["id"]),
        username=row["username"],
        date=row["date"],
        content=row["content"],
        is_deleted=row["is_deleted"],
        like_count=row["like_count"],
    )


def row_to_reply_row(row: Dict[str, Any]) -> ReplyRow:
    """Convert a joined reply row to ReplyRow."""
    return ReplyRow(
        id=ReplyId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        content=row["content"],
        date=row["date"],
        is_deleted=row["is_deleted"],
        username=row["username"],
    )
