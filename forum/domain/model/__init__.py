"""Domain model entities for the forum."""

from forum.domain.model.comment import (
    AddCommentLike,
    AddedComment,
    Comment,
    CommentDetail,
    CommentLike,
    CommentRow,
    NewComment,
)
from forum.domain.model.reply import (
    AddedReply,
    NewReply,
    Reply,
    ReplyDetail,
    ReplyRow,
)
from forum.domain.model.thread import (
    AddedThread,
    NewThread,
    Thread,
    ThreadDetail,
    ThreadRow,
)
from forum.domain.model.user import User

__all__ = [
    "User",
    "NewThread",
    "AddedThread",
    "Thread",
    "ThreadRow",
    "ThreadDetail",
    "NewComment",
    "AddedComment",
    "Comment",
    "CommentRow",
    "CommentDetail",
    "AddCommentLike",
    "CommentLike",
    "NewReply",
    "AddedReply",
    "Reply",
    "ReplyRow",
    "ReplyDetail",
]
