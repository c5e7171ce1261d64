"""Shared in-memory store for testing.

The in-memory repositories read each other's records (thread views join
usernames, likes touch comment counters), so they share one store instead of
keeping private dicts.
"""

from dataclasses import dataclass, field

from forum.domain.model import Comment, CommentLike, Reply, Thread, User
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


@dataclass
class InMemoryDatabase:
    """Tables held as dicts keyed by primary key."""

    users: dict[UserId, User] = field(default_factory=dict)
    threads: dict[ThreadId, Thread] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    replies: dict[ReplyId, Reply] = field(default_factory=dict)
    likes: dict[tuple[CommentId, UserId], CommentLike] = field(default_factory=dict)

    def add_user(self, user: User) -> User:
        """Register a user so views can resolve the username."""
        self.users[user.id] = user
        return user

    def username_of(self, user_id: UserId) -> str | None:
        user = self.users.get(user_id)
        return user.username if user else None
