"""In-memory comment repository for testing."""

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import (
    AddedComment,
    Comment,
    CommentLike,
    CommentRow,
    NewComment,
)
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    Clock,
    CommentId,
    EntityKind,
    IdGenerator,
    ThreadId,
    UserId,
    make_id,
)
from forum.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Like writes never await between the membership check and the mutation, so
    they are atomic with respect to other tasks on the same event loop.
    """

    def __init__(
        self, database: InMemoryDatabase, id_generator: IdGenerator, clock: Clock
    ) -> None:
        self.database = database
        self.id_generator = id_generator
        self.clock = clock

    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        """Store a new comment."""
        comment = Comment(
            id=CommentId(make_id(EntityKind.COMMENT, self.id_generator)),
            thread_id=ThreadId(new_comment.thread_id),
            content=new_comment.content,
            owner=UserId(new_comment.owner),
            created_at=self.clock(),
        )
        self.database.comments[comment.id] = comment
        return AddedComment(id=comment.id, content=comment.content, owner=comment.owner)

    async def verify_comment_exists(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Raise NotFoundError unless the comment belongs to the thread."""
        comment = self.database.comments.get(comment_id)
        if comment is None or comment.thread_id != thread_id:
            raise NotFoundError("Comment", comment_id)

    async def verify_comment_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Raise AuthorizationError unless the user owns the comment."""
        comment = self.database.comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        if comment.owner != owner:
            raise AuthorizationError("comment", comment_id, owner)

    async def delete_comment_by_id(self, comment_id: CommentId) -> None:
        """Soft-delete a comment."""
        comment = self.database.comments.get(comment_id)
        if comment is not None:
            self.database.comments[comment_id] = comment.model_copy(
                update={"is_deleted": True}
            )

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[CommentRow]:
        """Get all comments of a thread, oldest first."""
        comments = [
            c for c in self.database.comments.values() if c.thread_id == thread_id
        ]
        comments.sort(key=lambda c: c.created_at)
        return [
            CommentRow(
                id=c.id,
                username=self.database.username_of(c.owner),
                date=c.created_at,
                content=c.content,
                is_deleted=c.is_deleted,
                like_count=c.like_count,
            )
            for c in comments
        ]

    async def add_comment_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Record a like and bump the counter; no-op if it already exists."""
        key = (comment_id, user_id)
        comment = self.database.comments.get(comment_id)
        if comment is None or key in self.database.likes:
            return False
        self.database.likes[key] = CommentLike(
            id=make_id(EntityKind.LIKE, self.id_generator),
            comment_id=comment_id,
            user_id=user_id,
            created_at=self.clock(),
        )
        self.database.comments[comment_id] = comment.model_copy(
            update={"like_count": comment.like_count + 1}
        )
        return True

    async def remove_comment_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Drop a like and lower the counter; no-op if it does not exist."""
        if self.database.likes.pop((comment_id, user_id), None) is None:
            return False
        comment = self.database.comments.get(comment_id)
        if comment is not None:
            self.database.comments[comment_id] = comment.model_copy(
                update={"like_count": max(comment.like_count - 1, 0)}
            )
        return True

    async def get_comment_like_by_comment_id_and_user_id(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Check whether the user likes the comment."""
        return (comment_id, user_id) in self.database.likes

    async def get_comment_like_count(self, comment_id: CommentId) -> int:
        """Read the stored like counter."""
        comment = self.database.comments.get(comment_id)
        return comment.like_count if comment else 0
