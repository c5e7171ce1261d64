"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedComment, Comment, CommentRow, NewComment
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
from forum.persistence.mappers import comment_to_dict, row_to_comment_row
from forum.persistence.tables import comment_likes_table, comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator, clock: Clock
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of unique id suffixes
            clock: Current-time source for creation timestamps
        """
        self.session = session
        self.id_generator = id_generator
        self.clock = clock

    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        """Persist a new comment."""
        comment = Comment(
            id=CommentId(make_id(EntityKind.COMMENT, self.id_generator)),
            thread_id=ThreadId(new_comment.thread_id),
            content=new_comment.content,
            owner=UserId(new_comment.owner),
            created_at=self.clock(),
        )
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(
                comments_table.c.id, comments_table.c.content, comments_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return AddedComment.from_payload(row._asdict())

    async def verify_comment_exists(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Raise NotFoundError unless the comment belongs to the thread."""
        stmt = select(comments_table.c.id).where(
            and_(
                comments_table.c.id == comment_id,
                comments_table.c.thread_id == thread_id,
            )
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Comment", comment_id)

    async def verify_comment_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Raise AuthorizationError unless the user owns the comment."""
        stmt = select(comments_table.c.owner).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        stored_owner = result.scalar_one_or_none()
        if stored_owner is None:
            raise NotFoundError("Comment", comment_id)
        if stored_owner != owner:
            raise AuthorizationError("comment", comment_id, owner)

    async def delete_comment_by_id(self, comment_id: CommentId) -> None:
        """Soft-delete a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(is_deleted=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> List[CommentRow]:
        """Get all comments of a thread, oldest first."""
        stmt = (
            select(
                comments_table.c.id,
                users_table.c.username,
                comments_table.c.created_at.label("date"),
                comments_table.c.content,
                comments_table.c.is_deleted,
                comments_table.c.like_count,
            )
            .select_from(
                comments_table.outerjoin(
                    users_table, users_table.c.id == comments_table.c.owner
                )
            )
            .where(comments_table.c.thread_id == thread_id)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_row(row._asdict()) for row in result.fetchall()]

    async def add_comment_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Insert the like and bump the counter in a single statement.

        The counter update only sees the row returned by the insert, which is
        empty when the (comment, user) pair already exists.
        """
        inserted = (
            pg_insert(comment_likes_table)
            .values(
                id=make_id(EntityKind.LIKE, self.id_generator),
                comment_id=comment_id,
                user_id=user_id,
                created_at=self.clock(),
            )
            .on_conflict_do_nothing(constraint="unique_comment_user_like")
            .returning(comment_likes_table.c.comment_id)
            .cte("inserted_like")
        )
        stmt = (
            update(comments_table)
            .add_cte(inserted)
            .where(comments_table.c.id.in_(select(inserted.c.comment_id)))
            .values(like_count=comments_table.c.like_count + 1)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        added = result.first() is not None
        await self.session.flush()
        return added

    async def remove_comment_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Delete the like and lower the counter in a single statement."""
        removed = (
            delete(comment_likes_table)
            .where(
                and_(
                    comment_likes_table.c.comment_id == comment_id,
                    comment_likes_table.c.user_id == user_id,
                )
            )
            .returning(comment_likes_table.c.comment_id)
            .cte("removed_like")
        )
        stmt = (
            update(comments_table)
            .add_cte(removed)
            .where(comments_table.c.id.in_(select(removed.c.comment_id)))
            .values(like_count=func.greatest(comments_table.c.like_count - 1, 0))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        removed_any = result.first() is not None
        await self.session.flush()
        return removed_any

    async def get_comment_like_by_comment_id_and_user_id(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Check whether the user likes the comment."""
        stmt = select(comment_likes_table.c.id).where(
            and_(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def get_comment_like_count(self, comment_id: CommentId) -> int:
        """Read the stored like counter."""
        stmt = select(comments_table.c.like_count).where(
            comments_table.c.id == comment_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
