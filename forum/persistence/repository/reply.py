"""PostgreSQL implementation of Reply repository."""

from typing import List, Sequence

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedReply, NewReply, Reply, ReplyRow
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    Clock,
    CommentId,
    EntityKind,
    IdGenerator,
    ReplyId,
    UserId,
    make_id,
)
from forum.persistence.mappers import reply_to_dict, row_to_reply_row
from forum.persistence.tables import replies_table, users_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

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

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply."""
        reply = Reply(
            id=ReplyId(make_id(EntityKind.REPLY, self.id_generator)),
            comment_id=CommentId(new_reply.comment_id),
            content=new_reply.content,
            owner=UserId(new_reply.owner),
            created_at=self.clock(),
        )
        stmt = (
            insert(replies_table)
            .values(**reply_to_dict(reply))
            .returning(replies_table.c.id, replies_table.c.content, replies_table.c.owner)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return AddedReply.from_payload(row._asdict())

    async def verify_reply_exists(self, reply_id: ReplyId, comment_id: CommentId) -> None:
        """Raise NotFoundError unless the reply belongs to the comment."""
        stmt = select(replies_table.c.id).where(
            and_(
                replies_table.c.id == reply_id,
                replies_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Raise AuthorizationError unless the user owns the reply."""
        stmt = select(replies_table.c.owner).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        stored_owner = result.scalar_one_or_none()
        if stored_owner is None:
            raise NotFoundError("Reply", reply_id)
        if stored_owner != owner:
            raise AuthorizationError("reply", reply_id, owner)

    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Soft-delete a reply."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(is_deleted=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_replies_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> List[ReplyRow]:
        """Get the replies of several comments (batch query)."""
        if not comment_ids:
            return []

        stmt = (
            select(
                replies_table.c.id,
                replies_table.c.comment_id,
                replies_table.c.content,
                replies_table.c.created_at.label("date"),
                replies_table.c.is_deleted,
                users_table.c.username,
            )
            .select_from(
                replies_table.outerjoin(
                    users_table, users_table.c.id == replies_table.c.owner
                )
            )
            .where(replies_table.c.comment_id.in_(comment_ids))
            .order_by(replies_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply_row(row._asdict()) for row in result.fetchall()]
