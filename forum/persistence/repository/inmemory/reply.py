"""In-memory reply repository for testing."""

from typing import Sequence

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
from forum.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(
        self, database: InMemoryDatabase, id_generator: IdGenerator, clock: Clock
    ) -> None:
        self.database = database
        self.id_generator = id_generator
        self.clock = clock

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Store a new reply."""
        reply = Reply(
            id=ReplyId(make_id(EntityKind.REPLY, self.id_generator)),
            comment_id=CommentId(new_reply.comment_id),
            content=new_reply.content,
            owner=UserId(new_reply.owner),
            created_at=self.clock(),
        )
        self.database.replies[reply.id] = reply
        return AddedReply(id=reply.id, content=reply.content, owner=reply.owner)

    async def verify_reply_exists(self, reply_id: ReplyId, comment_id: CommentId) -> None:
        """Raise NotFoundError unless the reply belongs to the comment."""
        reply = self.database.replies.get(reply_id)
        if reply is None or reply.comment_id != comment_id:
            raise NotFoundError("Reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Raise AuthorizationError unless the user owns the reply."""
        reply = self.database.replies.get(reply_id)
        if reply is None:
            raise NotFoundError("Reply", reply_id)
        if reply.owner != owner:
            raise AuthorizationError("reply", reply_id, owner)

    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Soft-delete a reply."""
        reply = self.database.replies.get(reply_id)
        if reply is not None:
            self.database.replies[reply_id] = reply.model_copy(
                update={"is_deleted": True}
            )

    async def get_replies_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> list[ReplyRow]:
        """Get the replies of several comments (batch query)."""
        if not comment_ids:
            return []

        wanted = set(comment_ids)
        replies = [r for r in self.database.replies.values() if r.comment_id in wanted]
        replies.sort(key=lambda r: r.created_at)
        return [
            ReplyRow(
                id=r.id,
                comment_id=r.comment_id,
                content=r.content,
                date=r.created_at,
                is_deleted=r.is_deleted,
                username=self.database.username_of(r.owner),
            )
            for r in replies
        ]
