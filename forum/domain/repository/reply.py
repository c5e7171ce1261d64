"""Reply repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from forum.domain.model.reply import AddedReply, NewReply, ReplyRow
from forum.domain.value import CommentId, ReplyId, UserId


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Defines the contract for reply persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply.

        Args:
            new_reply: Validated reply payload

        Returns:
            The added reply with its generated id
        """
        pass

    @abstractmethod
    async def verify_reply_exists(self, reply_id: ReplyId, comment_id: CommentId) -> None:
        """Check that a reply exists on the given comment.

        Raises:
            NotFoundError: If no reply with this id belongs to the comment
        """
        pass

    @abstractmethod
    async def verify_reply_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Check that a user owns a reply.

        Raises:
            AuthorizationError: If the stored owner differs
        """
        pass

    @abstractmethod
    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Soft-delete a reply. Idempotent."""
        pass

    @abstractmethod
    async def get_replies_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> Sequence[ReplyRow]:
        """Get the replies of several comments in one batch.

        An empty input returns an empty result without querying.

        Args:
            comment_ids: IDs of the comments whose replies to fetch

        Returns:
            Replies ordered by creation time ascending
        """
        pass
