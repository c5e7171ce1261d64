"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from forum.domain.model.comment import AddedComment, CommentRow, NewComment
from forum.domain.value import CommentId, ThreadId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity and its likes.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        """Persist a new comment.

        Args:
            new_comment: Validated comment payload

        Returns:
            The added comment with its generated id
        """
        pass

    @abstractmethod
    async def verify_comment_exists(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Check that a comment exists on the given thread.

        Args:
            comment_id: The comment ID
            thread_id: The thread the comment must belong to

        Raises:
            NotFoundError: If no comment with this id belongs to the thread
        """
        pass

    @abstractmethod
    async def verify_comment_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Check that a user owns a comment.

        Args:
            comment_id: The comment ID
            owner: The user claiming ownership

        Raises:
            AuthorizationError: If the stored owner differs
        """
        pass

    @abstractmethod
    async def delete_comment_by_id(self, comment_id: CommentId) -> None:
        """Soft-delete a comment.

        Idempotent: deleting an already deleted comment keeps it deleted.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def get_comments_by_thread_id(
        self, thread_id: ThreadId
    ) -> Sequence[CommentRow]:
        """Get all comments of a thread, oldest first.

        Deleted comments are included; masking is up to the reader.

        Args:
            thread_id: The thread ID

        Returns:
            Comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def add_comment_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Like a comment.

        Inserting the like and incrementing the comment's like counter happen
        as one atomic operation; a like that already exists changes nothing.

        Args:
            comment_id: The comment ID
            user_id: The liking user

        Returns:
            True if the like was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def remove_comment_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Unlike a comment.

        Deleting the like and decrementing the comment's like counter
        (never below zero) happen as one atomic operation.

        Args:
            comment_id: The comment ID
            user_id: The user withdrawing the like

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def get_comment_like_by_comment_id_and_user_id(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Check whether a user currently likes a comment.

        Args:
            comment_id: The comment ID
            user_id: The user ID

        Returns:
            True if the like exists
        """
        pass

    @abstractmethod
    async def get_comment_like_count(self, comment_id: CommentId) -> int:
        """Get the stored like counter of a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Number of likes, 0 for an unknown comment
        """
        pass
