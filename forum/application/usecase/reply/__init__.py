"""Reply use cases."""

from .add_reply import AddReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyUseCase

__all__ = [
    "AddReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
]
