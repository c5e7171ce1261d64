"""Comment use cases."""

from .add_comment import AddCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .toggle_comment_like import (
    ToggleCommentLikeRequest,
    ToggleCommentLikeResponse,
    ToggleCommentLikeUseCase,
)

__all__ = [
    "AddCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ToggleCommentLikeRequest",
    "ToggleCommentLikeResponse",
    "ToggleCommentLikeUseCase",
]
