"""Thread use cases."""

from .add_thread import AddThreadUseCase
from .get_thread import GetThreadUseCase, build_thread_detail

__all__ = [
    "AddThreadUseCase",
    "GetThreadUseCase",
    "build_thread_detail",
]
