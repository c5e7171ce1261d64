"""Use case contract shared by every application operation."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT", contravariant=True)
ResponseT = TypeVar("ResponseT", covariant=True)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One operation: collaborators come in through ``__init__``, input through
    ``execute``. Validation of raw payloads happens inside ``execute``."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT: ...
