"""Strongly typed identifiers for forum entities.

Identifiers are opaque strings prefixed by the entity kind,
e.g. ``thread-V1StGXR8_Z5jdHi6``.
"""

from enum import Enum
from typing import NewType, Protocol

UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)


class EntityKind(str, Enum):
    """Kind prefix used when minting identifiers."""

    THREAD = "thread"
    COMMENT = "comment"
    REPLY = "reply"
    LIKE = "like"


class IdGenerator(Protocol):
    """Produces a unique opaque suffix for a new entity id."""

    def __call__(self) -> str: ...


def make_id(kind: EntityKind, id_generator: IdGenerator) -> str:
    """Mint a new identifier for an entity of the given kind.

    Args:
        kind: Entity kind
        id_generator: Source of unique suffixes

    Returns:
        Identifier of the form ``<kind>-<suffix>``
    """
    return f"{kind.value}-{id_generator()}"
