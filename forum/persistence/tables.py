"""SQLAlchemy Core tables, kept in step with ``migrations/versions``."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

ID_LENGTH = 50


def id_column() -> Column:
    return Column("id", String(ID_LENGTH), primary_key=True)


def reference(name: str, target: str) -> Column:
    """Non-null foreign key; children go with their parent."""
    return Column(
        name, String(ID_LENGTH), ForeignKey(target, ondelete="CASCADE"), nullable=False
    )


def created_at() -> Column:
    return Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    )


def deleted_flag() -> Column:
    return Column("is_deleted", Boolean, nullable=False, server_default="false")


# Owned by the authentication service; only usernames are read here
users_table = Table(
    "users",
    metadata,
    id_column(),
    Column("username", String(ID_LENGTH), nullable=False, unique=True),
    Column("password", Text, nullable=False),
    Column("fullname", Text, nullable=False),
)

threads_table = Table(
    "threads",
    metadata,
    id_column(),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    reference("owner", "users.id"),
    created_at(),
)

comments_table = Table(
    "comments",
    metadata,
    id_column(),
    reference("thread_id", "threads.id"),
    Column("content", Text, nullable=False),
    reference("owner", "users.id"),
    created_at(),
    deleted_flag(),
    Column("like_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
)
Index("idx_comments_thread_id", comments_table.c.thread_id)
Index("idx_comments_created_at", comments_table.c.created_at)

replies_table = Table(
    "replies",
    metadata,
    id_column(),
    reference("comment_id", "comments.id"),
    Column("content", Text, nullable=False),
    reference("owner", "users.id"),
    created_at(),
    deleted_flag(),
)
Index("idx_replies_comment_id", replies_table.c.comment_id)

comment_likes_table = Table(
    "comment_likes",
    metadata,
    id_column(),
    reference("comment_id", "comments.id"),
    reference("user_id", "users.id"),
    created_at(),
    UniqueConstraint("comment_id", "user_id", name="unique_comment_user_like"),
)
