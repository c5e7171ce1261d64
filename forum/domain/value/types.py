"""Domain value types."""

from datetime import datetime
from typing import Protocol

# Shown to readers in place of the content of soft-deleted items
DELETED_COMMENT_PLACEHOLDER = "**komentar telah dihapus**"
DELETED_REPLY_PLACEHOLDER = "**balasan telah dihapus**"


class Clock(Protocol):
    """Current-time source used to stamp new entities."""

    def __call__(self) -> datetime: ...
