"""User record.

Registration and authentication live outside the forum core; the record is
only read to resolve usernames when assembling thread views.
"""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    fullname: str = ""
