"""Domain layer errors."""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable category of a domain failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    AUTHORIZATION = "authorization"


class ValidationReason(str, Enum):
    """Why a payload failed validation."""

    MISSING_PROPERTY = "MISSING_PROPERTY"
    TYPE_MISMATCH = "TYPE_MISMATCH"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind


class ValidationError(DomainError):
    """Raised when a payload is malformed or incomplete.

    Attributes:
        entity: Entity code, e.g. ``NEW_COMMENT``
        reason: Reason code
        fields: Dotted paths of the offending fields
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self, entity: str, reason: ValidationReason, fields: list[str] | None = None
    ):
        self.entity = entity
        self.reason = reason
        self.fields = fields or []
        super().__init__(f"{entity}.{reason.value}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when a user attempts to mutate content they don't own."""

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class InconsistentDataError(Exception):
    """Raised when stored records break an invariant storage should uphold.

    Not a DomainError: the caller cannot fix it by changing the request.
    """

    def __init__(self, resource: str, identifier: str, detail: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Inconsistent {resource} {identifier}: {detail}")
