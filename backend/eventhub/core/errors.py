"""Domain errors surfaced to GraphQL clients."""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes placed in the response error extensions."""

    BAD_USER_INPUT = "BAD_USER_INPUT"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    CONFLICT = "CONFLICT"
    FORBIDDEN = "FORBIDDEN"


class DomainError(Exception):
    """Base domain error with code and user-safe message.

    graphql-core copies ``extensions`` from the original exception onto the
    located GraphQL error, so the code reaches the client untouched.
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, str]:
        return {"code": self.code.value}

    def __str__(self) -> str:
        return self.message


class ValidationError(DomainError):
    """Raised when an argument payload does not match its input contract."""

    code = ErrorCode.BAD_USER_INPUT


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class AuthenticationError(DomainError):
    """Raised when login credentials are rejected."""

    code = ErrorCode.UNAUTHENTICATED


class ConflictError(DomainError):
    """Raised when a write would duplicate a unique value."""

    code = ErrorCode.CONFLICT


class AuthorizationGateError(DomainError):
    """Raised when an operation requires an authenticated request."""

    code = ErrorCode.FORBIDDEN

    def __init__(self, message: str = "Unauthenticated!") -> None:
        super().__init__(message)
