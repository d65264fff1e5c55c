"""Domain error codes for the trips module."""

from dataclasses import dataclass
from enum import Enum

from trips.domain.enums import RefusalReason

GENERIC_FAILURE_MESSAGE = "Something went wrong while contacting the server. Please try again."
DEFAULT_REJECTION_MESSAGE = "Operation failed"


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    DOMAIN_REJECTED = "DOMAIN_REJECTED"
    REGISTRATION_REFUSED = "REGISTRATION_REFUSED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    TRANSPORT_FAILED = "TRANSPORT_FAILED"
    INVALID_ID = "INVALID_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class DomainRejectedError(DomainError):
    """The remote API refused the operation with a human-readable message.

    remote_code carries the API's own code when it sends one
    (for example EMAIL_NOT_VERIFIED). verbatim is False when the API sent
    no message and a generic one was substituted.
    """

    def __init__(
        self,
        message: str | None,
        status_code: int = 400,
        remote_code: str | None = None,
    ) -> None:
        super().__init__(code=ErrorCode.DOMAIN_REJECTED, message=message or DEFAULT_REJECTION_MESSAGE)
        object.__setattr__(self, "status_code", status_code)
        object.__setattr__(self, "remote_code", remote_code)
        object.__setattr__(self, "verbatim", bool(message))

    def with_fallback(self, message: str) -> "DomainRejectedError":
        """Return this error, or a copy carrying ``message`` if the API sent none."""
        if self.verbatim:
            return self
        return DomainRejectedError(message, status_code=self.status_code, remote_code=self.remote_code)


class RegistrationRefusedError(DomainError):
    """Raised when local eligibility rules forbid a registration."""

    def __init__(self, reason: RefusalReason) -> None:
        super().__init__(code=ErrorCode.REGISTRATION_REFUSED, message=refusal_message(reason))
        object.__setattr__(self, "reason", reason)


class AuthorizationError(DomainError):
    """Raised when the bearer token is missing or rejected.

    server_message keeps the API's own wording, which is not shown to the
    user unless the caller decides otherwise (failed logins do).
    """

    def __init__(
        self,
        message: str = "Your session has expired. Please sign in again.",
        server_message: str | None = None,
    ) -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message=message)
        object.__setattr__(self, "server_message", server_message)


class ForbiddenError(DomainError):
    """Raised when a non-admin employee reaches an admin operation."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message="Administrator access required")


class NotFoundError(DomainError):
    """Raised when the remote API answers 404."""

    def __init__(self, path: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message="Resource not found")
        object.__setattr__(self, "path", path)


class TransportError(DomainError):
    """Network failure, server error or unexpected payload shape."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(code=ErrorCode.TRANSPORT_FAILED, message=GENERIC_FAILURE_MESSAGE)
        object.__setattr__(self, "detail", detail)


class InvalidIdError(DomainError):
    """Raised when an ID in a request path is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message="Invalid ID format")


def refusal_message(reason: RefusalReason) -> str:
    match reason:
        case RefusalReason.PERIOD_CLOSED:
            return "Registration is closed for this period."
        case RefusalReason.DEADLINE_PASSED:
            return "Registration deadline has passed for this session."
        case RefusalReason.SESSION_STARTED:
            return "This session has already started."
        case RefusalReason.ALREADY_REGISTERED:
            return "You are already registered for this session."
