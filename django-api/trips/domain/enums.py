"""Closed status vocabularies of the trip lottery."""

from enum import Enum


class DestinationKind(Enum):
    EXTERNAL = "external"
    INTERNAL = "internal"


class PeriodState(Enum):
    """Administrator-controlled switch on a period."""

    OPEN = "open"
    CLOSED = "closed"


class InscriptionStatus(Enum):
    """Server-driven lifecycle of a registration."""

    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SelectionType(Enum):
    OFFICIAL = "official"
    SUBSTITUTE = "substitute"


class Role(Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"


class SessionStatus(Enum):
    """Status of a session derived from its travel dates."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    COMPLETED = "completed"


class PeriodStatus(Enum):
    """Status of a period derived from its state, deadline and dates."""

    CLOSED = "closed"
    EXPIRED = "expired"
    UPCOMING = "upcoming"
    ACTIVE = "active"
    ENDED = "ended"


class RefusalReason(Enum):
    """Why a registration is not permitted right now."""

    PERIOD_CLOSED = "PERIOD_CLOSED"
    DEADLINE_PASSED = "DEADLINE_PASSED"
    SESSION_STARTED = "SESSION_STARTED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"


class DrawOutcome(Enum):
    """Result of triggering the remote draw for a session."""

    GENERATED = "generated"
    REJECTED = "rejected"
    FAILED = "failed"
