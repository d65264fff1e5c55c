from trips.domain.enums import (
    DestinationKind,
    DrawOutcome,
    InscriptionStatus,
    PeriodState,
    PeriodStatus,
    RefusalReason,
    Role,
    SelectionType,
    SessionStatus,
)
from trips.domain.models import (
    AccountRegistration,
    Destination,
    DestinationDraft,
    Employee,
    HistoryRow,
    Inscription,
    Period,
    PeriodDraft,
    ProfileUpdate,
    SelectionResult,
    Session,
    SessionDraft,
    SignIn,
)
from trips.domain.value_objects import (
    Capacity,
    DestinationId,
    EmployeeId,
    InscriptionId,
    PeriodId,
    SelectionResultId,
    SessionId,
)

__all__ = [
    "AccountRegistration",
    "Destination",
    "DestinationDraft",
    "Employee",
    "HistoryRow",
    "Inscription",
    "Period",
    "PeriodDraft",
    "ProfileUpdate",
    "SelectionResult",
    "Session",
    "SessionDraft",
    "SignIn",
    "DestinationKind",
    "DrawOutcome",
    "InscriptionStatus",
    "PeriodState",
    "PeriodStatus",
    "RefusalReason",
    "Role",
    "SelectionType",
    "SessionStatus",
    "Capacity",
    "DestinationId",
    "EmployeeId",
    "InscriptionId",
    "PeriodId",
    "SelectionResultId",
    "SessionId",
]
