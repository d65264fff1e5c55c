"""Domain models representing state owned by the remote Tahwisa API.

These are read-only views; the API is the system of record.
Wire-format mapping lives in trips/stores/mapping.py.
"""

from dataclasses import dataclass
from datetime import datetime

from trips.domain.enums import (
    DestinationKind,
    InscriptionStatus,
    PeriodState,
    Role,
    SelectionType,
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


@dataclass(frozen=True)
class Destination:
    """Domain representation of a Destination."""

    id: DestinationId
    name: str
    location: str
    capacity: Capacity
    kind: DestinationKind
    description: str


@dataclass(frozen=True)
class Period:
    """Registration window bounding one or more sessions."""

    id: PeriodId
    name: str
    start_date: datetime
    end_date: datetime
    registration_deadline: datetime
    state: PeriodState


@dataclass(frozen=True)
class Session:
    """A scheduled trip tied to one destination and one period."""

    id: SessionId
    name: str
    start_date: datetime
    end_date: datetime
    destination_id: DestinationId
    period_id: PeriodId
    destination_name: str | None = None
    period_name: str | None = None


@dataclass(frozen=True)
class Inscription:
    """An employee's registration for a session."""

    id: InscriptionId
    employee_id: EmployeeId
    session_id: SessionId
    registered_at: datetime
    status: InscriptionStatus
    employee_name: str | None = None
    session_name: str | None = None


@dataclass(frozen=True)
class SelectionResult:
    """One row of the draw outcome for a session."""

    id: SelectionResultId
    session_id: SessionId
    employee_id: EmployeeId
    selection_type: SelectionType
    priority_order: int
    selected_at: datetime
    employee_last_name: str | None = None
    employee_first_name: str | None = None
    session_name: str | None = None


@dataclass(frozen=True)
class Employee:
    id: EmployeeId
    last_name: str
    first_name: str
    email: str
    phone: str
    employee_code: str
    structure: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class HistoryRow:
    """One line of the denormalized registration history feed.

    registration_date is kept as the raw ISO string sent by the API.
    """

    inscription_id: InscriptionId
    employee_id: EmployeeId
    last_name: str
    first_name: str
    session_name: str
    registration_date: str
    status: InscriptionStatus
    destination_name: str | None = None
    period_name: str | None = None


@dataclass(frozen=True)
class SignIn:
    """Token and employee snapshot returned by a successful login."""

    token: str
    employee: Employee


@dataclass(frozen=True)
class DestinationDraft:
    name: str
    location: str
    capacity: Capacity
    kind: DestinationKind
    description: str = ""


@dataclass(frozen=True)
class PeriodDraft:
    name: str
    start_date: datetime
    end_date: datetime
    registration_deadline: datetime
    state: PeriodState = PeriodState.OPEN

    def __post_init__(self) -> None:
        if self.start_date >= self.end_date:
            raise ValueError("Start date must be before end date")
        if self.registration_deadline >= self.start_date:
            raise ValueError("Registration deadline must be before start date")


@dataclass(frozen=True)
class SessionDraft:
    name: str
    start_date: datetime
    end_date: datetime
    destination_id: DestinationId
    period_id: PeriodId

    def __post_init__(self) -> None:
        if self.start_date >= self.end_date:
            raise ValueError("Start date must be before end date")


@dataclass(frozen=True)
class ProfileUpdate:
    """Editable employee fields; a blank password leaves it unchanged."""

    last_name: str
    first_name: str
    email: str
    phone: str
    structure: str
    password: str | None = None


@dataclass(frozen=True)
class AccountRegistration:
    last_name: str
    first_name: str
    email: str
    password: str
    phone: str
    employee_code: str
    department: str
