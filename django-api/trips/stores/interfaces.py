"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from trips.domain import (
    AccountRegistration,
    Destination,
    DestinationDraft,
    DestinationId,
    Employee,
    EmployeeId,
    HistoryRow,
    Inscription,
    InscriptionId,
    Period,
    PeriodDraft,
    PeriodId,
    ProfileUpdate,
    SelectionResult,
    Session,
    SessionDraft,
    SessionId,
    SignIn,
)


class TripStore(ABC):
    """Interface for trip catalog, registration and draw operations."""

    @abstractmethod
    def list_destinations(self) -> list[Destination]:
        ...

    @abstractmethod
    def create_destination(self, draft: DestinationDraft) -> Destination:
        ...

    @abstractmethod
    def update_destination(self, destination_id: DestinationId, draft: DestinationDraft) -> Destination:
        ...

    @abstractmethod
    def delete_destination(self, destination_id: DestinationId) -> None:
        ...

    @abstractmethod
    def list_periods(self) -> list[Period]:
        ...

    @abstractmethod
    def create_period(self, draft: PeriodDraft) -> Period:
        ...

    @abstractmethod
    def update_period(self, period_id: PeriodId, draft: PeriodDraft) -> Period:
        ...

    @abstractmethod
    def delete_period(self, period_id: PeriodId) -> None:
        ...

    @abstractmethod
    def list_sessions(self) -> list[Session]:
        ...

    @abstractmethod
    def create_session(self, draft: SessionDraft) -> Session:
        ...

    @abstractmethod
    def update_session(self, session_id: SessionId, draft: SessionDraft) -> Session:
        ...

    @abstractmethod
    def delete_session(self, session_id: SessionId) -> None:
        ...

    @abstractmethod
    def register(self, employee_id: EmployeeId, session_id: SessionId) -> Inscription:
        """Create an active inscription for the employee on the session."""
        ...

    @abstractmethod
    def cancel_inscription(self, inscription_id: InscriptionId) -> None:
        ...

    @abstractmethod
    def list_inscriptions_for_employee(self, employee_id: EmployeeId) -> list[Inscription]:
        """Return the employee's inscriptions, or an empty list when none exist."""
        ...

    @abstractmethod
    def full_history(self) -> list[HistoryRow]:
        """Return every registration of the organization, denormalized."""
        ...

    @abstractmethod
    def list_selection_results(self, session_id: SessionId) -> list[SelectionResult]:
        """Return the draw results of a session, or an empty list before the draw."""
        ...

    @abstractmethod
    def generate_selection(self, session_id: SessionId) -> None:
        """Trigger the remote draw for a session."""
        ...


class AccountStore(ABC):
    """Interface for identity and profile operations."""

    @abstractmethod
    def login(self, email: str, password: str) -> SignIn:
        ...

    @abstractmethod
    def current_employee(self) -> Employee:
        """Return the employee owning the bearer token."""
        ...

    @abstractmethod
    def register_account(self, registration: AccountRegistration) -> None:
        ...

    @abstractmethod
    def resend_verification(self, email: str) -> None:
        ...

    @abstractmethod
    def verify_email(self, token: str) -> None:
        ...

    @abstractmethod
    def request_password_reset(self, email: str) -> None:
        ...

    @abstractmethod
    def reset_password(self, token: str, password: str) -> None:
        ...

    @abstractmethod
    def update_profile(self, employee_id: EmployeeId, update: ProfileUpdate) -> None:
        ...
