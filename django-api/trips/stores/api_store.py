"""Tahwisa REST API implementation of the stores.

Each method issues one request and converts the payload to domain models.
Payloads that do not match the expected shape surface as TransportError.
"""

import logging
from typing import Any, Callable, TypeVar

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
from trips.domain.errors import NotFoundError, TransportError
from trips.stores import mapping
from trips.stores.http_client import TahwisaApiClient
from trips.stores.interfaces import AccountStore, TripStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _convert(mapper: Callable[[Any], T], payload: Any) -> T:
    try:
        return mapper(payload)
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Unexpected payload from API: %r", exc)
        raise TransportError(f"Unexpected payload: {exc!r}") from exc


def _convert_many(mapper: Callable[[Any], T], payload: Any) -> list[T]:
    if not isinstance(payload, list):
        logger.warning("Expected a list from API, got %s", type(payload).__name__)
        raise TransportError("Expected a list")
    return [_convert(mapper, item) for item in payload]


class ApiTripStore(TripStore):
    """Trip store backed by the remote Tahwisa API."""

    def __init__(self, client: TahwisaApiClient) -> None:
        self._client = client

    def list_destinations(self) -> list[Destination]:
        return _convert_many(mapping.destination_from_wire, self._client.get("/destinations"))

    def create_destination(self, draft: DestinationDraft) -> Destination:
        payload = self._client.post("/destinations", json=mapping.destination_to_wire(draft))
        return _convert(mapping.destination_from_wire, payload)

    def update_destination(self, destination_id: DestinationId, draft: DestinationDraft) -> Destination:
        payload = self._client.put(
            f"/destinations/{destination_id.value}", json=mapping.destination_to_wire(draft)
        )
        return _convert(mapping.destination_from_wire, payload)

    def delete_destination(self, destination_id: DestinationId) -> None:
        self._client.delete(f"/destinations/{destination_id.value}")

    def list_periods(self) -> list[Period]:
        return _convert_many(mapping.period_from_wire, self._client.get("/periodes"))

    def create_period(self, draft: PeriodDraft) -> Period:
        payload = self._client.post("/periodes", json=mapping.period_to_wire(draft))
        return _convert(mapping.period_from_wire, payload)

    def update_period(self, period_id: PeriodId, draft: PeriodDraft) -> Period:
        payload = self._client.put(f"/periodes/{period_id.value}", json=mapping.period_to_wire(draft))
        return _convert(mapping.period_from_wire, payload)

    def delete_period(self, period_id: PeriodId) -> None:
        self._client.delete(f"/periodes/{period_id.value}")

    def list_sessions(self) -> list[Session]:
        return _convert_many(mapping.session_from_wire, self._client.get("/sessions"))

    def create_session(self, draft: SessionDraft) -> Session:
        payload = self._client.post("/sessions", json=mapping.session_to_wire(draft))
        return _convert(mapping.session_from_wire, payload)

    def update_session(self, session_id: SessionId, draft: SessionDraft) -> Session:
        payload = self._client.put(f"/sessions/{session_id.value}", json=mapping.session_to_wire(draft))
        return _convert(mapping.session_from_wire, payload)

    def delete_session(self, session_id: SessionId) -> None:
        self._client.delete(f"/sessions/{session_id.value}")

    def register(self, employee_id: EmployeeId, session_id: SessionId) -> Inscription:
        payload = self._client.post(
            "/inscriptions",
            json={
                "employee_id": employee_id.value,
                "session_id": session_id.value,
                "statut": "active",
            },
        )
        return _convert(mapping.inscription_from_wire, payload)

    def cancel_inscription(self, inscription_id: InscriptionId) -> None:
        self._client.delete(f"/inscriptions/{inscription_id.value}")

    def list_inscriptions_for_employee(self, employee_id: EmployeeId) -> list[Inscription]:
        try:
            payload = self._client.get(f"/inscriptions/employee/{employee_id.value}")
        except NotFoundError:
            logger.debug("No inscriptions yet for employee %s", employee_id)
            return []
        return _convert_many(mapping.inscription_from_wire, payload)

    def full_history(self) -> list[HistoryRow]:
        return _convert_many(mapping.history_row_from_wire, self._client.get("/inscriptions/full-history"))

    def list_selection_results(self, session_id: SessionId) -> list[SelectionResult]:
        try:
            payload = self._client.get(f"/resultat-selections/session/{session_id.value}")
        except NotFoundError:
            logger.debug("No selection results yet for session %s", session_id)
            return []
        return _convert_many(mapping.selection_result_from_wire, payload)

    def generate_selection(self, session_id: SessionId) -> None:
        self._client.post(f"/resultat-selections/generate/{session_id.value}")


class ApiAccountStore(AccountStore):
    """Identity and profile store backed by the remote Tahwisa API."""

    def __init__(self, client: TahwisaApiClient) -> None:
        self._client = client

    def login(self, email: str, password: str) -> SignIn:
        payload = self._client.post("/auth/login", json={"email": email, "password": password})
        return _convert(mapping.sign_in_from_wire, payload)

    def current_employee(self) -> Employee:
        return _convert(mapping.employee_from_wire, self._client.get("/auth/me"))

    def register_account(self, registration: AccountRegistration) -> None:
        self._client.post("/auth/register", json=mapping.account_registration_to_wire(registration))

    def resend_verification(self, email: str) -> None:
        self._client.post("/auth/resend-verification", json={"email": email})

    def verify_email(self, token: str) -> None:
        self._client.post("/auth/verify-email", json={"token": token})

    def request_password_reset(self, email: str) -> None:
        self._client.post("/auth/request-password-reset", json={"email": email})

    def reset_password(self, token: str, password: str) -> None:
        self._client.post("/auth/reset-password", json={"token": token, "newPassword": password})

    def update_profile(self, employee_id: EmployeeId, update: ProfileUpdate) -> None:
        self._client.put(f"/employees/{employee_id.value}", json=mapping.profile_update_to_wire(update))
