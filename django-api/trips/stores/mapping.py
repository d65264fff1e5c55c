"""Translation between the Tahwisa API wire format and domain models.

The API speaks French field names; the domain does not.
"""

from datetime import datetime, timezone
from typing import Any

from django.utils.dateparse import parse_date, parse_datetime

from trips.domain import (
    AccountRegistration,
    Capacity,
    Destination,
    DestinationDraft,
    DestinationId,
    DestinationKind,
    Employee,
    EmployeeId,
    HistoryRow,
    Inscription,
    InscriptionId,
    InscriptionStatus,
    Period,
    PeriodDraft,
    PeriodId,
    PeriodState,
    ProfileUpdate,
    Role,
    SelectionResult,
    SelectionResultId,
    SelectionType,
    Session,
    SessionDraft,
    SessionId,
    SignIn,
)

DESTINATION_KINDS = {
    "externe": DestinationKind.EXTERNAL,
    "naftal_interne": DestinationKind.INTERNAL,
}
SELECTION_TYPES = {
    "officiel": SelectionType.OFFICIAL,
    "suppléant": SelectionType.SUBSTITUTE,
}
WIRE_DESTINATION_KINDS = {kind: wire for wire, kind in DESTINATION_KINDS.items()}

Payload = dict[str, Any]


def parse_wire_datetime(value: str) -> datetime:
    """Parse an ISO date or date-time; date-only and naive values are UTC."""
    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        if day is None:
            raise ValueError(f"Invalid date: {value!r}")
        parsed = datetime(day.year, day.month, day.day)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def wire_date(value: datetime) -> str:
    return value.date().isoformat()


def destination_from_wire(data: Payload) -> Destination:
    return Destination(
        id=DestinationId(data["id"]),
        name=data["nom"],
        location=data.get("localisation") or "",
        capacity=Capacity(int(data["capacité"])),
        kind=DESTINATION_KINDS[data["type"]],
        description=data.get("description") or "",
    )


def destination_to_wire(draft: DestinationDraft) -> Payload:
    return {
        "nom": draft.name,
        "localisation": draft.location,
        "capacité": draft.capacity.value,
        "type": WIRE_DESTINATION_KINDS[draft.kind],
        "description": draft.description,
    }


def period_from_wire(data: Payload) -> Period:
    return Period(
        id=PeriodId(data["id"]),
        name=data["nom"],
        start_date=parse_wire_datetime(data["date_debut_periode"]),
        end_date=parse_wire_datetime(data["date_fin_periode"]),
        registration_deadline=parse_wire_datetime(data["date_limite_inscription"]),
        state=PeriodState(data["statut"]),
    )


def period_to_wire(draft: PeriodDraft) -> Payload:
    return {
        "nom": draft.name,
        "date_debut_periode": wire_date(draft.start_date),
        "date_fin_periode": wire_date(draft.end_date),
        "date_limite_inscription": wire_date(draft.registration_deadline),
        "statut": draft.state.value,
    }


def session_from_wire(data: Payload) -> Session:
    return Session(
        id=SessionId(data["id"]),
        name=data["nom"],
        start_date=parse_wire_datetime(data["date_debut"]),
        end_date=parse_wire_datetime(data["date_fin"]),
        destination_id=DestinationId(data["destination_id"]),
        period_id=PeriodId(data["periode_id"]),
        destination_name=data.get("destination_nom"),
        period_name=data.get("periode_nom"),
    )


def session_to_wire(draft: SessionDraft) -> Payload:
    return {
        "nom": draft.name,
        "date_debut": wire_date(draft.start_date),
        "date_fin": wire_date(draft.end_date),
        "destination_id": draft.destination_id.value,
        "periode_id": draft.period_id.value,
    }


def inscription_from_wire(data: Payload) -> Inscription:
    return Inscription(
        id=InscriptionId(data["id"]),
        employee_id=EmployeeId(data["employee_id"]),
        session_id=SessionId(data["session_id"]),
        registered_at=parse_wire_datetime(data["date_inscription"]),
        status=InscriptionStatus(data["statut"]),
        employee_name=data.get("employee_name"),
        session_name=data.get("session_name"),
    )


def selection_result_from_wire(data: Payload) -> SelectionResult:
    return SelectionResult(
        id=SelectionResultId(data["id"]),
        session_id=SessionId(data["session_id"]),
        employee_id=EmployeeId(data["employee_id"]),
        selection_type=SELECTION_TYPES[data["type_selection"]],
        priority_order=int(data["ordre_priorite"]),
        selected_at=parse_wire_datetime(data["date_selection"]),
        employee_last_name=data.get("employee_nom"),
        employee_first_name=data.get("employee_prenom"),
        session_name=data.get("session_nom"),
    )


def _raw_date(value: Any) -> str:
    """Keep a date string as sent; a missing date becomes empty."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Invalid date: {value!r}")
    return value


def history_row_from_wire(data: Payload) -> HistoryRow:
    return HistoryRow(
        inscription_id=InscriptionId(data["id"]),
        employee_id=EmployeeId(data["employee_id"]),
        last_name=data.get("nom") or "",
        first_name=data.get("prénom") or "",
        session_name=data.get("session_nom") or "",
        registration_date=_raw_date(data.get("date_inscription")),
        status=InscriptionStatus(data["statut"]),
        destination_name=data.get("destination_nom"),
        period_name=data.get("periode_nom"),
    )


def employee_from_wire(data: Payload) -> Employee:
    return Employee(
        id=EmployeeId(data["id"]),
        last_name=data.get("nom") or "",
        first_name=data.get("prénom") or "",
        email=data["email"],
        phone=data.get("téléphone") or "",
        employee_code=data.get("matricule") or "",
        structure=data.get("structure") or "",
        role=Role(data.get("role") or Role.EMPLOYEE.value),
    )


def employee_to_wire(employee: Employee) -> Payload:
    """Snapshot format kept in the auth context; mirrors the API payload."""
    return {
        "id": employee.id.value,
        "nom": employee.last_name,
        "prénom": employee.first_name,
        "email": employee.email,
        "téléphone": employee.phone,
        "matricule": employee.employee_code,
        "structure": employee.structure,
        "role": employee.role.value,
    }


def sign_in_from_wire(data: Payload) -> SignIn:
    token = data.get("token")
    if not token:
        raise ValueError("No token received from server")
    return SignIn(token=token, employee=employee_from_wire(data["employee"]))


def account_registration_to_wire(registration: AccountRegistration) -> Payload:
    return {
        "nom": registration.last_name,
        "prénom": registration.first_name,
        "email": registration.email,
        "password": registration.password,
        "téléphone": registration.phone,
        "matricule": registration.employee_code,
        "department": registration.department,
    }


def profile_update_to_wire(update: ProfileUpdate) -> Payload:
    payload: Payload = {
        "nom": update.last_name,
        "prénom": update.first_name,
        "email": update.email,
        "téléphone": update.phone,
        "structure": update.structure,
    }
    if update.password:
        payload["password"] = update.password
    return payload
