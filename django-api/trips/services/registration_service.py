"""Registration service - what an employee may register for, and doing it.

Reads that do not depend on each other are issued together; the employee's
inscriptions are only requested once the employee is known.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from trips.domain import (
    Employee,
    Inscription,
    InscriptionId,
    Period,
    PeriodStatus,
    Session,
    SessionId,
)
from trips.domain.eligibility import Eligibility, check_registration, is_offered
from trips.domain.errors import DomainRejectedError, NotFoundError, RegistrationRefusedError
from trips.domain.status import evaluate_period_status
from trips.services.fetch import fetch_all
from trips.stores.interfaces import AccountStore, TripStore

logger = logging.getLogger(__name__)

REGISTRATION_FALLBACKS = {
    409: "You are already registered for this session.",
    400: "Registration deadline has passed for this session.",
}
REGISTRATION_FAILED = "Registration failed. Please try again."
CANCELLATION_FAILED = "Failed to cancel registration."


@dataclass(frozen=True)
class SessionOffer:
    """An upcoming session with its period and the employee's eligibility."""

    session: Session
    period: Period
    period_status: PeriodStatus
    eligibility: Eligibility


@dataclass(frozen=True)
class RegistrationOverview:
    employee: Employee
    offers: tuple[SessionOffer, ...]
    inscriptions: tuple[Inscription, ...]


class RegistrationService:
    """Service for the employee registration page."""

    def __init__(self, trips: TripStore, accounts: AccountStore) -> None:
        self._trips = trips
        self._accounts = accounts

    def overview(self, now: datetime) -> RegistrationOverview:
        """Return the sessions offered for registration and the employee's inscriptions."""
        employee, sessions, periods = fetch_all(
            self._accounts.current_employee,
            self._trips.list_sessions,
            self._trips.list_periods,
        )
        inscriptions = self._trips.list_inscriptions_for_employee(employee.id)
        periods_by_id = {period.id: period for period in periods}

        offers = []
        for session in sessions:
            if not is_offered(now, session):
                continue
            period = periods_by_id.get(session.period_id)
            if period is None:
                logger.warning("Session %s references unknown period %s", session.id, session.period_id)
                continue
            offers.append(
                SessionOffer(
                    session=session,
                    period=period,
                    period_status=evaluate_period_status(now, period),
                    eligibility=check_registration(now, session, period, inscriptions),
                )
            )
        return RegistrationOverview(
            employee=employee,
            offers=tuple(offers),
            inscriptions=tuple(inscriptions),
        )

    def register(self, now: datetime, session_id: SessionId) -> list[Inscription]:
        """Register the signed-in employee and return their refreshed inscriptions.

        Raises:
            NotFoundError: If the session or its period is unknown.
            RegistrationRefusedError: If eligibility rules forbid it.
            DomainRejectedError: If the API refuses it.
        """
        employee, sessions, periods = fetch_all(
            self._accounts.current_employee,
            self._trips.list_sessions,
            self._trips.list_periods,
        )
        session = next((s for s in sessions if s.id == session_id), None)
        if session is None:
            raise NotFoundError(f"/sessions/{session_id}")
        period = next((p for p in periods if p.id == session.period_id), None)
        if period is None:
            raise NotFoundError(f"/periodes/{session.period_id}")

        inscriptions = self._trips.list_inscriptions_for_employee(employee.id)
        eligibility = check_registration(now, session, period, inscriptions)
        if not eligibility.allowed:
            logger.info("Registration of %s on session %s refused: %s", employee.id, session_id, eligibility.reason)
            raise RegistrationRefusedError(eligibility.reason)

        try:
            self._trips.register(employee.id, session_id)
        except DomainRejectedError as exc:
            fallback = REGISTRATION_FALLBACKS.get(exc.status_code, REGISTRATION_FAILED)
            raise exc.with_fallback(fallback)
        logger.info("Employee %s registered on session %s", employee.id, session_id)
        return self._trips.list_inscriptions_for_employee(employee.id)

    def cancel(self, inscription_id: InscriptionId) -> list[Inscription]:
        """Cancel one of the employee's inscriptions and return the refreshed list."""
        employee = self._accounts.current_employee()
        try:
            self._trips.cancel_inscription(inscription_id)
        except DomainRejectedError as exc:
            raise exc.with_fallback(CANCELLATION_FAILED)
        logger.info("Inscription %s cancelled by employee %s", inscription_id, employee.id)
        return self._trips.list_inscriptions_for_employee(employee.id)
