"""Catalog service - destinations, periods and sessions with derived statuses.

Also carries the administrator operations on those entities. Drafts are
validated at construction, so nothing invalid reaches the network.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from trips.domain import (
    Destination,
    DestinationDraft,
    DestinationId,
    Employee,
    Inscription,
    InscriptionStatus,
    Period,
    PeriodDraft,
    PeriodId,
    PeriodStatus,
    Session,
    SessionDraft,
    SessionId,
    SessionStatus,
)
from trips.domain.eligibility import can_register
from trips.domain.errors import DomainRejectedError
from trips.domain.status import (
    days_until_deadline,
    duration_days,
    evaluate_period_status,
    evaluate_session_status,
    summarize_sessions,
)
from trips.services.fetch import fetch_all
from trips.stores.interfaces import AccountStore, TripStore

logger = logging.getLogger(__name__)

RECENT_LIMIT = 3


@dataclass(frozen=True)
class PeriodView:
    period: Period
    status: PeriodStatus
    registration_open: bool
    days_until_deadline: int
    duration_days: int


@dataclass(frozen=True)
class PeriodPage:
    """Periods matching the query; counts cover every period."""

    periods: tuple[PeriodView, ...]
    total_count: int
    open_count: int

    @property
    def filtered_count(self) -> int:
        return len(self.periods)


@dataclass(frozen=True)
class SessionView:
    session: Session
    status: SessionStatus
    duration_days: int
    destination: Destination | None = None
    period: Period | None = None


@dataclass(frozen=True)
class DashboardStats:
    employee: Employee
    total_sessions: int
    sessions_by_status: dict[SessionStatus, int]
    active_registrations: int
    completed_trips: int
    recent_sessions: tuple[SessionView, ...]
    recent_inscriptions: tuple[Inscription, ...]


class CatalogService:
    """Service for catalog listings and administrator CRUD."""

    def __init__(self, trips: TripStore, accounts: AccountStore | None = None) -> None:
        self._trips = trips
        self._accounts = accounts

    def destinations(self) -> list[Destination]:
        return self._trips.list_destinations()

    def periods(self, now: datetime, search: str = "", status: str = "") -> PeriodPage:
        """Return periods with derived status, filtered by name and status.

        Empty search or status match everything. open_count counts periods
        still accepting registrations.
        """
        views = [self._period_view(now, period) for period in self._trips.list_periods()]
        needle = search.lower()
        matching = [
            view
            for view in views
            if needle in view.period.name.lower() and (not status or view.status.value == status)
        ]
        return PeriodPage(
            periods=tuple(matching),
            total_count=len(views),
            open_count=sum(1 for view in views if view.registration_open),
        )

    def sessions(self, now: datetime) -> list[SessionView]:
        """Return sessions joined with their destination and period."""
        sessions, destinations, periods = fetch_all(
            self._trips.list_sessions,
            self._trips.list_destinations,
            self._trips.list_periods,
        )
        destinations_by_id = {destination.id: destination for destination in destinations}
        periods_by_id = {period.id: period for period in periods}
        return [
            self._session_view(
                now,
                session,
                destination=destinations_by_id.get(session.destination_id),
                period=periods_by_id.get(session.period_id),
            )
            for session in sessions
        ]

    def dashboard(self, now: datetime) -> DashboardStats:
        """Session counts by status and the signed-in employee's registrations.

        Raises:
            ValueError: If the service was built without an account store.
        """
        if self._accounts is None:
            raise ValueError("dashboard requires an account store")
        employee, sessions = fetch_all(self._accounts.current_employee, self._trips.list_sessions)
        inscriptions = self._trips.list_inscriptions_for_employee(employee.id)
        return DashboardStats(
            employee=employee,
            total_sessions=len(sessions),
            sessions_by_status=summarize_sessions(now, sessions),
            active_registrations=sum(1 for i in inscriptions if i.status is InscriptionStatus.ACTIVE),
            completed_trips=sum(1 for i in inscriptions if i.status is InscriptionStatus.COMPLETED),
            recent_sessions=tuple(self._session_view(now, s) for s in sessions[:RECENT_LIMIT]),
            recent_inscriptions=tuple(inscriptions[:RECENT_LIMIT]),
        )

    def create_destination(self, draft: DestinationDraft) -> Destination:
        return self._admin_call("create destination", self._trips.create_destination, draft)

    def update_destination(self, destination_id: DestinationId, draft: DestinationDraft) -> Destination:
        return self._admin_call("update destination", self._trips.update_destination, destination_id, draft)

    def delete_destination(self, destination_id: DestinationId) -> None:
        self._admin_call("delete destination", self._trips.delete_destination, destination_id)

    def create_period(self, now: datetime, draft: PeriodDraft) -> PeriodView:
        period = self._admin_call("create period", self._trips.create_period, draft)
        return self._period_view(now, period)

    def update_period(self, now: datetime, period_id: PeriodId, draft: PeriodDraft) -> PeriodView:
        period = self._admin_call("update period", self._trips.update_period, period_id, draft)
        return self._period_view(now, period)

    def delete_period(self, period_id: PeriodId) -> None:
        self._admin_call("delete period", self._trips.delete_period, period_id)

    def create_session(self, now: datetime, draft: SessionDraft) -> SessionView:
        session = self._admin_call("create session", self._trips.create_session, draft)
        return self._session_view(now, session)

    def update_session(self, now: datetime, session_id: SessionId, draft: SessionDraft) -> SessionView:
        session = self._admin_call("update session", self._trips.update_session, session_id, draft)
        return self._session_view(now, session)

    def delete_session(self, session_id: SessionId) -> None:
        self._admin_call("delete session", self._trips.delete_session, session_id)

    def _admin_call(self, action: str, operation, *args):
        try:
            result = operation(*args)
        except DomainRejectedError as exc:
            logger.info("Could not %s: %s", action, exc.message)
            raise
        logger.info("Administrator did %s", action)
        return result

    @staticmethod
    def _period_view(now: datetime, period: Period) -> PeriodView:
        return PeriodView(
            period=period,
            status=evaluate_period_status(now, period),
            registration_open=can_register(now, period),
            days_until_deadline=days_until_deadline(now, period),
            duration_days=duration_days(period.start_date, period.end_date),
        )

    @staticmethod
    def _session_view(
        now: datetime,
        session: Session,
        destination: Destination | None = None,
        period: Period | None = None,
    ) -> SessionView:
        return SessionView(
            session=session,
            status=evaluate_session_status(now, session),
            duration_days=duration_days(session.start_date, session.end_date),
            destination=destination,
            period=period,
        )
