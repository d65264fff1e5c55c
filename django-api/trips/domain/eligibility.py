"""Registration eligibility rules."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from trips.domain.enums import PeriodState, RefusalReason
from trips.domain.models import Inscription, Period, Session


@dataclass(frozen=True)
class Eligibility:
    """Outcome of an eligibility check; reason is set only when refused."""

    allowed: bool
    reason: RefusalReason | None = None

    @classmethod
    def granted(cls) -> "Eligibility":
        return cls(allowed=True)

    @classmethod
    def refused(cls, reason: RefusalReason) -> "Eligibility":
        return cls(allowed=False, reason=reason)


def can_register(now: datetime, period: Period) -> bool:
    """Period-level gate: the period is open and the deadline not yet passed.

    Session dates play no part here.
    """
    return period.state is PeriodState.OPEN and now <= period.registration_deadline


def is_offered(now: datetime, session: Session) -> bool:
    """Only sessions that have not started yet are offered for registration."""
    return session.start_date > now


def check_registration(
    now: datetime,
    session: Session,
    period: Period,
    inscriptions: Iterable[Inscription] = (),
) -> Eligibility:
    """Combine the period gate, the session filter and duplicate detection."""
    if period.state is not PeriodState.OPEN:
        return Eligibility.refused(RefusalReason.PERIOD_CLOSED)
    if not can_register(now, period):
        return Eligibility.refused(RefusalReason.DEADLINE_PASSED)
    if not is_offered(now, session):
        return Eligibility.refused(RefusalReason.SESSION_STARTED)
    if any(inscription.session_id == session.id for inscription in inscriptions):
        return Eligibility.refused(RefusalReason.ALREADY_REGISTERED)
    return Eligibility.granted()
