"""Temporal status evaluation for sessions and periods.

Every function takes ``now`` explicitly and never reads the clock.
"""

import math
from collections import Counter
from datetime import datetime
from typing import Iterable

from trips.domain.enums import PeriodState, PeriodStatus, SessionStatus
from trips.domain.models import Period, Session

SECONDS_PER_DAY = 24 * 60 * 60


def evaluate_session_status(now: datetime, session: Session) -> SessionStatus:
    """Return where ``now`` falls relative to the session's travel dates.

    Both boundaries count as active.
    """
    if now < session.start_date:
        return SessionStatus.UPCOMING
    if now <= session.end_date:
        return SessionStatus.ACTIVE
    return SessionStatus.COMPLETED


def evaluate_period_status(now: datetime, period: Period) -> PeriodStatus:
    """Return the display status of a period; first matching rule wins.

    1. an administrator-closed period is CLOSED whatever its dates
    2. past the registration deadline (strictly) it is EXPIRED
    3. before its start it is UPCOMING
    4. between start and end inclusive it is ACTIVE
    5. otherwise ENDED
    """
    if period.state is PeriodState.CLOSED:
        return PeriodStatus.CLOSED
    if now > period.registration_deadline:
        return PeriodStatus.EXPIRED
    if now < period.start_date:
        return PeriodStatus.UPCOMING
    if now <= period.end_date:
        return PeriodStatus.ACTIVE
    return PeriodStatus.ENDED


def days_until_deadline(now: datetime, period: Period) -> int:
    """Whole days left before the deadline, rounded up; negative once lapsed."""
    remaining = (period.registration_deadline - now).total_seconds()
    return math.ceil(remaining / SECONDS_PER_DAY)


def duration_days(start: datetime, end: datetime) -> int:
    return math.ceil(abs((end - start).total_seconds()) / SECONDS_PER_DAY)


def summarize_sessions(now: datetime, sessions: Iterable[Session]) -> dict[SessionStatus, int]:
    """Count sessions per status; every status is present in the result."""
    counts = Counter(evaluate_session_status(now, session) for session in sessions)
    return {status: counts.get(status, 0) for status in SessionStatus}
