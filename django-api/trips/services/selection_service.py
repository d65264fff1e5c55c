"""Selection service - draw results and the remote draw trigger."""

import logging
from dataclasses import dataclass

from trips.domain import DrawOutcome, SessionId
from trips.domain.errors import DomainRejectedError, NotFoundError, TransportError
from trips.domain.selection import SelectionPartition, partition_selections
from trips.stores.interfaces import TripStore

logger = logging.getLogger(__name__)

DRAW_FAILED = "Failed to generate selection. Please try again."


@dataclass(frozen=True)
class DrawReport:
    """What happened when the draw was triggered.

    partition is only set when the draw succeeded.
    """

    outcome: DrawOutcome
    message: str
    status_code: int
    partition: SelectionPartition | None = None


class SelectionService:
    def __init__(self, trips: TripStore) -> None:
        self._trips = trips

    def results(self, session_id: SessionId) -> SelectionPartition:
        """Return the partitioned results; empty when no draw happened yet."""
        return partition_selections(self._trips.list_selection_results(session_id))

    def generate(self, session_id: SessionId) -> DrawReport:
        """Trigger the draw once. Never retried; the caller re-triggers manually."""
        logger.info("Triggering draw for session %s", session_id)
        try:
            self._trips.generate_selection(session_id)
        except NotFoundError as exc:
            logger.info("Draw for unknown session %s", session_id)
            return DrawReport(outcome=DrawOutcome.REJECTED, message=exc.message, status_code=404)
        except DomainRejectedError as exc:
            logger.info("Draw for session %s rejected: %s", session_id, exc.message)
            return DrawReport(outcome=DrawOutcome.REJECTED, message=exc.message, status_code=exc.status_code)
        except TransportError as exc:
            logger.warning("Draw for session %s failed: %s", session_id, exc.detail)
            return DrawReport(outcome=DrawOutcome.FAILED, message=DRAW_FAILED, status_code=502)

        partition = self.results(session_id)
        return DrawReport(
            outcome=DrawOutcome.GENERATED,
            message=(
                f"Selection generated: {partition.official_count} official, "
                f"{partition.substitute_count} substitute"
            ),
            status_code=201,
            partition=partition,
        )
