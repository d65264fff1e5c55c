"""History service - filtered view over the full registration history."""

from dataclasses import dataclass

from trips.domain import HistoryRow
from trips.domain.history import HistoryFilter, filter_history, unique_statuses, unique_years
from trips.stores.interfaces import TripStore


@dataclass(frozen=True)
class HistoryPage:
    """Filtered rows plus facets computed on the unfiltered feed."""

    rows: tuple[HistoryRow, ...]
    total_count: int
    statuses: tuple[str, ...]
    years: tuple[str, ...]

    @property
    def filtered_count(self) -> int:
        return len(self.rows)


class HistoryService:
    def __init__(self, trips: TripStore) -> None:
        self._trips = trips

    def history(self, criteria: HistoryFilter) -> HistoryPage:
        rows = self._trips.full_history()
        return HistoryPage(
            rows=tuple(filter_history(rows, criteria)),
            total_count=len(rows),
            statuses=tuple(unique_statuses(rows)),
            years=tuple(unique_years(rows)),
        )
