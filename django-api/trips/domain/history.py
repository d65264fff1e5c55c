"""Client-side filtering and facets over the registration history feed."""

from dataclasses import dataclass
from typing import Iterable

from trips.domain.models import HistoryRow


@dataclass(frozen=True)
class HistoryFilter:
    """Empty strings match everything."""

    search_text: str = ""
    year: str = ""
    status: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.search_text or self.year or self.status)


def registration_year(row: HistoryRow) -> str:
    return row.registration_date.split("-", 1)[0][:4]


def _haystack(row: HistoryRow) -> str:
    return f"{row.last_name} {row.first_name} {row.session_name}".lower()


def matches(row: HistoryRow, criteria: HistoryFilter) -> bool:
    if criteria.search_text and criteria.search_text.lower() not in _haystack(row):
        return False
    if criteria.year and registration_year(row) != criteria.year:
        return False
    if criteria.status and row.status.value != criteria.status:
        return False
    return True


def filter_history(rows: Iterable[HistoryRow], criteria: HistoryFilter) -> list[HistoryRow]:
    """Return the rows matching every non-empty criterion, in input order."""
    return [row for row in rows if matches(row, criteria)]


def unique_statuses(rows: Iterable[HistoryRow]) -> list[str]:
    """Distinct statuses of the unfiltered rows, in first-seen order."""
    return list(dict.fromkeys(row.status.value for row in rows))


def unique_years(rows: Iterable[HistoryRow]) -> list[str]:
    """Distinct registration years of the unfiltered rows, in first-seen order.

    Rows without a registration date contribute no year.
    """
    return list(dict.fromkeys(year for year in map(registration_year, rows) if year))
