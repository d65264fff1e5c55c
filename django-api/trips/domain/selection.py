"""Partition and ranking of draw results for display."""

from dataclasses import dataclass
from typing import Iterable

from trips.domain.enums import SelectionType
from trips.domain.models import SelectionResult


@dataclass(frozen=True)
class RankedSelection:
    """A selection record with its position in the sorted list.

    display_index is the 1-based position after sorting and feeds the
    "#1, #2" badges. record.priority_order is the rank stored by the draw
    and feeds the "Priority: N" label. The two may differ.
    """

    display_index: int
    record: SelectionResult

    @property
    def priority_order(self) -> int:
        return self.record.priority_order


@dataclass(frozen=True)
class SelectionPartition:
    official: tuple[RankedSelection, ...] = ()
    substitute: tuple[RankedSelection, ...] = ()

    @property
    def official_count(self) -> int:
        return len(self.official)

    @property
    def substitute_count(self) -> int:
        return len(self.substitute)

    @property
    def total_count(self) -> int:
        return self.official_count + self.substitute_count

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0


def _rank(records: list[SelectionResult]) -> tuple[RankedSelection, ...]:
    # sorted() is stable, so equal priorities keep their input order
    ordered = sorted(records, key=lambda record: record.priority_order)
    return tuple(
        RankedSelection(display_index=position, record=record)
        for position, record in enumerate(ordered, start=1)
    )


def partition_selections(records: Iterable[SelectionResult]) -> SelectionPartition:
    """Split records into official and substitute lists, each ranked by priority.

    No deduplication or validation is applied to the input.
    """
    official: list[SelectionResult] = []
    substitute: list[SelectionResult] = []
    for record in records:
        match record.selection_type:
            case SelectionType.OFFICIAL:
                official.append(record)
            case SelectionType.SUBSTITUTE:
                substitute.append(record)
    return SelectionPartition(official=_rank(official), substitute=_rank(substitute))
