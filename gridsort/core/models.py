"""Column and sort value types shared by the sort manager and the bridge."""

from dataclasses import dataclass, replace
from typing import Any, Dict

# Direction values match Tabulator's sorter "dir" strings
NO_SORT = ""
ASCENDING = "asc"
DESCENDING = "desc"

SORT_DIRECTIONS = (NO_SORT, ASCENDING, DESCENDING)

# Each toggle moves a column one step along this cycle
SORT_CYCLE: Dict[str, str] = {
    NO_SORT: ASCENDING,
    ASCENDING: DESCENDING,
    DESCENDING: NO_SORT,
}


def _check_direction(direction: str) -> str:
    if direction not in SORT_CYCLE:
        raise ValueError(
            f"Invalid sort direction {direction!r}. "
            f"Expected one of: {list(SORT_DIRECTIONS)}"
        )
    return direction


@dataclass(frozen=True)
class ColumnSnapshot:
    """Immutable copy of a column taken when it entered the sort history.

    Attributes:
        property: Column identifier
        title: Display label
        sortable: Whether the column could be sorted when captured
        sort: Direction at the moment of capture
    """

    property: str
    title: str
    sortable: bool
    sort: str = NO_SORT

    def with_sort(self, direction: str) -> "ColumnSnapshot":
        """Return a copy of this snapshot with another direction."""
        return replace(self, sort=_check_direction(direction))


@dataclass(frozen=True)
class SortEntry:
    """One entry of an emitted sort ordering.

    Attributes:
        field: Column property the entry sorts by
        title: Column display label
        direction: "asc", "desc" or "" (unsorted)
    """

    field: str
    title: str
    direction: str

    @classmethod
    def from_snapshot(cls, snapshot: ColumnSnapshot) -> "SortEntry":
        return cls(field=snapshot.property, title=snapshot.title, direction=snapshot.sort)

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "title": self.title, "direction": self.direction}


class Column:
    """
    A table column as seen by the sort manager.

    Columns are created and owned by the caller. Once handed to a
    SortManager, the ``sort`` direction belongs to the manager: callers may
    seed it at construction time and read it afterwards, but only the
    manager changes it.

    Attributes:
        property: Stable identifier, unique among sortable columns
        title: Display label (defaults to the property)
        sortable: Whether clicking the column toggles its sort
    """

    __slots__ = ("property", "title", "sortable", "_sort")

    def __init__(
        self,
        property: str,
        title: str = "",
        sortable: bool = True,
        sort: str = NO_SORT,
    ):
        self.property = property
        self.title = title or property
        self.sortable = sortable
        self._sort = _check_direction(sort)

    @property
    def sort(self) -> str:
        """Current live sort direction."""
        return self._sort

    def _set_sort(self, direction: str) -> None:
        # Only SortManager writes here
        self._sort = _check_direction(direction)

    def snapshot(self) -> ColumnSnapshot:
        """Capture the column's current state."""
        return ColumnSnapshot(
            property=self.property,
            title=self.title,
            sortable=self.sortable,
            sort=self._sort,
        )

    def __repr__(self) -> str:
        return (
            f"Column(property='{self.property}', title='{self.title}', "
            f"sortable={self.sortable}, sort='{self._sort}')"
        )
