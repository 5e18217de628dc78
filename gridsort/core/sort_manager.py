"""Sort and group state for a table's columns."""

from typing import List, Optional, Sequence, Tuple

from .channel import LatestValueChannel
from .models import (
    ASCENDING,
    NO_SORT,
    SORT_CYCLE,
    Column,
    ColumnSnapshot,
    SortEntry,
)


class SortManagerDestroyedError(RuntimeError):
    """Raised when a destroyed SortManager is asked to change its state."""

    pass


def sort_models_equal(
    left: Optional[Sequence[SortEntry]], right: Optional[Sequence[SortEntry]]
) -> bool:
    """
    Compare two sort orderings structurally.

    Two orderings are equal when they have the same length and the same
    field, title and direction at every position.
    """
    if left is None or right is None:
        return left is right
    if len(left) != len(right):
        return False
    return all(
        a.field == b.field and a.title == b.title and a.direction == b.direction
        for a, b in zip(left, right)
    )


class SortManager:
    """
    Tracks which columns a table is sorted by and in what priority.

    Clicking a column cycles its direction ("" -> "asc" -> "desc" -> "").
    Every click pushes the column to the front of a priority history, so
    sorting by B after A yields the ordering [B, A]. Only the last clicked
    column shows a live direction; earlier ones keep the direction they had
    when clicked. Cycling a column back to unsorted forgets the history.

    A grouping column, when set, is always reported first.

    Two channels publish the result:
        - sort_channel: the highest-priority SortEntry, or None
        - multi_sort_channel: the full ordered list of SortEntry

    Both replay their latest value to new subscribers. Nothing is emitted
    when an operation leaves the full ordering unchanged.

    Example:
        manager = SortManager([Column("mass"), Column("name")])
        manager.multi_sort_channel.subscribe(render_sort_icons)
        manager.change_sort(manager.columns[0])
    """

    def __init__(self, columns: Optional[List[Column]] = None):
        """
        Initialize the SortManager.

        Args:
            columns: Columns of the table. Their ``sort`` direction is
                managed by this instance from now on.
        """
        self._columns: List[Column] = columns if columns is not None else []
        self._sorted_by: List[ColumnSnapshot] = []
        self._grouped_by: Optional[ColumnSnapshot] = None
        self._destroyed = False

        self.sort_channel: LatestValueChannel[Optional[SortEntry]] = LatestValueChannel(None)
        self.multi_sort_channel: LatestValueChannel[List[SortEntry]] = LatestValueChannel([])

    @property
    def columns(self) -> List[Column]:
        return self._columns

    @columns.setter
    def columns(self, columns: List[Column]) -> None:
        self.set_columns(columns)

    @property
    def grouped_by(self) -> Optional[ColumnSnapshot]:
        """Snapshot of the grouping column, or None."""
        return self._grouped_by

    @property
    def sorted_by(self) -> Tuple[ColumnSnapshot, ...]:
        """Priority history, most significant first."""
        return tuple(self._sorted_by)

    @property
    def sort(self) -> Optional[SortEntry]:
        """Latest value of the primary sort channel."""
        return self.sort_channel.value

    @property
    def multi_sort(self) -> List[SortEntry]:
        """Latest value of the full sort channel."""
        return list(self.multi_sort_channel.value)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def set_columns(self, columns: List[Column]) -> None:
        """
        Replace the table's columns.

        If one of the new columns already carries a direction, the first
        such column is emitted as the whole ordering. The priority history
        itself is left as it was.

        If none does, only the primary channel is reset to None; the full
        ordering keeps its last value.

        Args:
            columns: New column list
        """
        self._check_alive()
        self._columns = columns

        sorted_column = next((c for c in columns if c.sort != NO_SORT), None)

        if sorted_column is None:
            if self.sort_channel.value is not None:
                self.sort_channel.emit(None)
            return

        self._emit_sort([sorted_column.snapshot()])

    def change_group(self, column: Optional[Column]) -> None:
        """
        Group the table by a column, or remove grouping.

        Grouping collapses a multi-column sort to its top entry. Removing
        grouping when nothing else is sorted keeps the former grouping
        column as a plain ascending sort.

        Args:
            column: Column to group by, or None to ungroup
        """
        self._check_alive()

        previous_grouped_by = self._grouped_by

        self._grouped_by = None
        if column is not None:
            self._grouped_by = column.snapshot().with_sort(ASCENDING)

        if self._sorted_by:
            top_property = self._sorted_by[0].property
            for c in self._columns:
                if c.sortable and c.property != top_property:
                    c._set_sort(NO_SORT)
        elif previous_grouped_by is not None:
            self._sorted_by.append(previous_grouped_by)

        self._emit_sort(self._sorted_by)

    def change_sort(self, column: Column) -> None:
        """
        Toggle the sort direction of a column.

        Unsortable columns are ignored.

        Args:
            column: The clicked column
        """
        self._check_alive()

        if not column.sortable:
            return

        for c in self._columns:
            if c.sortable and c.property != column.property:
                c._set_sort(NO_SORT)

        column._set_sort(SORT_CYCLE[column.sort])

        if column.sort == NO_SORT:
            self._sorted_by = []
        else:
            self._sorted_by = [
                s for s in self._sorted_by if s.property != column.property
            ]
            self._sorted_by.insert(0, column.snapshot())

        if self._grouped_by is not None and self._grouped_by.property == column.property:
            self._grouped_by = self._grouped_by.with_sort(column.sort)

        self._emit_sort(self._sorted_by)

    def destroy(self) -> None:
        """Complete both channels. Further changes raise SortManagerDestroyedError."""
        if self._destroyed:
            return
        self._destroyed = True
        self.sort_channel.complete()
        self.multi_sort_channel.complete()

    def _check_alive(self) -> None:
        if self._destroyed:
            raise SortManagerDestroyedError(
                "SortManager has been destroyed and can no longer change sort state"
            )

    def _emit_sort(self, snapshots: Sequence[ColumnSnapshot]) -> None:
        ordering = list(snapshots)

        if self._grouped_by is not None:
            self._pin_grouped_column(ordering)

        updated_sort = [SortEntry.from_snapshot(s) for s in ordering]

        if sort_models_equal(self.multi_sort_channel.value, updated_sort):
            return

        self.sort_channel.emit(updated_sort[0] if updated_sort else None)
        self.multi_sort_channel.emit(updated_sort)

    def _pin_grouped_column(self, ordering: List[ColumnSnapshot]) -> None:
        grouped = self._grouped_by
        # A grouping key is never shown unsorted
        if grouped.sort == NO_SORT:
            grouped = grouped.with_sort(ASCENDING)

        index = next(
            (i for i, s in enumerate(ordering) if s.property == grouped.property), -1
        )
        if index > 0:
            del ordering[index]
            ordering.insert(0, grouped)
        elif index < 0:
            ordering.insert(0, grouped)
        elif ordering[0].sort == NO_SORT:
            ordering[0] = ordering[0].with_sort(ASCENDING)

    def __repr__(self) -> str:
        grouped = self._grouped_by.property if self._grouped_by else None
        return (
            f"SortManager(columns={len(self._columns)}, "
            f"sorted_by={[s.property for s in self._sorted_by]}, "
            f"grouped_by={grouped!r}, destroyed={self._destroyed})"
        )
