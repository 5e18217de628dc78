"""Bridge between emitted sort orderings and the table frontend."""

import warnings
from typing import Any, Dict, Iterable, List, Optional, Tuple

import polars as pl

from ..core.models import DESCENDING, NO_SORT, Column, SortEntry


def to_tabulator_sorters(entries: Optional[Iterable[SortEntry]]) -> List[Dict[str, str]]:
    """
    Convert a sort ordering to Tabulator sorter dicts.

    Produces the ``[{'column': 'field', 'dir': 'asc'}]`` shape used for
    Tabulator's initialSort. Unsorted entries are dropped.

    Args:
        entries: Ordering from SortManager.multi_sort (or None)

    Returns:
        List of sorter dicts, highest priority first
    """
    if not entries:
        return []
    return [
        {"column": entry.field, "dir": entry.direction}
        for entry in entries
        if entry.direction != NO_SORT
    ]


def to_polars_sort(
    entries: Optional[Iterable[SortEntry]],
) -> Tuple[List[pl.Expr], List[bool]]:
    """
    Convert a sort ordering to arguments for ``LazyFrame.sort``.

    Example:
        by, descending = to_polars_sort(manager.multi_sort)
        if by:
            data = data.sort(by, descending=descending)

    Args:
        entries: Ordering from SortManager.multi_sort (or None)

    Returns:
        Tuple of (column expressions, descending flags). Both are empty
        when nothing is sorted.
    """
    by: List[pl.Expr] = []
    descending: List[bool] = []
    for entry in entries or []:
        if entry.direction == NO_SORT:
            continue
        by.append(pl.col(entry.field))
        descending.append(entry.direction == DESCENDING)
    return by, descending


def columns_from_definitions(
    column_definitions: Iterable[Dict[str, Any]],
) -> List[Column]:
    """
    Build Columns from Tabulator column definitions.

    Reads ``field``, ``title``, ``headerSort`` (False makes the column
    unsortable) and an optional ``sortDir`` seed direction. Definitions
    without a field are skipped.

    Args:
        column_definitions: List of Tabulator column definition dicts

    Returns:
        Columns in definition order
    """
    columns: List[Column] = []
    for col_def in column_definitions:
        field = col_def.get("field")
        if not field:
            warnings.warn(
                f"Skipping column definition without a field: {col_def!r}"
            )
            continue
        columns.append(
            Column(
                property=field,
                title=col_def.get("title") or field,
                sortable=col_def.get("headerSort", True) is not False,
                sort=col_def.get("sortDir", NO_SORT) or NO_SORT,
            )
        )
    return columns
