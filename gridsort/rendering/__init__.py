"""Rendering helpers for sort state."""

from .bridge import columns_from_definitions, to_polars_sort, to_tabulator_sorters

__all__ = [
    "to_tabulator_sorters",
    "to_polars_sort",
    "columns_from_definitions",
]
