"""
gridsort - Sort and grouping state for interactive tables.

This package tracks which columns a table is sorted by, in which priority,
and which column (if any) the rows are grouped by. Changes are published on
replaying channels that a Streamlit/Tabulator frontend subscribes to.
"""

from .core.channel import ChannelClosedError, LatestValueChannel
from .core.models import ASCENDING, DESCENDING, NO_SORT, Column, ColumnSnapshot, SortEntry
from .core.sort_manager import SortManager, SortManagerDestroyedError, sort_models_equal
from .core.state import get_sort_manager, get_sort_state_for_vue, reset_sort_manager
from .rendering.bridge import columns_from_definitions, to_polars_sort, to_tabulator_sorters

__version__ = "0.1.0"

__all__ = [
    # Core
    "Column",
    "ColumnSnapshot",
    "SortEntry",
    "NO_SORT",
    "ASCENDING",
    "DESCENDING",
    "SortManager",
    "SortManagerDestroyedError",
    "sort_models_equal",
    "LatestValueChannel",
    "ChannelClosedError",
    # Session
    "get_sort_manager",
    "reset_sort_manager",
    "get_sort_state_for_vue",
    # Rendering
    "to_tabulator_sorters",
    "to_polars_sort",
    "columns_from_definitions",
]
