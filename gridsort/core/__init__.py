"""Core infrastructure for gridsort."""

from .channel import ChannelClosedError, LatestValueChannel
from .models import ASCENDING, DESCENDING, NO_SORT, Column, ColumnSnapshot, SortEntry
from .sort_manager import SortManager, SortManagerDestroyedError, sort_models_equal
from .state import get_sort_manager, reset_sort_manager

__all__ = [
    "Column",
    "ColumnSnapshot",
    "SortEntry",
    "NO_SORT",
    "ASCENDING",
    "DESCENDING",
    "LatestValueChannel",
    "ChannelClosedError",
    "SortManager",
    "SortManagerDestroyedError",
    "sort_models_equal",
    "get_sort_manager",
    "reset_sort_manager",
]
