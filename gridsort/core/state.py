"""Keep SortManagers alive across Streamlit script reruns."""

from typing import Any, Dict, List, Optional

from .models import Column
from .sort_manager import SortManager

# Session state key under which the default manager is stored
DEFAULT_SESSION_KEY = "gridsort_sort"


def get_sort_manager(
    key: str = DEFAULT_SESSION_KEY,
    columns: Optional[List[Column]] = None,
) -> SortManager:
    """
    Get or create the SortManager stored in Streamlit's session_state.

    Streamlit reruns the whole script on every interaction, so the manager
    has to live in session_state to keep its sort history. A destroyed
    manager is replaced by a fresh one.

    Args:
        key: session_state key. Use different keys for independent tables.
        columns: Columns for a newly created manager. Ignored when a live
            manager already exists under ``key``.

    Returns:
        The SortManager for this session and key
    """
    import streamlit as st

    manager = st.session_state.get(key)
    if manager is None or manager.destroyed:
        manager = SortManager(columns)
        st.session_state[key] = manager
    return manager


def reset_sort_manager(key: str = DEFAULT_SESSION_KEY) -> bool:
    """
    Destroy and forget the SortManager stored under a key.

    Returns:
        True if a manager was removed, False if none was stored
    """
    import streamlit as st

    if key not in st.session_state:
        return False
    manager = st.session_state[key]
    del st.session_state[key]
    manager.destroy()
    return True


def get_sort_state_for_vue(key: str = DEFAULT_SESSION_KEY) -> Dict[str, Any]:
    """
    Get the current sort state formatted for the Vue frontend.

    Returns:
        Dict with "sort" (entry dict or None), "multiSort" (list of entry
        dicts) and "groupedBy" (grouping property or None)
    """
    manager = get_sort_manager(key)
    primary = manager.sort
    return {
        "sort": primary.to_dict() if primary is not None else None,
        "multiSort": [entry.to_dict() for entry in manager.multi_sort],
        "groupedBy": manager.grouped_by.property if manager.grouped_by else None,
    }
