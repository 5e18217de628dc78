"""Pytest configuration and shared fixtures for gridsort tests."""

from typing import Any, Dict, List
from unittest.mock import patch

import polars as pl
import pytest

from gridsort import Column, SortManager


class MockSessionState(dict):
    """Mock Streamlit session_state that behaves like a dict."""
    pass


class Recorder:
    """Collects every value pushed on a channel."""

    def __init__(self):
        self.values: List[Any] = []
        self.completed = 0

    def __call__(self, value: Any) -> None:
        self.values.append(value)

    def on_complete(self) -> None:
        self.completed += 1


@pytest.fixture
def mock_streamlit():
    """
    Mock Streamlit's session_state for testing session binding.

    This fixture patches st.session_state so managers can be stored
    without running a Streamlit server.
    """
    mock_session_state = MockSessionState()

    with patch('streamlit.session_state', mock_session_state):
        yield mock_session_state


@pytest.fixture
def columns() -> List[Column]:
    """Columns a, b, g (sortable) and locked (not sortable)."""
    return [
        Column("a", title="Alpha"),
        Column("b", title="Beta"),
        Column("g", title="Group"),
        Column("locked", title="Locked", sortable=False),
    ]


@pytest.fixture
def by_property(columns: List[Column]) -> Dict[str, Column]:
    return {c.property: c for c in columns}


@pytest.fixture
def manager(columns: List[Column]):
    """SortManager over the sample columns, destroyed after the test."""
    m = SortManager(columns)
    yield m
    m.destroy()


@pytest.fixture
def recorders(manager: SortManager):
    """(primary, full) recorders subscribed after the initial replay."""
    primary, full = Recorder(), Recorder()
    manager.sort_channel.subscribe(primary, primary.on_complete)
    manager.multi_sort_channel.subscribe(full, full.on_complete)
    primary.values.clear()
    full.values.clear()
    return primary, full


@pytest.fixture
def sample_table_data() -> pl.LazyFrame:
    """Create sample data for sort bridge tests."""
    return pl.LazyFrame({
        "id": [1, 2, 3, 4, 5],
        "scan_id": [200, 100, 200, 100, 300],
        "mass": [500.5, 600.6, 700.7, 800.8, 900.9],
        "name": ["peak_a", "peak_b", "peak_c", "peak_d", "peak_e"],
    })
