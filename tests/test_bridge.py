"""Tests for converting sort orderings for the frontend and polars."""

import polars as pl
import pytest

from gridsort import (
    ASCENDING,
    DESCENDING,
    NO_SORT,
    SortEntry,
    SortManager,
    columns_from_definitions,
    to_polars_sort,
    to_tabulator_sorters,
)


class TestTabulatorSorters:
    """Tests for Tabulator initialSort conversion."""

    def test_converts_in_priority_order(self):
        entries = [SortEntry("scan_id", "Scan", ASCENDING), SortEntry("mass", "Mass", DESCENDING)]
        assert to_tabulator_sorters(entries) == [
            {"column": "scan_id", "dir": "asc"},
            {"column": "mass", "dir": "desc"},
        ]

    def test_skips_unsorted_entries(self):
        entries = [SortEntry("scan_id", "Scan", NO_SORT)]
        assert to_tabulator_sorters(entries) == []

    def test_empty_input(self):
        assert to_tabulator_sorters(None) == []
        assert to_tabulator_sorters([]) == []


class TestPolarsSort:
    """Tests for LazyFrame.sort argument conversion."""

    def test_empty_input(self):
        assert to_polars_sort(None) == ([], [])

    def test_arguments_sort_lazyframe(self, sample_table_data: pl.LazyFrame):
        entries = [SortEntry("scan_id", "Scan", ASCENDING), SortEntry("mass", "Mass", DESCENDING)]

        by, descending = to_polars_sort(entries)
        result = sample_table_data.sort(by, descending=descending).collect()

        assert descending == [False, True]
        assert result["id"].to_list() == [4, 2, 3, 1, 5]

    def test_manager_ordering_drives_sort(self, sample_table_data: pl.LazyFrame):
        columns = columns_from_definitions([{"field": "scan_id"}, {"field": "mass"}])
        manager = SortManager(columns)
        manager.change_sort(columns[1])
        manager.change_sort(columns[1])
        manager.change_group(columns[0])

        by, descending = to_polars_sort(manager.multi_sort)
        result = sample_table_data.sort(by, descending=descending).collect()

        assert result["id"].to_list() == [4, 2, 3, 1, 5]


class TestColumnsFromDefinitions:
    """Tests for building columns from Tabulator definitions."""

    def test_reads_definition_fields(self):
        columns = columns_from_definitions([
            {"field": "mass", "title": "Mass", "sorter": "number"},
            {"field": "name", "headerSort": False},
            {"field": "scan_id", "sortDir": "desc"},
        ])

        assert [c.property for c in columns] == ["mass", "name", "scan_id"]
        assert columns[0].title == "Mass"
        assert columns[1].title == "name"
        assert columns[1].sortable is False
        assert columns[2].sort == DESCENDING

    def test_definition_without_field_warns(self):
        with pytest.warns(UserWarning, match="without a field"):
            columns = columns_from_definitions([{"title": "Orphan"}, {"field": "mass"}])

        assert [c.property for c in columns] == ["mass"]
