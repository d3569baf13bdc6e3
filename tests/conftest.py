"""
Shared test fixtures and configuration.
"""

import pytest
import pandas as pd

from category_cloud.data_source import CategoryCount, DataFrameCategorySource
from category_cloud.titles import WikiTitleResolver


class ListCategorySource:
    """In-memory category source that records its queries."""

    def __init__(self, rows):
        self.rows = [CategoryCount(name, count) for name, count in rows]
        self.calls = []

    def fetch_counts(self, min_count, only=frozenset()):
        self.calls.append((min_count, frozenset(only)))
        rows = [row for row in self.rows if row.count >= min_count]
        if only:
            rows = [row for row in rows if row.name in only]
        return sorted(rows, key=lambda row: row.count, reverse=True)


class FailingCategorySource:
    """Category source whose backend is unavailable."""

    def fetch_counts(self, min_count, only=frozenset()):
        raise ConnectionError("database unavailable")


@pytest.fixture
def sample_counts():
    """Category page counts used across tests."""
    return {"A": 10, "B": 5, "C": 1}


@pytest.fixture
def sample_source(sample_counts):
    """DataFrame-backed source over the sample counts."""
    return DataFrameCategorySource.from_counts(sample_counts)


@pytest.fixture
def list_source(sample_counts):
    """Plain in-memory source over the sample counts."""
    return ListCategorySource(sample_counts.items())


@pytest.fixture
def resolver():
    """Default wiki title resolver."""
    return WikiTitleResolver()


@pytest.fixture
def sample_dataframe():
    """Category table as exported from a wiki database."""
    return pd.DataFrame({
        "cat_title": ["Physics", "Organic Chemistry", "Biology", "Stubs", None],
        "cat_pages": [40, 12, 3, 250, 7],
    })


@pytest.fixture
def sample_csv(tmp_path, sample_dataframe):
    """Write the sample category table to a CSV file."""
    file_path = tmp_path / "categories.csv"
    sample_dataframe.to_csv(file_path, index=False)
    return str(file_path)
