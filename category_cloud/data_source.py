"""Category count data sources and the filtered fetch used by the renderer."""

import logging
from pathlib import Path
from typing import AbstractSet, Iterable, List, Mapping, NamedTuple, Protocol, Union

import pandas as pd

from .utils.file_io import read_csv_with_fallback
from .utils.text_processing import normalize_name

logger = logging.getLogger(__name__)

DEFAULT_NAME_COLUMN = 'cat_title'
DEFAULT_COUNT_COLUMN = 'cat_pages'


class CategoryCount(NamedTuple):
    """A category and the number of pages it holds."""

    name: str
    count: int


class CategorySource(Protocol):
    """Anything that can list category page counts.

    Implementations return rows with ``count >= min_count``, restricted to
    ``only`` when it is non-empty, ordered by count descending.
    """

    def fetch_counts(self, min_count: int,
                     only: AbstractSet[str] = frozenset()) -> Iterable[CategoryCount]:
        ...


class DataFrameCategorySource:
    """Category source backed by a pandas DataFrame."""

    def __init__(self, df: pd.DataFrame,
                 name_column: str = DEFAULT_NAME_COLUMN,
                 count_column: str = DEFAULT_COUNT_COLUMN):
        """Initialize the source.

        Args:
            df: DataFrame with one row per category
            name_column: Column holding category names
            count_column: Column holding page counts

        Raises:
            KeyError: If either column is missing
        """
        missing = [col for col in (name_column, count_column) if col not in df.columns]
        if missing:
            raise KeyError(f"Missing required column(s): {', '.join(missing)}")

        self.name_column = name_column
        self.count_column = count_column
        self.df = self._clean(df[[name_column, count_column]])

    def _clean(self, df: pd.DataFrame) -> pd.DataFrame:
        names = df[self.name_column].fillna('').astype(str).map(normalize_name)
        counts = pd.to_numeric(df[self.count_column], errors='coerce').fillna(0)
        counts = counts.where(counts.abs() != float('inf'), 0)
        cleaned = pd.DataFrame({
            'name': names,
            'count': counts.astype(int).clip(lower=0),
        })
        cleaned = cleaned[cleaned['name'] != '']
        dropped = len(df) - len(cleaned)
        if dropped:
            logger.warning(f"Dropped {dropped} rows with empty category names")
        return cleaned.reset_index(drop=True)

    @classmethod
    def from_csv(cls, csv_path: Union[str, Path],
                 name_column: str = DEFAULT_NAME_COLUMN,
                 count_column: str = DEFAULT_COUNT_COLUMN) -> 'DataFrameCategorySource':
        """Load category counts from a CSV file."""
        logger.info(f"Loading category counts from {csv_path}")
        return cls(read_csv_with_fallback(csv_path), name_column, count_column)

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> 'DataFrameCategorySource':
        """Build a source from a mapping of category name to page count."""
        df = pd.DataFrame({
            DEFAULT_NAME_COLUMN: list(counts.keys()),
            DEFAULT_COUNT_COLUMN: list(counts.values()),
        })
        return cls(df)

    def __len__(self) -> int:
        return len(self.df)

    def fetch_counts(self, min_count: int,
                     only: AbstractSet[str] = frozenset()) -> List[CategoryCount]:
        rows = self.df[self.df['count'] >= min_count]
        if only:
            rows = rows[rows['name'].isin(list(only))]
        rows = rows.sort_values('count', ascending=False, kind='mergesort')
        return [CategoryCount(name, int(count))
                for name, count in zip(rows['name'], rows['count'])]


def fetch_categories(source: CategorySource,
                     min_count: int = 1,
                     max_results: int = 0,
                     exclude: AbstractSet[str] = frozenset(),
                     only: AbstractSet[str] = frozenset()) -> List[CategoryCount]:
    """Fetch the categories to display.

    Rows come from the source already thresholded by ``min_count`` and
    restricted to ``only``. The exclude set is applied here, then the result
    is cut down to the ``max_results`` highest counts (0 means no limit).

    Args:
        source: Category data source
        min_count: Minimum page count
        max_results: Maximum number of entries, 0 for unlimited
        exclude: Normalized names to drop
        only: Normalized names to restrict to (empty for no restriction)

    Returns:
        Categories sorted by count descending; empty if nothing qualifies
    """
    rows = source.fetch_counts(min_count, frozenset(only))

    categories = [row for row in rows if row.name not in exclude]
    # Stable sort keeps source order for ties
    categories.sort(key=lambda row: row.count, reverse=True)

    if max_results > 0 and len(categories) > max_results:
        categories = categories[:max_results]

    logger.info(f"Fetched {len(categories)} categories (min={min_count}, max={max_results})")
    return categories
