"""Descriptive statistics over cleaned usage records."""

from dataclasses import asdict, fields

import pandas as pd

from usage_analysis.domain.value_objects import (
    CATEGORICAL_FIELDS,
    NUMERIC_FIELDS,
    CleanedDataset,
    ColumnSummary,
    UserRecord,
)

_GROUPING_FIELDS = CATEGORICAL_FIELDS + ("behavior_class",)


def records_frame(dataset: CleanedDataset) -> pd.DataFrame:
    """One DataFrame row per record, one column per UserRecord field."""
    return pd.DataFrame(
        [asdict(r) for r in dataset.records],
        columns=[f.name for f in fields(UserRecord)],
    )


class DescriptiveStatisticsService:
    """Summaries and grouped averages for the report narrative."""

    def summarize(self, dataset: CleanedDataset) -> dict[str, ColumnSummary]:
        """Summarize every numeric column.

        Args:
            dataset: Cleaned dataset

        Returns:
            ColumnSummary per numeric field, in field order

        Raises:
            ValueError: If the dataset is empty
        """
        if dataset.size == 0:
            raise ValueError("cannot summarize an empty dataset")
        df = records_frame(dataset)
        return {name: self._summarize_series(name, df[name]) for name in NUMERIC_FIELDS}

    def summarize_column(self, dataset: CleanedDataset, column: str) -> ColumnSummary:
        if column not in NUMERIC_FIELDS:
            raise ValueError(f"{column} is not a numeric field")
        if dataset.size == 0:
            raise ValueError("cannot summarize an empty dataset")
        return self._summarize_series(column, records_frame(dataset)[column])

    @staticmethod
    def _summarize_series(column: str, series: pd.Series) -> ColumnSummary:
        values = series.astype(float)
        # Sample standard deviation, NaN for a single row
        std = values.std()
        return ColumnSummary(
            column=column,
            count=int(values.count()),
            mean=float(values.mean()),
            median=float(values.median()),
            # Smallest of the most frequent values
            mode=float(values.mode()[0]),
            std=0.0 if pd.isna(std) else float(std),
            minimum=float(values.min()),
            maximum=float(values.max()),
        )

    def group_means(
        self, dataset: CleanedDataset, by: str, column: str
    ) -> dict[str | int, float]:
        """Mean of a numeric column for each value of a grouping field.

        Args:
            dataset: Cleaned dataset
            by: Categorical field or "behavior_class"
            column: Numeric field to average

        Returns:
            Mapping of group value to mean, sorted by group value
        """
        if by not in _GROUPING_FIELDS:
            raise ValueError(f"cannot group by {by}")
        if column not in NUMERIC_FIELDS:
            raise ValueError(f"{column} is not a numeric field")

        means = records_frame(dataset).groupby(by)[column].mean().sort_index()
        key_type = int if by == "behavior_class" else str
        return {key_type(key): float(value) for key, value in means.items()}

    def class_counts(self, dataset: CleanedDataset) -> dict[int, int]:
        counts = records_frame(dataset)["behavior_class"].value_counts().sort_index()
        return {int(label): int(count) for label, count in counts.items()}
