"""Descriptive statistics value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnSummary:
    """Summary statistics of one numeric column."""

    column: str
    count: int
    mean: float
    median: float
    mode: float
    std: float
    minimum: float
    maximum: float

    @property
    def range(self) -> float:
        return self.maximum - self.minimum


@dataclass(frozen=True)
class SelectionSummary:
    """Averages over a set of selected records.

    Attributes:
        count: Number of selected records found in the dataset
        avg_battery_drain_mah: Mean battery drain, None for an empty selection
        avg_data_usage_mb: Mean data usage, None for an empty selection
    """

    count: int
    avg_battery_drain_mah: float | None
    avg_data_usage_mb: float | None
