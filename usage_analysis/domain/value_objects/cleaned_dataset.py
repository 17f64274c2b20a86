"""Cleaned dataset value object."""

from dataclasses import dataclass, field
from typing import Iterator

from usage_analysis.domain.exceptions import RowValidationWarning

from .user_record import UserRecord


@dataclass(frozen=True)
class CleanedDataset:
    """Ordered, validated user records.

    Attributes:
        records: Records in source order, row ids 1..n
        dropped_rows: Number of raw rows excluded during cleaning
        warnings: One warning per dropped row
    """

    records: tuple[UserRecord, ...]
    dropped_rows: int = 0
    warnings: tuple[RowValidationWarning, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.dropped_rows < 0:
            raise ValueError(f"dropped_rows must be non-negative, got {self.dropped_rows}")

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(self.records)

    @property
    def size(self) -> int:
        """Return the number of records."""
        return len(self.records)

    @property
    def labels(self) -> tuple[int, ...]:
        return tuple(r.behavior_class for r in self.records)

    def records_by_row_id(self) -> dict[int, UserRecord]:
        """Index records by their row id."""
        return {r.row_id: r for r in self.records}

    def subset(self, records: tuple[UserRecord, ...]) -> "CleanedDataset":
        """Create a dataset holding only the given records, without drop history."""
        return CleanedDataset(records=tuple(records))
