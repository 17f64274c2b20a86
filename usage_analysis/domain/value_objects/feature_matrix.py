"""Feature matrix value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureMatrix:
    """Encoded predictor rows with their column names.

    Attributes:
        feature_names: Names of the columns, in order
        rows: One tuple of floats per record
    """

    feature_names: tuple[str, ...]
    rows: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        width = len(self.feature_names)
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"row {i} has {len(row)} values, expected {width}")

    def __len__(self) -> int:
        return len(self.rows)
