"""Train/test split value object."""

from dataclasses import dataclass

from .cleaned_dataset import CleanedDataset


@dataclass(frozen=True)
class Split:
    """A disjoint cover of a cleaned dataset.

    Attributes:
        training_set: Records used to fit models
        test_set: Held-out records used for scoring
        seed: Seed the partition was drawn with
        ratio: Requested training fraction
        stratified: Whether per-class proportions were preserved
    """

    training_set: CleanedDataset
    test_set: CleanedDataset
    seed: int
    ratio: float
    stratified: bool = False

    def __post_init__(self) -> None:
        """Validate that the two sets are disjoint."""
        train_ids = {r.row_id for r in self.training_set}
        test_ids = {r.row_id for r in self.test_set}
        overlap = train_ids & test_ids
        if overlap:
            raise ValueError(f"training and test sets overlap on {len(overlap)} rows")

    @property
    def sizes(self) -> tuple[int, int]:
        """Return (training size, test size)."""
        return self.training_set.size, self.test_set.size
