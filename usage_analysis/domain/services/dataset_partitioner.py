"""Train/test partitioning service."""

import logging
import math

from sklearn.model_selection import train_test_split

from usage_analysis.domain.exceptions import EmptyPartitionError
from usage_analysis.domain.value_objects import CleanedDataset, Split, UserRecord

_LOGGER = logging.getLogger(__name__)


def training_count(total: int, ratio: float) -> int:
    """Number of training rows: floor(total * ratio), remainder goes to test."""
    # 700 * 0.7 evaluates to 489.99999999999994 in binary floating point
    return math.floor(total * ratio + 1e-9)


class DatasetPartitioner:
    """Deterministic, seeded train/test partitioner.

    The training count is floor(n * ratio) and the test set takes the
    remainder, so 700 rows at 0.7 give 490/210. The count is passed to
    train_test_split as an absolute size, which also holds under
    stratification. Both sets keep dataset order.
    """

    def partition(
        self,
        dataset: CleanedDataset,
        ratio: float = 0.7,
        seed: int = 42,
        stratify: bool = False,
    ) -> Split:
        """Split a dataset into training and test sets.

        Args:
            dataset: Cleaned dataset to split
            ratio: Fraction of rows assigned to training, in (0, 1)
            seed: random_state of the shuffle
            stratify: Preserve per-class proportions

        Returns:
            Split whose sets are a disjoint cover of the dataset

        Raises:
            ValueError: If ratio is not in (0, 1), or the classes are too
                small to stratify
            EmptyPartitionError: If either set would be empty
        """
        if not 0.0 < ratio < 1.0:
            raise ValueError(f"ratio must be between 0 and 1, got {ratio}")

        train_size = training_count(dataset.size, ratio)
        if train_size == 0:
            raise EmptyPartitionError("training", dataset.size)
        if train_size == dataset.size:
            raise EmptyPartitionError("test", dataset.size)

        try:
            training_positions, _ = train_test_split(
                list(range(dataset.size)),
                train_size=train_size,
                random_state=seed,
                shuffle=True,
                stratify=list(dataset.labels) if stratify else None,
            )
        except ValueError as e:
            if stratify:
                raise ValueError(f"Cannot stratify {dataset.size} rows: {e}") from e
            raise
        selected = set(training_positions)

        training: list[UserRecord] = []
        test: list[UserRecord] = []
        for position, record in enumerate(dataset.records):
            if position in selected:
                training.append(record)
            else:
                test.append(record)

        _LOGGER.info(
            "Partitioned %d rows into %d training / %d test (seed=%d, stratified=%s)",
            dataset.size,
            len(training),
            len(test),
            seed,
            stratify,
        )
        return Split(
            training_set=dataset.subset(tuple(training)),
            test_set=dataset.subset(tuple(test)),
            seed=seed,
            ratio=ratio,
            stratified=stratify,
        )
