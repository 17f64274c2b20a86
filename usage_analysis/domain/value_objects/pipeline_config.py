"""Pipeline configuration value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for one analysis run.

    The seed is threaded explicitly into the partitioner, the random
    baseline and the gradient-boosted ensemble.

    Attributes:
        train_ratio: Fraction of rows assigned to the training set
        seed: Seed for partitioning and randomized models
        stratify: Preserve per-class proportions when partitioning
        logistic_max_iter: Iteration budget of the logistic regression solver
        gbm_n_estimators: Number of boosted trees
        gbm_max_depth: Maximum depth of each tree
        gbm_learning_rate: Shrinkage applied to each tree
    """

    train_ratio: float = 0.7
    seed: int = 42
    stratify: bool = False
    logistic_max_iter: int = 1000
    gbm_n_estimators: int = 100
    gbm_max_depth: int = 3
    gbm_learning_rate: float = 0.1

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not 0.0 < self.train_ratio < 1.0:
            raise ValueError(f"train_ratio must be between 0 and 1, got {self.train_ratio}")
        if self.logistic_max_iter < 1:
            raise ValueError(
                f"logistic_max_iter must be at least 1, got {self.logistic_max_iter}"
            )
        if self.gbm_n_estimators < 1:
            raise ValueError(f"gbm_n_estimators must be at least 1, got {self.gbm_n_estimators}")
        if self.gbm_max_depth < 1:
            raise ValueError(f"gbm_max_depth must be at least 1, got {self.gbm_max_depth}")
        if not 0.0 < self.gbm_learning_rate <= 1.0:
            raise ValueError(
                f"gbm_learning_rate must be in (0, 1], got {self.gbm_learning_rate}"
            )
