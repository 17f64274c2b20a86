"""Random-guess baseline classifier."""

import random
from typing import Sequence

from usage_analysis.domain.exceptions import ConvergenceWarning
from usage_analysis.domain.interfaces import IClassifier
from usage_analysis.domain.value_objects import BASELINE, FeatureMatrix


class RandomBaselineClassifier(IClassifier):
    """Predicts a class drawn uniformly from the labels seen in training.

    The generator is re-seeded on every fit, so fit followed by predict
    is reproducible for a given seed. With a single training class the
    baseline always predicts that class.
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the baseline.

        Args:
            seed: Random seed for reproducibility (None draws from OS entropy)
        """
        self._seed = seed
        self._random = random.Random(seed)
        self._classes: tuple[int, ...] = ()

    @property
    def name(self) -> str:
        return BASELINE

    @property
    def classes(self) -> tuple[int, ...]:
        return self._classes

    def fit(
        self, features: FeatureMatrix, labels: Sequence[int]
    ) -> tuple[ConvergenceWarning, ...]:
        self._classes = tuple(sorted(set(labels)))
        self._random = random.Random(self._seed)
        return ()

    def predict(self, features: FeatureMatrix) -> list[int]:
        if not self._classes:
            raise RuntimeError("RandomBaselineClassifier has not been fitted")
        return [self._random.choice(self._classes) for _ in range(len(features))]
