"""Classifier interface.

Contract shared by every model the evaluation harness compares.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from usage_analysis.domain.exceptions import ConvergenceWarning
from usage_analysis.domain.value_objects import FeatureMatrix


class IClassifier(ABC):
    """Contract for behavior class prediction."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Model name used as the key of the evaluation result."""
        pass

    @abstractmethod
    def fit(
        self, features: FeatureMatrix, labels: Sequence[int]
    ) -> tuple[ConvergenceWarning, ...]:
        """Fit the model on the training partition.

        Args:
            features: Encoded training features
            labels: Behavior class of each training row

        Returns:
            Recoverable conditions met while fitting (empty if none)
        """
        pass

    @abstractmethod
    def predict(self, features: FeatureMatrix) -> list[int]:
        """Predict a behavior class for each row.

        Args:
            features: Encoded features, same columns as used in fit

        Returns:
            One predicted class per row

        Raises:
            RuntimeError: If the model has not been fitted
        """
        pass
