"""Base adapter for scikit-learn compatible estimators.

Shared fit/predict plumbing for library-backed classifiers: label
encoding, single-class fallback and convergence warning capture.
"""

import logging
import warnings
from abc import abstractmethod
from typing import Any, Sequence

import numpy as np
from usage_analysis.domain.exceptions import ConvergenceWarning, EmptyPartitionError
from usage_analysis.domain.interfaces import IClassifier
from usage_analysis.domain.value_objects import FeatureMatrix
from sklearn.exceptions import ConvergenceWarning as SklearnConvergenceWarning
from sklearn.preprocessing import LabelEncoder

_LOGGER = logging.getLogger(__name__)


class EstimatorClassifier(IClassifier):
    """Adapter around an estimator exposing fit(X, y) and predict(X).

    Labels are encoded to 0..k-1 before fitting and decoded after
    prediction. A training set with a single class cannot be fit by
    the underlying libraries; the adapter then predicts that class for
    every row and reports a ConvergenceWarning.
    """

    def __init__(self) -> None:
        self._estimator: Any | None = None
        self._label_encoder: LabelEncoder | None = None
        self._constant_class: int | None = None

    @abstractmethod
    def _build_estimator(self) -> Any:
        """Create a fresh, unfitted estimator."""
        pass

    @property
    def estimator(self) -> Any | None:
        """The fitted estimator, None before fit or after single-class fallback."""
        return self._estimator

    def fit(
        self, features: FeatureMatrix, labels: Sequence[int]
    ) -> tuple[ConvergenceWarning, ...]:
        if len(features) == 0:
            raise EmptyPartitionError("training", 0)
        if len(features) != len(labels):
            raise ValueError(f"got {len(features)} feature rows for {len(labels)} labels")

        X = np.asarray(features.rows, dtype=float)
        y = np.asarray(labels, dtype=int)
        classes = np.unique(y)

        if len(classes) == 1:
            self._estimator = None
            self._label_encoder = None
            self._constant_class = int(classes[0])
            warning = ConvergenceWarning(
                self.name,
                f"only class {self._constant_class} present in training data, "
                "predicting it for every row",
            )
            return (warning,)

        self._constant_class = None
        self._label_encoder = LabelEncoder().fit(y)
        estimator = self._build_estimator()

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            estimator.fit(X, self._label_encoder.transform(y))

        collected = []
        for w in caught:
            if issubclass(w.category, SklearnConvergenceWarning):
                collected.append(ConvergenceWarning(self.name, str(w.message).strip()))
            else:
                _LOGGER.warning("%s raised while fitting: %s", self.name, w.message)

        self._estimator = estimator
        _LOGGER.debug("Fitted %s on %d rows, classes %s", self.name, len(y), classes.tolist())
        return tuple(collected)

    def predict(self, features: FeatureMatrix) -> list[int]:
        if self._constant_class is not None:
            return [self._constant_class] * len(features)
        if self._estimator is None or self._label_encoder is None:
            raise RuntimeError(f"{self.name} has not been fitted")
        if len(features) == 0:
            return []

        X = np.asarray(features.rows, dtype=float)
        encoded = np.asarray(self._estimator.predict(X)).astype(int).ravel()
        return [int(v) for v in self._label_encoder.inverse_transform(encoded)]
