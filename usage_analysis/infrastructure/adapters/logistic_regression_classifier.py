"""Multinomial logistic regression adapter.

Infrastructure adapter that implements IClassifier using scikit-learn.
"""

from typing import Any

from usage_analysis.domain.value_objects import MULTINOMIAL_LOGISTIC
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from .estimator_classifier import EstimatorClassifier


class LogisticRegressionClassifier(EstimatorClassifier):
    """Multinomial logistic regression over standardized features.

    One linear score per class, soft-max normalized, fit by maximum
    likelihood with the lbfgs solver.
    """

    def __init__(
        self,
        max_iter: int = 1000,
        C: float = 1.0,
        seed: int | None = 42,
    ) -> None:
        """Initialize the classifier.

        Args:
            max_iter: Iteration budget of the solver
            C: Inverse regularization strength
            seed: Random state passed to the estimator
        """
        super().__init__()
        self._max_iter = max_iter
        self._C = C
        self._seed = seed

    @property
    def name(self) -> str:
        return MULTINOMIAL_LOGISTIC

    def _build_estimator(self) -> Any:
        return Pipeline(
            [
                ("scale", StandardScaler()),
                (
                    "logistic",
                    LogisticRegression(
                        solver="lbfgs",
                        C=self._C,
                        max_iter=self._max_iter,
                        random_state=self._seed,
                    ),
                ),
            ]
        )
