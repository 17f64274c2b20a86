"""XGBoost classifier adapter.

Infrastructure adapter that implements IClassifier using XGBoost.
"""

from typing import Any

import xgboost as xgb
from usage_analysis.domain.value_objects import GRADIENT_BOOSTING

from .estimator_classifier import EstimatorClassifier


class XGBoostClassifierAdapter(EstimatorClassifier):
    """Gradient-boosted tree ensemble.

    Shallow trees are added sequentially on the gradient of the soft-max
    loss; XGBoost selects the multi:softprob objective for more than two
    classes. Prediction is the arg-max class.
    """

    def __init__(self, hyperparams: dict[str, Any] | None = None) -> None:
        """Initialize the classifier.

        Args:
            hyperparams: XGBoost hyperparameters, merged over the defaults
        """
        super().__init__()
        self._hyperparams = {**self._default_hyperparams(), **(hyperparams or {})}

    @staticmethod
    def _default_hyperparams() -> dict[str, Any]:
        """Get default XGBoost hyperparameters."""
        return {
            "n_estimators": 100,
            "max_depth": 3,
            "learning_rate": 0.1,
            "random_state": 42,
            "tree_method": "hist",
            "n_jobs": 1,
        }

    @property
    def name(self) -> str:
        return GRADIENT_BOOSTING

    @property
    def hyperparams(self) -> dict[str, Any]:
        return dict(self._hyperparams)

    def _build_estimator(self) -> Any:
        return xgb.XGBClassifier(**self._hyperparams)
