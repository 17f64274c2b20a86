"""Evaluation result value objects.

Immutable data structures for classifier scores on a held-out test set.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from usage_analysis.domain.exceptions import UsageAnalysisWarning

BASELINE = "baseline"
MULTINOMIAL_LOGISTIC = "multinomial_logistic"
GRADIENT_BOOSTING = "gradient_boosting"
MODEL_NAMES = (BASELINE, MULTINOMIAL_LOGISTIC, GRADIENT_BOOSTING)


@dataclass(frozen=True)
class ModelScore:
    """Accuracy of one model on the test set.

    Attributes:
        model_name: Name of the evaluated model
        accuracy: Correct predictions over all test rows
        correct: Number of correctly predicted rows
        total: Number of test rows
        seen_class_accuracy: Accuracy over test rows whose true class was
            present in the training partition (None if there are none)
        warnings: Recoverable conditions raised while fitting or scoring
    """

    model_name: str
    accuracy: float
    correct: int
    total: int
    seen_class_accuracy: float | None = None
    warnings: tuple[UsageAnalysisWarning, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate score values."""
        if not self.model_name:
            raise ValueError("model_name cannot be empty")
        if self.total < 1:
            raise ValueError(f"total must be at least 1, got {self.total}")
        if not 0 <= self.correct <= self.total:
            raise ValueError(f"correct must be between 0 and {self.total}, got {self.correct}")
        if not 0.0 <= self.accuracy <= 1.0:
            raise ValueError(f"accuracy must be between 0.0 and 1.0, got {self.accuracy}")


@dataclass(frozen=True)
class EvaluationResult:
    """Scores of every evaluated model on one split.

    Attributes:
        scores: One score per model, keyed by model name
        training_size: Rows used to fit the models
        test_size: Rows used to score the models
        seed: Seed the split and the baseline were drawn with
        warnings: Run-level recoverable conditions (e.g. failed models)
    """

    scores: tuple[ModelScore, ...]
    training_size: int
    test_size: int
    seed: int
    warnings: tuple[UsageAnalysisWarning, ...] = field(default=())

    def __post_init__(self) -> None:
        names = [s.model_name for s in self.scores]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate model names in scores: {names}")

    @property
    def accuracies(self) -> Mapping[str, float]:
        """Read-only mapping of model name to accuracy."""
        return MappingProxyType({s.model_name: s.accuracy for s in self.scores})

    def score_for(self, model_name: str) -> ModelScore:
        for score in self.scores:
            if score.model_name == model_name:
                return score
        raise KeyError(model_name)

    def all_warnings(self) -> tuple[UsageAnalysisWarning, ...]:
        """Run-level warnings followed by every model's warnings."""
        collected = list(self.warnings)
        for score in self.scores:
            collected.extend(score.warnings)
        return tuple(collected)
