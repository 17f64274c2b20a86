"""Model evaluation service.

Fits every classifier on the same training partition and scores it on
the same held-out test partition.
"""

import logging
from typing import Iterable, Sequence

from sklearn.metrics import accuracy_score

from usage_analysis.domain.exceptions import (
    ConvergenceWarning,
    EmptyPartitionError,
    UnseenCategoryWarning,
    UsageAnalysisWarning,
)
from usage_analysis.domain.interfaces import IClassifier
from usage_analysis.domain.value_objects import EvaluationResult, FeatureMatrix, ModelScore, Split

from .feature_encoder import FeatureEncoder, split_features
from .random_baseline_classifier import RandomBaselineClassifier

_LOGGER = logging.getLogger(__name__)


def accuracy(predictions: Sequence[int], labels: Sequence[int]) -> float:
    """Fraction of rows where the prediction equals the true label."""
    _check_lengths(predictions, labels)
    return float(accuracy_score(list(labels), list(predictions)))


def correct_count(predictions: Sequence[int], labels: Sequence[int]) -> int:
    """Number of rows where the prediction equals the true label."""
    _check_lengths(predictions, labels)
    return int(accuracy_score(list(labels), list(predictions), normalize=False))


def _check_lengths(predictions: Sequence[int], labels: Sequence[int]) -> None:
    if len(predictions) != len(labels):
        raise ValueError(
            f"got {len(predictions)} predictions for {len(labels)} labels"
        )
    if not labels:
        raise ValueError("cannot compute accuracy of an empty set")


def evaluate_model(
    model: IClassifier,
    features: FeatureMatrix,
    labels: Sequence[int],
    seen_classes: Iterable[int] | None = None,
    warnings: Sequence[UsageAnalysisWarning] = (),
) -> ModelScore:
    """Score a fitted model on a test set.

    Args:
        model: Fitted classifier
        features: Encoded test features
        labels: True classes of the test rows
        seen_classes: Classes present in the training partition
        warnings: Conditions raised while fitting, kept on the score

    Returns:
        ModelScore for the model
    """
    predictions = model.predict(features)
    score = accuracy(predictions, labels)
    correct = correct_count(predictions, labels)

    seen_accuracy = score
    if seen_classes is not None:
        seen = set(seen_classes)
        pairs = [(p, y) for p, y in zip(predictions, labels) if y in seen]
        if pairs:
            seen_accuracy = accuracy([p for p, _ in pairs], [y for _, y in pairs])
        else:
            seen_accuracy = None

    return ModelScore(
        model_name=model.name,
        accuracy=score,
        correct=correct,
        total=len(labels),
        seen_class_accuracy=seen_accuracy,
        warnings=tuple(warnings),
    )


class ModelEvaluationService:
    """Evaluation harness over interchangeable classifiers.

    A model that fails to fit or predict is logged and left out of the
    result with a recorded warning; only an empty partition aborts.
    """

    def __init__(self, classifiers: Sequence[IClassifier]) -> None:
        """Initialize the harness.

        Args:
            classifiers: Models to compare, each with a distinct name
        """
        names = [c.name for c in classifiers]
        if len(names) != len(set(names)):
            raise ValueError(f"classifier names must be unique, got {names}")
        self._classifiers = tuple(classifiers)

    def evaluate(self, split: Split) -> EvaluationResult:
        """Fit and score every classifier on the split.

        Args:
            split: Training and test partitions

        Returns:
            EvaluationResult with one score per successfully evaluated model

        Raises:
            EmptyPartitionError: If the training or test set is empty
        """
        if split.training_set.size == 0:
            raise EmptyPartitionError("training", split.test_set.size)
        if split.test_set.size == 0:
            raise EmptyPartitionError("test", split.training_set.size)

        encoder = FeatureEncoder().fit(split.training_set.records)
        train_x, train_y, _ = split_features(split.training_set.records, encoder)
        test_x, test_y, unseen = split_features(split.test_set.records, encoder)

        run_warnings: list[UsageAnalysisWarning] = list(unseen)
        seen_classes = set(train_y)
        for label in sorted(set(test_y) - seen_classes):
            warning = UnseenCategoryWarning("behavior_class", label)
            _LOGGER.warning("Test set contains class %d absent from training", label)
            run_warnings.append(warning)

        scores = []
        for model in self._classifiers:
            _LOGGER.info(
                "Fitting %s on %d rows with %d features",
                model.name,
                len(train_x),
                len(train_x.feature_names),
            )
            try:
                fit_warnings = model.fit(train_x, train_y)
                score = evaluate_model(
                    model, test_x, test_y, seen_classes, warnings=fit_warnings
                )
            except Exception as e:
                _LOGGER.exception("Evaluation of %s failed", model.name)
                run_warnings.append(ConvergenceWarning(model.name, f"evaluation failed: {e}"))
                continue

            for warning in score.warnings:
                _LOGGER.warning("%s", warning)
            _LOGGER.info("%s accuracy: %.4f", model.name, score.accuracy)
            scores.append(score)

        return EvaluationResult(
            scores=tuple(scores),
            training_size=split.training_set.size,
            test_size=split.test_set.size,
            seed=split.seed,
            warnings=tuple(run_warnings),
        )


def baseline_accuracies(split: Split, seeds: Iterable[int]) -> list[float]:
    """Baseline accuracy on the split for each seed.

    Used to check that the random baseline sits near 1 / number of classes.
    """
    encoder = FeatureEncoder().fit(split.training_set.records)
    train_x, train_y, _ = split_features(split.training_set.records, encoder)
    test_x, test_y, _ = split_features(split.test_set.records, encoder)

    results = []
    for seed in seeds:
        model = RandomBaselineClassifier(seed=seed)
        model.fit(train_x, train_y)
        results.append(accuracy(model.predict(test_x), test_y))
    return results
