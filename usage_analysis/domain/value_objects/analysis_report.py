"""Analysis report value object."""

from dataclasses import dataclass, field
from typing import Any

from .cleaned_dataset import CleanedDataset
from .evaluation_result import EvaluationResult
from .split import Split


@dataclass(frozen=True)
class AnalysisReport:
    """Everything one pipeline run hands to the reporting layer.

    Attributes:
        dataset: Cleaned dataset with drop report
        split: Training and test partitions
        evaluation: Accuracy of every model on the test partition
        summary: Descriptive statistics, JSON serializable
    """

    dataset: CleanedDataset
    split: Split
    evaluation: EvaluationResult
    summary: dict[str, Any] = field(default_factory=dict)
