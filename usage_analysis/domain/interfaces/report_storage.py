"""Report storage interface.

Contract for handing pipeline outputs to the reporting layer.
"""

from abc import ABC, abstractmethod
from typing import Any

from usage_analysis.domain.value_objects import CleanedDataset, EvaluationResult


class IReportStorage(ABC):
    """Contract for persisting cleaned data and evaluation results."""

    @abstractmethod
    def save_cleaned_dataset(self, dataset: CleanedDataset) -> None:
        """Save the cleaned records with their row identifier.

        Raises:
            ReportStorageError: If saving fails
        """
        pass

    @abstractmethod
    def save_evaluation(self, result: EvaluationResult) -> None:
        """Save the model comparison.

        Raises:
            ReportStorageError: If saving fails
        """
        pass

    @abstractmethod
    def save_summary(self, summary: dict[str, Any]) -> None:
        """Save descriptive statistics of the dataset.

        Raises:
            ReportStorageError: If saving fails
        """
        pass

    @abstractmethod
    def load_evaluation(self) -> dict[str, float]:
        """Load the saved model name to accuracy mapping.

        Raises:
            ReportStorageError: If nothing was saved or the file is unreadable
        """
        pass
