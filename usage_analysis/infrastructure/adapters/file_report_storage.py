"""File-based report storage adapter.

Infrastructure adapter that implements IReportStorage using the file
system: a CSV for the cleaned dataset, JSON for results and statistics.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd
from usage_analysis.domain.exceptions import ReportStorageError
from usage_analysis.domain.interfaces import IReportStorage
from usage_analysis.domain.value_objects import (
    COLUMN_NAMES,
    ROW_ID_COLUMN,
    CleanedDataset,
    EvaluationResult,
)

_LOGGER = logging.getLogger(__name__)


class FileReportStorage(IReportStorage):
    """File-based implementation of report storage."""

    CLEANED_DATASET_FILE_NAME = "cleaned_dataset.csv"
    EVALUATION_FILE_NAME = "evaluation.json"
    SUMMARY_FILE_NAME = "summary.json"

    def __init__(self, base_path: str | Path) -> None:
        """Initialize file-based storage.

        Args:
            base_path: Directory path for report files
        """
        self._base_path = Path(base_path)
        self._ensure_directory_exists()

    @property
    def base_path(self) -> Path:
        return self._base_path

    def _ensure_directory_exists(self) -> None:
        """Create storage directory if it doesn't exist."""
        self._base_path.mkdir(parents=True, exist_ok=True)

    def save_cleaned_dataset(self, dataset: CleanedDataset) -> None:
        path = self._base_path / self.CLEANED_DATASET_FILE_NAME
        columns = [ROW_ID_COLUMN, *COLUMN_NAMES.values()]
        df = pd.DataFrame([r.to_row() for r in dataset.records], columns=columns)
        try:
            df.to_csv(path, index=False)
        except OSError as e:
            raise ReportStorageError(f"Failed to save cleaned dataset: {e}") from e
        _LOGGER.info("Cleaned dataset saved: %s (%d rows)", path, len(df))

    def save_evaluation(self, result: EvaluationResult) -> None:
        payload = {
            "created_at": datetime.now().isoformat(),
            "seed": result.seed,
            "training_size": result.training_size,
            "test_size": result.test_size,
            "accuracies": dict(result.accuracies),
            "models": {
                score.model_name: {
                    "accuracy": score.accuracy,
                    "correct": score.correct,
                    "total": score.total,
                    "seen_class_accuracy": score.seen_class_accuracy,
                    "warnings": [str(w) for w in score.warnings],
                }
                for score in result.scores
            },
            "warnings": [str(w) for w in result.warnings],
        }
        self._write_json(self.EVALUATION_FILE_NAME, payload)
        _LOGGER.info("Evaluation saved: %s", dict(result.accuracies))

    def save_summary(self, summary: dict[str, Any]) -> None:
        self._write_json(self.SUMMARY_FILE_NAME, summary)

    def load_evaluation(self) -> dict[str, float]:
        path = self._base_path / self.EVALUATION_FILE_NAME
        if not path.exists():
            raise ReportStorageError(f"No evaluation saved in {self._base_path}")
        try:
            with open(path) as f:
                payload = json.load(f)
            return {name: float(value) for name, value in payload["accuracies"].items()}
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise ReportStorageError(f"Failed to load evaluation: {e}") from e

    def _write_json(self, file_name: str, payload: dict[str, Any]) -> None:
        path = self._base_path / file_name
        try:
            with open(path, "w") as f:
                json.dump(payload, f, indent=2, default=str)
        except (OSError, TypeError) as e:
            raise ReportStorageError(f"Failed to save {file_name}: {e}") from e
