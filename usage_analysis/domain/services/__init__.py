"""Domain services for usage analysis.

Services contain the business logic and operate on value objects.
Tabular steps (splitting, encoding, metrics, statistics) use numpy,
pandas and scikit-learn; model backends stay in infrastructure.
"""

from .dataset_cleaner import DatasetCleaner
from .dataset_partitioner import DatasetPartitioner, training_count
from .descriptive_statistics_service import DescriptiveStatisticsService
from .feature_encoder import UNKNOWN_CATEGORY, FeatureEncoder, split_features
from .model_evaluation_service import (
    ModelEvaluationService,
    accuracy,
    baseline_accuracies,
    correct_count,
    evaluate_model,
)
from .random_baseline_classifier import RandomBaselineClassifier
from .selection_summary_service import SelectionSummaryService
from .synthetic_usage_generator import SyntheticUsageGenerator

__all__ = [
    "DatasetCleaner",
    "DatasetPartitioner",
    "DescriptiveStatisticsService",
    "FeatureEncoder",
    "ModelEvaluationService",
    "RandomBaselineClassifier",
    "SelectionSummaryService",
    "SyntheticUsageGenerator",
    "UNKNOWN_CATEGORY",
    "accuracy",
    "baseline_accuracies",
    "correct_count",
    "evaluate_model",
    "split_features",
    "training_count",
]
