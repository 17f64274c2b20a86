"""Value objects for usage analysis.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .analysis_report import AnalysisReport
from .cleaned_dataset import CleanedDataset
from .evaluation_result import (
    BASELINE,
    GRADIENT_BOOSTING,
    MODEL_NAMES,
    MULTINOMIAL_LOGISTIC,
    EvaluationResult,
    ModelScore,
)
from .feature_matrix import FeatureMatrix
from .pipeline_config import PipelineConfig
from .split import Split
from .statistics_summary import ColumnSummary, SelectionSummary
from .user_record import (
    BEHAVIOR_CLASSES,
    CATEGORICAL_FIELDS,
    COLUMN_NAMES,
    GENDERS,
    KNOWN_DEVICE_MODELS,
    NUMERIC_FIELDS,
    OPERATING_SYSTEMS,
    ROW_ID_COLUMN,
    UserRecord,
)

__all__ = [
    "AnalysisReport",
    "BASELINE",
    "BEHAVIOR_CLASSES",
    "CATEGORICAL_FIELDS",
    "COLUMN_NAMES",
    "CleanedDataset",
    "ColumnSummary",
    "EvaluationResult",
    "FeatureMatrix",
    "GENDERS",
    "GRADIENT_BOOSTING",
    "KNOWN_DEVICE_MODELS",
    "MODEL_NAMES",
    "ModelScore",
    "MULTINOMIAL_LOGISTIC",
    "NUMERIC_FIELDS",
    "OPERATING_SYSTEMS",
    "PipelineConfig",
    "ROW_ID_COLUMN",
    "SelectionSummary",
    "Split",
    "UserRecord",
]
