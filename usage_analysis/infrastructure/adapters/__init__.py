"""Infrastructure adapters for usage analysis.

These adapters implement domain interfaces using external libraries
like pandas, scikit-learn, XGBoost and file system storage.
"""

from .csv_usage_data_reader import CsvUsageDataReader
from .estimator_classifier import EstimatorClassifier
from .file_report_storage import FileReportStorage
from .logistic_regression_classifier import LogisticRegressionClassifier
from .xgboost_classifier import XGBoostClassifierAdapter

__all__ = [
    "CsvUsageDataReader",
    "EstimatorClassifier",
    "FileReportStorage",
    "LogisticRegressionClassifier",
    "XGBoostClassifierAdapter",
]
