"""Domain interfaces for usage analysis.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .classifier import IClassifier
from .report_storage import IReportStorage
from .selection_summarizer import ISelectionSummarizer
from .usage_data_reader import IUsageDataReader

__all__ = [
    "IClassifier",
    "IReportStorage",
    "ISelectionSummarizer",
    "IUsageDataReader",
]
