"""Application services for usage analysis.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .usage_analysis_service import UsageAnalysisService

__all__ = [
    "UsageAnalysisService",
]
