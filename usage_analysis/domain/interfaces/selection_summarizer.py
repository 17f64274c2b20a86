"""Selection summarizer interface.

Contract for the interactive point-selection view: whenever the user
selects points, the view asks for averages over the selected rows.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from usage_analysis.domain.value_objects import SelectionSummary


class ISelectionSummarizer(ABC):
    """Contract for summarizing a selection of cleaned records."""

    @abstractmethod
    def on_selection_changed(self, row_ids: Iterable[int]) -> SelectionSummary:
        """Summarize the records with the given row ids.

        Args:
            row_ids: Row identifiers of the selected points

        Returns:
            SelectionSummary with average battery drain and data usage
        """
        pass
