"""Selection summary service.

In-memory implementation of the point-selection capability: averages of
battery drain and data usage over the selected rows.
"""

import logging
from typing import Iterable

from usage_analysis.domain.interfaces import ISelectionSummarizer
from usage_analysis.domain.value_objects import CleanedDataset, SelectionSummary

from .descriptive_statistics_service import records_frame

_LOGGER = logging.getLogger(__name__)

_AVERAGED_COLUMNS = ["battery_drain_mah", "data_usage_mb"]


class SelectionSummaryService(ISelectionSummarizer):
    """Summarizes selections of a cleaned dataset by row id."""

    def __init__(self, dataset: CleanedDataset) -> None:
        self._frame = records_frame(dataset).set_index("row_id")[_AVERAGED_COLUMNS]

    def on_selection_changed(self, row_ids: Iterable[int]) -> SelectionSummary:
        requested = list(dict.fromkeys(row_ids))
        selected = [row_id for row_id in requested if row_id in self._frame.index]

        unknown = len(requested) - len(selected)
        if unknown:
            _LOGGER.debug("Ignored %d unknown row ids in selection", unknown)
        if not selected:
            return SelectionSummary(count=0, avg_battery_drain_mah=None, avg_data_usage_mb=None)

        means = self._frame.loc[selected].mean()
        return SelectionSummary(
            count=len(selected),
            avg_battery_drain_mah=float(means["battery_drain_mah"]),
            avg_data_usage_mb=float(means["data_usage_mb"]),
        )
