"""Usage Analysis Service.

Main application service that coordinates domain and infrastructure
for the cleaning, partitioning and model comparison use case.
"""

import logging
from dataclasses import asdict
from typing import Any, Callable, Mapping, Sequence

from usage_analysis.domain.exceptions import RowValidationWarning
from usage_analysis.domain.interfaces import (
    IClassifier,
    IReportStorage,
    ISelectionSummarizer,
    IUsageDataReader,
)
from usage_analysis.domain.services import (
    DatasetCleaner,
    DatasetPartitioner,
    DescriptiveStatisticsService,
    ModelEvaluationService,
    SelectionSummaryService,
)
from usage_analysis.domain.value_objects import (
    AnalysisReport,
    CleanedDataset,
    EvaluationResult,
    PipelineConfig,
    Split,
)

_LOGGER = logging.getLogger(__name__)

ClassifierFactory = Callable[[PipelineConfig], Sequence[IClassifier]]

# (grouping field, numeric column) pairs reported as grouped averages
GROUPED_AVERAGES = (
    ("operating_system", "screen_on_hours"),
    ("operating_system", "app_usage_minutes"),
    ("behavior_class", "battery_drain_mah"),
    ("behavior_class", "data_usage_mb"),
    ("gender", "screen_on_hours"),
)


class UsageAnalysisService:
    """Application service for the usage analysis pipeline.

    The pipeline is linear and single pass: raw rows are cleaned,
    partitioned, encoded and used to fit and score each classifier.
    Fatal errors propagate; recoverable ones travel with the report.
    """

    def __init__(
        self,
        classifier_factory: ClassifierFactory,
        reader: IUsageDataReader | None = None,
        storage: IReportStorage | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        """Initialize the usage analysis service.

        Args:
            classifier_factory: Builds fresh classifiers for one run
            reader: Source of raw usage rows (optional)
            storage: Destination of the report files (optional)
            config: Pipeline configuration, defaults if omitted
        """
        self._classifier_factory = classifier_factory
        self._reader = reader
        self._storage = storage
        self._config = config or PipelineConfig()
        self._cleaner = DatasetCleaner()
        self._partitioner = DatasetPartitioner()
        self._statistics = DescriptiveStatisticsService()

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def load_dataset(self) -> CleanedDataset:
        """Read and clean the configured data source.

        Raises:
            RuntimeError: If no reader is configured
            ReportStorageError: If the source cannot be read
            SchemaError: If required columns are missing
        """
        if self._reader is None:
            raise RuntimeError("No usage data reader configured")
        columns, rows, rejected = self._reader.read_rows()
        return self.clean_rows(rows, columns, rejected)

    def clean_rows(
        self,
        rows: Sequence[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
        rejected: Sequence[RowValidationWarning] = (),
    ) -> CleanedDataset:
        dataset = self._cleaner.clean(rows, columns, rejected)
        if dataset.dropped_rows:
            _LOGGER.warning(
                "%d rows dropped during cleaning, %d kept",
                dataset.dropped_rows,
                dataset.size,
            )
        return dataset

    def partition(self, dataset: CleanedDataset) -> Split:
        return self._partitioner.partition(
            dataset,
            ratio=self._config.train_ratio,
            seed=self._config.seed,
            stratify=self._config.stratify,
        )

    def evaluate(self, split: Split) -> EvaluationResult:
        """Fit and score freshly built classifiers on the split."""
        classifiers = self._classifier_factory(self._config)
        return ModelEvaluationService(classifiers).evaluate(split)

    def summarize(self, dataset: CleanedDataset) -> dict[str, Any]:
        """Descriptive statistics of the dataset, JSON serializable."""
        columns = {
            name: {**asdict(summary), "range": summary.range}
            for name, summary in self._statistics.summarize(dataset).items()
        }
        grouped = {
            f"{column}_by_{by}": {
                str(key): value
                for key, value in self._statistics.group_means(dataset, by, column).items()
            }
            for by, column in GROUPED_AVERAGES
        }
        return {
            "rows": dataset.size,
            "dropped_rows": dataset.dropped_rows,
            "class_counts": {
                str(k): v for k, v in self._statistics.class_counts(dataset).items()
            },
            "columns": columns,
            "grouped_means": grouped,
        }

    def selection_summarizer(self, dataset: CleanedDataset) -> ISelectionSummarizer:
        """Capability for the point-selection view over this dataset."""
        return SelectionSummaryService(dataset)

    def run(self, dataset: CleanedDataset | None = None) -> AnalysisReport:
        """Run the whole pipeline.

        Args:
            dataset: Already cleaned dataset; loaded from the reader if omitted

        Returns:
            AnalysisReport with dataset, split, evaluation and statistics

        Raises:
            SchemaError: If required columns are missing from the input
            EmptyPartitionError: If a partition is empty
        """
        if dataset is None:
            dataset = self.load_dataset()

        _LOGGER.info(
            "Starting analysis of %d records (ratio=%.2f, seed=%d, stratify=%s)",
            dataset.size,
            self._config.train_ratio,
            self._config.seed,
            self._config.stratify,
        )
        split = self.partition(dataset)
        summary = self.summarize(dataset)
        evaluation = self.evaluate(split)

        if self._storage is not None:
            self._storage.save_cleaned_dataset(dataset)
            self._storage.save_summary(summary)
            self._storage.save_evaluation(evaluation)

        _LOGGER.info("Analysis completed: %s", dict(evaluation.accuracies))
        return AnalysisReport(
            dataset=dataset,
            split=split,
            evaluation=evaluation,
            summary=summary,
        )
