"""Command entry point.

Runs the usage analysis pipeline once, configured from the environment.
"""

import logging
import os
import sys
from pathlib import Path

# Add the repository root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from usage_analysis.application.services import UsageAnalysisService
from usage_analysis.domain.exceptions import UsageAnalysisError
from usage_analysis.domain.interfaces import IClassifier
from usage_analysis.domain.services import RandomBaselineClassifier, SyntheticUsageGenerator
from usage_analysis.domain.value_objects import PipelineConfig
from usage_analysis.infrastructure.adapters import (
    CsvUsageDataReader,
    FileReportStorage,
    LogisticRegressionClassifier,
    XGBoostClassifierAdapter,
)

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


def configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "info").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_config_from_env() -> PipelineConfig:
    """Build the pipeline configuration from environment variables.

    Raises:
        ValueError: If a variable holds an invalid value
    """
    return PipelineConfig(
        train_ratio=float(os.getenv("TRAIN_RATIO", "0.7")),
        seed=int(os.getenv("SPLIT_SEED", "42")),
        stratify=os.getenv("STRATIFY_SPLIT", "false").strip().lower() in _TRUE_VALUES,
    )


def build_classifiers(config: PipelineConfig) -> list[IClassifier]:
    """Create the three compared models, seeded from the configuration."""
    return [
        RandomBaselineClassifier(seed=config.seed),
        LogisticRegressionClassifier(max_iter=config.logistic_max_iter, seed=config.seed),
        XGBoostClassifierAdapter(
            {
                "n_estimators": config.gbm_n_estimators,
                "max_depth": config.gbm_max_depth,
                "learning_rate": config.gbm_learning_rate,
                "random_state": config.seed,
            }
        ),
    ]


def main() -> int:
    configure_logging()

    try:
        config = load_config_from_env()
    except ValueError as e:
        _LOGGER.error("Invalid configuration: %s", e)
        return 2

    data_path = os.getenv("USAGE_DATA_PATH")
    output_path = Path(os.getenv("REPORT_OUTPUT_PATH", "report"))
    reader = CsvUsageDataReader(data_path) if data_path else None
    storage = FileReportStorage(output_path)
    service = UsageAnalysisService(build_classifiers, reader, storage, config)

    try:
        if reader is None:
            _LOGGER.info("USAGE_DATA_PATH not set, running on synthetic data")
            rows = SyntheticUsageGenerator(seed=config.seed).generate()
            report = service.run(service.clean_rows(rows))
        else:
            report = service.run()
    except UsageAnalysisError as e:
        _LOGGER.error("Analysis aborted: %s", e)
        return 1

    train_size, test_size = report.split.sizes
    _LOGGER.info("Training rows: %d, test rows: %d", train_size, test_size)
    for name, value in report.evaluation.accuracies.items():
        _LOGGER.info("%-22s accuracy %.4f", name, value)
    for warning in report.evaluation.all_warnings():
        _LOGGER.warning("%s", warning)
    _LOGGER.info("Report written to %s", output_path.resolve())
    return 0


if __name__ == "__main__":
    sys.exit(main())
