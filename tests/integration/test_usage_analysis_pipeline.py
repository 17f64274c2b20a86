"""Integration tests for the full usage analysis pipeline."""

import json
from pathlib import Path

import pandas as pd
import pytest
from usage_analysis.application.services import UsageAnalysisService
from usage_analysis.domain.exceptions import EmptyPartitionError, SchemaError
from usage_analysis.domain.value_objects import COLUMN_NAMES, CleanedDataset, PipelineConfig
from usage_analysis.infrastructure import main as entry_point
from usage_analysis.infrastructure.adapters import CsvUsageDataReader, FileReportStorage
from usage_analysis.infrastructure.main import build_classifiers

pytestmark = pytest.mark.integration


@pytest.fixture
def csv_path(tmp_path: Path, raw_rows) -> Path:
    path = tmp_path / "user_behavior_dataset.csv"
    pd.DataFrame(raw_rows, columns=list(COLUMN_NAMES.values())).to_csv(path, index=False)
    return path


@pytest.fixture
def service(tmp_path: Path, csv_path: Path) -> UsageAnalysisService:
    return UsageAnalysisService(
        build_classifiers,
        reader=CsvUsageDataReader(csv_path),
        storage=FileReportStorage(tmp_path / "report"),
        config=PipelineConfig(seed=42),
    )


class TestUsageAnalysisPipeline:
    """End-to-end runs from CSV to report files."""

    def test_run_cleans_partitions_and_scores(self, service: UsageAnalysisService) -> None:
        report = service.run()

        assert report.dataset.size == 700
        assert report.dataset.dropped_rows == 0
        assert report.split.sizes == (490, 210)
        assert set(report.evaluation.accuracies) == {
            "baseline",
            "multinomial_logistic",
            "gradient_boosting",
        }
        assert all(0.0 <= a <= 1.0 for a in report.evaluation.accuracies.values())

    def test_models_beat_the_baseline(self, service: UsageAnalysisService) -> None:
        accuracies = service.run().evaluation.accuracies
        assert accuracies["multinomial_logistic"] >= accuracies["baseline"]
        assert accuracies["gradient_boosting"] >= accuracies["baseline"]

    def test_models_reach_high_accuracy_on_separable_data(
        self, service: UsageAnalysisService
    ) -> None:
        """Near-perfect classes should be learned almost exactly."""
        accuracies = service.run().evaluation.accuracies
        assert accuracies["multinomial_logistic"] >= 0.9
        assert accuracies["gradient_boosting"] >= 0.95
        assert accuracies["baseline"] < 0.5

    def test_rerun_gives_identical_result(self, service: UsageAnalysisService) -> None:
        first = service.run()
        second = service.run()
        assert dict(first.evaluation.accuracies) == dict(second.evaluation.accuracies)
        assert first.split.test_set.records == second.split.test_set.records

    def test_stratified_run(self, tmp_path: Path, csv_path: Path) -> None:
        service = UsageAnalysisService(
            build_classifiers,
            reader=CsvUsageDataReader(csv_path),
            config=PipelineConfig(seed=7, stratify=True),
        )
        report = service.run()
        assert report.split.stratified is True
        assert report.split.training_set.size + report.split.test_set.size == 700

    def test_report_files_are_written(self, service: UsageAnalysisService, tmp_path: Path) -> None:
        report = service.run()
        report_dir = tmp_path / "report"

        cleaned = pd.read_csv(report_dir / FileReportStorage.CLEANED_DATASET_FILE_NAME)
        assert len(cleaned) == 700
        assert FileReportStorage(report_dir).load_evaluation() == dict(
            report.evaluation.accuracies
        )
        with open(report_dir / FileReportStorage.SUMMARY_FILE_NAME) as f:
            summary = json.load(f)
        assert summary["rows"] == 700
        assert set(summary["grouped_means"]["screen_on_hours_by_operating_system"]) == {
            "Android",
            "iOS",
        }

    def test_selection_summary_joins_on_row_id(self, service: UsageAnalysisService) -> None:
        dataset = service.load_dataset()
        summarizer = service.selection_summarizer(dataset)
        summary = summarizer.on_selection_changed([1, 2])
        expected = (dataset.records[0].battery_drain_mah + dataset.records[1].battery_drain_mah) / 2
        assert summary.count == 2
        assert summary.avg_battery_drain_mah == pytest.approx(expected)

    def test_missing_column_aborts_before_fitting(self, tmp_path: Path, raw_rows) -> None:
        path = tmp_path / "broken.csv"
        pd.DataFrame(raw_rows).drop(columns=["User Behavior Class"]).to_csv(path, index=False)
        service = UsageAnalysisService(build_classifiers, reader=CsvUsageDataReader(path))
        with pytest.raises(SchemaError, match="User Behavior Class"):
            service.run()

    def test_malformed_line_is_dropped_not_fatal(self, tmp_path: Path, csv_path: Path) -> None:
        """Test that a line with an extra field is reported and the run completes."""
        lines = csv_path.read_text().splitlines()
        lines[42] += ",EXTRA"
        csv_path.write_text("\n".join(lines) + "\n")
        service = UsageAnalysisService(
            build_classifiers,
            reader=CsvUsageDataReader(csv_path),
            storage=FileReportStorage(tmp_path / "report"),
        )

        report = service.run()

        assert report.dataset.size == 699
        assert report.dataset.dropped_rows == 1
        assert report.dataset.warnings[0].row_number == 42
        assert report.split.sizes == (489, 210)

    def test_empty_dataset_aborts(self) -> None:
        service = UsageAnalysisService(build_classifiers)
        with pytest.raises(EmptyPartitionError):
            service.run(CleanedDataset(records=()))

    def test_single_class_dataset_does_not_crash(self, record_factory) -> None:
        dataset = CleanedDataset(records=tuple(record_factory(i, 2) for i in range(1, 21)))
        report = UsageAnalysisService(build_classifiers).run(dataset)

        assert dict(report.evaluation.accuracies) == {
            "baseline": 1.0,
            "multinomial_logistic": 1.0,
            "gradient_boosting": 1.0,
        }
        degenerate = {
            w.model_name for w in report.evaluation.all_warnings() if hasattr(w, "model_name")
        }
        assert degenerate == {"multinomial_logistic", "gradient_boosting"}


class TestEntryPoint:
    """Tests for the command entry point."""

    def test_main_runs_on_csv(self, monkeypatch, tmp_path: Path, csv_path: Path) -> None:
        monkeypatch.setenv("USAGE_DATA_PATH", str(csv_path))
        monkeypatch.setenv("REPORT_OUTPUT_PATH", str(tmp_path / "out"))
        monkeypatch.setenv("SPLIT_SEED", "3")

        assert entry_point.main() == 0
        assert (tmp_path / "out" / FileReportStorage.EVALUATION_FILE_NAME).exists()

    def test_main_runs_on_synthetic_data(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.delenv("USAGE_DATA_PATH", raising=False)
        monkeypatch.setenv("REPORT_OUTPUT_PATH", str(tmp_path / "out"))

        assert entry_point.main() == 0
        accuracies = FileReportStorage(tmp_path / "out").load_evaluation()
        assert set(accuracies) == {"baseline", "multinomial_logistic", "gradient_boosting"}

    def test_main_reports_schema_error(self, monkeypatch, tmp_path: Path, raw_rows) -> None:
        path = tmp_path / "broken.csv"
        pd.DataFrame(raw_rows).drop(columns=["Age"]).to_csv(path, index=False)
        monkeypatch.setenv("USAGE_DATA_PATH", str(path))
        monkeypatch.setenv("REPORT_OUTPUT_PATH", str(tmp_path / "out"))

        assert entry_point.main() == 1

    def test_invalid_ratio_is_rejected(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("TRAIN_RATIO", "1.5")
        monkeypatch.setenv("REPORT_OUTPUT_PATH", str(tmp_path / "out"))
        assert entry_point.main() == 2

    def test_load_config_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("TRAIN_RATIO", "0.8")
        monkeypatch.setenv("SPLIT_SEED", "11")
        monkeypatch.setenv("STRATIFY_SPLIT", "Yes")
        config = entry_point.load_config_from_env()
        assert config == PipelineConfig(train_ratio=0.8, seed=11, stratify=True)
