"""Tests for the feature encoder."""

import numpy as np
import pytest
from sklearn.preprocessing import OneHotEncoder
from usage_analysis.domain.exceptions import UnseenCategoryWarning
from usage_analysis.domain.services import UNKNOWN_CATEGORY, FeatureEncoder, split_features
from usage_analysis.domain.value_objects import NUMERIC_FIELDS


class TestFeatureEncoder:
    """Tests for FeatureEncoder service."""

    @pytest.fixture
    def training_records(self, record_factory):
        return [
            record_factory(1, 1, device_model="OnePlus 9"),
            record_factory(2, 2, device_model="iPhone 12", operating_system="iOS"),
            record_factory(3, 3, device_model="Xiaomi Mi 11", gender="Male"),
        ]

    def test_feature_names(self, training_records) -> None:
        encoder = FeatureEncoder().fit(training_records)
        names = encoder.feature_names
        assert names[: len(NUMERIC_FIELDS)] == NUMERIC_FIELDS
        assert "device_model=iPhone 12" in names
        assert f"device_model={UNKNOWN_CATEGORY}" in names
        assert "operating_system=iOS" in names
        assert "gender=Male" in names
        # 6 numeric + (3 + 1) devices + (2 + 1) systems + (2 + 1) genders
        assert len(names) == 16

    def test_identifiers_are_not_features(self, training_records) -> None:
        names = FeatureEncoder().fit(training_records).feature_names
        assert "user_id" not in names
        assert "row_id" not in names

    def test_transform_one_hot_encodes(self, training_records) -> None:
        encoder = FeatureEncoder().fit(training_records)
        matrix, warnings = encoder.transform(training_records)
        assert warnings == ()
        assert len(matrix) == 3
        row = dict(zip(matrix.feature_names, matrix.rows[1]))
        assert row["device_model=iPhone 12"] == 1.0
        assert row["device_model=OnePlus 9"] == 0.0
        assert row["operating_system=iOS"] == 1.0
        assert row[f"device_model={UNKNOWN_CATEGORY}"] == 0.0
        assert row["app_usage_minutes"] == 120.0

    def test_unseen_category_uses_unknown_bucket(self, training_records, record_factory) -> None:
        """Test that a category absent at fit time does not fail."""
        encoder = FeatureEncoder().fit(training_records)
        unseen = [
            record_factory(10, 1, device_model="Nokia 3310"),
            record_factory(11, 2, device_model="Nokia 3310"),
        ]

        matrix, warnings = encoder.transform(unseen)

        row = dict(zip(matrix.feature_names, matrix.rows[0]))
        assert row[f"device_model={UNKNOWN_CATEGORY}"] == 1.0
        assert sum(v for k, v in row.items() if k.startswith("device_model=")) == 1.0
        assert len(warnings) == 1
        assert isinstance(warnings[0], UnseenCategoryWarning)
        assert warnings[0].field == "device_model"
        assert warnings[0].value == "Nokia 3310"

    def test_each_categorical_field_has_one_active_indicator(self, dataset) -> None:
        encoder = FeatureEncoder().fit(dataset.records)
        matrix, _ = encoder.transform(dataset.records[:20])
        for values in matrix.rows:
            row = dict(zip(matrix.feature_names, values))
            for prefix in ("device_model=", "operating_system=", "gender="):
                assert sum(v for k, v in row.items() if k.startswith(prefix)) == 1.0

    def test_unfitted_encoder_raises_error(self, training_records) -> None:
        with pytest.raises(RuntimeError, match="not been fitted"):
            FeatureEncoder().transform(training_records)

    def test_split_features_returns_labels_in_order(self, training_records) -> None:
        encoder = FeatureEncoder().fit(training_records)
        features, labels, warnings = split_features(training_records, encoder)
        assert labels == (1, 2, 3)
        assert len(features) == 3
        assert warnings == ()

    def test_category_blocks_match_one_hot_encoder(self, training_records, record_factory) -> None:
        """Test that the indicators are OneHotEncoder output plus an unknown column."""
        encoder = FeatureEncoder().fit(training_records)
        records = training_records + [record_factory(4, 1, device_model="Nokia 3310")]
        reference = OneHotEncoder(handle_unknown="ignore", sparse_output=False).fit(
            [[r.device_model, r.operating_system, r.gender] for r in training_records]
        )
        expected = reference.transform([[r.device_model, r.operating_system, r.gender] for r in records])

        matrix, _ = encoder.transform(records)

        known = [
            i
            for i, name in enumerate(matrix.feature_names)
            if "=" in name and not name.endswith(UNKNOWN_CATEGORY)
        ]
        actual = np.array(matrix.rows)[:, known]
        np.testing.assert_array_equal(actual, expected)

    def test_unseen_values_in_several_fields(self, training_records, record_factory) -> None:
        """Test that each field sets its own unknown indicator and warning."""
        encoder = FeatureEncoder().fit(training_records[:1])
        record = record_factory(20, 1, device_model="iPhone 12", operating_system="iOS")

        matrix, warnings = encoder.transform([record])

        row = dict(zip(matrix.feature_names, matrix.rows[0]))
        assert row[f"device_model={UNKNOWN_CATEGORY}"] == 1.0
        assert row[f"operating_system={UNKNOWN_CATEGORY}"] == 1.0
        assert row[f"gender={UNKNOWN_CATEGORY}"] == 0.0
        assert row["gender=Female"] == 1.0
        assert {(w.field, w.value) for w in warnings} == {
            ("device_model", "iPhone 12"),
            ("operating_system", "iOS"),
        }

    def test_fit_on_empty_records_raises_error(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            FeatureEncoder().fit([])

    def test_transform_of_no_records_is_empty(self, training_records) -> None:
        matrix, warnings = FeatureEncoder().fit(training_records).transform([])
        assert len(matrix) == 0
        assert warnings == ()
