"""Feature encoding service.

Splits user records into numeric feature rows and behavior class labels.
"""

import logging
from typing import Sequence

import numpy as np
from sklearn.preprocessing import OneHotEncoder

from usage_analysis.domain.exceptions import UnseenCategoryWarning
from usage_analysis.domain.value_objects import (
    CATEGORICAL_FIELDS,
    NUMERIC_FIELDS,
    FeatureMatrix,
    UserRecord,
)

_LOGGER = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "__unknown__"


def _categorical_values(records: Sequence[UserRecord]) -> np.ndarray:
    return np.array(
        [[getattr(r, name) for name in CATEGORICAL_FIELDS] for r in records],
        dtype=object,
    )


class FeatureEncoder:
    """One-hot encoder for usage records.

    The category mapping is fit once (on the training partition) and then
    applied unchanged to any set of records. Every categorical field gets
    one indicator per fitted category plus an unknown indicator; values not
    seen at fit time encode as an all-zero block in the OneHotEncoder and
    set the unknown indicator instead of failing.
    """

    def __init__(self) -> None:
        self._encoder: OneHotEncoder | None = None

    @property
    def is_fitted(self) -> bool:
        return self._encoder is not None

    @property
    def categories(self) -> dict[str, tuple[str, ...]]:
        """Fitted categories per categorical field."""
        if self._encoder is None:
            raise RuntimeError("FeatureEncoder has not been fitted")
        return {
            field_name: tuple(str(value) for value in values)
            for field_name, values in zip(CATEGORICAL_FIELDS, self._encoder.categories_)
        }

    @property
    def feature_names(self) -> tuple[str, ...]:
        """Column names of the encoded matrix."""
        names = list(NUMERIC_FIELDS)
        for field_name, values in self.categories.items():
            names.extend(f"{field_name}={value}" for value in values)
            names.append(f"{field_name}={UNKNOWN_CATEGORY}")
        return tuple(names)

    def fit(self, records: Sequence[UserRecord]) -> "FeatureEncoder":
        """Learn the categories of each categorical field.

        Args:
            records: Records to learn categories from

        Returns:
            The fitted encoder

        Raises:
            ValueError: If records is empty
        """
        if not records:
            raise ValueError("cannot fit FeatureEncoder on an empty set of records")

        categories = [
            sorted({getattr(r, field_name) for r in records})
            for field_name in CATEGORICAL_FIELDS
        ]
        encoder = OneHotEncoder(
            categories=categories,
            handle_unknown="ignore",
            sparse_output=False,
            dtype=np.float64,
        )
        self._encoder = encoder.fit(_categorical_values(records))
        _LOGGER.debug("Fitted feature encoder with categories: %s", self.categories)
        return self

    def transform(
        self, records: Sequence[UserRecord]
    ) -> tuple[FeatureMatrix, tuple[UnseenCategoryWarning, ...]]:
        """Encode records with the fitted mapping.

        Args:
            records: Records to encode

        Returns:
            Tuple of (feature matrix, one warning per distinct unseen value)
        """
        if self._encoder is None:
            raise RuntimeError("FeatureEncoder has not been fitted")
        if not records:
            return FeatureMatrix(feature_names=self.feature_names, rows=()), ()

        numeric = np.array(
            [[float(getattr(r, name)) for name in NUMERIC_FIELDS] for r in records],
            dtype=np.float64,
        )
        encoded = self._encoder.transform(_categorical_values(records))

        blocks = [numeric]
        unseen: dict[tuple[str, str], UnseenCategoryWarning] = {}
        offset = 0
        for field_name, values in zip(CATEGORICAL_FIELDS, self._encoder.categories_):
            block = encoded[:, offset : offset + len(values)]
            offset += len(values)
            # handle_unknown="ignore" leaves the whole block at zero
            unknown = block.sum(axis=1) == 0
            for index in np.flatnonzero(unknown):
                value = getattr(records[index], field_name)
                key = (field_name, value)
                if key not in unseen:
                    unseen[key] = UnseenCategoryWarning(field_name, value)
                    _LOGGER.warning("%s", unseen[key])
            blocks.append(block)
            blocks.append(unknown.astype(np.float64)[:, np.newaxis])

        matrix = np.hstack(blocks)
        rows = tuple(tuple(float(v) for v in row) for row in matrix)
        return FeatureMatrix(feature_names=self.feature_names, rows=rows), tuple(unseen.values())


def split_features(
    records: Sequence[UserRecord], encoder: FeatureEncoder
) -> tuple[FeatureMatrix, tuple[int, ...], tuple[UnseenCategoryWarning, ...]]:
    """Partition records into encoded features and labels.

    Args:
        records: Records to split
        encoder: Fitted encoder

    Returns:
        Tuple of (features, behavior class labels, unseen category warnings)
    """
    features, warnings = encoder.transform(records)
    labels = tuple(r.behavior_class for r in records)
    return features, labels, warnings
