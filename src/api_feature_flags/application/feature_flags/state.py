"""Application feature flags – resolution state machine.

::

    UNINITIALIZED --receive(valid)----> FETCHED
    any           --receive(invalid)--> ERRORED
    any           --receive_error-----> ERRORED

Test mode is an independent flag.  Once entered it stays on and takes
priority over every status during resolution.
"""
from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from typing import Any

from api_feature_flags.application.feature_flags.normalizer import (
    NormalizedData,
    normalize_data,
)
from api_feature_flags.kernel.errors import (
    ExplicitError,
    FeatureDataError,
    InvalidDataError,
)


class ResolutionStatus(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    FETCHED = "fetched"
    ERRORED = "errored"


def is_valid_data(records: Any) -> bool:
    """Only a non-empty list or tuple of records counts as data."""
    return isinstance(records, (list, tuple)) and len(records) > 0


class FeatureFlagState:
    """Holds fetched data, fetch status and the last error.

    :meth:`current_data` is the only read surface for the normalised map; raw
    records are kept privately so they can be re-indexed when the key fields
    change.  *extra_keys* names record fields projected next to the enabled
    field.
    """

    def __init__(
        self,
        feature_key: str = "feature_key",
        enabled_key: str = "value",
        extra_keys: Iterable[str] = (),
    ) -> None:
        self._feature_key = feature_key
        self._enabled_key = enabled_key
        self._extra_keys = tuple(extra_keys)
        self._records: Sequence[Any] | None = None
        self._data: NormalizedData | None = None
        self.status = ResolutionStatus.UNINITIALIZED
        self.did_fetch_data = False
        self.error: FeatureDataError | None = None
        self.is_testing = False

    @property
    def feature_key(self) -> str:
        return self._feature_key

    @property
    def enabled_key(self) -> str:
        return self._enabled_key

    @property
    def extra_keys(self) -> tuple[str, ...]:
        return self._extra_keys

    @property
    def reason(self) -> Any:
        """Raw reason of the last error, ``None`` when there is none."""
        return self.error.reason if self.error is not None else None

    def _normalize(self, records: Sequence[Any]) -> NormalizedData:
        return normalize_data(records, self._feature_key, self._enabled_key, self._extra_keys)

    def receive(self, records: Any) -> bool:
        """Accept a fetch result; invalid input moves to ``ERRORED``."""
        if not is_valid_data(records):
            self.receive_error(InvalidDataError())
            return False
        self._records = records
        self._data = self._normalize(records)
        self.status = ResolutionStatus.FETCHED
        self.did_fetch_data = True
        return True

    def receive_error(self, reason: Any) -> FeatureDataError:
        """Record *reason* and move to ``ERRORED``."""
        if isinstance(reason, FeatureDataError):
            error = reason
        elif isinstance(reason, BaseException):
            error = ExplicitError(reason, cause=reason)
        else:
            error = ExplicitError(reason)
        self.error = error
        self.status = ResolutionStatus.ERRORED
        self.did_fetch_data = False
        return error

    def enter_test_mode(self) -> None:
        self.is_testing = True
        self.did_fetch_data = True

    def rekey(self, feature_key: str, enabled_key: str) -> None:
        """Switch the record fields used for indexing, re-normalising held data."""
        if (feature_key, enabled_key) == (self._feature_key, self._enabled_key):
            return
        self._feature_key = feature_key
        self._enabled_key = enabled_key
        if self._records is not None:
            self._data = self._normalize(self._records)

    def current_data(self) -> NormalizedData | None:
        if not self.did_fetch_data:
            return None
        return self._data


__all__ = ["FeatureFlagState", "ResolutionStatus", "is_valid_data"]
