"""Feature data errors – why the service holds no usable flag data.

Both kinds collapse into the same errored state; the distinction only
survives in the stored error for reporting.
"""

from __future__ import annotations

from typing import Any

from api_feature_flags.kernel.errors.root import FeatureFlagsError

EMPTY_DATA_REASON = "Empty data received"


class FeatureDataError(FeatureFlagsError):
    """The service has no usable feature data.

    ``reason`` keeps whatever value was reported, untouched.
    """

    code = "feature_data_error"

    def __init__(self, reason: Any, **kwargs: Any) -> None:
        super().__init__(reason if isinstance(reason, str) else repr(reason), **kwargs)
        self.reason = reason


class InvalidDataError(FeatureDataError):
    """Fetched payload was not a list of records, or was empty."""

    code = "invalid_data"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(EMPTY_DATA_REASON, **kwargs)


class ExplicitError(FeatureDataError):
    """Failure reported directly by the caller (e.g. transport failure)."""

    code = "explicit_error"


__all__ = ["EMPTY_DATA_REASON", "ExplicitError", "FeatureDataError", "InvalidDataError"]
