"""Infrastructure errors – I/O failures while fetching feature data."""

from __future__ import annotations

from typing import Any

from api_feature_flags.kernel.errors.root import FeatureFlagsError


class InfrastructureError(FeatureFlagsError):
    """The feature endpoint could not be read."""

    code = "infrastructure_error"

    def __init__(self, message: str, *, url: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, url=url, **kwargs)
        self.url = url


class TimeoutError(InfrastructureError):  # noqa: A001
    """The request to the feature endpoint exceeded its deadline."""

    code = "fetch_timeout"


class ExternalServiceError(InfrastructureError):
    """The feature endpoint answered with an error status or an unreadable body."""

    code = "external_service_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status_code=status_code, **kwargs)
        self.status_code = status_code


__all__ = ["ExternalServiceError", "InfrastructureError", "TimeoutError"]
