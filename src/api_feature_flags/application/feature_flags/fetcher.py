"""Application feature flags – FeatureFetcher port."""
from __future__ import annotations

import abc
from typing import Any


class FeatureFetcher(abc.ABC):
    """Port: retrieve raw feature records from *url*.

    Implementations return the decoded payload (normally a list of mappings)
    and raise an
    :class:`~api_feature_flags.kernel.errors.InfrastructureError` on failure.
    """

    @abc.abstractmethod
    async def fetch(self, url: str) -> Any: ...


__all__ = ["FeatureFetcher"]
