"""HTTP adapter – HttpFeatureFetcher."""
from __future__ import annotations

from typing import Any

from api_feature_flags.adapters.http.client import HttpxHttpClient
from api_feature_flags.application.feature_flags.fetcher import FeatureFetcher
from api_feature_flags.kernel.errors import ExternalServiceError


class HttpFeatureFetcher(FeatureFetcher):
    """GET the feature endpoint and decode its JSON body.

    Usage::

        async with HttpxHttpClient(base_url="https://api.example.com") as client:
            service = FeatureFlagService(fetcher=HttpFeatureFetcher(client))
            await service.load()
    """

    def __init__(self, client: HttpxHttpClient | None = None) -> None:
        self._client = client or HttpxHttpClient()

    async def fetch(self, url: str) -> Any:
        response = await self._client.get(url, headers={"Accept": "application/json"})
        try:
            return response.json()
        except ValueError as exc:
            raise ExternalServiceError(
                f"Invalid JSON from GET {url}",
                url=url,
                status_code=response.status_code,
                cause=exc,
            ) from exc


__all__ = ["HttpFeatureFetcher"]
