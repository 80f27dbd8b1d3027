"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from api_feature_flags.kernel.errors import ExternalServiceError, TimeoutError as FetchTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper that raises kernel infrastructure errors."""

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.get(url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(f"HTTP request timed out: GET {url}", url=url, cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                f"HTTP {exc.response.status_code} from GET {url}",
                url=url,
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(str(exc), url=url, cause=exc) from exc


__all__ = ["HttpxHttpClient"]
