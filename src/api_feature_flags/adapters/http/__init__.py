"""HTTP adapter – httpx client and feature fetcher."""
from api_feature_flags.adapters.http.client import HttpxHttpClient
from api_feature_flags.adapters.http.fetcher import HttpFeatureFetcher

__all__ = ["HttpFeatureFetcher", "HttpxHttpClient"]
