"""Testing fakes – in-memory doubles for application ports."""
from api_feature_flags.testing.fakes.fetcher import FakeFeatureFetcher

__all__ = ["FakeFeatureFetcher"]
