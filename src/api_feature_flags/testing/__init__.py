"""Testing support – fakes and hypothesis strategies.

``api_feature_flags.testing.generators`` needs the ``test`` extra.
"""

from api_feature_flags.testing.fakes import FakeFeatureFetcher

__all__ = ["FakeFeatureFetcher"]
