"""
api_feature_flags – resolve feature flags from a remote-fetched dataset.

Import path convention::

    from api_feature_flags.application.feature_flags import FeatureFlagService
    from api_feature_flags.adapters.http import HttpFeatureFetcher
    from api_feature_flags.kernel.errors import InvalidDataError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
