"""Application feature flags – resolution engine, ports and value objects."""
from api_feature_flags.application.feature_flags.cache import FeatureFlagCache
from api_feature_flags.application.feature_flags.feature_flag import FeatureFlag
from api_feature_flags.application.feature_flags.fetcher import FeatureFetcher
from api_feature_flags.application.feature_flags.normalizer import NormalizedData, normalize_data, pick
from api_feature_flags.application.feature_flags.service import FeatureFlagService
from api_feature_flags.application.feature_flags.state import FeatureFlagState, ResolutionStatus

__all__ = [
    "FeatureFetcher",
    "FeatureFlag",
    "FeatureFlagCache",
    "FeatureFlagService",
    "FeatureFlagState",
    "NormalizedData",
    "ResolutionStatus",
    "normalize_data",
    "pick",
]
