"""Config settings – feature flag options and their env loader."""
from api_feature_flags.config.settings.feature_flags import (
    OPTION_ALIASES,
    SERVICE_OPTIONS,
    FeatureFlagSettings,
    option_name,
)
from api_feature_flags.config.settings.loaders import EnvSettingsLoader

__all__ = ["OPTION_ALIASES", "SERVICE_OPTIONS", "EnvSettingsLoader", "FeatureFlagSettings", "option_name"]
