"""Configuration errors."""
from __future__ import annotations

from typing import Any

from api_feature_flags.kernel.errors import FeatureFlagsError


class ConfigError(FeatureFlagsError):
    """The service was configured or wired incorrectly."""

    code = "config_error"


class InvalidSettingValueError(ConfigError):
    """An option holds a value the service cannot work with."""

    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting=setting_name,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
