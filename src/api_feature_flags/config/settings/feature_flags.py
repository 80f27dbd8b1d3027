"""Config settings – FeatureFlagSettings."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar

from api_feature_flags.config.errors import InvalidSettingValueError

SERVICE_OPTIONS: tuple[str, ...] = (
    "feature_url",
    "feature_key",
    "enabled_key",
    "should_memoize",
    "default_value",
)

# camelCase spellings used by JSON/JS configuration payloads
OPTION_ALIASES: dict[str, str] = {
    "featureUrl": "feature_url",
    "featureKey": "feature_key",
    "enabledKey": "enabled_key",
    "shouldMemoize": "should_memoize",
    "defaultValue": "default_value",
}


def option_name(key: str) -> str | None:
    """Return the option *key* refers to, or ``None`` if it names none."""
    if key in SERVICE_OPTIONS:
        return key
    return OPTION_ALIASES.get(key)


@dataclasses.dataclass
class FeatureFlagSettings:
    """Options understood by :class:`FeatureFlagService`.

    Environment variables use the ``FEATURE_FLAGS_`` prefix, e.g.
    ``FEATURE_FLAGS_FEATURE_URL``.
    """

    env_prefix: ClassVar[str] = "FEATURE_FLAGS"

    feature_url: str = "/api/v1/features"
    feature_key: str = "feature_key"
    enabled_key: str = "value"
    should_memoize: bool = True
    default_value: bool = False

    def __post_init__(self) -> None:
        for name in ("feature_key", "enabled_key"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidSettingValueError(name, value, "must be a non-empty string")

    def merged(self, options: Mapping[str, Any]) -> "FeatureFlagSettings":
        """Return a copy updated with the options named in *options*.

        Both ``feature_key`` and ``featureKey`` spellings are accepted;
        anything else is ignored.
        """
        known: dict[str, Any] = {}
        for key, value in options.items():
            name = option_name(key)
            if name is not None:
                known[name] = value
        return dataclasses.replace(self, **known)


__all__ = ["OPTION_ALIASES", "SERVICE_OPTIONS", "FeatureFlagSettings", "option_name"]
