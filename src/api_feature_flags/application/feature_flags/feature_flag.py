"""Application feature flags – FeatureFlag descriptor."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any


@dataclasses.dataclass(frozen=True, eq=False)
class FeatureFlag:
    """Result of resolving a single feature key.

    A *relay* carries no measured data; consumers fall back to
    ``default_value``.  Equality is identity so memoized instances can be
    told apart from freshly built ones.
    """

    default_value: Any = False
    data: Mapping[str, Any] | None = None
    is_relay: bool = False
    enabled_key: str = "value"

    def __post_init__(self) -> None:
        if self.data is None and not self.is_relay:
            object.__setattr__(self, "is_relay", True)

    @property
    def is_enabled(self) -> bool:
        if self.is_relay or self.data is None or self.enabled_key not in self.data:
            return bool(self.default_value)
        return bool(self.data[self.enabled_key])

    @property
    def is_disabled(self) -> bool:
        return not self.is_enabled

    def get(self, field: str, default: Any = None) -> Any:
        """Read a projected field from ``data``."""
        if self.data is None:
            return default
        return self.data.get(field, default)


__all__ = ["FeatureFlag"]
