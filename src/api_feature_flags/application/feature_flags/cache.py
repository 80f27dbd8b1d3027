"""Application feature flags – memoisation cache for resolved flags."""
from __future__ import annotations

from api_feature_flags.application.feature_flags.feature_flag import FeatureFlag


class FeatureFlagCache:
    """Canonical key → :class:`FeatureFlag`.

    No size or time based eviction: entries go away only through
    :meth:`invalidate_and_put`, :meth:`invalidate` or :meth:`clear`.
    Not thread-safe.
    """

    def __init__(self) -> None:
        self._entries: dict[str, FeatureFlag] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str) -> FeatureFlag | None:
        return self._entries.get(key)

    def put(self, key: str, flag: FeatureFlag) -> FeatureFlag:
        """Store *flag* unless *key* is already cached; return the cached flag."""
        found = self._entries.get(key)
        if found is not None:
            return found
        self._entries[key] = flag
        return flag

    def invalidate_and_put(self, key: str, flag: FeatureFlag) -> FeatureFlag:
        self._entries.pop(key, None)
        return self.put(key, flag)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["FeatureFlagCache"]
