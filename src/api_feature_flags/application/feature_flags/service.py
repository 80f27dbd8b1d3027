"""Application feature flags – FeatureFlagService.

Resolves any feature name to a :class:`FeatureFlag`.  Resolution never
raises: missing, errored or not-yet-fetched data all produce a relay flag
that falls back to ``default_value``.

Typical usage::

    service = FeatureFlagService(fetcher=HttpFeatureFetcher(client))
    service.configure(feature_key="name", enabled_key="enabled")
    await service.load()

    if service.resolve("dark-mode").is_enabled:
        ...
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from api_feature_flags.application.feature_flags.cache import FeatureFlagCache
from api_feature_flags.application.feature_flags.feature_flag import FeatureFlag
from api_feature_flags.application.feature_flags.fetcher import FeatureFetcher
from api_feature_flags.application.feature_flags.normalizer import NormalizedData
from api_feature_flags.application.feature_flags.state import FeatureFlagState, ResolutionStatus
from api_feature_flags.config.errors import ConfigError
from api_feature_flags.config.settings import FeatureFlagSettings, option_name
from api_feature_flags.kernel.errors import FeatureDataError, InfrastructureError
from api_feature_flags.kernel.types import normalize_key
from api_feature_flags.observability.logging import get_logger

_log = get_logger(__name__)


class FeatureFlagService:
    """Orchestrates state, normalisation and memoisation for flag lookups.

    Parameters
    ----------
    settings:
        Initial options.  Defaults to :class:`FeatureFlagSettings`, or to the
        key fields of *state* when a state is injected.
    fetcher:
        Port used by :meth:`fetch_features` / :meth:`load`.
    state:
        Injected state holder, e.g. to share fetched data between services.
        Its key fields must match *settings*, otherwise :class:`ConfigError`.
    cache:
        Injected memoisation cache.
    extra_keys:
        Record fields projected into flag data next to ``enabled_key``.
        Only used when the service builds its own state.
    """

    def __init__(
        self,
        settings: FeatureFlagSettings | None = None,
        *,
        fetcher: FeatureFetcher | None = None,
        state: FeatureFlagState | None = None,
        cache: FeatureFlagCache | None = None,
        extra_keys: Iterable[str] = (),
    ) -> None:
        if state is None:
            settings = settings or FeatureFlagSettings()
            state = FeatureFlagState(settings.feature_key, settings.enabled_key, extra_keys)
        elif settings is None:
            settings = FeatureFlagSettings(
                feature_key=state.feature_key, enabled_key=state.enabled_key
            )
        elif (settings.feature_key, settings.enabled_key) != (state.feature_key, state.enabled_key):
            raise ConfigError(
                "Injected FeatureFlagState is keyed on "
                f"({state.feature_key!r}, {state.enabled_key!r}) but settings use "
                f"({settings.feature_key!r}, {settings.enabled_key!r})"
            )
        self._settings = settings
        self._fetcher = fetcher
        self._state = state
        self._cache = cache if cache is not None else FeatureFlagCache()

    def __enter__(self) -> "FeatureFlagService":
        return self

    def __exit__(self, *args: Any) -> None:
        self.destroy()

    def __getitem__(self, key: str) -> Any:
        return self.resolve(key)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def settings(self) -> FeatureFlagSettings:
        return self._settings

    def configure(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> "FeatureFlagService":
        """Set service options; unknown keys are ignored.  Chainable.

        Option names may be snake_case (``feature_key``) or camelCase
        (``featureKey``).  Changing ``feature_key``/``enabled_key`` re-indexes
        the state, including for every other service sharing it.
        """
        merged = {**(options or {}), **kwargs}
        if not merged:
            raise ConfigError("Cannot configure FeatureFlags service without options")
        self._settings = self._settings.merged(merged)
        self._state.rekey(self._settings.feature_key, self._settings.enabled_key)
        _log.debug(
            "feature_flags.configured",
            options=sorted({name for name in map(option_name, merged) if name is not None}),
        )
        return self

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> FeatureFlagState:
        return self._state

    @property
    def status(self) -> ResolutionStatus:
        return self._state.status

    @property
    def did_fetch_data(self) -> bool:
        return self._state.did_fetch_data

    @property
    def error(self) -> FeatureDataError | None:
        return self._state.error

    @property
    def is_testing(self) -> bool:
        return self._state.is_testing

    @property
    def data(self) -> NormalizedData | None:
        return self._state.current_data()

    def receive_data(self, records: Any) -> bool:
        """Store fetched records; blank or non-list input puts the service in error."""
        if self._state.receive(records):
            _log.info("feature_flags.data_received", count=len(records))
            return True
        _log.warning("feature_flags.data_rejected", reason=self._state.reason)
        return False

    def receive_error(self, reason: Any) -> FeatureDataError:
        """Put the service in error, recording *reason*."""
        error = self._state.receive_error(reason)
        _log.warning("feature_flags.error_received", **error.to_log())
        return error

    def enter_test_mode(self) -> None:
        """Resolve every flag as enabled from now on, without memoising."""
        self._state.enter_test_mode()
        self._settings = self._settings.merged({"should_memoize": False})
        _log.info("feature_flags.test_mode_entered")

    setup_for_testing = enter_test_mode

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def fetch_features(self, url: str | None = None) -> Any:
        """Fetch raw records from *url* (default: ``settings.feature_url``).

        In test mode nothing is fetched and ``True`` is returned.
        """
        if self._state.is_testing:
            return True
        if self._fetcher is None:
            raise ConfigError("No FeatureFetcher configured for FeatureFlags service")
        return await self._fetcher.fetch(url or self._settings.feature_url)

    async def load(self, url: str | None = None) -> bool:
        """Fetch and receive in one step; returns whether data is usable.

        Fetch failures are recorded through :meth:`receive_error` instead of
        propagating.
        """
        if self._state.is_testing:
            return True
        try:
            records = await self.fetch_features(url)
        except InfrastructureError as exc:
            _log.warning("feature_flags.fetch_failed", url=url or self._settings.feature_url)
            self.receive_error(exc)
            return False
        return self.receive_data(records)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def normalize_key(self, key: Any = "") -> str:
        """Canonical form of *key*, as used for stored records."""
        return normalize_key(key)

    def resolve(self, key: str, *, invalidate: bool = False) -> Any:
        """Return the flag for *key*, or the option value if *key* names one.

        Option names are matched in snake_case or camelCase.
        ``invalidate=True`` replaces any memoised flag with a fresh one.
        """
        option = option_name(key)
        if option is not None:
            return getattr(self._settings, option)
        feature_key = self.normalize_key(key)
        if self._state.is_testing:
            return self._handle_test()
        if self._state.did_fetch_data:
            return self._handle_success(feature_key, invalidate)
        return self._handle_failed(feature_key, invalidate)

    get = resolve

    def _handle_test(self) -> FeatureFlag:
        return FeatureFlag(default_value=True, is_relay=True, enabled_key=self._settings.enabled_key)

    def _handle_success(self, key: str, invalidate: bool) -> FeatureFlag:
        data = self._state.current_data() or {}
        flag = FeatureFlag(
            default_value=self._settings.default_value,
            data=data.get(key),
            enabled_key=self._settings.enabled_key,
        )
        return self._memoize(key, flag, invalidate)

    def _handle_failed(self, key: str, invalidate: bool) -> FeatureFlag:
        flag = FeatureFlag(
            default_value=self._settings.default_value,
            is_relay=True,
            enabled_key=self._settings.enabled_key,
        )
        return self._memoize(key, flag, invalidate)

    def _memoize(self, key: str, flag: FeatureFlag, invalidate: bool) -> FeatureFlag:
        if not self._settings.should_memoize:
            return flag
        if invalidate:
            return self._cache.invalidate_and_put(key, flag)
        return self._cache.put(key, flag)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        self._cache.clear()
        _log.debug("feature_flags.cache_cleared")

    def destroy(self) -> None:
        """Release every memoised flag."""
        self.clear_cache()


__all__ = ["FeatureFlagService"]
