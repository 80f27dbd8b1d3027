"""Unit tests for the feature flag resolution state machine."""

from __future__ import annotations

import pytest
from hypothesis import given

from api_feature_flags.application.feature_flags import FeatureFlagState, ResolutionStatus
from api_feature_flags.kernel.errors import (
    ExplicitError,
    ExternalServiceError,
    InvalidDataError,
)
from api_feature_flags.kernel.types import normalize_key
from api_feature_flags.testing.generators import feature_records_strategy


def _state() -> FeatureFlagState:
    return FeatureFlagState(feature_key="name", enabled_key="enabled")


class TestInitialState:
    def test_uninitialized(self) -> None:
        state = _state()
        assert state.status is ResolutionStatus.UNINITIALIZED
        assert state.did_fetch_data is False
        assert state.error is None
        assert state.reason is None
        assert state.is_testing is False
        assert state.current_data() is None


class TestReceive:
    def test_valid_records_fetch(self) -> None:
        state = _state()
        assert state.receive([{"name": "dark-mode", "enabled": True}]) is True
        assert state.status is ResolutionStatus.FETCHED
        assert state.did_fetch_data is True
        assert state.current_data() == {"darkMode": {"enabled": True}}

    def test_tuple_is_accepted(self) -> None:
        state = _state()
        assert state.receive(({"name": "x", "enabled": False},)) is True

    @pytest.mark.parametrize("payload", [[], (), None, {}, {"name": "x"}, "records", 3, True])
    def test_invalid_payload_errors(self, payload: object) -> None:
        state = _state()
        assert state.receive(payload) is False
        assert state.status is ResolutionStatus.ERRORED
        assert state.did_fetch_data is False
        assert isinstance(state.error, InvalidDataError)
        assert state.reason == "Empty data received"
        assert state.current_data() is None

    def test_invalid_after_fetched_errors(self) -> None:
        state = _state()
        state.receive([{"name": "x", "enabled": True}])
        state.receive([])
        assert state.status is ResolutionStatus.ERRORED
        assert state.current_data() is None

    def test_second_receive_overrides(self) -> None:
        state = _state()
        state.receive([{"name": "x", "enabled": True}])
        state.receive([{"name": "x", "enabled": False}])
        assert state.current_data() == {"x": {"enabled": False}}

    def test_receive_after_error_recovers(self) -> None:
        state = _state()
        state.receive_error("offline")
        state.receive([{"name": "x", "enabled": True}])
        assert state.status is ResolutionStatus.FETCHED
        assert state.did_fetch_data is True

    @given(feature_records_strategy())
    def test_one_entry_per_canonical_key(self, records: list[dict]) -> None:
        state = FeatureFlagState()
        assert state.receive(records) is True
        data = state.current_data()
        assert data is not None
        assert set(data) == {normalize_key(r["feature_key"]) for r in records}


class TestReceiveError:
    def test_plain_reason_is_wrapped(self) -> None:
        state = _state()
        error = state.receive_error("offline")
        assert isinstance(error, ExplicitError)
        assert state.error is error
        assert state.reason == "offline"
        assert state.status is ResolutionStatus.ERRORED
        assert state.did_fetch_data is False

    def test_exception_reason_is_chained(self) -> None:
        state = _state()
        exc = ExternalServiceError("features-api", status_code=502)
        error = state.receive_error(exc)
        assert isinstance(error, ExplicitError)
        assert error.reason is exc
        assert error.cause is exc

    def test_data_error_stored_as_is(self) -> None:
        state = _state()
        original = InvalidDataError()
        assert state.receive_error(original) is original

    def test_clears_fetched_data(self) -> None:
        state = _state()
        state.receive([{"name": "x", "enabled": True}])
        state.receive_error("gone")
        assert state.current_data() is None


class TestTestMode:
    def test_forces_did_fetch_data(self) -> None:
        state = _state()
        state.enter_test_mode()
        assert state.is_testing is True
        assert state.did_fetch_data is True
        assert state.status is ResolutionStatus.UNINITIALIZED
        assert state.current_data() is None

    def test_keeps_existing_data(self) -> None:
        state = _state()
        state.receive([{"name": "x", "enabled": True}])
        state.enter_test_mode()
        assert state.current_data() == {"x": {"enabled": True}}

    def test_survives_later_errors(self) -> None:
        state = _state()
        state.enter_test_mode()
        state.receive_error("offline")
        assert state.is_testing is True


class TestRekey:
    def test_renormalizes_held_records(self) -> None:
        state = _state()
        state.receive([{"name": "a", "id": "b", "enabled": True, "on": False}])
        state.rekey("id", "on")
        assert state.current_data() == {"b": {"on": False}}

    def test_without_records(self) -> None:
        state = _state()
        state.rekey("id", "on")
        assert state.current_data() is None

    def test_key_properties_follow_rekey(self) -> None:
        state = _state()
        state.rekey("id", "on")
        assert (state.feature_key, state.enabled_key) == ("id", "on")


class TestExtraKeys:
    def test_defaults_to_none(self) -> None:
        assert FeatureFlagState().extra_keys == ()

    def test_projected_next_to_enabled_key(self) -> None:
        state = FeatureFlagState("name", "enabled", extra_keys=["variant", "rollout"])
        state.receive([{"name": "x", "enabled": True, "variant": "b", "owner": "team"}])
        assert state.extra_keys == ("variant", "rollout")
        assert state.current_data() == {"x": {"enabled": True, "variant": "b"}}

    def test_kept_across_rekey(self) -> None:
        state = FeatureFlagState("name", "enabled", extra_keys=["variant"])
        state.receive([{"name": "a", "id": "b", "on": False, "variant": "c"}])
        state.rekey("id", "on")
        assert state.current_data() == {"b": {"on": False, "variant": "c"}}
