"""Application feature flags – raw record normalisation."""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from api_feature_flags.kernel.types import normalize_key

NormalizedData = dict[str, dict[str, Any]]


def pick(record: Any, keys: Iterable[str]) -> dict[str, Any]:
    """Copy the *keys* present in *record*; non-mappings yield ``{}``."""
    if not isinstance(record, Mapping):
        return {}
    return {key: record[key] for key in keys if key in record}


def normalize_data(
    records: Sequence[Any],
    feature_key: str,
    enabled_key: str,
    extra_keys: Iterable[str] = (),
) -> NormalizedData:
    """Index *records* by the canonical form of their ``feature_key`` field.

    Each entry keeps only ``enabled_key`` plus any *extra_keys*.  Records
    whose names collide after normalisation overwrite earlier ones, so a
    later record overrides an earlier one.
    """
    keys = (enabled_key, *extra_keys)
    result: NormalizedData = {}
    for record in records:
        name = record.get(feature_key) if isinstance(record, Mapping) else None
        result[normalize_key(name)] = pick(record, keys)
    return result


__all__ = ["NormalizedData", "normalize_data", "pick"]
