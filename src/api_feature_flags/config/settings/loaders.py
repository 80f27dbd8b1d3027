"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from api_feature_flags.config.errors import ConfigError

T = TypeVar("T")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class EnvSettingsLoader:
    """Build a settings dataclass from ``<PREFIX>_<FIELD>`` environment variables.

    The prefix comes from the class's ``env_prefix``.  Variables that are not
    set leave the dataclass default in place.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "env_prefix", "")
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = "_".join(part for part in (prefix, field.name) if part).upper()
            if env_key in environ:
                kwargs[field.name] = self._coerce(environ[env_key], field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(value: str, type_hint: Any) -> Any:
        # annotations are strings under ``from __future__ import annotations``
        if type_hint in (bool, "bool"):
            return value.strip().lower() in _TRUTHY
        return value


__all__ = ["EnvSettingsLoader"]
