"""Root error class shared by every layer."""

from __future__ import annotations

from typing import Any, ClassVar


class FeatureFlagsError(Exception):
    """Root of every error raised or recorded by this package.

    ``code`` is a stable slug for log fields.  Keyword arguments other than
    ``cause`` are kept in ``context`` and emitted by :meth:`to_log`.
    """

    code: ClassVar[str] = "feature_flags_error"

    def __init__(self, message: str, *, cause: BaseException | None = None, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_log(self) -> dict[str, Any]:
        """Flat dict suitable for structlog keyword arguments."""
        fields: dict[str, Any] = {
            "error_type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            **self.context,
        }
        if self.__cause__ is not None:
            fields["cause"] = repr(self.__cause__)
        return fields


__all__ = ["FeatureFlagsError"]
