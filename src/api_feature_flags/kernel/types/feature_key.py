"""Canonical feature keys.

Every lookup and every stored record goes through :func:`normalize_key`, so
``"dark-mode"``, ``"dark_mode"``, ``"Dark Mode"`` and ``"darkMode"`` all land
on the same entry.
"""

from __future__ import annotations

import re
from typing import Any, Final

_SEPARATOR_PATTERN: Final = re.compile(r"(?:-|_|\.|\s)+(.)?", re.DOTALL)
_LEADING_UPPER_PATTERN: Final = re.compile(r"(^|/)([A-Z])")


def camelize(text: str) -> str:
    """Return the lower camel-case form of *text*.

    Rules applied in order:
    1. Drop each run of ``-``, ``_``, ``.`` or whitespace and upper-case the
       character that follows it.
    2. Lower-case an ASCII capital at the start of the string or after ``/``.
    """
    value = _SEPARATOR_PATTERN.sub(lambda m: (m.group(1) or "").upper(), text)
    return _LEADING_UPPER_PATTERN.sub(lambda m: m.group(1) + m.group(2).lower(), value)


def normalize_key(key: Any = "") -> str:
    """Map any feature name onto its canonical key. Idempotent.

    ``None`` becomes ``""``; other non-strings go through :func:`str`.
    """
    if key is None:
        return ""
    return camelize(key if isinstance(key, str) else str(key))


__all__ = ["camelize", "normalize_key"]
