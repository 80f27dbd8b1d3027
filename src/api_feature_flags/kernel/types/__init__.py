"""Kernel value types."""
from api_feature_flags.kernel.types.feature_key import camelize, normalize_key

__all__ = ["camelize", "normalize_key"]
