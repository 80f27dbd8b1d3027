"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    FeatureFlagsError
    ├── FeatureDataError     (data.py)
    │   ├── InvalidDataError
    │   └── ExplicitError
    ├── InfrastructureError  (infrastructure.py)
    │   ├── TimeoutError
    │   └── ExternalServiceError
    └── ConfigError          (api_feature_flags.config.errors)
"""

from api_feature_flags.kernel.errors.data import (
    EMPTY_DATA_REASON,
    ExplicitError,
    FeatureDataError,
    InvalidDataError,
)
from api_feature_flags.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)
from api_feature_flags.kernel.errors.root import FeatureFlagsError

__all__ = [
    "EMPTY_DATA_REASON",
    "ExplicitError",
    "ExternalServiceError",
    "FeatureDataError",
    "FeatureFlagsError",
    "InfrastructureError",
    "InvalidDataError",
    "TimeoutError",
]
