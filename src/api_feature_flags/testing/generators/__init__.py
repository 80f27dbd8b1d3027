"""Testing generators – property-based strategies (needs ``hypothesis``)."""
from api_feature_flags.testing.generators.strategies import (
    feature_name_strategy,
    feature_record_strategy,
    feature_records_strategy,
)

__all__ = ["feature_name_strategy", "feature_record_strategy", "feature_records_strategy"]
