"""Application layer – feature flag resolution."""
