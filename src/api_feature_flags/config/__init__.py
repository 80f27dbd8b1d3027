"""Configuration – feature flag options, env loader and config errors."""
