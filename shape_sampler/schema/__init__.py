"""Run configuration schemas."""
