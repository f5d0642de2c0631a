"""Injected uniform sources."""

from shape_sampler.sources.numpy_source import NumpyUniformSource

__all__ = ["NumpyUniformSource"]
