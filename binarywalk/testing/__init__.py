"""Testing utilities for binarywalk consumers."""

from .fixtures import LifecycleTracker

__all__ = ['LifecycleTracker']
