"""Validation errors raised while declaring slots and breakpoints."""
from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

__all__ = ["InvalidBucket", "InvalidBreakpointConfig"]


class InvalidBucket(ValueError):
    """Raised when a column or row bucket is outside its declared range."""


class InvalidBreakpointConfig(ImproperlyConfigured):
    """Raised when breakpoint thresholds are missing, negative or unordered."""
