"""Custom exception hierarchy for the numhelpers package."""

from __future__ import annotations


class NumhelpersError(Exception):
    """Base exception for all numhelpers errors."""


class InvalidNumberError(NumhelpersError, ValueError):
    """Raised when a value is not a finite real number."""


class InvalidPrecisionError(NumhelpersError, ValueError):
    """Raised when a fraction-digit precision is not an integer in range."""


class LocaleActivationError(NumhelpersError):
    """Raised when the requested locale is not installed."""
