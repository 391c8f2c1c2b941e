"""Human-readable number formatting.

Usage::

    from numhelpers import format_abbreviated, format_locale

    format_locale(1234.5678, 2)   # '1,234.57'
    format_abbreviated(2_500_000)  # '2.5M'
"""

from numhelpers.exceptions import (
    InvalidNumberError,
    InvalidPrecisionError,
    LocaleActivationError,
    NumhelpersError,
)
from numhelpers.formatting import (
    DEFAULT_PRECISION,
    MAX_PRECISION,
    format_abbreviated,
    format_locale,
)
from numhelpers.settings import FormatSettings, activate_locale, load_settings

__all__ = [
    "DEFAULT_PRECISION",
    "MAX_PRECISION",
    "FormatSettings",
    "InvalidNumberError",
    "InvalidPrecisionError",
    "LocaleActivationError",
    "NumhelpersError",
    "activate_locale",
    "format_abbreviated",
    "format_locale",
    "load_settings",
]
