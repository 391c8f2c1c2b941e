"""Formatting helpers for human-readable number display.

Two renderings are provided:

- ``format_locale``: grouped digits in the active ``LC_NUMERIC`` locale with
  at most ``precision`` fraction digits (e.g. '1,234.57').
- ``format_abbreviated``: K/M magnitude suffixes for counts and sizes
  (e.g. '2.5M' instead of '2,500,000').
"""

from __future__ import annotations

import locale
import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from numhelpers.exceptions import InvalidNumberError, InvalidPrecisionError

if TYPE_CHECKING:
    from typing import SupportsFloat

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 4
MAX_PRECISION = 20

# Largest tier first; bounds are inclusive.
_TIERS = (
    (Decimal(1_000_000), "M"),
    (Decimal(1_000), "K"),
)


def _to_decimal(value: SupportsFloat | Decimal | str) -> Decimal:
    """Coerce *value* to a finite Decimal.

    Floats keep their shortest round-trip form, so 1.005 stays 1.005 rather
    than the binary 1.00499999...
    """
    if isinstance(value, bool):
        msg = f"Cannot format boolean {value!r} as a number"
        raise InvalidNumberError(msg)
    if isinstance(value, (int, Decimal)):
        number = Decimal(value)
    else:
        try:
            number = Decimal(repr(float(value)))
        except (TypeError, ValueError) as exc:
            msg = f"Cannot format {value!r} as a number"
            raise InvalidNumberError(msg) from exc
    if not number.is_finite():
        msg = f"Cannot format non-finite value {value!r}"
        raise InvalidNumberError(msg)
    return number


def _check_precision(precision: int) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        msg = f"Precision must be an integer, got {precision!r}"
        raise InvalidPrecisionError(msg)
    if not 0 <= precision <= MAX_PRECISION:
        msg = f"Precision must be between 0 and {MAX_PRECISION}, got {precision}"
        raise InvalidPrecisionError(msg)


def _round_half_up(number: Decimal, places: int) -> Decimal:
    """Round to *places* fraction digits, ties away from zero."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        rounded = number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    if not rounded:
        # Drop the sign of a value that rounded to zero.
        return rounded.copy_abs()
    return rounded


def _grouped(number: Decimal, precision: int) -> str:
    """Render *number* with digit grouping and trailing fraction zeros dropped.

    Only the whole part goes through the locale, so the digits stay exact.
    The C/POSIX locale defines no thousands separator, so the comma/period
    convention is used there instead.
    """
    sign = "-" if number < 0 else ""
    whole, _, fraction = format(abs(number), f".{precision}f").partition(".")
    fraction = fraction.rstrip("0")
    conventions = locale.localeconv()
    if conventions["thousands_sep"]:
        whole = locale.format_string("%d", int(whole), grouping=True)
        decimal_point = str(conventions["decimal_point"])
    else:
        whole = format(int(whole), ",")
        decimal_point = "."
    if fraction:
        return f"{sign}{whole}{decimal_point}{fraction}"
    return f"{sign}{whole}"


def format_locale(
    value: SupportsFloat | Decimal | str,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Format a number with locale grouping and up to *precision* fraction digits.

    Trailing fractional zeros are dropped, so whole values carry no decimal
    point:

    - ``format_locale(1234.5678, 2)`` -> '1,234.57'
    - ``format_locale(5)`` -> '5'

    Raises:
        InvalidNumberError: *value* is not a finite real number.
        InvalidPrecisionError: *precision* is not an integer in
            ``0..MAX_PRECISION``.
    """
    _check_precision(precision)
    number = _round_half_up(_to_decimal(value), precision)
    text = _grouped(number, precision)
    logger.debug("Formatted %r (precision=%d) as %r", value, precision, text)
    return text


def format_abbreviated(value: SupportsFloat | Decimal | str) -> str:
    """Format a number with a K (thousands) or M (millions) suffix.

    - >= 1,000,000: one decimal place in millions (e.g. '2.5M')
    - >= 1,000: one decimal place in thousands (e.g. '1.5K')
    - Below 1,000: ``format_locale`` with the default precision

    The tier is picked before rounding, so 999,999 renders as '1,000K'.
    Negative values are abbreviated by magnitude and keep their sign.

    Raises:
        InvalidNumberError: *value* is not a finite real number.
    """
    number = _to_decimal(value)
    magnitude = abs(number)
    for threshold, suffix in _TIERS:
        if magnitude >= threshold:
            scaled = _round_half_up(magnitude / threshold, 1)
            sign = "-" if number < 0 else ""
            logger.debug("Abbreviating %r in the %s tier", value, suffix)
            return f"{sign}{format_locale(scaled, precision=1)}{suffix}"
    logger.debug("Value %r is below the abbreviation threshold", value)
    return format_locale(number)
