"""Locale-aware rendering of numeric metric values for report display."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
import math

from .parsing import normalize_optional_string


_DEFAULT_LANGUAGE = "en"
_MAX_FRACTION_DIGITS = 3
# language -> (grouping separator, decimal separator)
_SEPARATORS: dict[str, tuple[str, str]] = {
    "en": (",", "."),
    "ja": (",", "."),
    "zh": (",", "."),
    "ko": (",", "."),
    "de": (".", ","),
    "es": (".", ","),
    "it": (".", ","),
    "nl": (".", ","),
    "pt": (".", ","),
    "cs": ("\u00a0", ","),
    "pl": ("\u00a0", ","),
    "ru": ("\u00a0", ","),
    "fr": ("\u202f", ","),
}


def _language(locale: str | None) -> str:
    """Return the primary language subtag of a BCP-47 locale."""

    normalized = normalize_optional_string(locale)
    if normalized is None:
        return _DEFAULT_LANGUAGE
    return normalized.replace("_", "-").split("-", 1)[0].lower()


def format_number(value: float, locale: str | None = "en-US") -> str:
    """Format a number with grouping and at most three fraction digits.

    Trailing fractional zeros are dropped, so `0.050` renders as `0.05` and
    `1234.5` renders as `1,234.5` in English locales.
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    grouping, decimal_point = _SEPARATORS.get(_language(locale), _SEPARATORS[_DEFAULT_LANGUAGE])
    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-_MAX_FRACTION_DIGITS)
    # quantize needs room for every integer digit plus the fraction digits
    with localcontext() as context:
        context.prec = max(context.prec, exact.adjusted() + _MAX_FRACTION_DIGITS + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)

    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    integer_part, _, fraction_part = text.partition(".")
    integer_part = integer_part.replace(",", grouping)
    if fraction_part:
        return f"{integer_part}{decimal_point}{fraction_part}"
    return integer_part
