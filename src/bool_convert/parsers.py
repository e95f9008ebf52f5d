"""Strict parsing helpers for boolean literals and culture-aware doubles."""

import decimal
import functools
import numbers
import re
from typing import Any

from bool_convert import providers
from bool_convert.providers import FormatProvider

TRUE_STRING = "True"
FALSE_STRING = "False"


def try_parse_bool(s: str | None) -> bool | None:
    """
    Parse the invariant boolean literals, returning None when the text is neither.

    Matching ignores case, whitespace and NUL characters at either end.
    """
    if not isinstance(s, str):
        return None
    value = s
    while (trimmed := value.strip().strip("\0")) != value:
        value = trimmed
    value = value.casefold()
    if value == TRUE_STRING.casefold():
        return True
    elif value == FALSE_STRING.casefold():
        return False
    return None


def parse_bool(s: str | None) -> bool:
    """Return True only when the text is the invariant true literal."""
    return try_parse_bool(s) is True


def try_parse_float(
    s: str | None, provider: FormatProvider | str | None = None
) -> float | None:
    """
    Parse a double using the symbols of the given provider.

    Accepted shape: surrounding whitespace, an optional leading sign, integer
    digits optionally split by group separators, an optional decimal separator
    with fraction digits and an optional exponent. The NaN and infinity symbols
    are matched case insensitively. Returns None when the text does not parse.
    """
    if not isinstance(s, str):
        return None
    provider = providers.resolve(provider)
    value = s.strip()
    if not value:
        return None
    folded = value.casefold()
    if folded == provider.nan_symbol.casefold():
        return float("nan")
    elif folded == provider.negative_infinity_symbol.casefold():
        return float("-inf")
    sign = 1.0
    if value.startswith(provider.negative_sign):
        sign = -1.0
        value = value[len(provider.negative_sign) :]
    elif value.startswith(provider.positive_sign):
        value = value[len(provider.positive_sign) :]
    if value.casefold() == provider.positive_infinity_symbol.casefold():
        return sign * float("inf")
    match = _number_pattern(
        provider.decimal_separator, provider.group_separator
    ).fullmatch(value)
    if match is None:
        return None
    integer = (match.group("int") or "").replace(provider.group_separator, "")
    fraction = match.group("frac") or ""
    if not integer and not fraction:
        return None
    exponent = match.group("exp") or "0"
    return sign * float(f"{integer or '0'}.{fraction or '0'}e{exponent}")


def to_float(value: Any, provider: FormatProvider | str | None = None) -> float | None:
    """
    Read a value as a double.

    Real numbers and decimals are converted directly. Anything else, including
    numbers too large for a double, is parsed from its text. Booleans and None
    are not numbers and yield None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        try:
            return float(value)
        except (OverflowError, ValueError):
            pass
    return try_parse_float(text(value), provider)


def text(value: Any) -> str | None:
    """Return the default string form of a value, or None if it cannot be produced."""
    if value is None or isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return None


@functools.cache
def _number_pattern(decimal_separator: str, group_separator: str) -> re.Pattern:
    d = re.escape(decimal_separator)
    g = re.escape(group_separator)
    return re.compile(
        rf"(?P<int>[0-9](?:[0-9]|{g})*)?(?:{d}(?P<frac>[0-9]*))?(?:[eE](?P<exp>[+-]?[0-9]+))?"
    )
