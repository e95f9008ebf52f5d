"""
The to-boolean capability.

A value supports the capability when ``convert`` has a registration for its
type or when it implements ``Convertible``. Registrations may raise to signal
that a particular value cannot be converted; callers decide how to fall back.
"""

import datetime
import functools
import numbers
from typing import Any, Protocol, runtime_checkable

from bool_convert import parsers
from bool_convert.providers import FormatProvider


@runtime_checkable
class Convertible(Protocol):
    """Objects that know how to convert themselves to a boolean."""

    def to_bool(self, provider: FormatProvider) -> bool: ...


@functools.singledispatch
def convert(value: Any, provider: FormatProvider) -> bool:
    if isinstance(value, Convertible):
        return bool(value.to_bool(provider))
    raise TypeError(f"Value is not convertible to bool - type:{type(value).__name__}")


@convert.register
def _(value: str, provider: FormatProvider) -> bool:
    result = parsers.try_parse_bool(value)
    if result is None:
        raise ValueError(f"String was not recognized as a valid bool - value:{value}")
    return result


@convert.register
def _(value: numbers.Number, provider: FormatProvider) -> bool:
    return value != 0


@convert.register(datetime.date)
@convert.register(datetime.time)
@convert.register(datetime.timedelta)
def _(value, provider: FormatProvider) -> bool:
    raise TypeError(f"Invalid cast to bool - type:{type(value).__name__}")


def supports(value: Any) -> bool:
    """Return True if the value has a registered conversion or implements Convertible."""
    if value is None:
        return False
    if convert.dispatch(type(value)) is not _convert_fallback:
        return True
    return isinstance(value, Convertible)


_convert_fallback = convert.dispatch(object)
