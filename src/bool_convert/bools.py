"""
Conversion of arbitrary values to booleans.

``to_bool`` runs an ordered chain of tiers. Each tier returns a boolean when it
can decide, or None to hand the original value to the next tier:

1. None is False
2. an exact bool is returned unchanged
3. values supporting the to-boolean capability are converted through it
4. values readable as a double are True when non-zero
5. the value's text is parsed strictly as a boolean literal
"""

from collections.abc import Callable
from typing import Any

from bool_convert import convertibles, logs, parsers, providers
from bool_convert.parsers import parse_bool
from bool_convert.providers import FormatProvider

LOG = logs.logger(__name__)


def to_bool(value: Any, provider: FormatProvider | str | None = None) -> bool:
    """
    Convert a value to a boolean without raising.

    Args:
        value: Value to convert, may be None
        provider: FormatProvider or registered culture name used for number
            parsing, defaults to the invariant provider. Unknown names fall
            back to the invariant provider with a warning

    Returns:
        The result of the first tier that decides
    """
    provider = _resolve_provider(provider)
    for tier in _TIERS:
        result = tier(value, provider)
        if result is not None:
            return result
    return False


def _resolve_provider(provider: FormatProvider | str | None) -> FormatProvider:
    if isinstance(provider, str) and providers.get(provider) is None:
        LOG.warning("Unknown format provider, using invariant - name:%s", provider)
        return providers.INVARIANT
    return providers.resolve(provider)

def _from_none(value: Any, provider: FormatProvider) -> bool | None:
    return False if value is None else None


def _from_bool(value: Any, provider: FormatProvider) -> bool | None:
    return value if type(value) is bool else None


def _from_convertible(value: Any, provider: FormatProvider) -> bool | None:
    if not convertibles.supports(value):
        return None
    try:
        return convertibles.convert(value, provider)
    except Exception as e:
        LOG.debug(
            "Conversion failed, falling back - type:%s error:%s",
            type(value).__name__,
            e,
        )
        return None


def _from_float(value: Any, provider: FormatProvider) -> bool | None:
    result = parsers.to_float(value, provider)
    return None if result is None else result != 0


def _from_str(value: Any, provider: FormatProvider) -> bool | None:
    return parse_bool(parsers.text(value))


_TIERS: tuple[Callable[[Any, FormatProvider], bool | None], ...] = (
    _from_none,
    _from_bool,
    _from_convertible,
    _from_float,
    _from_str,
)
