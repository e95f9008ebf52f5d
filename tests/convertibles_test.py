import datetime
import decimal

import pytest

from bool_convert import convertibles
from bool_convert.providers import INVARIANT


class Lamp:
    def to_bool(self, provider):
        return provider is INVARIANT


def test_supports():
    assert convertibles.supports("x")
    assert convertibles.supports(1)
    assert convertibles.supports(2.5)
    assert convertibles.supports(decimal.Decimal(1))
    assert convertibles.supports(datetime.date.today())
    assert convertibles.supports(Lamp())
    assert not convertibles.supports(None)
    assert not convertibles.supports(object())
    assert not convertibles.supports([1])


def test_convert_strings():
    assert convertibles.convert("true", INVARIANT) is True
    assert convertibles.convert("False", INVARIANT) is False
    with pytest.raises(ValueError, match="not recognized"):
        convertibles.convert("1", INVARIANT)


def test_convert_numbers():
    assert convertibles.convert(0, INVARIANT) is False
    assert convertibles.convert(-3, INVARIANT) is True
    assert convertibles.convert(decimal.Decimal("0.0"), INVARIANT) is False


def test_convert_dates_raise():
    with pytest.raises(TypeError):
        convertibles.convert(datetime.datetime.now(), INVARIANT)


def test_convert_protocol_receives_provider():
    assert isinstance(Lamp(), convertibles.Convertible)
    assert convertibles.convert(Lamp(), INVARIANT) is True


def test_convert_unsupported():
    with pytest.raises(TypeError, match="not convertible"):
        convertibles.convert(object(), INVARIANT)
