import math

import numpy as np
import pytest

from metric_arithmetic import add, compare, divide, multiply, subtract
from metric_errors import ParseError


def test_compare_uses_inverted_polarity():
    assert compare("1kg", "999g", "g") == -1
    assert compare("999g", "1kg", "g") == 1
    assert compare("1kg", "1000g", "g") == 0


def test_arithmetic_on_mixed_prefixes():
    assert add("1km", "500m", "m") == 1500
    assert subtract("1km", "500m", "m") == 500
    assert multiply("2kV", "3V", "V") == 6000
    assert divide("1kW", "250W", "W") == 4
    assert np.isclose(add("1mA", "500μA", "A"), 1.5e-3)


def test_divide_by_zero_follows_ieee():
    assert divide("1kW", "0W", "W") == math.inf
    assert divide("-1kW", "0W", "W") == -math.inf
    assert math.isnan(divide("0W", "0W", "W"))


def test_bad_operand_propagates():
    with pytest.raises(ParseError):
        add("1kW", "lots", "W")
