import numpy as np
import pytest

from metric_errors import ParseError
from metric_parser import parse, parse_many


def test_base_unit_removed_before_prefix_detection():
    assert parse("1km", "m") == 1000
    assert parse("1000m", "m") == 1000


def test_common_prefixes():
    assert parse("10km", "m") == 10000
    assert np.isclose(parse("5.2μF", "F"), 5.2e-6)
    assert np.isclose(parse("3mA", "A"), 3e-3)
    assert parse("2MW", "W") == 2e6
    assert parse("4GHz", "Hz") == 4e9


def test_deca_wins_over_deci_and_atto():
    assert parse("5daL", "L") == 50
    assert np.isclose(parse("5dL", "L"), 0.5)
    assert np.isclose(parse("5aL", "L"), 5e-18)


def test_signed_and_fractional_numerals():
    assert parse("-3kV", "V") == -3000
    assert parse("+2kV", "V") == 2000
    assert parse(".5kV", "V") == 500
    assert parse("7.kV", "V") == 7000
    assert parse("42", "V") == 42


def test_micro_sign_alias():
    assert np.isclose(parse("5µF", "F"), 5e-6)


def test_empty_base_unit():
    assert parse("3k", "") == 3000


def test_garbage_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse("5xyz", "g")
    assert excinfo.value.value == "5xyz"
    assert excinfo.value.base_unit == "g"
    assert "invalid metric prefix" in str(excinfo.value)


@pytest.mark.parametrize("text", ["", "k", "1 km", "1e3m", "1.2.3m", "--1m", "1kkm0x"])
def test_invalid_numerals(text):
    with pytest.raises(ParseError):
        parse(text, "m")


def test_every_base_unit_occurrence_is_removed():
    assert parse("1mmm", "m") == 1
    assert parse("m1m", "m") == 1


def test_every_matched_prefix_occurrence_is_removed():
    assert parse("1kmk", "m") == 1000
    assert parse("1kkm", "m") == 1000


def test_wrong_base_unit_is_parse_error():
    with pytest.raises(ParseError):
        parse("5kW", "V")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("abc", "m")


def test_parse_many():
    values = parse_many(["1kW", "250W", "2.5MW"], "W")
    assert values.dtype == np.float64
    np.testing.assert_allclose(values, [1000.0, 250.0, 2.5e6])
    with pytest.raises(ParseError):
        parse_many(["1kW", "oops"], "W")
