"""Tests for the derived value calculators."""
import pytest

from metarwx import calculators
from metarwx.calculators import CalculatorError


def test_relative_humidity_saturated():
    assert calculators.relative_humidity(20, 20, "C") == 100.0


def test_relative_humidity_units_agree():
    rh_c = calculators.relative_humidity(9.4, 6.1, "C")
    assert 75 < rh_c < 85
    rh_f = calculators.relative_humidity(48.92, 42.98, "F")
    assert rh_f == pytest.approx(rh_c, abs=0.1)


def test_heat_index_is_warmer_in_humid_heat():
    assert calculators.heat_index(35, 50, "C") > 35


def test_wind_chill_is_colder():
    assert calculators.wind_chill(-10, 20, "C", "KPH") < -10
    assert calculators.wind_chill(0, 10, "C", "KTS") < 0


def test_feels_like():
    assert calculators.feels_like(-5, 80, 15, "C", "KTS") < -5
    assert calculators.feels_like(35, 50, 5, "C", "KTS") > 35
    # No humidity, no heat index
    assert calculators.feels_like(30, None, 10, "C", "KTS") == 30
    # No wind, no wind chill
    assert calculators.feels_like(5, 80, None, "C", "KTS") == 5
    assert calculators.feels_like(5, 80, 0, "C", "KTS") == 5


def test_invalid_units():
    with pytest.raises(CalculatorError):
        calculators.relative_humidity(20, 10, "K")
    with pytest.raises(CalculatorError):
        calculators.wind_chill(0, 10, "C", "FPS")
