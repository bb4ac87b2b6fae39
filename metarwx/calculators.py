"""
Derived values (humidity, heat index, wind chill) from decoded observations.
"""

from __future__ import annotations

import math

from .units import convert_unit


class CalculatorError(Exception):
    """Exception for calculator related errors."""


_TEMPERATURE_LABELS = {
    "C": "celsius",
    "F": "fahrenheit",
}

_WIND_SPEED_LABELS = {
    "KTS": "knot",
    "MPH": "mile per hour",
    "KPH": "kilometer per hour",
    "MPS": "meter per second",
}


def _convert(
    value: float, current_unit: str, to_unit: str, labels: dict[str, str]
) -> float:
    """
    Converts value between two of the unit abbreviations in labels. Raises
    CalculatorError if either unit is not one of them.
    """
    conv_from = current_unit.upper().strip()
    conv_to = to_unit.upper().strip()
    if conv_from not in labels:
        raise CalculatorError(f"Invalid current unit specified: '{conv_from}'")
    if conv_to not in labels:
        raise CalculatorError(f"Invalid convert to unit specified: '{conv_to}'")
    if conv_from == conv_to:
        return value
    return convert_unit(value, labels[conv_from], labels[conv_to])


def _convert_temperature(temperature: float, current_unit: str, to_unit: str) -> float:
    return _convert(temperature, current_unit, to_unit, _TEMPERATURE_LABELS)


def _convert_wind_speed(wind_speed: float, current_unit: str, to_unit: str) -> float:
    return _convert(wind_speed, current_unit, to_unit, _WIND_SPEED_LABELS)


def _simple_heat_index(temp_f: float, rh: float) -> float:
    simple_hi = 0.5 * (temp_f + 61.0 + ((temp_f - 68.0) * 1.2) + (rh * 0.094))
    return (simple_hi + temp_f) / 2


def _rothfusz_heat_index(temp_f: float, rh: float) -> float:
    return (
        -42.379
        + 2.04901523 * temp_f
        + 10.14333127 * rh
        - 0.22475541 * temp_f * rh
        - 0.00683783 * temp_f * temp_f
        - 0.05481717 * rh * rh
        + 0.00122874 * temp_f * temp_f * rh
        + 0.00085282 * temp_f * rh * rh
        - 0.00000199 * temp_f * temp_f * rh * rh
    )


def _adjust_heat_index(hi: float, temp_f: float, rh: float) -> float:
    # Low relative humidity
    if rh < 13 and 80 <= temp_f <= 112:
        return hi - ((13 - rh) / 4) * math.sqrt((17 - abs(temp_f - 95)) / 17)
    # High relative humidity
    if rh > 85 and 80 <= temp_f <= 87:
        return hi + ((rh - 85) / 10) * ((87 - temp_f) / 5)
    return hi


def saturation_vapor_pressure(temperature: float, unit: str) -> float:
    """
    Calculates saturation vapour pressure of water in hPa given the
    temperature, using Tetens equation.

    https://en.wikipedia.org/wiki/Tetens_equation

    Parameters:
        * temperature (float) -- Temperature value in degrees.
        * unit (str) -- Unit of the value, either 'C' or 'F'.
    """
    temp_c = _convert_temperature(temperature, current_unit=unit, to_unit="C")
    if temp_c >= 0:
        return 6.1078 * math.exp((17.27 * temp_c) / (temp_c + 237.3))
    return 6.1078 * math.exp((21.875 * temp_c) / (temp_c + 265.5))


def relative_humidity(temperature: float, dew_point: float, unit: str) -> float:
    """
    Calculates relative humidity given air temperature and dew point values in
    degrees of the same unit, 'C' or 'F'. Returns a percentage rounded to 2
    decimal places.

    Parameters:
        * temperature (float) -- Air temperature value in degrees.
        * dew_point (float) -- Dew point temperature value in degrees.
        * unit (str) -- Unit of the values, either 'C' or 'F'.
    """
    actual_vapor_pressure = saturation_vapor_pressure(dew_point, unit)
    sat_vapor_pressure = saturation_vapor_pressure(temperature, unit)
    return round((actual_vapor_pressure / sat_vapor_pressure) * 100, 2)


def heat_index(temperature: float, rel_humidity: float, unit: str) -> float:
    """
    Calculates heat index (apparent temperature) given air temperature and
    relative humidity. Loses accuracy below 80F.

    Based on the NWS heat index equation outlined by Rothfusz in technical
    attachment SR90-23, and additional adjustments from the NWS.
    https://www.wpc.ncep.noaa.gov/html/heatindex_equation.shtml

    Parameters:
        * temperature (float) -- Air temperature value in degrees.
        * rel_humidity (float) -- Relative humidity percentage.
        * unit (str) -- Unit of the values, either 'C' or 'F'.
    """
    temp_f = _convert_temperature(temperature, current_unit=unit, to_unit="F")
    hi_result = _simple_heat_index(temp_f, rel_humidity)
    if hi_result >= 80:
        hi_result = _rothfusz_heat_index(temp_f, rel_humidity)
        hi_result = _adjust_heat_index(hi_result, temp_f, rel_humidity)
    return _convert_temperature(hi_result, current_unit="F", to_unit=unit)


def wind_chill(
    temperature: float, wind_speed: float, temp_unit: str, wind_unit: str
) -> float:
    """
    Calculates wind chill (apparent temperature) given air temperature and
    wind speed. Should not be used above air temps of 50F.

    Based on the NWS/JAGTI wind chill temperature index formula.
    https://www.weather.gov/media/lsx/wcm/Winter2008/Wind_Chill.pdf

    Parameters:
        * temperature (float) -- Air temperature value in degrees.
        * wind_speed (float) -- Speed of wind value.
        * temp_unit (str) -- Unit of temperature, either 'C' or 'F'.
        * wind_unit (str) -- Unit of wind speed, 'KTS', 'MPH', 'KPH' or 'MPS'.
    """
    temp_f = _convert_temperature(temperature, current_unit=temp_unit, to_unit="F")
    wind_mph = _convert_wind_speed(wind_speed, current_unit=wind_unit, to_unit="MPH")
    wind_chill_f = (
        35.74
        + 0.6215 * temp_f
        - 35.75 * (wind_mph**0.16)
        + 0.4275 * temp_f * (wind_mph**0.16)
    )
    return _convert_temperature(wind_chill_f, current_unit="F", to_unit=temp_unit)


def feels_like(
    temperature: float,
    rel_humidity: float | None,
    wind_speed: float | None,
    temp_unit: str,
    wind_unit: str,
) -> float:
    """
    Calculates the "feels like" temperature. At or below 50F with wind, the
    result is the wind chill. At or above 80F with a known humidity, the
    heat index. Otherwise the air temperature itself.

    Parameters:
        * temperature (float) -- Air temperature value in degrees.
        * rel_humidity (float | None) -- Relative humidity percentage.
        * wind_speed (float | None) -- Speed of wind value.
        * temp_unit (str) -- Unit of temperature, either 'C' or 'F'.
        * wind_unit (str) -- Unit of wind speed, 'KTS', 'MPH', 'KPH' or 'MPS'.
    """
    temp_f = _convert_temperature(temperature, current_unit=temp_unit, to_unit="F")
    if temp_f <= 50 and wind_speed:
        return wind_chill(temperature, wind_speed, temp_unit, wind_unit)
    if temp_f >= 80 and rel_humidity is not None:
        return heat_index(temperature, rel_humidity, temp_unit)
    return temperature
