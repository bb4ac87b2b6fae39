"""
Module with a static dictionary of the units a decoded METAR is reported in.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UnitConversionError
from .groups import DistanceUnits, SpeedUnits


@dataclass(frozen=True, eq=False)
class UnitInfo:
    """
    An immutable dataclass object that holds information for a unit loosely
    based on the QUDT unit vocabulary.

    Attributes:
    * unit_kind (str) -- The type of measurement the unit is used for. Possible
    values are 'temperature', 'length', 'velocity' and 'pressure'.
    * label (str) -- Full name or label of the unit, ie. 'fahrenheit'.
    * symbol (str) -- The symbol used in print, ie '°F'.
    * conv_factor (float) -- The factor or multiplier for conversion to the
    base unit of its kind.
    * conv_offset (float) -- The offset value for conversion, if applicable.

    Conversion factor is 1 for base units. Temperature units also need an
    offset, kelvin being the base unit.
    """

    unit_kind: str
    label: str
    symbol: str
    conv_factor: float
    conv_offset: float = 0.0

    def __str__(self) -> str:
        return self.label.capitalize()


_ALL_UNITS: dict[str, UnitInfo] = {
    "celsius": UnitInfo(
        unit_kind="temperature",
        label="celsius",
        symbol="°C",
        conv_factor=1.0,
        conv_offset=273.15,
    ),
    "fahrenheit": UnitInfo(
        unit_kind="temperature",
        label="fahrenheit",
        symbol="°F",
        conv_factor=0.5555555555555556,
        conv_offset=459.67,
    ),
    "kelvin": UnitInfo(
        unit_kind="temperature",
        label="kelvin",
        symbol="K",
        conv_factor=1.0,
    ),
    "meter per second": UnitInfo(
        unit_kind="velocity",
        label="meter per second",
        symbol="m/s",
        conv_factor=1.0,
    ),
    "knot": UnitInfo(
        unit_kind="velocity",
        label="knot",
        symbol="kt",
        conv_factor=0.5144444444444445,
    ),
    "kilometer per hour": UnitInfo(
        unit_kind="velocity",
        label="kilometer per hour",
        symbol="km/h",
        conv_factor=0.2777777777777778,
    ),
    "mile per hour": UnitInfo(
        unit_kind="velocity",
        label="mile per hour",
        symbol="mph",
        conv_factor=0.44704,
    ),
    "meter": UnitInfo(
        unit_kind="length",
        label="meter",
        symbol="m",
        conv_factor=1.0,
    ),
    "foot": UnitInfo(
        unit_kind="length",
        label="foot",
        symbol="ft",
        conv_factor=0.3048,
    ),
    "international mile": UnitInfo(
        unit_kind="length",
        label="international mile",
        symbol="mi",
        conv_factor=1609.344,
    ),
    "pascal": UnitInfo(
        unit_kind="pressure",
        label="pascal",
        symbol="Pa",
        conv_factor=1.0,
    ),
    "hectopascal": UnitInfo(
        unit_kind="pressure",
        label="hectopascal",
        symbol="hPa",
        conv_factor=100.0,
    ),
    "inch of mercury": UnitInfo(
        unit_kind="pressure",
        label="inch of mercury",
        symbol="inHg",
        conv_factor=3386.389,
    ),
}

_SPEED_UNIT_LABELS: dict[SpeedUnits, str] = {
    SpeedUnits.KT: "knot",
    SpeedUnits.MPS: "meter per second",
    SpeedUnits.KPH: "kilometer per hour",
}

_DISTANCE_UNIT_LABELS: dict[DistanceUnits, str] = {
    DistanceUnits.M: "meter",
    DistanceUnits.SM: "international mile",
}


def unit_by_label(label: str) -> UnitInfo:
    """
    Retrieves unit information based on the units (case insensitive) full name.

    Raises:
    * KeyError -- The unit cannot be found.

    Example:
    >>> unit_by_label('Knot').symbol
    'kt'
    """
    return _ALL_UNITS[label.casefold()]


def speed_unit(units: SpeedUnits) -> UnitInfo:
    """The unit information of a decoded wind speed unit."""
    return _ALL_UNITS[_SPEED_UNIT_LABELS[units]]


def distance_unit(units: DistanceUnits) -> UnitInfo:
    """The unit information of a decoded visibility unit."""
    return _ALL_UNITS[_DISTANCE_UNIT_LABELS[units]]


def convert(value: float, from_unit: UnitInfo, to_unit: UnitInfo) -> float:
    """
    Converts a floating point value from one unit to another. The two units
    must be of the same kind (ie both 'temperature' or 'length').

    Raises:
    * UnitConversionError -- If the units are incompatible.
    """
    if from_unit.unit_kind != to_unit.unit_kind:
        raise UnitConversionError(
            f"Invalid unit types for conversion. from_unit is "
            f"'{from_unit.unit_kind}' and to_unit is '{to_unit.unit_kind}'."
        )
    if from_unit.unit_kind == "temperature":
        if from_unit.label == "fahrenheit":
            from_base = from_unit.conv_factor * (value + from_unit.conv_offset)
        else:
            from_base = from_unit.conv_factor * value + from_unit.conv_offset
        if to_unit.label == "fahrenheit":
            return from_base / to_unit.conv_factor - to_unit.conv_offset
        return (from_base - to_unit.conv_offset) / to_unit.conv_factor
    return (from_unit.conv_factor * value) / to_unit.conv_factor


def convert_unit(
    value: float, from_unit: UnitInfo | str, to_unit: UnitInfo | str
) -> float:
    """
    Same as convert(), but units can also be given by label, ie.
    convert_unit(10, 'knot', 'mile per hour').

    Raises:
    * KeyError -- A unit label cannot be found.
    * UnitConversionError -- If the units are incompatible.
    """
    if isinstance(from_unit, str):
        from_unit = unit_by_label(from_unit)
    if isinstance(to_unit, str):
        to_unit = unit_by_label(to_unit)
    return convert(value, from_unit, to_unit)
