"""
Recognizes and decodes the individual groups of a METAR/SPECI report.

Each field kind has an is_*() predicate, testing the shape of a single
space delimited group, and a decode_*() function that turns a group the
predicate accepted into plain values or a small immutable dataclass. Neither
side raises for input the predicate accepted, since the predicates only
check character shapes and the decoders parse prefixes tolerantly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .common import leading_float, leading_int, match, starts_with


class ReportType(Enum):
    """Type of report, routine or special."""

    METAR = "METAR"
    SPECI = "SPECI"


class SpeedUnits(Enum):
    """Units of the wind group."""

    KT = "KT"
    MPS = "MPS"
    KPH = "KPH"


class DistanceUnits(Enum):
    """Units of the visibility group."""

    M = "M"
    SM = "SM"


class Cover(Enum):
    """Cloud cover category of a sky condition group."""

    SKC = "SKC"
    CLR = "CLR"
    NSC = "NSC"
    FEW = "FEW"
    SCT = "SCT"
    BKN = "BKN"
    OVC = "OVC"


class CloudType(Enum):
    """Significant convective cloud reported with a sky condition layer."""

    TCU = "TCU"
    CB = "CB"
    ACC = "ACC"


SKY_COVERS: tuple[Cover, ...] = tuple(Cover)
CLOUD_TYPES: tuple[CloudType, ...] = tuple(CloudType)

_TEMPERATURE_PATTERNS = ("##/##", "##/M##", "M##/M##", "##/", "M##/")
_WIND_PATTERNS = ("#####", "#####G##", "######G###")


@dataclass(frozen=True)
class Wind:
    """Decoded wind group. Direction is None when the wind is variable."""

    direction: int | None
    speed: int
    gust: int | None
    units: SpeedUnits
    variable: bool = False


@dataclass(frozen=True)
class Visibility:
    """
    Decoded prevailing visibility group. When cavok is set no value or units
    are present.
    """

    value: float | None
    units: DistanceUnits | None
    less_than: bool = False
    cavok: bool = False


@dataclass(frozen=True)
class SkyCondition:
    """An immutable sky condition layer from a METAR."""

    cover: Cover
    altitude: int | None = None
    cloud_type: CloudType | None = None
    temporary: bool = False

    @property
    def has_altitude(self) -> bool:
        """True if the layer reports its base, in feet."""
        return self.altitude is not None

    @property
    def has_cloud_type(self) -> bool:
        """True if the layer carries a TCU, CB or ACC annotation."""
        return self.cloud_type is not None


def is_report_type(group: str) -> bool:
    return group in ("METAR", "SPECI")


def is_icao(group: str) -> bool:
    return match("$$$$", group)


def is_observation_time(group: str) -> bool:
    return match("######Z", group)


def is_wind(group: str) -> bool:
    if starts_with("VRB", group):
        return True
    return any(starts_with(pattern, group) for pattern in _WIND_PATTERNS)


def is_wind_variation(group: str) -> bool:
    return match("###V###", group)


def is_visibility(group: str) -> bool:
    """
    True for 'CAVOK', a 4 digit meters group, or a statute miles group such
    as '10SM', '1/2SM' or 'M1/4SM'.
    """
    if group == "CAVOK":
        return True
    units_index = group.find(DistanceUnits.SM.value)
    if units_index == -1:
        return match("####", group)
    if units_index != len(group) - 2:
        return False
    if not match("#", group[0]) and group[0] != "M":
        return False
    return all(match("#", char) or char == "/" for char in group[1:units_index])


def is_sky_condition(group: str) -> bool:
    return any(starts_with(cover.value, group) for cover in SKY_COVERS)


def is_vertical_visibility(group: str) -> bool:
    return match("VV###", group)


def is_temperature(group: str) -> bool:
    return any(match(pattern, group) for pattern in _TEMPERATURE_PATTERNS)


def is_altimeter_a(group: str) -> bool:
    return match("A####", group)


def is_altimeter_q(group: str) -> bool:
    return match("Q####", group)


def is_sea_level_pressure(group: str) -> bool:
    return match("SLP###", group)


def is_precise_temperature(group: str) -> bool:
    return match("T########", group)


def decode_observation_time(group: str) -> tuple[int, int, int]:
    """Returns (day, hour, minute) of a DDHHMMZ group, without range checks."""
    return (int(group[0:2]), int(group[2:4]), int(group[4:6]))


def decode_wind(group: str) -> Wind:
    """
    Decodes a wind group such as '27009KT', '24010G18KT', '04503MPS' or
    'VRB05G21KPH'. Knots are assumed when no unit suffix is found.
    """
    if SpeedUnits.MPS.value in group:
        units = SpeedUnits.MPS
    elif SpeedUnits.KPH.value in group:
        units = SpeedUnits.KPH
    else:
        units = SpeedUnits.KT
    variable = group.startswith("VRB")
    direction = None if variable else int(group[0:3])
    speed = leading_int(group[3:6])
    gust = None
    gust_index = group.find("G")
    if gust_index != -1:
        gust = leading_int(group[gust_index + 1 : gust_index + 4])
    return Wind(direction, speed, gust, units, variable)


def decode_wind_variation(group: str) -> tuple[int, int]:
    """Returns the (minimum, maximum) directions of a dddVddd group."""
    return (int(group[0:3]), int(group[4:7]))


def decode_visibility(group: str, previous: str | None = None) -> Visibility | None:
    """
    Decodes a visibility group. Parameter previous is the group right before
    this one, which holds the whole miles of a mixed fraction ('2 1/2SM').
    Returns None for a fraction with a zero denominator.
    """
    if group == "CAVOK":
        return Visibility(None, None, cavok=True)
    units_index = group.find(DistanceUnits.SM.value)
    if units_index == -1:
        return Visibility(float(group), DistanceUnits.M)
    less_than = group.startswith("M")
    body = group[1:units_index] if less_than else group[:units_index]
    if "/" not in body:
        return Visibility(leading_float(body), DistanceUnits.SM, less_than)
    numerator, denominator = body.split("/", maxsplit=1)
    denominator_value = leading_float(denominator)
    if denominator_value == 0:
        return None
    value = leading_float(numerator) / denominator_value
    if match("#", previous):
        value += int(previous)
    return Visibility(value, DistanceUnits.SM, less_than)


def _layer_altitude(digits: str) -> int | None:
    if not match("###", digits):
        return None
    return int(digits) * 100


def decode_sky_condition(group: str, temporary: bool = False) -> SkyCondition:
    """
    Decodes a sky condition group such as 'CLR', 'OVC015' or 'FEW050CB'.
    Unrecognized cloud type text leaves the cloud type empty. Heights that
    are not reported ('BKN///') leave the altitude empty.
    """
    cover = Cover(group[0:3])
    if len(group) == 3:
        return SkyCondition(cover, temporary=temporary)
    altitude = _layer_altitude(group[3:6])
    if len(group) == 6:
        return SkyCondition(cover, altitude, temporary=temporary)
    cloud_type = None
    for known_type in CLOUD_TYPES:
        if group[6:] == known_type.value:
            cloud_type = known_type
            break
    return SkyCondition(cover, altitude, cloud_type, temporary)


def decode_vertical_visibility(group: str) -> int:
    """Vertical visibility in feet."""
    return int(group[2:]) * 100


def _signed_temperature(text: str) -> int:
    if text.startswith("M"):
        text = f"-{text[1:]}"
    return int(text)


def decode_temperature(group: str) -> tuple[int, int | None]:
    """
    Returns (temperature, dew point) in whole degrees celsius. The dew point
    is None when the group ends with the separator ('15/').
    """
    temperature, dew_point = group.split("/", maxsplit=1)
    if len(dew_point) == 0:
        return (_signed_temperature(temperature), None)
    return (_signed_temperature(temperature), _signed_temperature(dew_point))


def decode_altimeter_a(group: str) -> float:
    """Altimeter setting in inches of mercury, two implied decimals."""
    return int(group[1:]) / 100.0


def decode_altimeter_q(group: str) -> int:
    """Altimeter setting in hectopascals."""
    return int(group[1:])


def decode_sea_level_pressure(group: str) -> float:
    """
    Sea level pressure in hectopascals. The group only carries the tens,
    units and tenths, and the value is always taken to be above 1000 hPa.
    """
    return int(group[3:]) / 10.0 + 1000.0


def _tenths_temperature(text: str) -> float:
    if text.startswith("1"):
        text = f"-{text[1:]}"
    return float(text) / 10.0


def decode_precise_temperature(group: str) -> tuple[float, float]:
    """
    Returns (temperature, dew point) in tenths of degrees celsius from a
    'T' remark group. A leading 1 in either half means below zero.
    """
    return (_tenths_temperature(group[1:5]), _tenths_temperature(group[5:9]))
