"""
Decoding a METAR/SPECI string into a python object.
"""

from __future__ import annotations

import logging

from . import groups
from .common import quotify
from .groups import (
    DistanceUnits,
    ReportType,
    SkyCondition,
    SpeedUnits,
    Visibility,
    Wind,
)
from .phenom import Phenom, decode_phenomena

logger = logging.getLogger(__name__)

MAX_CLOUD_LAYERS = 3

REMARKS_MARKER = "RMK"
TEMPORARY_MARKERS: tuple[str, ...] = ("TEMPO",)


class Metar:
    """
    Python object for a decoded METAR/SPECI observation. Every field is
    optional, use the has_* properties to know if a field was found in the
    report. Value properties return None when their field is absent.

    Groups are decoded left to right, each by at most one decoder. Groups
    that are not recognized are skipped, so decoding never fails and an
    empty string gives an object with every field absent.
    """

    def __init__(self, metar_observation: str | None = None) -> None:
        """
        Creates a Metar object, decoding the given observation string if one
        is specified.

        Parameters:
        * metar_observation (str | None) -- Full METAR observation string
        """
        self._report_type: ReportType | None = None
        self._icao: str | None = None
        self._day: int | None = None
        self._hour: int | None = None
        self._minute: int | None = None
        self._wind: Wind | None = None
        self._min_wind_direction: int | None = None
        self._max_wind_direction: int | None = None
        self._visibility: Visibility | None = None
        self._vertical_visibility: int | None = None
        self._cloud_layers: list[SkyCondition] = []
        self._temperature: int | None = None
        self._dew_point: int | None = None
        self._precise_temperature: float | None = None
        self._precise_dew_point: float | None = None
        self._altimeter_a: float | None = None
        self._altimeter_q: int | None = None
        self._sea_level_pressure: float | None = None
        self._phenomena: list[Phenom] = []
        if metar_observation is not None:
            self.parse(metar_observation)

    def __repr__(self) -> str:
        sb = f"{self.__class__.__name__}(\n"
        sb = f"{sb}    report_type={quotify(self._report_type)},\n"
        sb = f"{sb}    icao={quotify(self._icao)},\n"
        sb = f"{sb}    day={quotify(self._day)},\n"
        sb = f"{sb}    hour={quotify(self._hour)},\n"
        sb = f"{sb}    minute={quotify(self._minute)},\n"
        sb = f"{sb}    wind={quotify(self._wind)},\n"
        sb = f"{sb}    min_wind_direction={quotify(self._min_wind_direction)},\n"
        sb = f"{sb}    max_wind_direction={quotify(self._max_wind_direction)},\n"
        sb = f"{sb}    visibility={quotify(self._visibility)},\n"
        sb = f"{sb}    vertical_visibility={quotify(self._vertical_visibility)},\n"
        sb = f"{sb}    cloud_layers={quotify(self._cloud_layers)},\n"
        sb = f"{sb}    temperature={quotify(self._temperature)},\n"
        sb = f"{sb}    dew_point={quotify(self._dew_point)},\n"
        sb = f"{sb}    precise_temperature={quotify(self._precise_temperature)},\n"
        sb = f"{sb}    precise_dew_point={quotify(self._precise_dew_point)},\n"
        sb = f"{sb}    altimeter_a={quotify(self._altimeter_a)},\n"
        sb = f"{sb}    altimeter_q={quotify(self._altimeter_q)},\n"
        sb = f"{sb}    sea_level_pressure={quotify(self._sea_level_pressure)},\n"
        sb = f"{sb}    phenomena={quotify(self._phenomena)},\n"
        return f"{sb})"

    @classmethod
    def from_raw_string(cls, metar: str) -> Metar:
        """Constructs a Metar object using just the raw METAR."""
        return cls(metar)

    def parse(self, metar_observation: str) -> None:
        """
        Decodes the groups of the observation string into this object.

        Fields that are already present are never overwritten, so calling
        this again only adds sky conditions (up to three) and phenomena.
        After 'RMK' groups are no longer read as present weather, and after
        a TEMPO marker layers and phenomena are flagged as temporary.
        """
        previous: str | None = None
        in_remarks = False
        temporary = False
        for group in metar_observation.split():
            if not self.has_report_type and groups.is_report_type(group):
                self._report_type = ReportType(group)
            elif not self.has_icao and groups.is_icao(group):
                self._icao = group
            elif not self.has_minute and groups.is_observation_time(group):
                self._day, self._hour, self._minute = groups.decode_observation_time(
                    group
                )
            elif not self.has_wind_speed and groups.is_wind(group):
                self._wind = groups.decode_wind(group)
            elif not self.has_min_wind_direction and groups.is_wind_variation(group):
                (
                    self._min_wind_direction,
                    self._max_wind_direction,
                ) = groups.decode_wind_variation(group)
            elif (
                not self.has_visibility
                and not self.is_cavok
                and groups.is_visibility(group)
            ):
                self._visibility = groups.decode_visibility(group, previous)
            elif (
                self.num_cloud_layers < MAX_CLOUD_LAYERS
                and groups.is_sky_condition(group)
            ):
                self._cloud_layers.append(
                    groups.decode_sky_condition(group, temporary)
                )
            elif not self.has_vertical_visibility and groups.is_vertical_visibility(
                group
            ):
                self._vertical_visibility = groups.decode_vertical_visibility(group)
            elif not self.has_temperature and groups.is_temperature(group):
                self._temperature, self._dew_point = groups.decode_temperature(group)
            elif not self.has_altimeter_a and groups.is_altimeter_a(group):
                self._altimeter_a = groups.decode_altimeter_a(group)
            elif not self.has_altimeter_q and groups.is_altimeter_q(group):
                self._altimeter_q = groups.decode_altimeter_q(group)
            elif not self.has_sea_level_pressure and groups.is_sea_level_pressure(
                group
            ):
                self._sea_level_pressure = groups.decode_sea_level_pressure(group)
            elif not self.has_precise_temperature and groups.is_precise_temperature(
                group
            ):
                (
                    self._precise_temperature,
                    self._precise_dew_point,
                ) = groups.decode_precise_temperature(group)
            elif group == REMARKS_MARKER:
                in_remarks = True
            elif group in TEMPORARY_MARKERS:
                temporary = True
            elif not in_remarks:
                self._parse_phenomena(group, temporary)
            else:
                logger.debug("Skipping remark group '%s'", group)
            previous = group

    def _parse_phenomena(self, group: str, temporary: bool) -> None:
        phenomena = decode_phenomena(group, temporary)
        if len(phenomena) == 0:
            logger.debug("Skipping unrecognized group '%s'", group)
            return
        self._phenomena.extend(phenomena)

    # Report type and station

    @property
    def has_report_type(self) -> bool:
        return self._report_type is not None

    @property
    def report_type(self) -> ReportType | None:
        """METAR or SPECI, None if the report does not start with either."""
        return self._report_type

    @property
    def has_icao(self) -> bool:
        return self._icao is not None

    @property
    def icao(self) -> str | None:
        """The 4 letter ICAO station identifier."""
        return self._icao

    # Observation time

    @property
    def has_day(self) -> bool:
        return self._day is not None

    @property
    def day(self) -> int | None:
        return self._day

    @property
    def has_hour(self) -> bool:
        return self._hour is not None

    @property
    def hour(self) -> int | None:
        return self._hour

    @property
    def has_minute(self) -> bool:
        return self._minute is not None

    @property
    def minute(self) -> int | None:
        return self._minute

    # Wind

    @property
    def has_wind_direction(self) -> bool:
        return self._wind is not None and self._wind.direction is not None

    @property
    def wind_direction(self) -> int | None:
        """Direction in degrees, None when absent or variable."""
        return None if self._wind is None else self._wind.direction

    @property
    def is_variable_wind_direction(self) -> bool:
        return self._wind is not None and self._wind.variable

    @property
    def has_wind_speed(self) -> bool:
        return self._wind is not None

    @property
    def wind_speed(self) -> int | None:
        return None if self._wind is None else self._wind.speed

    @property
    def has_wind_gust(self) -> bool:
        return self._wind is not None and self._wind.gust is not None

    @property
    def wind_gust(self) -> int | None:
        return None if self._wind is None else self._wind.gust

    @property
    def wind_speed_units(self) -> SpeedUnits | None:
        """Units of wind_speed and wind_gust."""
        return None if self._wind is None else self._wind.units

    @property
    def has_min_wind_direction(self) -> bool:
        return self._min_wind_direction is not None

    @property
    def min_wind_direction(self) -> int | None:
        return self._min_wind_direction

    @property
    def has_max_wind_direction(self) -> bool:
        return self._max_wind_direction is not None

    @property
    def max_wind_direction(self) -> int | None:
        return self._max_wind_direction

    # Visibility

    @property
    def has_visibility(self) -> bool:
        return self._visibility is not None and self._visibility.value is not None

    @property
    def visibility(self) -> float | None:
        """Prevailing visibility, None when absent or CAVOK."""
        return None if self._visibility is None else self._visibility.value

    @property
    def visibility_units(self) -> DistanceUnits | None:
        return None if self._visibility is None else self._visibility.units

    @property
    def is_less_than_visibility(self) -> bool:
        """True if visibility is reported as less than the value ('M1/4SM')."""
        return self._visibility is not None and self._visibility.less_than

    @property
    def is_cavok(self) -> bool:
        return self._visibility is not None and self._visibility.cavok

    @property
    def has_vertical_visibility(self) -> bool:
        return self._vertical_visibility is not None

    @property
    def vertical_visibility(self) -> int | None:
        """Vertical visibility into an obscured sky, in feet."""
        return self._vertical_visibility

    # Sky conditions

    @property
    def num_cloud_layers(self) -> int:
        return len(self._cloud_layers)

    @property
    def cloud_layers(self) -> tuple[SkyCondition, ...]:
        return tuple(self._cloud_layers)

    def layer(self, index: int) -> SkyCondition:
        """
        Returns the sky condition layer at the index, in report order.

        Raises:
        * IndexError -- The index is not one of the decoded layers.
        """
        if not 0 <= index < len(self._cloud_layers):
            raise IndexError(
                f"Cloud layer {index} out of range, "
                f"{len(self._cloud_layers)} layer(s) decoded."
            )
        return self._cloud_layers[index]

    # Temperature

    @property
    def has_temperature(self) -> bool:
        return self._temperature is not None

    @property
    def temperature(self) -> int | None:
        """Air temperature in whole degrees celsius."""
        return self._temperature

    @property
    def has_dew_point(self) -> bool:
        return self._dew_point is not None

    @property
    def dew_point(self) -> int | None:
        """Dew point in whole degrees celsius."""
        return self._dew_point

    @property
    def has_precise_temperature(self) -> bool:
        return self._precise_temperature is not None

    @property
    def precise_temperature(self) -> float | None:
        """Air temperature in tenths of degrees celsius, from the remarks."""
        return self._precise_temperature

    @property
    def has_precise_dew_point(self) -> bool:
        return self._precise_dew_point is not None

    @property
    def precise_dew_point(self) -> float | None:
        """Dew point in tenths of degrees celsius, from the remarks."""
        return self._precise_dew_point

    # Pressure

    @property
    def has_altimeter_a(self) -> bool:
        return self._altimeter_a is not None

    @property
    def altimeter_a(self) -> float | None:
        """Altimeter setting in inches of mercury."""
        return self._altimeter_a

    @property
    def has_altimeter_q(self) -> bool:
        return self._altimeter_q is not None

    @property
    def altimeter_q(self) -> int | None:
        """Altimeter setting in hectopascals."""
        return self._altimeter_q

    @property
    def has_sea_level_pressure(self) -> bool:
        return self._sea_level_pressure is not None

    @property
    def sea_level_pressure(self) -> float | None:
        """Sea level pressure in hectopascals, from the remarks."""
        return self._sea_level_pressure

    # Present weather

    @property
    def num_phenomena(self) -> int:
        return len(self._phenomena)

    @property
    def phenomena(self) -> tuple[Phenom, ...]:
        return tuple(self._phenomena)

    def phenomenon(self, index: int) -> Phenom:
        """
        Returns the decoded present weather group at the index, in report
        order.

        Raises:
        * IndexError -- The index is not one of the decoded groups.
        """
        if not 0 <= index < len(self._phenomena):
            raise IndexError(
                f"Phenomenon {index} out of range, "
                f"{len(self._phenomena)} phenomena decoded."
            )
        return self._phenomena[index]
