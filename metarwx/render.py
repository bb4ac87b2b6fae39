"""
Human readable descriptions of a decoded Metar, and a rich table report.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from . import calculators
from .common import cardinal_direction
from .groups import CloudType, Cover, DistanceUnits, SkyCondition, SpeedUnits
from .metar import Metar
from .phenom import Intensity, Phenom, Phenomenon
from .units import convert_unit

COVER_NAMES: dict[Cover, str] = {
    Cover.SKC: "Sky clear",
    Cover.CLR: "Clear below 12,000 ft",
    Cover.NSC: "No significant cloud",
    Cover.FEW: "Few",
    Cover.SCT: "Scattered",
    Cover.BKN: "Broken",
    Cover.OVC: "Overcast",
}

CLOUD_TYPE_NAMES: dict[CloudType, str] = {
    CloudType.TCU: "towering cumulus",
    CloudType.CB: "cumulonimbus",
    CloudType.ACC: "altocumulus castellanus",
}

PHENOMENON_NAMES: dict[Phenomenon, str] = {
    Phenomenon.MIST: "mist",
    Phenomenon.DUST_STORM: "dust storm",
    Phenomenon.DUST: "dust",
    Phenomenon.DRIZZLE: "drizzle",
    Phenomenon.FUNNEL_CLOUD: "funnel cloud",
    Phenomenon.FOG: "fog",
    Phenomenon.SMOKE: "smoke",
    Phenomenon.HAIL: "hail",
    Phenomenon.SMALL_HAIL: "small hail",
    Phenomenon.HAZE: "haze",
    Phenomenon.ICE_CRYSTALS: "ice crystals",
    Phenomenon.ICE_PELLETS: "ice pellets",
    Phenomenon.DUST_SAND_WHORLS: "dust/sand whorls",
    Phenomenon.SPRAY: "spray",
    Phenomenon.RAIN: "rain",
    Phenomenon.SAND: "sand",
    Phenomenon.SNOW_GRAINS: "snow grains",
    Phenomenon.SHOWER: "showers",
    Phenomenon.SNOW: "snow",
    Phenomenon.SQUALLS: "squalls",
    Phenomenon.SAND_STORM: "sand storm",
    Phenomenon.UNKNOWN_PRECIP: "unknown precipitation",
    Phenomenon.VOLCANIC_ASH: "volcanic ash",
    Phenomenon.THUNDERSTORM: "thunderstorm",
    Phenomenon.SLEET: "sleet",
}

INTENSITY_NAMES: dict[Intensity, str] = {
    Intensity.LIGHT: "light",
    Intensity.NORMAL: "",
    Intensity.HEAVY: "heavy",
}

SPEED_UNIT_NAMES: dict[SpeedUnits, str] = {
    SpeedUnits.KT: "kt",
    SpeedUnits.MPS: "m/s",
    SpeedUnits.KPH: "km/h",
}

DISTANCE_UNIT_NAMES: dict[DistanceUnits, str] = {
    DistanceUnits.M: "meters",
    DistanceUnits.SM: "statute miles",
}

# Wind units accepted by the calculators module
_CALCULATOR_WIND_UNITS: dict[SpeedUnits, str] = {
    SpeedUnits.KT: "KTS",
    SpeedUnits.MPS: "MPS",
    SpeedUnits.KPH: "KPH",
}

# (Phenom attribute, word), in the order words are written
_DESCRIPTOR_WORDS = (
    ("shallow", "shallow"),
    ("partial", "partial"),
    ("patches", "patches of"),
    ("drifting", "drifting"),
    ("blowing", "blowing"),
    ("freezing", "freezing"),
)


def describe_phenom(phenom: Phenom) -> str:
    """
    Outputs a human readable description of a present weather group, ie.
    'Light thunderstorm with rain' for '-TSRA'.
    """
    words = []
    if phenom.intensity is not Intensity.NORMAL:
        words.append(INTENSITY_NAMES[phenom.intensity])
    for attribute, word in _DESCRIPTOR_WORDS:
        if getattr(phenom, attribute):
            words.append(word)
    if phenom.thunderstorm and phenom.phenomenon is not Phenomenon.THUNDERSTORM:
        words.append("thunderstorm with")
    words.append(" and ".join(PHENOMENON_NAMES[code] for code in phenom.codes))
    if phenom.shower and phenom.phenomenon is not Phenomenon.SHOWER:
        words.append("showers")
    if phenom.vicinity:
        words.append("in the vicinity")
    sb = " ".join(words)
    return f"{sb[0].upper()}{sb[1:]}"


def describe_sky_condition(layer: SkyCondition) -> str:
    """Outputs a human readable description of a sky condition layer."""
    sb = COVER_NAMES[layer.cover]
    if layer.altitude is not None:
        sb = f"{sb} at {layer.altitude} ft"
    if layer.cloud_type is not None:
        sb = f"{sb} ({CLOUD_TYPE_NAMES[layer.cloud_type]})"
    return sb


def describe_wind(metar: Metar) -> str:
    """Outputs a human readable description of the decoded wind groups."""
    if not metar.has_wind_speed:
        return "Unspecified"
    units = SPEED_UNIT_NAMES[metar.wind_speed_units]
    if metar.wind_speed == 0 and not metar.has_wind_gust:
        return "Calm"
    if metar.is_variable_wind_direction:
        sb = f"Variable at {metar.wind_speed} {units}"
    else:
        compass = cardinal_direction(metar.wind_direction)
        sb = f"{metar.wind_direction}° ({compass}) at {metar.wind_speed} {units}"
    if metar.has_wind_gust:
        sb = f"{sb}, gusting {metar.wind_gust} {units}"
    if metar.has_min_wind_direction and metar.has_max_wind_direction:
        sb = (
            f"{sb}, varying between {metar.min_wind_direction}° "
            f"and {metar.max_wind_direction}°"
        )
    return sb


def describe_visibility(metar: Metar) -> str:
    """Outputs a human readable description of the decoded visibility."""
    if metar.is_cavok:
        return "CAVOK"
    if not metar.has_visibility:
        return "Unspecified"
    if metar.visibility_units is DistanceUnits.M:
        sb = f"{metar.visibility:.0f} meters"
    else:
        sb = f"{metar.visibility:.2f} statute miles"
    if metar.is_less_than_visibility:
        return f"Less than {sb}"
    return sb


def describe_temperature(value_c: float, fahrenheit: bool = False) -> str:
    if fahrenheit:
        return f"{convert_unit(value_c, 'celsius', 'fahrenheit'):.1f} °F"
    return f"{value_c:.1f} °C"


def _best_temperature(metar: Metar) -> tuple[float | None, float | None]:
    # Remarks carry tenths, prefer them over the whole degrees of the body
    temp = metar.precise_temperature
    if temp is None:
        temp = metar.temperature
    dew = metar.precise_dew_point
    if dew is None:
        dew = metar.dew_point
    return (temp, dew)


def _temperature_rows(metar: Metar, fahrenheit: bool) -> list[tuple[str, str]]:
    temp, dew = _best_temperature(metar)
    if temp is None:
        return []
    rows = [("Temperature", describe_temperature(temp, fahrenheit))]
    humidity = None
    if dew is not None:
        humidity = calculators.relative_humidity(temp, dew, "C")
        rows.append(("Dew Point", describe_temperature(dew, fahrenheit)))
        rows.append(("Humidity", f"{humidity:.0f}%"))
    wind_unit = "KTS"
    if metar.wind_speed_units is not None:
        wind_unit = _CALCULATOR_WIND_UNITS[metar.wind_speed_units]
    feeling = calculators.feels_like(temp, humidity, metar.wind_speed, "C", wind_unit)
    if round(feeling, 1) != round(temp, 1):
        rows.append(("Feels Like", describe_temperature(feeling, fahrenheit)))
    return rows


def _pressure_rows(metar: Metar) -> list[tuple[str, str]]:
    rows = []
    if metar.has_altimeter_a:
        rows.append(("Altimeter", f"{metar.altimeter_a:.2f} inHg"))
    elif metar.has_altimeter_q:
        rows.append(("Altimeter", f"{metar.altimeter_q} hPa"))
    if metar.has_sea_level_pressure:
        rows.append(("Sea Level", f"{metar.sea_level_pressure:.1f} hPa"))
    return rows


def report_table(metar: Metar, fahrenheit: bool = False) -> Table:
    """
    Creates a rich Table with one row per decoded field. Temporary sky
    condition layers are left out.
    """
    title = metar.icao if metar.has_icao else "METAR"
    if metar.has_report_type:
        title = f"{title} ({metar.report_type.value})"
    table = Table(title=title, show_header=True)
    table.add_column("Field")
    table.add_column("Value")

    if metar.has_day and metar.has_hour and metar.has_minute:
        table.add_row(
            "Observed", f"Day {metar.day} at {metar.hour:02d}:{metar.minute:02d}Z"
        )
    for name, value in _temperature_rows(metar, fahrenheit):
        table.add_row(name, value)
    for name, value in _pressure_rows(metar):
        table.add_row(name, value)
    table.add_row("Wind", describe_wind(metar))
    table.add_row("Visibility", describe_visibility(metar))
    if metar.has_vertical_visibility:
        table.add_row("Vertical Visibility", f"{metar.vertical_visibility} ft")
    for layer in metar.cloud_layers:
        if not layer.temporary:
            table.add_row("Sky Condition", describe_sky_condition(layer))
    for phenom in metar.phenomena:
        table.add_row("Weather", describe_phenom(phenom))
    return table


def print_report(
    metar: Metar, fahrenheit: bool = False, console: Console | None = None
) -> None:
    """Prints the report table of a decoded Metar to the console."""
    if console is None:
        console = Console()
    console.print(report_table(metar, fahrenheit))
