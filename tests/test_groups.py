"""Tests for the group classifier and the field decoders."""
import pytest

from metarwx import groups
from metarwx.groups import (
    CloudType,
    Cover,
    DistanceUnits,
    SkyCondition,
    SpeedUnits,
    Visibility,
    Wind,
)


def test_report_type_and_station():
    assert groups.is_report_type("METAR")
    assert groups.is_report_type("SPECI")
    assert not groups.is_report_type("TAF")
    assert groups.is_icao("KSTL")
    assert not groups.is_icao("KST")
    assert not groups.is_icao("AO2")


@pytest.mark.parametrize(
    "group", ["25005KT", "240105KT", "25005G12KT", "240105G121KT", "VRB04KT", "04503MPS"]
)
def test_is_wind(group):
    assert groups.is_wind(group)


@pytest.mark.parametrize("group", ["2500KT", "KT", "VR05KT", "090V150"])
def test_is_not_wind(group):
    assert not groups.is_wind(group)


def test_is_wind_variation():
    assert groups.is_wind_variation("090V150")
    assert not groups.is_wind_variation("090V15")


@pytest.mark.parametrize(
    "group", ["CAVOK", "1500", "9999", "10SM", "1/2SM", "5/16SM", "M1/4SM"]
)
def test_is_visibility(group):
    assert groups.is_visibility(group)


@pytest.mark.parametrize("group", ["150", "SM", "P6SM", "10SMX", "1/2", "1A2SM"])
def test_is_not_visibility(group):
    assert not groups.is_visibility(group)


def test_is_sky_condition():
    for group in ("SKC", "CLR", "NSC", "FEW004", "SCT080CB", "BKN///", "OVC120"):
        assert groups.is_sky_condition(group)
    assert not groups.is_sky_condition("VV007")
    assert not groups.is_sky_condition("OV")


@pytest.mark.parametrize("group", ["09/06", "01/M01", "M14/M15", "15/", "M07/"])
def test_is_temperature(group):
    assert groups.is_temperature(group)


@pytest.mark.parametrize("group", ["9/6", "09/6", "M1/M2", "09/M6", "/06"])
def test_is_not_temperature(group):
    assert not groups.is_temperature(group)


def test_pressure_and_remark_groups():
    assert groups.is_altimeter_a("A3006")
    assert groups.is_altimeter_q("Q1020")
    assert not groups.is_altimeter_a("Q1020")
    assert groups.is_sea_level_pressure("SLP177")
    assert not groups.is_sea_level_pressure("SLPNO")
    assert groups.is_precise_temperature("T00940061")
    assert not groups.is_precise_temperature("T0094006")
    assert groups.is_vertical_visibility("VV105")
    assert groups.is_observation_time("231751Z")


def test_decode_observation_time():
    assert groups.decode_observation_time("123456Z") == (12, 34, 56)
    assert groups.decode_observation_time("041600Z") == (4, 16, 0)


@pytest.mark.parametrize(
    "group,expected",
    [
        ("25005KT", Wind(250, 5, None, SpeedUnits.KT)),
        ("240105KT", Wind(240, 105, None, SpeedUnits.KT)),
        ("240105G121KT", Wind(240, 105, 121, SpeedUnits.KT)),
        ("25005G12KT", Wind(250, 5, 12, SpeedUnits.KT)),
        ("VRB105G121KT", Wind(None, 105, 121, SpeedUnits.KT, variable=True)),
        ("04503MPS", Wind(45, 3, None, SpeedUnits.MPS)),
        ("VRB03MPS", Wind(None, 3, None, SpeedUnits.MPS, variable=True)),
        ("08090G102MPS", Wind(80, 90, 102, SpeedUnits.MPS)),
        ("04005KPH", Wind(40, 5, None, SpeedUnits.KPH)),
        ("VRB05G21KPH", Wind(None, 5, 21, SpeedUnits.KPH, variable=True)),
    ],
)
def test_decode_wind(group, expected):
    assert groups.decode_wind(group) == expected


def test_decode_wind_variation():
    assert groups.decode_wind_variation("090V150") == (90, 150)


def test_decode_visibility_meters():
    vis = groups.decode_visibility("1500")
    assert vis == Visibility(1500.0, DistanceUnits.M)


def test_decode_visibility_statute_miles():
    assert groups.decode_visibility("10SM") == Visibility(10.0, DistanceUnits.SM)
    assert groups.decode_visibility("1/4SM").value == pytest.approx(0.25)
    assert groups.decode_visibility("5/16SM").value == pytest.approx(0.3125)


def test_decode_visibility_mixed_fraction_uses_previous_group():
    vis = groups.decode_visibility("1/2SM", previous="2")
    assert vis.value == pytest.approx(2.5)
    assert vis.units is DistanceUnits.SM
    # Only a single digit group counts as whole miles
    assert groups.decode_visibility("1/2SM", previous="12").value == pytest.approx(0.5)
    assert groups.decode_visibility("1/2SM", previous="28009KT").value == pytest.approx(
        0.5
    )


def test_decode_visibility_less_than():
    vis = groups.decode_visibility("M1/4SM")
    assert vis.value == pytest.approx(0.25)
    assert vis.less_than is True


def test_decode_visibility_cavok():
    vis = groups.decode_visibility("CAVOK")
    assert vis.cavok is True
    assert vis.value is None
    assert vis.units is None


def test_decode_visibility_zero_denominator():
    assert groups.decode_visibility("1/0SM") is None


@pytest.mark.parametrize(
    "group,expected",
    [
        ("CLR", SkyCondition(Cover.CLR)),
        ("SKC", SkyCondition(Cover.SKC)),
        ("NSC", SkyCondition(Cover.NSC)),
        ("OVC015", SkyCondition(Cover.OVC, 1500)),
        ("FEW004TCU", SkyCondition(Cover.FEW, 400, CloudType.TCU)),
        ("SCT080CB", SkyCondition(Cover.SCT, 8000, CloudType.CB)),
        ("OVC120ACC", SkyCondition(Cover.OVC, 12000, CloudType.ACC)),
        ("BKN050XYZ", SkyCondition(Cover.BKN, 5000)),
        ("BKN///", SkyCondition(Cover.BKN)),
    ],
)
def test_decode_sky_condition(group, expected):
    assert groups.decode_sky_condition(group) == expected


def test_decode_sky_condition_temporary():
    layer = groups.decode_sky_condition("BKN008", temporary=True)
    assert layer.temporary is True
    assert layer.has_altitude
    assert not layer.has_cloud_type


def test_decode_vertical_visibility():
    assert groups.decode_vertical_visibility("VV105") == 10500
    assert groups.decode_vertical_visibility("VV007") == 700


@pytest.mark.parametrize(
    "group,expected",
    [
        ("08/06", (8, 6)),
        ("01/M01", (1, -1)),
        ("M14/M15", (-14, -15)),
        ("15/", (15, None)),
        ("M07/", (-7, None)),
    ],
)
def test_decode_temperature(group, expected):
    assert groups.decode_temperature(group) == expected


def test_decode_altimeters():
    assert groups.decode_altimeter_a("A3006") == pytest.approx(30.06)
    assert groups.decode_altimeter_q("Q1020") == 1020


def test_decode_sea_level_pressure():
    assert groups.decode_sea_level_pressure("SLP177") == pytest.approx(1017.7)
    assert groups.decode_sea_level_pressure("SLP260") == pytest.approx(1026.0)


@pytest.mark.parametrize(
    "group,expected",
    [
        ("T00830067", (8.3, 6.7)),
        ("T01831167", (18.3, -16.7)),
        ("T10171018", (-1.7, -1.8)),
        ("T11001117", (-10.0, -11.7)),
    ],
)
def test_decode_precise_temperature(group, expected):
    assert groups.decode_precise_temperature(group) == pytest.approx(expected)
