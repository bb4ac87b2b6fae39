"""Tests for present weather group decoding."""
import pytest

from metarwx.phenom import Intensity, Phenom, Phenomenon, decode_phenomena


def _single(group, **kwargs):
    result = decode_phenomena(group, **kwargs)
    assert len(result) == 1
    return result[0]


@pytest.mark.parametrize(
    "group,expected",
    [
        ("BR", Phenomenon.MIST),
        ("DS", Phenomenon.DUST_STORM),
        ("DU", Phenomenon.DUST),
        ("DZ", Phenomenon.DRIZZLE),
        ("FC", Phenomenon.FUNNEL_CLOUD),
        ("FG", Phenomenon.FOG),
        ("FU", Phenomenon.SMOKE),
        ("GR", Phenomenon.HAIL),
        ("GS", Phenomenon.SMALL_HAIL),
        ("HZ", Phenomenon.HAZE),
        ("IC", Phenomenon.ICE_CRYSTALS),
        ("PE", Phenomenon.ICE_PELLETS),
        ("PL", Phenomenon.ICE_PELLETS),
        ("PO", Phenomenon.DUST_SAND_WHORLS),
        ("PY", Phenomenon.SPRAY),
        ("RA", Phenomenon.RAIN),
        ("SA", Phenomenon.SAND),
        ("SG", Phenomenon.SNOW_GRAINS),
        ("SN", Phenomenon.SNOW),
        ("SQ", Phenomenon.SQUALLS),
        ("SS", Phenomenon.SAND_STORM),
        ("UP", Phenomenon.UNKNOWN_PRECIP),
        ("VA", Phenomenon.VOLCANIC_ASH),
    ],
)
def test_phenomenon_codes(group, expected):
    phenom = _single(group)
    assert phenom.phenomenon is expected
    assert phenom.intensity is Intensity.NORMAL
    assert len(phenom) == 1


def test_intensity_markers():
    assert _single("-RA").intensity is Intensity.LIGHT
    assert _single("+RA").intensity is Intensity.HEAVY
    assert _single("RA").intensity is Intensity.NORMAL


def test_descriptors_set_flags():
    phenom = _single("VCBLSN")
    assert phenom.phenomenon is Phenomenon.SNOW
    assert phenom.vicinity
    assert phenom.blowing
    assert not phenom.freezing

    assert _single("FZFG").freezing
    assert _single("DRSN").drifting
    assert _single("PRFG").partial
    assert _single("MIFG").shallow
    assert _single("BCFG").patches


def test_shower_descriptor():
    phenom = _single("+SHRA")
    assert phenom.phenomenon is Phenomenon.RAIN
    assert phenom.shower
    assert phenom.intensity is Intensity.HEAVY


def test_thunderstorm_with_precipitation():
    phenom = _single("-TSRA")
    assert phenom.phenomenon is Phenomenon.RAIN
    assert phenom.thunderstorm
    assert phenom.intensity is Intensity.LIGHT


def test_bare_thunderstorm():
    phenom = _single("TS")
    assert phenom.phenomenon is Phenomenon.THUNDERSTORM
    assert phenom.thunderstorm


def test_showers_in_the_vicinity():
    phenom = _single("VCSH")
    assert phenom.phenomenon is Phenomenon.SHOWER
    assert phenom.shower
    assert phenom.vicinity


def test_rain_and_snow_compose_to_sleet():
    assert _single("RASN").phenomenon is Phenomenon.SLEET
    assert _single("-SNRA").phenomenon is Phenomenon.SLEET


def test_group_bundles_several_codes():
    phenom = _single("-DZBR")
    assert len(phenom) == 2
    assert phenom.num_phenom == 2
    assert phenom[0] is Phenomenon.DRIZZLE
    assert phenom[1] is Phenomenon.MIST
    assert phenom.intensity is Intensity.LIGHT
    with pytest.raises(IndexError):
        phenom[2]


def test_temporary_flag():
    assert _single("SHRA", temporary=True).temporary
    assert not _single("SHRA").temporary


@pytest.mark.parametrize(
    "group", ["", "SE", "2", "AO2", "RAB06", "NOSIG", "KSTL", "VC", "R04/P1500N"]
)
def test_unrecognized_groups(group):
    assert decode_phenomena(group) == []


def test_phenom_equality():
    assert _single("-RA") == Phenom(codes=(Phenomenon.RAIN,), intensity=Intensity.LIGHT)
