"""
Decoding of present weather groups ('-RA', '+TSRA', 'VCBLSN', 'FZFG', ...).

A present weather group is an optional intensity sign, any number of two
letter descriptors, and one or more two letter phenomenon codes. Every group
decodes to a single Phenom that bundles its codes and shares the group's
intensity and descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phenomenon(Enum):
    """Weather phenomenon, valued by its METAR code."""

    MIST = "BR"
    DUST_STORM = "DS"
    DUST = "DU"
    DRIZZLE = "DZ"
    FUNNEL_CLOUD = "FC"
    FOG = "FG"
    SMOKE = "FU"
    HAIL = "GR"
    SMALL_HAIL = "GS"
    HAZE = "HZ"
    ICE_CRYSTALS = "IC"
    ICE_PELLETS = "PE"
    DUST_SAND_WHORLS = "PO"
    SPRAY = "PY"
    RAIN = "RA"
    SAND = "SA"
    SNOW_GRAINS = "SG"
    SHOWER = "SH"
    SNOW = "SN"
    SQUALLS = "SQ"
    SAND_STORM = "SS"
    UNKNOWN_PRECIP = "UP"
    VOLCANIC_ASH = "VA"
    # Only produced by a bare 'TS' group or a composite pair
    THUNDERSTORM = "TS"
    SLEET = "RASN"


class Intensity(Enum):
    """Intensity of a weather phenomenon."""

    LIGHT = -1
    NORMAL = 0
    HEAVY = 1


THUNDERSTORM_CODE = "TS"

INTENSITY_MARKERS: dict[str, Intensity] = {
    "-": Intensity.LIGHT,
    "+": Intensity.HEAVY,
}

# Descriptor code -> Phenom flag attribute
MODIFIERS: dict[str, str] = {
    "VC": "vicinity",
    "BL": "blowing",
    "FZ": "freezing",
    "DR": "drifting",
    "SH": "shower",
    "PR": "partial",
    "MI": "shallow",
    "BC": "patches",
}

PHENOMENON_CODES: dict[str, Phenomenon] = {
    "BR": Phenomenon.MIST,
    "DS": Phenomenon.DUST_STORM,
    "DU": Phenomenon.DUST,
    "DZ": Phenomenon.DRIZZLE,
    "FC": Phenomenon.FUNNEL_CLOUD,
    "FG": Phenomenon.FOG,
    "FU": Phenomenon.SMOKE,
    "GR": Phenomenon.HAIL,
    "GS": Phenomenon.SMALL_HAIL,
    "HZ": Phenomenon.HAZE,
    "IC": Phenomenon.ICE_CRYSTALS,
    "PE": Phenomenon.ICE_PELLETS,
    "PL": Phenomenon.ICE_PELLETS,
    "PO": Phenomenon.DUST_SAND_WHORLS,
    "PY": Phenomenon.SPRAY,
    "RA": Phenomenon.RAIN,
    "SA": Phenomenon.SAND,
    "SG": Phenomenon.SNOW_GRAINS,
    "SH": Phenomenon.SHOWER,
    "SN": Phenomenon.SNOW,
    "SQ": Phenomenon.SQUALLS,
    "SS": Phenomenon.SAND_STORM,
    "UP": Phenomenon.UNKNOWN_PRECIP,
    "VA": Phenomenon.VOLCANIC_ASH,
}

# Consecutive codes reported as one phenomenon
COMPOSITE_CODES: dict[tuple[Phenomenon, Phenomenon], Phenomenon] = {
    (Phenomenon.RAIN, Phenomenon.SNOW): Phenomenon.SLEET,
    (Phenomenon.SNOW, Phenomenon.RAIN): Phenomenon.SLEET,
}


@dataclass(frozen=True)
class Phenom:
    """
    One decoded present weather group. A group can bundle more than one
    phenomenon code ('-DZBR'), len() and indexing give access to each of
    them, and the phenomenon property returns the first one.
    """

    codes: tuple[Phenomenon, ...]
    intensity: Intensity = Intensity.NORMAL
    blowing: bool = False
    freezing: bool = False
    drifting: bool = False
    vicinity: bool = False
    partial: bool = False
    shallow: bool = False
    patches: bool = False
    thunderstorm: bool = False
    shower: bool = False
    temporary: bool = False

    def __len__(self) -> int:
        return len(self.codes)

    def __getitem__(self, index: int) -> Phenomenon:
        return self.codes[index]

    @property
    def num_phenom(self) -> int:
        """Number of phenomenon codes bundled in this group."""
        return len(self.codes)

    @property
    def phenomenon(self) -> Phenomenon:
        """The first, defining phenomenon of the group."""
        return self.codes[0]


def _compose(codes: list[Phenomenon]) -> list[Phenomenon]:
    composed: list[Phenomenon] = []
    index = 0
    while index < len(codes):
        pair = tuple(codes[index : index + 2])
        if pair in COMPOSITE_CODES:
            composed.append(COMPOSITE_CODES[pair])
            index += 2
        else:
            composed.append(codes[index])
            index += 1
    return composed


def decode_phenomena(group: str, temporary: bool = False) -> list[Phenom]:
    """
    Decodes a present weather group into a list of Phenom objects. The list
    is empty when the group is not a present weather group at all, which is
    the case as soon as one of its codes is unknown.

    Parameters:
    * group (str) -- A single group of the report, ie. '-TSRA'.
    * temporary (bool) -- Marks the result as part of a TEMPO trend.
    """
    intensity = INTENSITY_MARKERS.get(group[:1], Intensity.NORMAL)
    remaining = group[1:] if group[:1] in INTENSITY_MARKERS else group

    flags: dict[str, bool] = {}
    while remaining[:2] in MODIFIERS:
        flags[MODIFIERS[remaining[:2]]] = True
        remaining = remaining[2:]

    if len(remaining) % 2 != 0:
        return []

    codes: list[Phenomenon] = []
    for index in range(0, len(remaining), 2):
        chunk = remaining[index : index + 2]
        if chunk == THUNDERSTORM_CODE:
            flags["thunderstorm"] = True
            continue
        code = PHENOMENON_CODES.get(chunk)
        if code is None:
            return []
        codes.append(code)

    if len(codes) == 0:
        # Groups made of descriptors only, ie. 'VCSH' or 'VCTS'
        if flags.get("thunderstorm"):
            codes.append(Phenomenon.THUNDERSTORM)
        elif flags.get("shower"):
            codes.append(Phenomenon.SHOWER)
        else:
            return []

    return [
        Phenom(
            codes=tuple(_compose(codes)),
            intensity=intensity,
            temporary=temporary,
            **flags,
        )
    ]
