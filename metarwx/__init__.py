"""
Decoder for METAR/SPECI aviation weather reports.
"""

from .metar import Metar
from .groups import Cover, CloudType, DistanceUnits, ReportType, SkyCondition, SpeedUnits
from .phenom import Intensity, Phenom, Phenomenon

__all__ = [
    "CloudType",
    "Cover",
    "DistanceUnits",
    "Intensity",
    "Metar",
    "Phenom",
    "Phenomenon",
    "ReportType",
    "SkyCondition",
    "SpeedUnits",
]
