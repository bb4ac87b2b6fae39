"""
Exceptions raised by the modules around the decoder. Decoding a report
itself never raises.
"""


class MetarError(Exception):
    """Base exception for this package."""


class FetchError(MetarError):
    """Exception for failures retrieving a raw report."""


class UnitConversionError(MetarError):
    """Exception for converting between incompatible units."""
