"""
Common helper methods used in various modules.
"""

from __future__ import annotations

import re
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")

_DIGITS = "0123456789"

_CARDINAL_ABBREVIATED = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)

_CARDINAL_FULLNAMES = (
    "North",
    "North-Northeast",
    "Northeast",
    "East-Northeast",
    "East",
    "East-Southeast",
    "Southeast",
    "South-Southeast",
    "South",
    "South-Southwest",
    "Southwest",
    "West-Southwest",
    "West",
    "West-Northwest",
    "Northwest",
    "North-Northwest",
)


def _match_character(pattern_char: str, char: str) -> bool:
    if pattern_char == "#":
        return char in _DIGITS
    if pattern_char == "$":
        return char.isascii() and char.isalpha()
    return pattern_char == char


def _match_prefix(pattern: str, candidate: str) -> bool:
    for pattern_char, char in zip(pattern, candidate):
        if not _match_character(pattern_char, char):
            return False
    return True


def match(pattern: str, candidate: str | None) -> bool:
    """
    Tests a group against a pattern of the same length. In the pattern '#'
    matches any decimal digit, '$' matches any letter, and every other
    character must match literally.

    Examples:
    >>> match("######Z", "231751Z")
    True
    >>> match("$$$$", "KSTL1")
    False
    """
    if candidate is None or len(pattern) != len(candidate):
        return False
    return _match_prefix(pattern, candidate)


def starts_with(pattern: str, candidate: str | None) -> bool:
    """
    Same as match(), but only the first len(pattern) characters of the
    candidate are tested. Trailing candidate characters are ignored.
    """
    if candidate is None or len(pattern) > len(candidate):
        return False
    return _match_prefix(pattern, candidate)


def leading_int(text: str) -> int:
    """
    Parses the leading base 10 integer of a string, ignoring anything that
    follows it ('05G' -> 5). Returns 0 if the string has no leading digits.
    """
    found = _LEADING_INT.match(text)
    if found is None:
        return 0
    return int(found.group(1))


def leading_float(text: str) -> float:
    """
    Parses the leading decimal number of a string ('10SM' -> 10.0). Returns
    0.0 if the string has no leading number.
    """
    found = _LEADING_FLOAT.match(text)
    if found is None:
        return 0.0
    return float(found.group(1))


def quotify(value: Any) -> str:
    """
    Returns str(value), if input value is already a string we wrap it in single
    quotes.
    """
    return f"'{value}'" if isinstance(value, str) else str(value)


def cardinal_direction(direction: int, style: str = "short") -> str:
    """
    The cardinal direction of the specified wind direction value.

    Parameters:
    * direction (int) -- Direction of wind in 0-360 degrees.
    * style (str) -- The style of string to be returned. Possible values
    are 'short', 'long' and 'degrees'. Defaults to 'short'.

    Examples of each style for northeasterly wind:
    * 'short' -> 'NE'
    * 'long' -> 'Northeast'
    * 'degrees' -> '45°'
    """
    cfstyle = style.casefold()
    cardinal_index = int(round(direction / 22.5) % 16)
    if cfstyle == "long":
        return _CARDINAL_FULLNAMES[cardinal_index]
    if cfstyle == "degrees":
        return f"{direction}°"
    return _CARDINAL_ABBREVIATED[cardinal_index]
