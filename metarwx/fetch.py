"""Retrieval of raw METAR reports over HTTP."""

from __future__ import annotations

import logging

import requests

from .errors import FetchError

logger = logging.getLogger(__name__)

NOAA_METAR_URL = (
    "https://tgftp.nws.noaa.gov/data/observations/metar/stations/{station_id}.TXT"
)
AVIATIONWEATHER_METAR_URL = "https://aviationweather.gov/api/data/metar"
DEFAULT_TIMEOUT = 5


def _get_text(url: str, timeout: float, params: dict[str, str] | None = None) -> str:
    logger.info("Requesting %s", url)
    try:
        resp = requests.get(url=url, params=params, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as ex:
        raise FetchError(f"Request to '{url}' failed: {ex}") from ex
    logger.debug("Response status %s", resp.status_code)
    return resp.text


def fetch_metar(
    station_id: str, url: str = NOAA_METAR_URL, timeout: float = DEFAULT_TIMEOUT
) -> str:
    """
    Returns the latest METAR from the given station, as published on the
    NOAA observation server. The payload is two lines, the observation
    timestamp followed by the report itself.

    Parameters:
    * station_id (str) -- ICAO station identifier, ie. 'KSTL'.
    * url (str) -- URL template, '{station_id}' is replaced.
    * timeout (float) -- Request timeout in seconds.

    Raises:
    * FetchError -- The request failed or the payload has no report.
    """
    station = station_id.strip().upper()
    payload = _get_text(url.format(station_id=station), timeout)
    lines = [ln.strip() for ln in payload.strip().splitlines()]
    if len(lines) < 2 or len(lines[1]) == 0:
        raise FetchError(f"Could not retrieve data for '{station}'.")
    return lines[1]


def aviationweather_get_metar(
    station_id: str,
    url: str = AVIATIONWEATHER_METAR_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Returns the latest METAR from the given station, using the
    aviationweather.gov data API.

    Raises:
    * FetchError -- The request failed or the payload is empty.
    """
    station = station_id.strip().upper()
    params = {"ids": station, "format": "raw", "taf": "false"}
    metar_raw = _get_text(url, timeout, params).strip().upper()
    if len(metar_raw) == 0:
        raise FetchError(f"Could not retrieve data for '{station}'.")
    return metar_raw.splitlines()[0]
