"""Coordinate codec: decimal degrees <-> degrees/minutes/seconds.

Two textual DMS encodings coexist and have separate parsers:

- **punctuated**, ``N35°43'36"`` / ``E139°46'47"``, produced by
  :func:`decimal_to_dms` and read back by :func:`parse_punctuated_dms`;
- **compact**, ``N354336`` / ``1394647E``, typed into quick-entry fields
  and read by :func:`parse_compact_dms` / :func:`compact_dms_to_decimal`.

They are not interchangeable: a compact string never matches the
punctuated parser and vice versa.
"""

from __future__ import annotations

import logging
import math
import re

from skyplan.contracts.coordinates import DMSComponents
from skyplan.services.errors import DMSFormatError

logger = logging.getLogger(__name__)

_PUNCTUATED_LAT_RE = re.compile(r"([NS])(\d{2})°(\d{2})'(\d{2})\"")
_PUNCTUATED_LON_RE = re.compile(r"([EW])(\d{3})°(\d{2})'(\d{2})\"")

# Hemisphere letter may be a prefix or a suffix; N/E when omitted.
_COMPACT_LAT_RE = re.compile(r"^([NS])?(\d{6})([NS])?$")
_COMPACT_LON_RE = re.compile(r"^([EW])?(\d{7})([EW])?$")


def _max_degrees(is_latitude: bool) -> int:
    return 90 if is_latitude else 180


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _split(value: float) -> tuple[int, int, int]:
    """Split an absolute decimal angle into whole degrees, minutes, seconds.

    Degrees and minutes are truncated, seconds rounded.  A rounded 60
    seconds carries into the minutes (and 60 minutes into the degrees) so
    the result always re-parses.
    """
    value = abs(value)
    degrees = math.floor(value)
    minutes = math.floor((value - degrees) * 60)
    seconds = _round_half_up((value - degrees - minutes / 60) * 3600)
    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return degrees, minutes, seconds


def _to_decimal(
    degrees: int, minutes: int, seconds: int, hemisphere: str, is_latitude: bool
) -> float | None:
    """Combine DMS fields into signed decimal degrees, None when out of range."""
    if minutes >= 60 or seconds >= 60:
        return None
    decimal = degrees + minutes / 60 + seconds / 3600
    if decimal > _max_degrees(is_latitude):
        return None
    if hemisphere in ("S", "W"):
        decimal = -decimal
    return decimal


# ------------------------------------------------------------------
# Punctuated form
# ------------------------------------------------------------------


def decimal_to_dms(latitude: float, longitude: float) -> tuple[str, str]:
    """Format a position as punctuated DMS strings.

    >>> decimal_to_dms(35.7267, 139.7797)
    ('N35°43\\'36"', 'E139°46\\'47"')
    """
    lat_dir = "N" if latitude >= 0 else "S"
    lon_dir = "E" if longitude >= 0 else "W"
    lat_d, lat_m, lat_s = _split(latitude)
    lon_d, lon_m, lon_s = _split(longitude)
    lat_dms = f"{lat_dir}{lat_d:02d}°{lat_m:02d}'{lat_s:02d}\""
    lon_dms = f"{lon_dir}{lon_d:03d}°{lon_m:02d}'{lon_s:02d}\""
    return lat_dms, lon_dms


def parse_punctuated_dms(dms: str, is_latitude: bool) -> float | None:
    """Parse ``H DD°MM'SS"`` (latitude) or ``H DDD°MM'SS"`` (longitude).

    Case-insensitive.  Returns None, never raises, when the text does not
    match or encodes an out-of-range angle.
    """
    pattern = _PUNCTUATED_LAT_RE if is_latitude else _PUNCTUATED_LON_RE
    match = pattern.search(dms.upper())
    if match is None:
        logger.debug("Unparseable punctuated DMS: %r", dms)
        return None

    hemisphere, degrees, minutes, seconds = match.groups()
    decimal = _to_decimal(
        int(degrees), int(minutes), int(seconds), hemisphere, is_latitude
    )
    if decimal is None:
        logger.debug("Out-of-range punctuated DMS: %r", dms)
    return decimal


dms_to_decimal = parse_punctuated_dms


# ------------------------------------------------------------------
# Compact form
# ------------------------------------------------------------------


def _match_compact(text: str, is_latitude: bool) -> DMSComponents | None:
    pattern = _COMPACT_LAT_RE if is_latitude else _COMPACT_LON_RE
    match = pattern.match(text.strip().upper())
    if match is None:
        return None

    prefix, digits, suffix = match.groups()
    hemisphere = prefix or suffix or ("N" if is_latitude else "E")
    width = 2 if is_latitude else 3
    return DMSComponents(
        degrees=digits[:width],
        minutes=digits[width : width + 2],
        seconds=digits[width + 2 :],
        hemisphere=hemisphere,
    )


def components_to_decimal(components: DMSComponents, is_latitude: bool) -> float | None:
    """Signed decimal degrees for decoded compact fields, None when out of range."""
    return _to_decimal(
        int(components.degrees),
        int(components.minutes),
        int(components.seconds),
        components.hemisphere,
        is_latitude,
    )


def parse_compact_dms(text: str, is_latitude: bool) -> DMSComponents | None:
    """Decode ``[H]DDMMSS[H]`` (latitude) or ``[H]DDDMMSS[H]`` (longitude).

    Returns None when the digit count is wrong, the hemisphere letter does
    not belong to the axis, or the angle is out of range.
    """
    components = _match_compact(text, is_latitude)
    if components is None or components_to_decimal(components, is_latitude) is None:
        logger.debug("Rejected compact DMS: %r", text)
        return None
    return components


def compact_dms_to_decimal(text: str, is_latitude: bool) -> float:
    """Strict compact parser for quick-entry fields.

    Raises
    ------
    DMSFormatError
        With a message suitable for display next to the field.
    """
    components = _match_compact(text, is_latitude)
    if components is None:
        digits = re.sub(r"^[A-Z]|[A-Z]$", "", text.strip().upper())
        if not digits.isdigit() or len(digits) != (6 if is_latitude else 7):
            reason = (
                "Latitude must be 6 digits (DDMMSS)"
                if is_latitude
                else "Longitude must be 7 digits (DDDMMSS)"
            )
        else:
            reason = (
                "Latitude hemisphere must be N or S"
                if is_latitude
                else "Longitude hemisphere must be E or W"
            )
        raise DMSFormatError(text, reason)

    if int(components.minutes) >= 60 or int(components.seconds) >= 60:
        raise DMSFormatError(text, "Minutes and seconds must be below 60")

    decimal = components_to_decimal(components, is_latitude)
    if decimal is None:
        raise DMSFormatError(
            text, f"Degrees must not exceed {_max_degrees(is_latitude)}"
        )
    return decimal


def format_compact_dms(latitude: float, longitude: float) -> str:
    """Display a position in compact form, e.g. ``N354336 E1394647``."""
    lat_dir = "N" if latitude >= 0 else "S"
    lon_dir = "E" if longitude >= 0 else "W"
    lat_d, lat_m, lat_s = _split(latitude)
    lon_d, lon_m, lon_s = _split(longitude)
    return (
        f"{lat_dir}{lat_d:02d}{lat_m:02d}{lat_s:02d} "
        f"{lon_dir}{lon_d:03d}{lon_m:02d}{lon_s:02d}"
    )
