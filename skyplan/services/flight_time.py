"""Clock arithmetic for ETE and ETA.

Times are minutes since local midnight.  Nothing here wraps past 24:00:
a flight landing 25 hours after midnight reads ``25:00``, since plans
never span more than one day.
"""

from __future__ import annotations

import logging
import math
import re

from skyplan.services.errors import TimeFormatError

logger = logging.getLogger(__name__)

ETA_PLACEHOLDER = "--:--"

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def format_time(total_minutes: float) -> str:
    """Format minutes as ``HH:MM`` (hours not wrapped at 24)."""
    hours = math.floor(total_minutes / 60)
    mins = math.floor(total_minutes % 60)
    return f"{hours:02d}:{mins:02d}"


def parse_time(text: str) -> int:
    """Minutes since midnight for a 24-hour ``HH:MM`` string."""
    match = _CLOCK_RE.match(text.strip())
    if match is None:
        raise TimeFormatError(text)
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise TimeFormatError(text)
    return hours * 60 + minutes


def calculate_ete(total_distance_nm: float, tas_kt: float | None) -> float:
    """Estimated time enroute in minutes; 0 when TAS is unknown or zero."""
    if tas_kt is None or tas_kt == 0:
        return 0
    return (total_distance_nm / tas_kt) * 60


def calculate_eta(departure_time: str | None, ete_minutes: float) -> str:
    """Arrival clock time, or ``--:--`` without a departure time or ETE."""
    if not departure_time or ete_minutes <= 0:
        return ETA_PLACEHOLDER
    try:
        departure = parse_time(departure_time)
    except TimeFormatError:
        logger.warning("Ignoring malformed departure time %r", departure_time)
        return ETA_PLACEHOLDER
    return format_time(departure + ete_minutes)
