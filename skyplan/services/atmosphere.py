"""ISA standard-atmosphere model for true airspeed and Mach.

Calm air, troposphere lapse rate only: no tropopause clamp is applied,
so results above roughly 36,000 ft are not physically meaningful.
At and above ``ISA_CEILING_FT`` the modelled temperature is no longer
positive; TAS and Mach are then NaN.  Contracts and endpoints reject
such altitudes before they reach this module.
"""

from __future__ import annotations

import math

SEA_LEVEL_TEMPERATURE_K = 288.15
LAPSE_RATE_K_PER_M = 0.0065
FEET_TO_METERS = 0.3048
KNOTS_TO_MS = 0.514444
GAMMA_AIR = 1.4
GAS_CONSTANT_AIR = 287.05  # J/(kg·K)

# Altitude where the linear lapse rate reaches 0 K (~145,443 ft)
ISA_CEILING_FT = SEA_LEVEL_TEMPERATURE_K / (LAPSE_RATE_K_PER_M * FEET_TO_METERS)


def temperature_at(altitude_ft: float) -> float:
    """ISA temperature in kelvin at a pressure altitude in feet."""
    return SEA_LEVEL_TEMPERATURE_K - LAPSE_RATE_K_PER_M * (altitude_ft * FEET_TO_METERS)


def calculate_tas(ias_kt: float, altitude_ft: float) -> float:
    """True airspeed in knots: ``IAS * sqrt(T0 / T)``."""
    temperature = temperature_at(altitude_ft)
    if temperature <= 0:
        return math.nan
    return ias_kt * math.sqrt(SEA_LEVEL_TEMPERATURE_K / temperature)


def speed_of_sound_ms(altitude_ft: float) -> float:
    temperature = temperature_at(altitude_ft)
    if temperature <= 0:
        return math.nan
    return math.sqrt(GAMMA_AIR * GAS_CONSTANT_AIR * temperature)


def calculate_mach(tas_kt: float, altitude_ft: float) -> float:
    """Mach number for a true airspeed in knots at an altitude in feet."""
    return (tas_kt * KNOTS_TO_MS) / speed_of_sound_ms(altitude_ft)
