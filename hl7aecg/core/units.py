# hl7aecg/core/units.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .exceptions import UnrecognizedUnitError


# Multiplier that brings an amplitude to volts
AMPLITUDE_UNITS: Mapping[str, float] = MappingProxyType({
    "V": 1.0,
    "mV": 1e-3,
    "uV": 1e-6,
})

# Multiplier applied to a time-derived quantity. Note this multiplies: a
# frequency computed as 1/increment with increment in ms becomes Hz.
TIME_UNITS: Mapping[str, float] = MappingProxyType({
    "s": 1.0,
    "ms": 1e3,
    "us": 1e6,
})


def normalize_amplitude(
    value: float,
    unit: str,
    *,
    lead_index: int | None = None,
    source: str | None = None,
) -> float:
    """Convert an amplitude to volts.

    Raises
    ------
    UnrecognizedUnitError
        If `unit` is not one of V, mV, uV (case-sensitive).
    """
    try:
        factor = AMPLITUDE_UNITS[unit]
    except KeyError as e:
        raise UnrecognizedUnitError(value, unit, lead_index, source=source) from e
    return float(value) * factor


def normalize_time(
    value: float,
    unit: str,
    *,
    source: str | None = None,
) -> float:
    """Scale a time-derived quantity by the s / ms / us multiplier."""
    try:
        factor = TIME_UNITS[unit]
    except KeyError as e:
        raise UnrecognizedUnitError(value, unit, source=source) from e
    return float(value) * factor
