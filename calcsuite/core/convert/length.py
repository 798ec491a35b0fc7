# calcsuite/core/convert/length.py

from __future__ import annotations

from calcsuite.core.errors import UnknownUnitError

# Conversion factors to meters
LENGTH_FACTORS: dict[str, float] = {
    "millimeter": 0.001,
    "centimeter": 0.01,
    "meter": 1.0,
    "kilometer": 1000.0,
    "inch": 0.0254,
    "foot": 0.3048,
    "yard": 0.9144,
    "mile": 1609.34,
    "nautical-mile": 1852.0,
    "micron": 1e-6,
    "nanometer": 1e-9,
}

LENGTH_LABELS: dict[str, str] = {
    "millimeter": "Millimeter (mm)",
    "centimeter": "Centimeter (cm)",
    "meter": "Meter (m)",
    "kilometer": "Kilometer (km)",
    "inch": "Inch (in)",
    "foot": "Foot (ft)",
    "yard": "Yard (yd)",
    "mile": "Mile (mi)",
    "nautical-mile": "Nautical Mile (nmi)",
    "micron": "Micron (μm)",
    "nanometer": "Nanometer (nm)",
}


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert ``value`` between length units by way of meters."""
    for unit in (from_unit, to_unit):
        if unit not in LENGTH_FACTORS:
            raise UnknownUnitError(unit, tuple(LENGTH_FACTORS))
    meters = value * LENGTH_FACTORS[from_unit]
    return meters / LENGTH_FACTORS[to_unit]
