"""Shortest round-tripping decimal rendering shared by every text form."""

from numpy import format_float_positional


def format_decimal(value: float) -> str:
    """Render ``value`` with the fewest digits that parse back to the same float.

    Trailing zeros and a trailing decimal point are dropped, and exponent
    notation is never used: ``25.0`` -> ``"25"``, ``25.050`` -> ``"25.05"``,
    ``1e-7`` -> ``"0.0000001"``.
    """
    return format_float_positional(float(value), unique=True, trim="-")
