"""
Domain models and value objects.

Contains CurveParameters and the unit conversions used at the presentation
boundary.
"""

from src.core.domain.curve_parameters import CurveParameters
from src.core.domain.units import (
    ONE_ETH,
    ONE_TOKEN,
    TICK_SIZE,
    TOKEN_DECIMALS,
    ceil_to_tick,
    floor_to_tick,
    format_ether,
    format_units,
    from_ticks,
    parse_ether,
    parse_units,
    to_ticks,
)

__all__ = [
    # Units module
    "ONE_ETH",
    "ONE_TOKEN",
    "TICK_SIZE",
    "TOKEN_DECIMALS",
    "to_ticks",
    "from_ticks",
    "floor_to_tick",
    "ceil_to_tick",
    "parse_units",
    "format_units",
    "parse_ether",
    "format_ether",
    # Curve parameters model
    "CurveParameters",
]
