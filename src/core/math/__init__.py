"""
Core math modules для zCurve pricing engine

Целочисленные примитивы с побитовым совпадением с on-chain контрактом.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    # Exceptions
    ArithmeticOverflow,
    CurveError,
    InsufficientReserve,
    InvalidParameters,
    OutOfSupply,
    SearchLimitExceeded,
    UnreachableTarget,
    ZeroTarget,
    # Checked arithmetic
    ceil_div,
    checked_add,
    checked_mul,
    checked_sub,
    floor_div,
    # Validation
    require_positive_uint,
    require_uint,
)

# Cost Function
from src.core.math.cost_function import (
    cost,
    sum_of_squares,
    tick_price,
    weighted_tick_sum,
)

# Divisor Calibrator
from src.core.math.divisor_calibrator import (
    CalibrationConfig,
    calibrate,
    closed_form_divisor,
    validate_calibration_inputs,
)

# Quoter
from src.core.math.quoter import (
    QuoterConfig,
    cost_for_tokens,
    refund_for_tokens,
    tokens_for_budget,
    tokens_to_burn_for_eth,
)

# Price Sampler
from src.core.math.price_sampler import (
    CurveScenario,
    PricePoint,
    analyze_scenario,
    marginal_price,
    price_at_fraction,
    price_curve,
    price_per_token,
)

__all__ = [
    # Integer Safeguards: Exceptions
    "ArithmeticOverflow",
    "CurveError",
    "InsufficientReserve",
    "InvalidParameters",
    "OutOfSupply",
    "SearchLimitExceeded",
    "UnreachableTarget",
    "ZeroTarget",
    # Integer Safeguards: Checked arithmetic
    "ceil_div",
    "checked_add",
    "checked_mul",
    "checked_sub",
    "floor_div",
    # Integer Safeguards: Validation
    "require_positive_uint",
    "require_uint",
    # Cost Function
    "cost",
    "sum_of_squares",
    "tick_price",
    "weighted_tick_sum",
    # Divisor Calibrator
    "CalibrationConfig",
    "calibrate",
    "closed_form_divisor",
    "validate_calibration_inputs",
    # Quoter
    "QuoterConfig",
    "cost_for_tokens",
    "refund_for_tokens",
    "tokens_for_budget",
    "tokens_to_burn_for_eth",
    # Price Sampler
    "CurveScenario",
    "PricePoint",
    "analyze_scenario",
    "marginal_price",
    "price_at_fraction",
    "price_curve",
    "price_per_token",
]
