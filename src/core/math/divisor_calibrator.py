"""
Divisor Calibrator — Exact Divisor for a Target Raise

Подбор divisor так, чтобы cost(sale_cap, quad_cap, divisor) == target_raised
ТОЧНО (целочисленное равенство).

Алгоритм:
1. Closed-form инверсия: divisor ≈ W · ONE_ETH // (6 · target),
   где W = weighted_tick_sum(sale_cap, quad_cap).
   Из-за floor-делений внутри cost() closed form может недобрать
   несколько wei до target, поэтому он используется только как seed.
2. Бисекция по divisor: cost не возрастает по divisor, поэтому
   находим НАИБОЛЬШИЙ divisor с cost(sale_cap) >= target.
3. Если для найденного divisor cost != target, точного целочисленного
   решения не существует → UnreachableTarget.

Калибровка выполняется один раз при создании продажи (не hot path).
Float не используется нигде.
"""

import logging
from dataclasses import dataclass

from src.core.constants import ONE_ETH
from src.core.math.cost_function import cost, weighted_tick_sum
from src.core.math.integer_safeguards import (
    InvalidParameters,
    SearchLimitExceeded,
    UnreachableTarget,
    ZeroTarget,
    checked_mul,
    floor_div,
    require_uint,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalibrationConfig:
    """Конфигурация калибровки.

    max_iterations с запасом покрывает бисекцию по uint256 (256 шагов).
    """

    max_iterations: int = 512


# =============================================================================
# VALIDATION
# =============================================================================


def validate_calibration_inputs(sale_cap: int, quad_cap: int, target_raised: int) -> None:
    """
    Проверка входов калибровки.

    Raises:
        InvalidParameters: если sale_cap/quad_cap <= 0 или quad_cap > sale_cap
        ZeroTarget: если target_raised == 0
    """
    require_uint(sale_cap, "sale_cap")
    require_uint(quad_cap, "quad_cap")
    require_uint(target_raised, "target_raised")

    if sale_cap == 0 or quad_cap == 0:
        raise InvalidParameters(
            f"sale_cap and quad_cap must be positive, got sale_cap={sale_cap} "
            f"quad_cap={quad_cap}"
        )

    if quad_cap > sale_cap:
        raise InvalidParameters(
            f"quad_cap {quad_cap} must be <= sale_cap {sale_cap}"
        )

    if target_raised == 0:
        raise ZeroTarget(
            "target_raised must be positive: no divisor makes the curve free"
        )


# =============================================================================
# CLOSED FORM
# =============================================================================


def closed_form_divisor(sale_cap: int, quad_cap: int, target_raised: int) -> int:
    """
    Алгебраическая инверсия cost() относительно divisor.

        target = W · ONE_ETH / (6 · divisor)
        divisor = W · ONE_ETH // (6 · target)

    Floor-деления в cost() не учитываются, поэтому cost при этом divisor
    может быть на несколько wei ниже target.

    Args:
        sale_cap: Всего атомарных единиц в продаже
        quad_cap: Граница квадратичной фазы
        target_raised: Целевой сбор при полной продаже (wei)

    Returns:
        Приближённый divisor (может быть 0 для недостижимо большого target)

    Examples:
        >>> closed_form_divisor(800_000_000 * 10**18, 200_000_000 * 10**18, 10**16)
        444444444444444111111111111111666666666666666
    """
    validate_calibration_inputs(sale_cap, quad_cap, target_raised)

    weight = weighted_tick_sum(sale_cap, quad_cap)
    return floor_div(checked_mul(weight, ONE_ETH), checked_mul(6, target_raised))


# =============================================================================
# CALIBRATE
# =============================================================================


def calibrate(
    sale_cap: int,
    quad_cap: int,
    target_raised: int,
    config: CalibrationConfig | None = None,
) -> int:
    """
    Наибольший divisor с cost(sale_cap, quad_cap, divisor) == target_raised.

    Args:
        sale_cap: Всего атомарных единиц в продаже
        quad_cap: Граница квадратичной фазы
        target_raised: Целевой сбор при полной продаже (wei)
        config: Конфигурация (опционально)

    Returns:
        divisor (int > 0)

    Raises:
        ZeroTarget: target_raised == 0
        InvalidParameters: некорректные sale_cap/quad_cap
        UnreachableTarget: точного целочисленного divisor не существует
        SearchLimitExceeded: бисекция не сошлась за max_iterations

    Examples:
        >>> calibrate(800_000_000 * 10**18, 200_000_000 * 10**18, 10**16)
        444444444444441111111111111116666666666666666
    """
    config = config or CalibrationConfig()
    validate_calibration_inputs(sale_cap, quad_cap, target_raised)

    weight = weighted_tick_sum(sale_cap, quad_cap)
    if weight == 0:
        raise UnreachableTarget(
            f"Curve prices the whole supply at zero: sale_cap={sale_cap} "
            f"quad_cap={quad_cap} (need at least two ticks priced)"
        )

    # Максимальный сбор достигается при divisor = 1
    max_raise = cost(sale_cap, quad_cap, 1)
    if target_raised > max_raise:
        raise UnreachableTarget(
            f"target_raised {target_raised} exceeds maximum raise {max_raise} "
            f"(divisor=1)"
        )

    # Инвариант бисекции: cost(lo) >= target, cost(hi) < target.
    # При divisor = W · ONE_ETH каждое слагаемое cost() < 1 → cost == 0.
    lo = 1
    hi = checked_mul(weight, ONE_ETH)

    seed = closed_form_divisor(sale_cap, quad_cap, target_raised)
    if lo < seed < hi:
        if cost(sale_cap, quad_cap, seed) >= target_raised:
            lo = seed
        else:
            hi = seed

    iterations = 0
    while hi - lo > 1:
        if iterations >= config.max_iterations:
            raise SearchLimitExceeded(
                f"Divisor bisection exceeded {config.max_iterations} iterations "
                f"(lo={lo}, hi={hi})"
            )

        mid = (lo + hi) // 2
        if cost(sale_cap, quad_cap, mid) >= target_raised:
            lo = mid
        else:
            hi = mid
        iterations += 1

    achieved = cost(sale_cap, quad_cap, lo)
    if achieved != target_raised:
        raise UnreachableTarget(
            f"No integer divisor yields exactly {target_raised} wei: "
            f"divisor={lo} gives {achieved}, divisor={lo + 1} gives less"
        )

    logger.debug(
        "Calibrated divisor=%d (seed=%d, iterations=%d) for sale_cap=%d "
        "quad_cap=%d target=%d",
        lo,
        seed,
        iterations,
        sale_cap,
        quad_cap,
        target_raised,
    )

    return lo
