"""
Price Sampler — Marginal Price Series for Charts and Analysis

Многократные вычисления cost() на малых шагах:
- marginal_price: стоимость следующих delta единиц
- price_per_token: маржинальная цена одного целого токена
- price_curve: равномерная выборка точек кривой для графиков
- analyze_scenario: сводка по кривой для заданного target raise

Некритичный компонент: используется только аналитикой/графиками.
Все значения — int (wei / атомарные единицы); доля проданного выражается
в basis points, без float.
"""

from typing import NamedTuple

from src.core.constants import ONE_ETH, ONE_TOKEN, TICK_SIZE
from src.core.domain.curve_parameters import CurveParameters
from src.core.math.cost_function import cost
from src.core.math.divisor_calibrator import calibrate
from src.core.math.integer_safeguards import (
    InvalidParameters,
    OutOfSupply,
    require_positive_uint,
    require_uint,
)
from src.core.math.quoter import tokens_for_budget

# Basis points в 100%
BPS_DENOMINATOR = 10_000

# Количество точек графика по умолчанию
DEFAULT_NUM_POINTS = 100


# =============================================================================
# TYPES
# =============================================================================


class PricePoint(NamedTuple):
    """Точка кривой для графика."""

    tokens: int  # Кумулятивно продано (атомарные единицы)
    total_cost: int  # cost(tokens) в wei
    marginal_price: int  # Стоимость следующего tick в wei (0 после sold out)
    percent_sold_bps: int  # Доля проданного в basis points


class CurveScenario(NamedTuple):
    """Сводка по кривой для заданного target raise."""

    target_raised: int  # wei
    divisor: int
    avg_price_per_token: int  # wei за целый токен (target · 1e18 // sale_cap)
    price_at_25_percent: int  # wei за целый токен
    price_at_50_percent: int
    price_at_75_percent: int
    price_at_100_percent: int  # цена последнего целого токена
    tokens_for_one_eth: int  # сколько токенов даёт 1 ETH на старте (кратно tick)


# =============================================================================
# MARGINAL PRICE
# =============================================================================


def marginal_price(sold: int, params: CurveParameters, delta: int = TICK_SIZE) -> int:
    """
    Стоимость следующих delta единиц при sold проданных.

    delta ограничивается остатком supply; ровно на sale_cap → 0.

    Args:
        sold: Кумулятивно проданное количество
        params: Параметры кривой
        delta: Шаг в атомарных единицах (default: 1 tick)

    Returns:
        Стоимость в wei

    Raises:
        OutOfSupply: sold > sale_cap
    """
    require_uint(sold, "sold")
    require_positive_uint(delta, "delta")

    if sold > params.sale_cap:
        raise OutOfSupply(f"sold {sold} exceeds sale_cap {params.sale_cap}")
    if sold == params.sale_cap:
        return 0

    upper = min(sold + delta, params.sale_cap)
    return cost(upper, params.quad_cap, params.divisor) - cost(
        sold, params.quad_cap, params.divisor
    )


def price_per_token(sold: int, params: CurveParameters) -> int:
    """Маржинальная цена одного целого токена (10^18 единиц) в wei."""
    return marginal_price(sold, params, delta=ONE_TOKEN)


# =============================================================================
# PRICE CURVE
# =============================================================================


def price_curve(
    params: CurveParameters, num_points: int = DEFAULT_NUM_POINTS
) -> list[PricePoint]:
    """
    Равномерная выборка num_points + 1 точек от 0 до sale_cap.

    Args:
        params: Параметры кривой
        num_points: Количество интервалов (>= 1)

    Returns:
        Список PricePoint длины num_points + 1

    Examples:
        >>> p = CurveParameters(sale_cap=10 * 10**12, quad_cap=5 * 10**12, divisor=1)
        >>> len(price_curve(p, num_points=5))
        6
    """
    require_positive_uint(num_points, "num_points")

    points = []
    for i in range(num_points + 1):
        tokens = params.sale_cap * i // num_points
        points.append(
            PricePoint(
                tokens=tokens,
                total_cost=cost(tokens, params.quad_cap, params.divisor),
                marginal_price=marginal_price(tokens, params),
                percent_sold_bps=BPS_DENOMINATOR * i // num_points,
            )
        )

    return points


# =============================================================================
# SCENARIO ANALYSIS
# =============================================================================


def price_at_fraction(params: CurveParameters, fraction_bps: int) -> int:
    """
    Цена целого токена в точке fraction_bps / 10000 от sale_cap.

    В точке 100% возвращается цена последнего целого токена.
    """
    require_uint(fraction_bps, "fraction_bps")
    if fraction_bps > BPS_DENOMINATOR:
        raise InvalidParameters(
            f"fraction_bps must be <= {BPS_DENOMINATOR}, got {fraction_bps}"
        )

    sold = params.sale_cap * fraction_bps // BPS_DENOMINATOR
    if sold + ONE_TOKEN > params.sale_cap:
        sold = max(params.sale_cap - ONE_TOKEN, 0)

    return price_per_token(sold, params)


def analyze_scenario(sale_cap: int, quad_cap: int, target_raised: int) -> CurveScenario:
    """
    Калибровка и сводка ценовой динамики для target_raised.

    Args:
        sale_cap: Всего атомарных единиц в продаже
        quad_cap: Граница квадратичной фазы
        target_raised: Целевой сбор (wei)

    Returns:
        CurveScenario
    """
    divisor = calibrate(sale_cap, quad_cap, target_raised)
    params = CurveParameters(sale_cap=sale_cap, quad_cap=quad_cap, divisor=divisor)

    tokens_for_one_eth = tokens_for_budget(0, ONE_ETH, params)

    return CurveScenario(
        target_raised=target_raised,
        divisor=divisor,
        avg_price_per_token=target_raised * ONE_TOKEN // sale_cap,
        price_at_25_percent=price_at_fraction(params, 2_500),
        price_at_50_percent=price_at_fraction(params, 5_000),
        price_at_75_percent=price_at_fraction(params, 7_500),
        price_at_100_percent=price_at_fraction(params, BPS_DENOMINATOR),
        tokens_for_one_eth=tokens_for_one_eth // TICK_SIZE * TICK_SIZE,
    )
