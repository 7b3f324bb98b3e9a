"""
Cost Function — zCurve Quadratic-then-Linear Pricing

Кумулятивная стоимость (wei) продажи n атомарных единиц токена.
Порядок операций фиксирован и совпадает с on-chain контрактом: каждое
деление — floor, перестановка умножений и делений меняет результат.

ФОРМУЛЫ:
    m = n // TICK_SIZE
    K = quad_cap // TICK_SIZE

    m < 2:      cost = 0                                   (первый tick бесплатный)
    m <= K:     sum_sq = m·(m-1)·(2m-1) // 6
                cost = (sum_sq · ONE_ETH) // (6 · divisor)
    m > K:      quad_cost = (sum_sq(K) · ONE_ETH) // (6 · divisor)
                p_K = (K² · ONE_ETH) // (6 · divisor)
                cost = quad_cost + p_K · (m - K)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. cost(0) == 0
2. cost не убывает по n
3. Знаменатель 6·divisor применяется одним делением после всех умножений
4. Переполнение uint256 → ArithmeticOverflow, никогда не wraparound
"""

from src.core.constants import ONE_ETH, TICK_SIZE
from src.core.math.integer_safeguards import (
    InvalidParameters,
    checked_add,
    checked_mul,
    floor_div,
    require_positive_uint,
    require_uint,
)


# =============================================================================
# SUM OF SQUARES
# =============================================================================


def sum_of_squares(m: int) -> int:
    """
    Сумма квадратов 0² + 1² + … + (m-1)² в закрытой форме.

    sum_{i=0..m-1} i² = m·(m-1)·(2m-1) // 6

    Args:
        m: Количество ticks (m >= 0)

    Returns:
        Сумма квадратов (int); 0 для m < 2

    Examples:
        >>> sum_of_squares(3)  # 0 + 1 + 4
        5
        >>> sum_of_squares(1)
        0
    """
    require_uint(m, "m")

    if m < 2:
        return 0

    product = checked_mul(checked_mul(m, m - 1), 2 * m - 1)
    return product // 6


def _denominator(divisor: int) -> int:
    return checked_mul(6, divisor)


# =============================================================================
# COST
# =============================================================================


def cost(n: int, quad_cap: int, divisor: int) -> int:
    """
    Кумулятивная стоимость продажи n атомарных единиц (wei).

    Args:
        n: Кумулятивно проданное количество (атомарные единицы, 0 <= n <= sale_cap)
        quad_cap: Граница квадратичной фазы (атомарные единицы)
        divisor: Масштаб кривой (> 0)

    Returns:
        Суммарная стоимость в wei

    Raises:
        InvalidParameters: если входы не uint или divisor <= 0
        ArithmeticOverflow: если промежуточное произведение > UINT256_MAX

    Examples:
        >>> cost(0, 10**15, 1)
        0
        >>> cost(3 * 10**12, 10**15, 1)  # sum_sq(3) = 5 → 5e18 // 6
        833333333333333333
    """
    require_uint(n, "n")
    require_uint(quad_cap, "quad_cap")
    require_positive_uint(divisor, "divisor")

    m = n // TICK_SIZE

    # Первый tick бесплатный
    if m < 2:
        return 0

    k = quad_cap // TICK_SIZE
    denom = _denominator(divisor)

    if m <= k:
        # Чистая квадратичная фаза
        sum_sq = sum_of_squares(m)
        return floor_div(checked_mul(sum_sq, ONE_ETH), denom)

    # Смешанная фаза: квадратичная до K, далее линейный хвост по цене p_K
    sum_k = sum_of_squares(k)
    quad_cost = floor_div(checked_mul(sum_k, ONE_ETH), denom)

    price_at_k = floor_div(checked_mul(checked_mul(k, k), ONE_ETH), denom)
    tail_cost = checked_mul(price_at_k, m - k)

    return checked_add(quad_cost, tail_cost)


# =============================================================================
# MARGINAL PRICE & CALIBRATION WEIGHT
# =============================================================================


def tick_price(tick: int, quad_cap: int, divisor: int) -> int:
    """
    Маржинальная цена одного tick: cost(tick + 1) - cost(tick) в tick-единицах.

    В линейной фазе (tick >= K) цена постоянна и равна
    p_K = (K² · ONE_ETH) // (6 · divisor).

    Args:
        tick: Номер tick (количество уже проданных ticks)
        quad_cap: Граница квадратичной фазы (атомарные единицы)
        divisor: Масштаб кривой

    Returns:
        Стоимость следующего tick в wei
    """
    require_uint(tick, "tick")
    n = checked_mul(tick, TICK_SIZE)
    return cost(n + TICK_SIZE, quad_cap, divisor) - cost(n, quad_cap, divisor)


def weighted_tick_sum(sale_cap: int, quad_cap: int) -> int:
    """
    Вес кривой W: cost(sale_cap) ≈ W · ONE_ETH / (6 · divisor).

        m <= K:  W = sum_sq(m)
        m > K:   W = sum_sq(K) + K² · (m - K)

    Не зависит от divisor; используется для калибровки.

    Examples:
        >>> weighted_tick_sum(3 * 10**12, 3 * 10**12)
        5
        >>> weighted_tick_sum(5 * 10**12, 3 * 10**12)  # 5 + 9 * 2
        23
    """
    require_uint(sale_cap, "sale_cap")
    require_uint(quad_cap, "quad_cap")

    if quad_cap > sale_cap:
        raise InvalidParameters(
            f"quad_cap must not exceed sale_cap, got quad_cap={quad_cap} "
            f"sale_cap={sale_cap}"
        )

    m = sale_cap // TICK_SIZE
    k = quad_cap // TICK_SIZE

    if m <= k:
        return sum_of_squares(m)

    return checked_add(sum_of_squares(k), checked_mul(checked_mul(k, k), m - k))
