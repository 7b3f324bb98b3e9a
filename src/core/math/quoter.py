"""
Quoter — Buy/Sell Quotes on a Frozen zCurve

Чистые stateless операции над замороженными CurveParameters:

BUY SIDE:
- cost_for_tokens: ETH за точное количество токенов (разность двух cost)
- tokens_for_budget: максимум токенов на ETH бюджет (бинарный поиск)

SELL SIDE (зеркало view-функций контракта):
- refund_for_tokens: ETH refund за сжигание токенов
- tokens_to_burn_for_eth: минимум токенов (кратно tick) для refund >= eth_out

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. current_sold + amount <= sale_cap, иначе OutOfSupply
2. Бинарный поиск: O(log(remaining)) вычислений cost, одно на шаг (midpoint)
3. cost(current_sold) вычисляется один раз на запрос
4. eth_budget == 0 → 0 токенов (не ошибка)
"""

from dataclasses import dataclass

from src.core.constants import TICK_SIZE
from src.core.domain.curve_parameters import CurveParameters
from src.core.math.cost_function import cost
from src.core.math.integer_safeguards import (
    InsufficientReserve,
    OutOfSupply,
    SearchLimitExceeded,
    ceil_div,
    require_uint,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class QuoterConfig:
    """Конфигурация quoter.

    max_search_iterations: жёсткий лимит итераций бинарного поиска
    (поиск по uint256 завершается максимум за 256 шагов).
    """

    max_search_iterations: int = 512


_DEFAULT_CONFIG = QuoterConfig()


# =============================================================================
# HELPERS
# =============================================================================


def _cost_at(n: int, params: CurveParameters) -> int:
    return cost(n, params.quad_cap, params.divisor)


def _require_within_supply(current_sold: int, params: CurveParameters) -> None:
    require_uint(current_sold, "current_sold")
    if current_sold > params.sale_cap:
        raise OutOfSupply(
            f"current_sold {current_sold} exceeds sale_cap {params.sale_cap}"
        )


def _search_limit_error(config: QuoterConfig, lo: int, hi: int) -> SearchLimitExceeded:
    return SearchLimitExceeded(
        f"Quote search exceeded {config.max_search_iterations} iterations "
        f"(lo={lo}, hi={hi})"
    )


# =============================================================================
# BUY SIDE
# =============================================================================


def cost_for_tokens(current_sold: int, amount: int, params: CurveParameters) -> int:
    """
    Стоимость покупки amount атомарных единиц при текущем net sold.

    cost(current_sold + amount) - cost(current_sold)

    Args:
        current_sold: Кумулятивно проданное количество
        amount: Количество к покупке
        params: Замороженные параметры кривой

    Returns:
        Стоимость в wei

    Raises:
        OutOfSupply: если current_sold + amount > sale_cap
        InvalidParameters: если входы не uint
    """
    _require_within_supply(current_sold, params)
    require_uint(amount, "amount")

    target = current_sold + amount
    if target > params.sale_cap:
        raise OutOfSupply(
            f"current_sold {current_sold} + amount {amount} exceeds "
            f"sale_cap {params.sale_cap}"
        )

    return _cost_at(target, params) - _cost_at(current_sold, params)


def tokens_for_budget(
    current_sold: int,
    eth_budget: int,
    params: CurveParameters,
    config: QuoterConfig | None = None,
) -> int:
    """
    Наибольшее amount, которое можно купить на eth_budget.

    amount ∈ [0, sale_cap - current_sold],
    cost(current_sold + amount) - cost(current_sold) <= eth_budget.

    Бинарный поиск с верхней серединой: lo всегда допустим, hi — верхняя
    граница кандидатов; одно вычисление cost на шаг, граничные точки
    не вычисляются отдельно.

    Args:
        current_sold: Кумулятивно проданное количество
        eth_budget: Бюджет в wei
        params: Замороженные параметры кривой
        config: Конфигурация (опционально)

    Returns:
        Количество атомарных единиц (0 при нулевом бюджете или sold out)

    Raises:
        OutOfSupply: если current_sold > sale_cap
        SearchLimitExceeded: если поиск превысил лимит итераций
    """
    config = config or _DEFAULT_CONFIG
    _require_within_supply(current_sold, params)
    require_uint(eth_budget, "eth_budget")

    if eth_budget == 0:
        return 0

    base_cost = _cost_at(current_sold, params)

    lo = 0
    hi = params.sale_cap - current_sold
    iterations = 0

    while lo < hi:
        if iterations >= config.max_search_iterations:
            raise _search_limit_error(config, lo, hi)

        mid = (lo + hi + 1) // 2
        if _cost_at(current_sold + mid, params) - base_cost <= eth_budget:
            lo = mid
        else:
            hi = mid - 1
        iterations += 1

    return lo


# =============================================================================
# SELL SIDE
# =============================================================================


def refund_for_tokens(current_sold: int, amount: int, params: CurveParameters) -> int:
    """
    ETH refund за продажу amount токенов обратно в кривую.

    cost(current_sold) - cost(current_sold - amount); amount ограничивается
    сверху current_sold (нельзя продать больше, чем продано).

    Raises:
        OutOfSupply: если current_sold > sale_cap
    """
    _require_within_supply(current_sold, params)
    require_uint(amount, "amount")

    if amount == 0:
        return 0

    amount = min(amount, current_sold)
    return _cost_at(current_sold, params) - _cost_at(current_sold - amount, params)


def tokens_to_burn_for_eth(
    eth_out: int,
    current_sold: int,
    params: CurveParameters,
    config: QuoterConfig | None = None,
) -> int:
    """
    Минимальное количество токенов, refund за которое покрывает eth_out.

    Результат округляется вверх до границы tick (контракт принимает только
    целые ticks) и ограничивается current_sold.

    Args:
        eth_out: Желаемый refund в wei
        current_sold: Кумулятивно проданное количество
        params: Замороженные параметры кривой
        config: Конфигурация (опционально)

    Returns:
        Количество атомарных единиц к сжиганию

    Raises:
        InsufficientReserve: если eth_out > cost(current_sold)
        OutOfSupply: если current_sold > sale_cap
    """
    config = config or _DEFAULT_CONFIG
    _require_within_supply(current_sold, params)
    require_uint(eth_out, "eth_out")

    if eth_out == 0:
        return 0

    reserve = _cost_at(current_sold, params)
    if eth_out > reserve:
        raise InsufficientReserve(
            f"eth_out {eth_out} exceeds curve reserve {reserve} at "
            f"current_sold {current_sold}"
        )

    # Наименьшее amount с refund(amount) >= eth_out; refund(current_sold) == reserve
    lo = 0
    hi = current_sold
    iterations = 0

    while lo < hi:
        if iterations >= config.max_search_iterations:
            raise _search_limit_error(config, lo, hi)

        mid = (lo + hi) // 2
        if reserve - _cost_at(current_sold - mid, params) >= eth_out:
            hi = mid
        else:
            lo = mid + 1
        iterations += 1

    return min(ceil_div(lo, TICK_SIZE) * TICK_SIZE, current_sold)
