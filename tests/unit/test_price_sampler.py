"""
Тесты для Price Sampler — Marginal Price Series

Проверяемые свойства:
1. price_curve: num_points + 1 равномерных точек, total_cost == cost(tokens)
2. marginal_price: ровно на sale_cap == 0, за sale_cap → OutOfSupply
3. analyze_scenario: сводка стандартной продажи на 2 ETH
"""

import pytest

from src.core.constants import ONE_ETH, ONE_TOKEN, STANDARD_QUAD_CAP, STANDARD_SALE_CAP, TICK_SIZE
from src.core.domain.curve_parameters import CurveParameters
from src.core.math.cost_function import cost
from src.core.math.integer_safeguards import InvalidParameters, OutOfSupply
from src.core.math.price_sampler import (
    BPS_DENOMINATOR,
    DEFAULT_NUM_POINTS,
    PricePoint,
    analyze_scenario,
    marginal_price,
    price_at_fraction,
    price_curve,
    price_per_token,
)

STD_DIVISOR_2_ETH = 2222222222222205555555555555583333333333333
TOY_PRICE_AT_K = 26666666666666666666666


@pytest.fixture
def toy_params():
    return CurveParameters(sale_cap=1000 * TICK_SIZE, quad_cap=400 * TICK_SIZE, divisor=1)


@pytest.fixture
def standard_params():
    return CurveParameters(
        sale_cap=STANDARD_SALE_CAP, quad_cap=STANDARD_QUAD_CAP, divisor=STD_DIVISOR_2_ETH
    )


# =============================================================================
# ТЕСТЫ: marginal_price
# =============================================================================


class TestMarginalPrice:
    """Стоимость следующего шага."""

    def test_first_ticks_free(self, toy_params):
        assert marginal_price(0, toy_params) == 0
        assert marginal_price(TICK_SIZE, toy_params) == 166666666666666666

    def test_linear_region(self, toy_params):
        assert marginal_price(400 * TICK_SIZE, toy_params) == TOY_PRICE_AT_K
        assert marginal_price(999 * TICK_SIZE, toy_params) == TOY_PRICE_AT_K

    def test_sold_out_is_zero(self, toy_params):
        assert marginal_price(toy_params.sale_cap, toy_params) == 0

    def test_beyond_sale_cap_rejected(self, toy_params):
        """sold > sale_cap — некорректное состояние, а не sold out."""
        with pytest.raises(OutOfSupply, match="exceeds sale_cap"):
            marginal_price(toy_params.sale_cap + 1, toy_params)

    def test_price_per_token_beyond_sale_cap_rejected(self, toy_params):
        with pytest.raises(OutOfSupply):
            price_per_token(toy_params.sale_cap + TICK_SIZE, toy_params)

    def test_delta_clamped_to_supply(self, toy_params):
        """delta за пределами sale_cap ограничивается остатком."""
        assert marginal_price(999 * TICK_SIZE, toy_params, delta=50 * TICK_SIZE) == TOY_PRICE_AT_K

    def test_zero_delta_rejected(self, toy_params):
        with pytest.raises(InvalidParameters, match="delta"):
            marginal_price(0, toy_params, delta=0)


class TestPricePerToken:
    """Цена целого токена на стандартной продаже."""

    def test_quadratic_phase(self, standard_params):
        assert price_per_token(80_000_000 * ONE_TOKEN, standard_params) == 480000006

    def test_linear_phase(self, standard_params):
        assert price_per_token(STANDARD_QUAD_CAP, standard_params) == 3_000_000_000
        assert price_per_token(600_000_000 * ONE_TOKEN, standard_params) == 3_000_000_000


# =============================================================================
# ТЕСТЫ: price_curve
# =============================================================================


class TestPriceCurve:
    """Равномерная выборка кривой."""

    def test_toy_curve_points(self, toy_params):
        assert price_curve(toy_params, num_points=5) == [
            PricePoint(0, 0, 0, 0),
            PricePoint(200 * TICK_SIZE, 441116666666666666666666, 6666666666666666666667, 2_000),
            PricePoint(400 * TICK_SIZE, 3542233333333333333333333, TOY_PRICE_AT_K, 4_000),
            PricePoint(600 * TICK_SIZE, 8875566666666666666666533, TOY_PRICE_AT_K, 6_000),
            PricePoint(800 * TICK_SIZE, 14208899999999999999999733, TOY_PRICE_AT_K, 8_000),
            PricePoint(1000 * TICK_SIZE, 19542233333333333333332933, 0, BPS_DENOMINATOR),
        ]

    def test_default_resolution(self, standard_params):
        points = price_curve(standard_params)
        assert len(points) == DEFAULT_NUM_POINTS + 1
        assert points[0].tokens == 0
        assert points[-1].tokens == STANDARD_SALE_CAP
        assert points[-1].total_cost == 2 * ONE_ETH

    def test_total_cost_matches_cost_function(self, standard_params):
        for point in price_curve(standard_params, num_points=16):
            assert point.total_cost == cost(point.tokens, STANDARD_QUAD_CAP, STD_DIVISOR_2_ETH)

    def test_cumulative_cost_non_decreasing(self, standard_params):
        points = price_curve(standard_params, num_points=40)
        totals = [p.total_cost for p in points]
        assert totals == sorted(totals)

    def test_zero_points_rejected(self, toy_params):
        with pytest.raises(InvalidParameters, match="num_points"):
            price_curve(toy_params, num_points=0)


# =============================================================================
# ТЕСТЫ: analyze_scenario
# =============================================================================


class TestAnalyzeScenario:
    """Сводка для стандартной продажи."""

    def test_two_eth_scenario(self):
        scenario = analyze_scenario(STANDARD_SALE_CAP, STANDARD_QUAD_CAP, 2 * ONE_ETH)

        assert scenario.target_raised == 2 * ONE_ETH
        assert scenario.divisor == STD_DIVISOR_2_ETH
        assert scenario.avg_price_per_token == 2_500_000_000
        assert scenario.price_at_25_percent == 3_000_000_000
        assert scenario.price_at_50_percent == 3_000_000_000
        assert scenario.price_at_75_percent == 3_000_000_000
        assert scenario.price_at_100_percent == 3_000_000_000
        assert scenario.tokens_for_one_eth == 466666666666666000000000000

    def test_price_at_fraction_bounds(self, standard_params):
        assert price_at_fraction(standard_params, 1_000) == 480000006
        with pytest.raises(InvalidParameters, match="fraction_bps"):
            price_at_fraction(standard_params, BPS_DENOMINATOR + 1)

    def test_last_token_priced_at_full_sale(self, toy_params):
        """Supply меньше одного токена: цена остатка от нуля."""
        assert price_at_fraction(toy_params, BPS_DENOMINATOR) == cost(
            toy_params.sale_cap, toy_params.quad_cap, 1
        )
