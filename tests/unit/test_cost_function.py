"""
Тесты для Cost Function — zCurve Quadratic-then-Linear Pricing

Проверяемые инварианты:
1. cost(0) == 0, первый tick бесплатный
2. Квадратичная фаза: (sum_sq · ONE_ETH) // (6 · divisor)
3. Линейный хвост по замороженной цене p_K
4. Порядок floor-делений совпадает с on-chain reference
5. Переполнение uint256 → ArithmeticOverflow
"""

import pytest

from src.core.constants import ONE_ETH, STANDARD_QUAD_CAP, STANDARD_SALE_CAP, TICK_SIZE
from src.core.math.cost_function import (
    cost,
    sum_of_squares,
    tick_price,
    weighted_tick_sum,
)
from src.core.math.integer_safeguards import ArithmeticOverflow, InvalidParameters

# Игрушечная кривая: 1000 ticks, квадратичная фаза до 400 ticks, divisor = 1
TOY_SALE_CAP = 1000 * TICK_SIZE
TOY_QUAD_CAP = 400 * TICK_SIZE
TOY_PRICE_AT_K = 400 * 400 * ONE_ETH // 6

# Стандартная продажа, откалиброванная на 2 ETH
STD_DIVISOR_2_ETH = 2222222222222205555555555555583333333333333


# =============================================================================
# ТЕСТЫ: sum_of_squares
# =============================================================================


class TestSumOfSquares:
    """Закрытая форма суммы квадратов."""

    @pytest.mark.parametrize("m", [0, 1, 2, 3, 4, 10, 57])
    def test_matches_explicit_sum(self, m):
        assert sum_of_squares(m) == sum(i * i for i in range(m))

    def test_large_m(self):
        m = 2 * 10**14
        assert sum_of_squares(m) == m * (m - 1) * (2 * m - 1) // 6

    def test_negative_rejected(self):
        with pytest.raises(InvalidParameters):
            sum_of_squares(-1)


# =============================================================================
# ТЕСТЫ: cost — reference vectors
# =============================================================================


class TestCostReferenceVectors:
    """Побитовые reference vectors игрушечной кривой."""

    @pytest.mark.parametrize(
        "ticks, expected",
        [
            (0, 0),
            (1, 0),
            (2, 166666666666666666),
            (3, 833333333333333333),
            (399, 3515699833333333333333333),
            (400, 3542233333333333333333333),
            (401, 3568899999999999999999999),
            (1000, 19542233333333333333332933),
        ],
    )
    def test_toy_curve(self, ticks, expected):
        assert cost(ticks * TICK_SIZE, TOY_QUAD_CAP, 1) == expected

    def test_standard_sale_full_cost(self):
        """Стандартная продажа на 2 ETH собирает ровно 2 ETH."""
        assert cost(STANDARD_SALE_CAP, STANDARD_QUAD_CAP, STD_DIVISOR_2_ETH) == 2 * ONE_ETH

    def test_standard_sale_cost_at_quad_cap(self):
        assert (
            cost(STANDARD_QUAD_CAP, STANDARD_QUAD_CAP, STD_DIVISOR_2_ETH)
            == 200_000_000_000_000_000
        )

    def test_closed_form_divisor_undershoots(self):
        """Closed-form divisor для 0.01 ETH недобирает 7 wei из-за floor."""
        closed_form = 444444444444444111111111111111666666666666666
        assert (
            cost(STANDARD_SALE_CAP, STANDARD_QUAD_CAP, closed_form)
            == 9999999999999993
        )


# =============================================================================
# ТЕСТЫ: cost — поведение
# =============================================================================


class TestCostBehaviour:
    """Квантование, фазы и границы."""

    def test_zero(self):
        assert cost(0, TOY_QUAD_CAP, 1) == 0

    def test_dust_region_free(self):
        """Меньше двух полных ticks — бесплатно."""
        assert cost(2 * TICK_SIZE - 1, TOY_QUAD_CAP, 1) == 0

    def test_sub_tick_remainder_ignored(self):
        """Остаток внутри tick не влияет на стоимость."""
        assert cost(3 * TICK_SIZE + 5, TOY_QUAD_CAP, 1) == cost(3 * TICK_SIZE, TOY_QUAD_CAP, 1)
        assert cost(4 * TICK_SIZE - 1, TOY_QUAD_CAP, 1) == cost(3 * TICK_SIZE, TOY_QUAD_CAP, 1)

    def test_linear_tail_length_zero_at_quad_cap(self):
        """m == K: линейный хвост нулевой длины, чистая квадратичная формула."""
        expected = sum_of_squares(400) * ONE_ETH // 6
        assert cost(TOY_QUAD_CAP, TOY_QUAD_CAP, 1) == expected

    def test_linear_tail_uses_price_at_k(self):
        """Каждый tick после K стоит ровно p_K."""
        at_k = cost(TOY_QUAD_CAP, TOY_QUAD_CAP, 1)
        for extra in (1, 2, 600):
            assert (
                cost(TOY_QUAD_CAP + extra * TICK_SIZE, TOY_QUAD_CAP, 1)
                == at_k + extra * TOY_PRICE_AT_K
            )

    def test_tail_floors_per_tick_price(self):
        """Хвост = floor(p_K) · (m - K), а не floor(K² · ONE_ETH · (m - K) / 6d)."""
        divisor = 7
        assert cost(TOY_SALE_CAP, TOY_QUAD_CAP, divisor) == 2791747619047619047618733
        combined_tail = cost(TOY_QUAD_CAP, TOY_QUAD_CAP, divisor) + (
            400 * 400 * ONE_ETH * 600 // (6 * divisor)
        )
        assert combined_tail == 2791747619047619047619047
        assert cost(TOY_SALE_CAP, TOY_QUAD_CAP, divisor) < combined_tail

    def test_quad_and_tail_floored_separately(self):
        """Единое деление W · ONE_ETH // (6d) даёт другой результат."""
        divisor = 7
        weight = weighted_tick_sum(TOY_SALE_CAP, TOY_QUAD_CAP)
        assert weight * ONE_ETH // (6 * divisor) == 2791747619047619047619047
        assert cost(TOY_SALE_CAP, TOY_QUAD_CAP, divisor) != weight * ONE_ETH // (6 * divisor)

    def test_larger_divisor_is_cheaper(self):
        n = 700 * TICK_SIZE
        assert cost(n, TOY_QUAD_CAP, 2) <= cost(n, TOY_QUAD_CAP, 1)
        assert cost(n, TOY_QUAD_CAP, 1000) < cost(n, TOY_QUAD_CAP, 1)

    def test_quad_cap_below_one_tick(self):
        """K == 0: весь supply в линейной фазе с нулевой ценой."""
        assert cost(TOY_SALE_CAP, TICK_SIZE - 1, 1) == 0


class TestCostValidation:
    """Валидация входов и переполнение."""

    def test_zero_divisor_rejected(self):
        with pytest.raises(InvalidParameters, match="divisor"):
            cost(TOY_SALE_CAP, TOY_QUAD_CAP, 0)

    def test_negative_divisor_rejected(self):
        with pytest.raises(InvalidParameters, match="divisor"):
            cost(TOY_SALE_CAP, TOY_QUAD_CAP, -1)

    def test_negative_n_rejected(self):
        with pytest.raises(InvalidParameters, match="n must be non-negative"):
            cost(-1, TOY_QUAD_CAP, 1)

    def test_float_rejected(self):
        with pytest.raises(InvalidParameters, match="integer"):
            cost(1.5e15, TOY_QUAD_CAP, 1)

    def test_overflow_fails_loudly(self):
        """sum_sq · ONE_ETH за пределами uint256 → ArithmeticOverflow."""
        n = 2**100 * TICK_SIZE
        with pytest.raises(ArithmeticOverflow):
            cost(n, n, 1)


# =============================================================================
# ТЕСТЫ: tick_price / weighted_tick_sum
# =============================================================================


class TestTickPrice:
    """Маржинальная цена одного tick."""

    def test_linear_region_constant(self):
        assert tick_price(400, TOY_QUAD_CAP, 1) == TOY_PRICE_AT_K
        assert tick_price(999, TOY_QUAD_CAP, 1) == TOY_PRICE_AT_K

    def test_quadratic_region(self):
        assert tick_price(399, TOY_QUAD_CAP, 1) == 26533500000000000000000

    def test_first_tick_free(self):
        assert tick_price(0, TOY_QUAD_CAP, 1) == 0


class TestWeightedTickSum:
    """Вес кривой для калибровки."""

    def test_pure_quadratic(self):
        assert weighted_tick_sum(3 * TICK_SIZE, 3 * TICK_SIZE) == 5

    def test_mixed(self):
        assert weighted_tick_sum(5 * TICK_SIZE, 3 * TICK_SIZE) == 5 + 9 * 2

    def test_toy_curve(self):
        assert weighted_tick_sum(TOY_SALE_CAP, TOY_QUAD_CAP) == 117253400

    def test_quad_cap_above_sale_cap_rejected(self):
        with pytest.raises(InvalidParameters, match="quad_cap"):
            weighted_tick_sum(TICK_SIZE, 2 * TICK_SIZE)
