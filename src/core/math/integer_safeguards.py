"""
Integer Safeguards — Checked uint256 Arithmetic

Модуль обеспечивает побитовое совпадение с on-chain арифметикой:
- Checked умножение/сложение/вычитание в пределах uint256
- Floor-деление с защитой от деления на ноль
- Валидация входов (только int, без float/bool)
- Re-export иерархии исключений (src.core.errors)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение uint256 никогда не происходит молча (ArithmeticOverflow)
2. Float никогда не попадает в вычисления (InvalidParameters)
3. Отрицательные промежуточные значения невозможны (uint256 semantics)
4. Все операции детерминированы и воспроизводимы
"""

from src.core.constants import UINT256_MAX
from src.core.errors import (  # noqa: F401  (re-export)
    ArithmeticOverflow,
    CurveError,
    InsufficientReserve,
    InvalidParameters,
    OutOfSupply,
    SearchLimitExceeded,
    UnreachableTarget,
    ZeroTarget,
)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require_uint(value: int, name: str) -> int:
    """
    Валидация, что значение — неотрицательный int в пределах uint256.

    bool отвергается явно (bool является подклассом int).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidParameters: Если value не int, отрицательный или > UINT256_MAX

    Examples:
        >>> require_uint(10, "n")
        10
        >>> require_uint(1.5, "n")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidParameters: n must be an integer, got float 1.5
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameters(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )

    if value < 0:
        raise InvalidParameters(f"{name} must be non-negative, got {value}")

    if value > UINT256_MAX:
        raise InvalidParameters(f"{name} exceeds uint256 range, got {value}")

    return value


def require_positive_uint(value: int, name: str) -> int:
    """
    Валидация, что значение — строго положительный uint256.

    Raises:
        InvalidParameters: Если value не int, <= 0 или > UINT256_MAX
    """
    require_uint(value, name)

    if value == 0:
        raise InvalidParameters(f"{name} must be positive, got {value}")

    return value


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def _check_range(result: int, op: str, a: int, b: int) -> int:
    if result > UINT256_MAX:
        raise ArithmeticOverflow(f"uint256 overflow in {op}: {a} {op} {b}")
    return result


def checked_mul(a: int, b: int) -> int:
    """
    Умножение с проверкой переполнения uint256.

    Examples:
        >>> checked_mul(6, 7)
        42
        >>> checked_mul(2**255, 2)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflow: uint256 overflow in *: ...
    """
    return _check_range(a * b, "*", a, b)


def checked_add(a: int, b: int) -> int:
    """Сложение с проверкой переполнения uint256."""
    return _check_range(a + b, "+", a, b)


def checked_sub(a: int, b: int) -> int:
    """
    Вычитание без underflow (uint256 semantics).

    Raises:
        ArithmeticOverflow: Если b > a
    """
    if b > a:
        raise ArithmeticOverflow(f"uint256 underflow in -: {a} - {b}")
    return a - b


def floor_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное floor-деление (EVM `/` для uint256).

    Raises:
        InvalidParameters: Если denominator == 0
    """
    if denominator == 0:
        raise InvalidParameters(f"division by zero: {numerator} / 0")
    return numerator // denominator


def ceil_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с округлением вверх.

    Examples:
        >>> ceil_div(7, 2)
        4
        >>> ceil_div(6, 2)
        3
    """
    if denominator == 0:
        raise InvalidParameters(f"division by zero: {numerator} / 0")
    return -(-numerator // denominator)
