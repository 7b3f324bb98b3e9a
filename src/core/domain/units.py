"""
Units — Централизованный модуль единиц токена и ETH

Единственный допустимый способ преобразований между:
- атомарными единицами токена (18 десятичных знаков)
- ticks (блоки по TICK_SIZE атомарных единиц)
- wei и десятичными строками (только на границе presentation)

ЗАПРЕЩЕНО использовать float для денежных величин: parse/format работают
только со строками и int.
"""

from src.core.constants import ONE_ETH, ONE_TOKEN, TICK_SIZE, TOKEN_DECIMALS
from src.core.math.integer_safeguards import (
    InvalidParameters,
    ceil_div,
    require_uint,
)

__all__ = [
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
]


# =============================================================================
# TICKS
# =============================================================================


def to_ticks(amount: int) -> int:
    """
    Квантование: атомарные единицы → количество полных ticks (floor).

    Examples:
        >>> to_ticks(3 * 10**12 + 5)
        3
    """
    return require_uint(amount, "amount") // TICK_SIZE


def from_ticks(ticks: int) -> int:
    """Конверсия: ticks → атомарные единицы."""
    return require_uint(ticks, "ticks") * TICK_SIZE


def floor_to_tick(amount: int) -> int:
    """
    Округление вниз до границы tick.

    Examples:
        >>> floor_to_tick(2 * 10**12 + 1)
        2000000000000
    """
    return to_ticks(amount) * TICK_SIZE


def ceil_to_tick(amount: int) -> int:
    """
    Округление вверх до границы tick.

    Examples:
        >>> ceil_to_tick(2 * 10**12 + 1)
        3000000000000
    """
    require_uint(amount, "amount")
    return ceil_div(amount, TICK_SIZE) * TICK_SIZE


# =============================================================================
# PRESENTATION BOUNDARY
# =============================================================================


def parse_units(value: str, decimals: int = TOKEN_DECIMALS) -> int:
    """
    Парсинг десятичной строки в атомарные единицы.

    Поведение совпадает с viem parseEther/parseUnits для неотрицательных
    значений: лишние дробные знаки отбрасываются (округление вниз).

    Args:
        value: Десятичная строка, например "0.01" или "800000000"
        decimals: Количество десятичных знаков (default: 18)

    Returns:
        Значение в атомарных единицах (int)

    Raises:
        InvalidParameters: Если строка не является неотрицательным десятичным числом

    Examples:
        >>> parse_units("0.01")
        10000000000000000
        >>> parse_units("1.5", decimals=6)
        1500000
    """
    if not isinstance(value, str):
        raise InvalidParameters(
            f"value must be a decimal string, got {type(value).__name__}"
        )

    text = value.strip()
    if text in ("", ".") or not text.isascii():
        raise InvalidParameters(f"Invalid decimal string: {value!r}")

    whole, sep, frac = text.partition(".")

    if not whole:
        whole = "0"
    if not whole.isdigit() or (sep and frac and not frac.isdigit()):
        raise InvalidParameters(f"Invalid decimal string: {value!r}")

    frac = frac[:decimals].ljust(decimals, "0")
    return int(whole) * 10**decimals + int(frac or "0")


def format_units(amount: int, decimals: int = TOKEN_DECIMALS) -> str:
    """
    Форматирование атомарных единиц в десятичную строку без потери точности.

    Examples:
        >>> format_units(10000000000000000)
        '0.01'
        >>> format_units(2 * 10**18)
        '2'
    """
    require_uint(amount, "amount")
    whole, frac = divmod(amount, 10**decimals)

    if frac == 0:
        return str(whole)

    frac_str = str(frac).rjust(decimals, "0").rstrip("0")
    return f"{whole}.{frac_str}"


def parse_ether(value: str) -> int:
    """Парсинг ETH строки в wei."""
    return parse_units(value, TOKEN_DECIMALS)


def format_ether(wei: int) -> str:
    """Форматирование wei в ETH строку."""
    return format_units(wei, TOKEN_DECIMALS)
