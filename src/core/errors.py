"""
Иерархия исключений zCurve pricing engine

Общий модуль для math и domain слоёв: CurveParameters и checked
арифметика бросают одни и те же типы.
"""


class CurveError(Exception):
    """Базовое исключение pricing engine."""


class InvalidParameters(CurveError, ValueError):
    """
    Некорректные параметры кривой или входы операции.

    Примеры: quad_cap > sale_cap, divisor <= 0, отрицательное количество,
    float вместо int.
    """


class ZeroTarget(InvalidParameters):
    """Калибровка запрошена с target_raised == 0."""


class OutOfSupply(CurveError):
    """Запрошенный кумулятивный объём превышает sale_cap."""


class InsufficientReserve(CurveError):
    """
    Запрошенный ETH refund больше, чем собрано кривой на текущем net sold.
    """


class UnreachableTarget(CurveError):
    """
    Ни один целочисленный divisor не даёт cost(sale_cap) == target_raised.

    Возникает, если target выше стоимости при divisor=1, если кривая
    оценивает весь supply в ноль, или если floor-деление перескакивает
    через target.
    """


class ArithmeticOverflow(CurveError, OverflowError):
    """Промежуточный результат не помещается в uint256."""


class SearchLimitExceeded(CurveError, RuntimeError):
    """Бинарный поиск не сошёлся за отведённое число итераций."""
