"""
zCurve константы

Константы для побитового совпадения с on-chain контрактом:
- TICK_SIZE: квант атомарных единиц (10^12)
- ONE_ETH: 1 ETH в wei (10^18)
- UINT256_MAX: граница checked арифметики
- STANDARD_*: стандартные параметры oneshot-продажи (800M / 200M)
"""

from typing import Final

# Десятичные знаки токена и ETH
TOKEN_DECIMALS: Final[int] = 18

# 1 ETH в wei
ONE_ETH: Final[int] = 10**TOKEN_DECIMALS

# 1 целый токен в атомарных единицах
ONE_TOKEN: Final[int] = 10**TOKEN_DECIMALS

# Размер tick в атомарных единицах
TICK_SIZE: Final[int] = 10**12

# uint256 максимальное значение
UINT256_MAX: Final[int] = 2**256 - 1

# Стандартная продажа: 800M токенов, квадратичная фаза до 200M (25%)
STANDARD_SALE_CAP: Final[int] = 800_000_000 * ONE_TOKEN
STANDARD_QUAD_CAP: Final[int] = 200_000_000 * ONE_TOKEN
