"""Presets — стандартные target raise для 800M / 200M продажи.

Divisor каждого preset вычисляется калибровкой (точное равенство
cost(sale_cap) == target), а не хранится константой.
"""

from typing import Final

from src.core.constants import STANDARD_QUAD_CAP, STANDARD_SALE_CAP
from src.core.domain.curve_parameters import CurveParameters
from src.core.domain.units import parse_ether
from src.core.math.divisor_calibrator import calibrate
from src.core.math.integer_safeguards import InvalidParameters
from src.core.math.price_sampler import CurveScenario, analyze_scenario

# Target raise в ETH (десятичные строки, без float)
PRESET_TARGETS_ETH: Final[tuple[str, ...]] = (
    "0.01",  # oneshot default
    "0.1",
    "0.5",
    "1",
    "2",  # recommended
    "5",
    "8.5",  # pump.fun style
)


def _require_preset(target_eth: str) -> None:
    if target_eth not in PRESET_TARGETS_ETH:
        raise InvalidParameters(
            f"Unknown preset {target_eth!r}, expected one of {PRESET_TARGETS_ETH}"
        )


def preset_divisor(target_eth: str) -> int:
    """Divisor для preset target raise на стандартной продаже."""
    _require_preset(target_eth)
    return calibrate(STANDARD_SALE_CAP, STANDARD_QUAD_CAP, parse_ether(target_eth))


def preset_parameters(target_eth: str) -> CurveParameters:
    """Замороженные параметры стандартной продажи для preset."""
    return CurveParameters(
        sale_cap=STANDARD_SALE_CAP,
        quad_cap=STANDARD_QUAD_CAP,
        divisor=preset_divisor(target_eth),
    )


def analyze_presets(
    targets_eth: tuple[str, ...] = PRESET_TARGETS_ETH,
) -> list[CurveScenario]:
    """Сводка ценовой динамики по списку target raise."""
    return [
        analyze_scenario(STANDARD_SALE_CAP, STANDARD_QUAD_CAP, parse_ether(target))
        for target in targets_eth
    ]
