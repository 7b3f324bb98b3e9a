"""Sale — создание продажи и котировки поверх pricing engine.

- launcher: калибровка и заморозка CurveParameters
- quote_desk: диспетчер quote_request для live UI
- presets: стандартные target raise
"""

from .launcher import SaleLaunchConfig, SaleLauncher, SaleLaunchResult
from .presets import PRESET_TARGETS_ETH, analyze_presets, preset_divisor, preset_parameters
from .quote_desk import QuoteDesk

__all__ = [
    "SaleLaunchConfig",
    "SaleLauncher",
    "SaleLaunchResult",
    "QuoteDesk",
    "PRESET_TARGETS_ETH",
    "analyze_presets",
    "preset_divisor",
    "preset_parameters",
]
