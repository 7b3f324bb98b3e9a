"""Sale Launcher — создание продажи с замороженными параметрами кривой.

Поток создания продажи:
1. Валидация запроса (sale_launch контракт или явные аргументы)
2. Калибровка divisor (DivisorCalibrator, один раз)
3. Заморозка CurveParameters
4. Проверка: cost(sale_cap) == target_raised

Результат сериализуется в plain int (model_dump) для хранения рядом
с on-chain метаданными продажи.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from src.core.constants import STANDARD_QUAD_CAP, STANDARD_SALE_CAP
from src.core.contracts.validators import validate_sale_launch
from src.core.domain.curve_parameters import CurveParameters
from src.core.math.cost_function import cost
from src.core.math.divisor_calibrator import (
    CalibrationConfig,
    calibrate,
    closed_form_divisor,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SaleLaunchConfig:
    """Конфигурация создания продажи.

    По умолчанию — стандартная oneshot-продажа: 800M токенов,
    квадратичная фаза до 200M (25% supply).
    """

    sale_cap: int = STANDARD_SALE_CAP
    quad_cap: int = STANDARD_QUAD_CAP
    calibration: CalibrationConfig = field(default_factory=CalibrationConfig)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SaleLaunchResult:
    """Результат создания продажи."""

    params: CurveParameters
    target_raised: int  # wei
    total_raise: int  # cost(sale_cap), всегда == target_raised
    closed_form_divisor: int  # seed калибровки (для диагностики)

    details: str

    def to_record(self) -> Dict[str, int]:
        """Plain-int запись параметров для хранения."""
        return self.params.model_dump()


# =============================================================================
# LAUNCHER
# =============================================================================


class SaleLauncher:
    """Создание zCurve продажи.

    Калибрует divisor один раз и возвращает замороженные параметры.
    Launcher не хранит состояние продаж: каждый вызов независим.
    """

    def __init__(self, config: SaleLaunchConfig | None = None):
        """Инициализация launcher.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or SaleLaunchConfig()

    def launch(
        self,
        target_raised: int,
        sale_cap: int | None = None,
        quad_cap: int | None = None,
    ) -> SaleLaunchResult:
        """Создание продажи для target_raised.

        Args:
            target_raised: целевой сбор при полной продаже (wei)
            sale_cap: всего атомарных единиц (опционально, default из config)
            quad_cap: граница квадратичной фазы (опционально, default из config)

        Returns:
            SaleLaunchResult с замороженными CurveParameters

        Raises:
            ZeroTarget, InvalidParameters, UnreachableTarget: из калибровки
        """
        sale_cap = sale_cap if sale_cap is not None else self.config.sale_cap
        quad_cap = quad_cap if quad_cap is not None else self.config.quad_cap

        divisor = calibrate(
            sale_cap, quad_cap, target_raised, config=self.config.calibration
        )
        params = CurveParameters(sale_cap=sale_cap, quad_cap=quad_cap, divisor=divisor)
        total_raise = cost(params.sale_cap, params.quad_cap, params.divisor)
        seed = closed_form_divisor(sale_cap, quad_cap, target_raised)

        logger.info(
            "Sale launched: sale_cap=%d quad_cap=%d divisor=%d target_raised=%d",
            sale_cap,
            quad_cap,
            divisor,
            target_raised,
        )

        return SaleLaunchResult(
            params=params,
            target_raised=target_raised,
            total_raise=total_raise,
            closed_form_divisor=seed,
            details=(
                f"Launch: divisor={divisor}, closed_form={seed}, "
                f"delta={divisor - seed}, total_raise={total_raise} wei"
            ),
        )

    def launch_from_request(self, data: Dict[str, Any]) -> SaleLaunchResult:
        """Создание продажи из JSON запроса (sale_launch контракт).

        Raises:
            jsonschema.ValidationError: если запрос не соответствует схеме
        """
        validate_sale_launch(data)
        return self.launch(
            target_raised=data["target_raised"],
            sale_cap=data["sale_cap"],
            quad_cap=data["quad_cap"],
        )
