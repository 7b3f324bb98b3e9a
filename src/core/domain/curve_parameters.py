"""
CurveParameters — Модель параметров zCurve продажи

Immutable Pydantic модель: вычисляется один раз при создании продажи
(DivisorCalibrator) и не изменяется до конца жизни продажи.
Полная совместимость с JSON Schema контрактом curve_parameters.json.

Все поля — целые числа (strict mode): float и строки не принимаются.
Нарушение любого инварианта при создании или model_validate бросает
InvalidParameters (CurveError), а не pydantic.ValidationError.
"""

from contextlib import contextmanager
from typing import Any, Iterator

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.constants import TICK_SIZE, UINT256_MAX
from src.core.errors import InvalidParameters


@contextmanager
def _as_invalid_parameters() -> Iterator[None]:
    try:
        yield
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'model'}: {error['msg']}"
            for error in e.errors()
        )
        raise InvalidParameters(f"Invalid CurveParameters: {details}") from e


class CurveParameters(BaseModel):
    """
    Замороженные параметры bonding curve.

    Инварианты:
    - 0 < quad_cap <= sale_cap
    - divisor > 0
    """

    sale_cap: int = Field(
        ..., gt=0, le=UINT256_MAX, description="Всего атомарных единиц в продаже"
    )
    quad_cap: int = Field(
        ...,
        gt=0,
        le=UINT256_MAX,
        description="Граница квадратичной фазы (атомарные единицы)",
    )
    divisor: int = Field(
        ..., gt=0, le=UINT256_MAX, description="Масштаб кривой (больше → дешевле)"
    )

    model_config = {"frozen": True, "strict": True}

    def __init__(self, **data: Any):
        with _as_invalid_parameters():
            super().__init__(**data)

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> "CurveParameters":
        """Валидация dict/объекта; ошибки → InvalidParameters."""
        with _as_invalid_parameters():
            return super().model_validate(obj, **kwargs)

    @classmethod
    def model_validate_json(cls, json_data: Any, **kwargs: Any) -> "CurveParameters":
        """Валидация JSON строки; ошибки → InvalidParameters."""
        with _as_invalid_parameters():
            return super().model_validate_json(json_data, **kwargs)

    @field_validator("quad_cap")
    @classmethod
    def validate_quad_cap_within_sale_cap(cls, v: int, info) -> int:
        """Проверка quad_cap <= sale_cap."""
        if "sale_cap" not in info.data:
            return v

        sale_cap = info.data["sale_cap"]
        if v > sale_cap:
            raise ValueError(f"quad_cap {v} must be <= sale_cap {sale_cap}")

        return v

    @property
    def sale_ticks(self) -> int:
        """Количество полных ticks в продаже."""
        return self.sale_cap // TICK_SIZE

    @property
    def quad_ticks(self) -> int:
        """Количество ticks квадратичной фазы (K)."""
        return self.quad_cap // TICK_SIZE

    def remaining_supply(self, current_sold: int) -> int:
        """
        Остаток supply при текущем net sold.

        Returns:
            max(sale_cap - current_sold, 0)
        """
        return max(self.sale_cap - current_sold, 0)
