"""Quote Desk — диспетчер котировок для live UI.

Принимает quote_request (JSON контракт), загружает замороженные параметры
и вызывает соответствующую операцию Quoter. Результат — plain int.
"""

from typing import Any, Callable, Dict

from src.core.contracts.validators import validate_quote_request
from src.core.domain.curve_parameters import CurveParameters
from src.core.math.quoter import (
    QuoterConfig,
    cost_for_tokens,
    refund_for_tokens,
    tokens_for_budget,
    tokens_to_burn_for_eth,
)


class QuoteDesk:
    """Stateless диспетчер котировок."""

    def __init__(self, config: QuoterConfig | None = None):
        self.config = config or QuoterConfig()
        self._operations: Dict[str, Callable[[int, int, CurveParameters], int]] = {
            "cost_for_tokens": cost_for_tokens,
            "tokens_for_budget": self._tokens_for_budget,
            "refund_for_tokens": refund_for_tokens,
            "tokens_to_burn_for_eth": self._tokens_to_burn_for_eth,
        }

    def _tokens_for_budget(
        self, current_sold: int, eth_budget: int, params: CurveParameters
    ) -> int:
        return tokens_for_budget(current_sold, eth_budget, params, config=self.config)

    def _tokens_to_burn_for_eth(
        self, current_sold: int, eth_out: int, params: CurveParameters
    ) -> int:
        return tokens_to_burn_for_eth(eth_out, current_sold, params, config=self.config)

    def quote(self, data: Dict[str, Any]) -> int:
        """Исполнение quote_request.

        Args:
            data: {"operation", "current_sold", "value", "curve"}

        Returns:
            Результат операции (wei или атомарные единицы)

        Raises:
            jsonschema.ValidationError: если запрос не соответствует схеме
            InvalidParameters: если curve нарушает инварианты
            CurveError: ошибки Quoter (OutOfSupply, InsufficientReserve, ...)
        """
        validate_quote_request(data)
        params = CurveParameters.model_validate(data["curve"])
        operation = self._operations[data["operation"]]
        return operation(data["current_sold"], data["value"], params)
