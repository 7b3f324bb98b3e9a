"""
Contract Validation Module

Модуль для валидации JSON контрактов на границах pricing engine.
"""

from .validators import (
    ContractValidator,
    CurveParametersValidator,
    QuoteRequestValidator,
    SaleLaunchValidator,
    SchemaLoader,
    default_loader,
    load_curve_parameters,
    validate_curve_parameters,
    validate_quote_request,
    validate_sale_launch,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CurveParametersValidator",
    "SaleLaunchValidator",
    "QuoteRequestValidator",
    # Functions
    "default_loader",
    "load_curve_parameters",
    "validate_curve_parameters",
    "validate_sale_launch",
    "validate_quote_request",
]
