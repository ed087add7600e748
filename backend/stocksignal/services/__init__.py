"""
StockSignal Services

Service layer containing all business logic.
Each service has a defined interface (contract) and implementation.
"""

from stocksignal.services.base import (
    BaseService,
    ServiceError,
    ValidationError,
    AdviceNotFoundError,
    PriceOutOfRangeError,
)

__all__ = [
    "BaseService",
    "ServiceError",
    "ValidationError",
    "AdviceNotFoundError",
    "PriceOutOfRangeError",
]
