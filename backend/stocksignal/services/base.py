"""
Service Contracts and Errors

Every engine service derives from BaseService and reports failures
through the ServiceError hierarchy below.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for engine services.

    Services are stateless wrappers over pure rules:
    - input and output are pydantic contracts from stocksignal.schemas
    - the same input always produces the same output
    - nothing is fetched or persisted
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name used in logs and error messages."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Run the service's main operation.

        Args:
            input_data: Already-validated InputT contract

        Returns:
            OutputT contract

        Raises:
            ServiceError: If the operation cannot complete
        """
        pass

    async def health_check(self) -> bool:
        # No external dependencies to probe
        return True


class ServiceError(Exception):
    """Base exception for engine service failures."""

    def __init__(self, service_name: str, message: str, details: Optional[dict] = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class ValidationError(ServiceError):
    """Input rejected by a service-level check."""
    pass


class AdviceNotFoundError(ServiceError):
    """No advice record exists for the requested symbol."""
    pass


class PriceOutOfRangeError(ValidationError):
    """Proposed price override falls outside its acceptance interval."""

    kind = "OutOfRange"

    def __init__(self, service_name: str, message: str, bounds, proposed: float):
        self.bounds = bounds
        self.proposed = proposed
        super().__init__(
            service_name,
            message,
            details={
                "kind": self.kind,
                "min": bounds.min,
                "max": bounds.max,
                "proposed": proposed,
            },
        )
