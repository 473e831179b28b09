"""Value objects describing the result of handing a message to a provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DeliveryOutcome:
    """Uniform result of one delivery attempt, whatever the channel."""

    success: bool
    message_id: str | None = None
    error: str | None = None
    provider_data: Any = None

    @classmethod
    def failed(cls, error: str) -> "DeliveryOutcome":
        return cls(success=False, error=error)


__all__ = ["DeliveryOutcome"]
