"""Schemas describing delivery provider state."""

from typing import Any

from .base import CamelModel


class SmsBalanceRead(CamelModel):
    balance: Any = None


__all__ = ["SmsBalanceRead"]
