"""Account — a total to be paid under one tier. Created per calculation, never persisted."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from tierprice.domain.errors import InvalidAmountError, InvalidTierError
from tierprice.domain.tier import Tier
from tierprice.domain.value_object import ValueObject, to_decimal


@dataclass(frozen=True)
class Account(ValueObject):
    total_amount: Decimal
    tier: Tier

    def __post_init__(self) -> None:
        try:
            total = to_decimal(self.total_amount)
        except (TypeError, ValueError) as e:
            raise InvalidAmountError(str(e)) from e
        if total < 0:
            raise InvalidAmountError(f"total amount must be non-negative, got {total}")
        if not isinstance(self.tier, Tier):
            raise InvalidTierError(f"expected a Tier, got {type(self.tier).__name__}")
        object.__setattr__(self, "total_amount", total)
