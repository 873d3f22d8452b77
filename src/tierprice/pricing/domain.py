"""Pricing context: capabilities and service interfaces (no framework imports)."""
from decimal import Decimal
from typing import Protocol, runtime_checkable

from tierprice.domain.account import Account


@runtime_checkable
class Discountable(Protocol):
    """Anything that knows its own discount rate (a fraction in [0, 1])."""

    def discount_rate(self) -> Decimal:
        ...


class IDiscountResolver(Protocol):
    def net_amount(self, account: Account) -> Decimal:
        ...

    def discount_amount(self, account: Account) -> Decimal:
        ...
