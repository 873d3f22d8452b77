"""Pricing: commands, queries and handlers (DI of resolver, catalog and settings)."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, DecimalException, localcontext
from typing import Any

from tierprice.core.config import Settings
from tierprice.ddd import Command, Query
from tierprice.domain.account import Account
from tierprice.domain.errors import InvalidAmountError
from tierprice.domain.tier import Tier, TierCatalog
from tierprice.domain.value_object import widen

from .domain import IDiscountResolver


@dataclass(frozen=True)
class CalculateNetAmount(Command):
    total_amount: Any
    tier: str


@dataclass(frozen=True)
class ListTiers(Query):
    pass


@dataclass(frozen=True)
class GetTier(Query):
    name: str


@dataclass(frozen=True)
class Quote:
    tier: str
    rate: Decimal
    total_amount: Decimal
    discount_amount: Decimal
    net_amount: Decimal


def _tier_info(tier: Tier) -> dict[str, str]:
    return {"name": tier.name, "rate": str(tier.rate)}


class CalculateNetAmountHandler:
    def __init__(self, resolver: IDiscountResolver, catalog: TierCatalog, settings: Settings):
        self._resolver = resolver
        self._catalog = catalog
        self._quantum = settings.quantum

    def __call__(self, cmd: CalculateNetAmount) -> Quote:
        account = Account(cmd.total_amount, self._catalog.get(cmd.tier))
        net = self._resolver.net_amount(account)
        # net <= total, so a context wide enough for the total covers every amount in the quote
        try:
            with localcontext() as ctx:
                widen(ctx, account.total_amount, self._quantum.as_tuple().exponent)
                total = account.total_amount.quantize(self._quantum, rounding=ROUND_HALF_UP)
                net = net.quantize(self._quantum, rounding=ROUND_HALF_UP)
                discount = total - net
        except DecimalException as e:
            raise InvalidAmountError(
                f"cannot quote {account.total_amount} to a quantum of {self._quantum}"
            ) from e
        return Quote(
            tier=account.tier.name,
            rate=account.tier.discount_rate(),
            total_amount=total,
            discount_amount=discount,
            net_amount=net,
        )


class ListTiersHandler:
    def __init__(self, catalog: TierCatalog):
        self._catalog = catalog

    def __call__(self, query: ListTiers) -> list[dict[str, str]]:
        return [_tier_info(tier) for tier in self._catalog]


class GetTierHandler:
    def __init__(self, catalog: TierCatalog):
        self._catalog = catalog

    def __call__(self, query: GetTier) -> dict[str, str]:
        return _tier_info(self._catalog.get(query.name))
