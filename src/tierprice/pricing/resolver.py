"""DiscountResolver: net amount = total - total * tier rate, for tiers the catalog recognizes."""
from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from tierprice.domain.account import Account
from tierprice.domain.errors import InvalidTierError
from tierprice.domain.tier import TierCatalog
from tierprice.domain.value_object import widen

from .domain import Discountable

logger = logging.getLogger(__name__)


class DiscountResolver:
    """
    Asks the account's tier for its rate; holds no per-tier logic.
    Adding a tier means extending the catalog, not editing this class.
    Arithmetic is exact: precision grows with the total instead of rounding at 28 digits.
    """

    def __init__(self, catalog: TierCatalog) -> None:
        self._catalog = catalog

    def _recognized(self, account: Account) -> Discountable:
        if account.tier not in self._catalog:
            logger.warning("rejected unrecognized tier %r", account.tier.name)
            raise InvalidTierError(f"unknown tier {account.tier.name!r}")
        return account.tier

    def discount_amount(self, account: Account) -> Decimal:
        rate = self._recognized(account).discount_rate()
        total = account.total_amount
        with localcontext() as ctx:
            widen(ctx, total, total.as_tuple().exponent + rate.as_tuple().exponent)
            return total * rate

    def net_amount(self, account: Account) -> Decimal:
        rate = self._recognized(account).discount_rate()
        total = account.total_amount
        with localcontext() as ctx:
            widen(ctx, total, total.as_tuple().exponent + rate.as_tuple().exponent)
            net = total - total * rate
        logger.debug("resolved %s under %s -> %s", total, account.tier.name, net)
        return net
