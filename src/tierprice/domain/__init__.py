"""Domain layer: value objects, tiers, accounts and errors."""
from tierprice.domain.value_object import ValueObject
from tierprice.domain.tier import GOLD, PLATINUM, SILVER, STANDARD, Tier, TierCatalog, default_catalog
from tierprice.domain.account import Account
from tierprice.domain.errors import (
    DuplicateTierError,
    HandlerNotFoundError,
    InvalidAmountError,
    InvalidRateError,
    InvalidTierError,
    TierPriceError,
)

__all__ = [
    "ValueObject",
    "Tier",
    "TierCatalog",
    "default_catalog",
    "STANDARD",
    "SILVER",
    "GOLD",
    "PLATINUM",
    "Account",
    "TierPriceError",
    "InvalidTierError",
    "InvalidAmountError",
    "InvalidRateError",
    "DuplicateTierError",
    "HandlerNotFoundError",
]
