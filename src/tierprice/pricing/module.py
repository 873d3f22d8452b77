"""Pricing bounded context: resolver bound via .bind(), catalog and settings as instances."""
from __future__ import annotations

from tierprice.core.config import Settings
from tierprice.ddd import DomainModule
from tierprice.domain.tier import TierCatalog, default_catalog

from .application import (
    CalculateNetAmount,
    CalculateNetAmountHandler,
    GetTier,
    GetTierHandler,
    ListTiers,
    ListTiersHandler,
)
from .domain import IDiscountResolver
from .resolver import DiscountResolver


def pricing_module(catalog: TierCatalog | None = None, *, settings: Settings | None = None) -> DomainModule:
    """Build the pricing context over catalog (default: built-in tiers), extended by settings.extra_tiers."""
    settings = settings or Settings()
    if catalog is None:
        catalog = default_catalog()
    catalog = catalog.extended(*settings.extra_tiers)
    return (
        DomainModule("pricing")
        .instance(Settings, settings)
        .instance(TierCatalog, catalog)
        .bind(IDiscountResolver, DiscountResolver)
        .command(CalculateNetAmount, CalculateNetAmountHandler)
        .query(ListTiers, ListTiersHandler)
        .query(GetTier, GetTierHandler)
    )
