"""
tierprice — tier-based discount resolution.
Each tier carries its own rate; DiscountResolver computes total - total * rate.
Application is composed from module objects via app.register(module).
"""
from tierprice.core import Application, Config, Container, Module, Settings
from tierprice.domain import (
    GOLD,
    PLATINUM,
    SILVER,
    STANDARD,
    Account,
    InvalidTierError,
    Tier,
    TierCatalog,
    TierPriceError,
    default_catalog,
)
from tierprice.pricing import DiscountResolver
from tierprice.main import create_app

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "Settings",
    "Account",
    "Tier",
    "TierCatalog",
    "default_catalog",
    "STANDARD",
    "SILVER",
    "GOLD",
    "PLATINUM",
    "DiscountResolver",
    "TierPriceError",
    "InvalidTierError",
    "create_app",
]
