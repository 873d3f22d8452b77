"""Pricing context: discount resolution by tier."""
from tierprice.pricing.application import CalculateNetAmount, GetTier, ListTiers, Quote
from tierprice.pricing.domain import Discountable, IDiscountResolver
from tierprice.pricing.module import pricing_module
from tierprice.pricing.resolver import DiscountResolver

__all__ = [
    "CalculateNetAmount",
    "GetTier",
    "ListTiers",
    "Quote",
    "Discountable",
    "IDiscountResolver",
    "DiscountResolver",
    "pricing_module",
]
