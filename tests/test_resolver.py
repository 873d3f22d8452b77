from decimal import Decimal

import pytest

from tierprice.domain import GOLD, PLATINUM, SILVER, STANDARD, Account, InvalidTierError, Tier
from tierprice.pricing import DiscountResolver, Discountable


def test_gold_example(resolver):
    assert resolver.net_amount(Account(1000, GOLD)) == Decimal("800")


def test_platinum_example(resolver):
    assert resolver.net_amount(Account(500, PLATINUM)) == Decimal("350")


def test_discount_amount(resolver):
    assert resolver.discount_amount(Account(1000, GOLD)) == Decimal("200")


def test_zero_rate_keeps_total(resolver):
    assert resolver.net_amount(Account("123.45", STANDARD)) == Decimal("123.45")


def test_full_rate_yields_zero(catalog):
    free = Tier("free", "1")
    resolver = DiscountResolver(catalog.extended(free))
    assert resolver.net_amount(Account("999.99", free)) == 0


@pytest.mark.parametrize("total", ["0", "0.01", "1", "19.99", "1000", "123456789.123"])
@pytest.mark.parametrize("tier", [STANDARD, SILVER, GOLD, PLATINUM])
def test_net_within_bounds(resolver, total, tier):
    account = Account(total, tier)
    net = resolver.net_amount(account)
    assert 0 <= net <= account.total_amount


def test_unknown_tier_is_rejected(resolver, caplog):
    account = Account(100, Tier("diamond", "0.4"))
    with pytest.raises(InvalidTierError):
        resolver.net_amount(account)
    with pytest.raises(InvalidTierError):
        resolver.discount_amount(account)
    assert "diamond" in caplog.text


def test_tier_with_known_name_but_other_rate_is_rejected(resolver):
    with pytest.raises(InvalidTierError):
        resolver.net_amount(Account(100, Tier("gold", "0.9")))


def test_new_tier_needs_only_a_catalog_extension(catalog):
    diamond = Tier("diamond", "0.4")
    extended = DiscountResolver(catalog.extended(diamond))
    assert extended.net_amount(Account(1000, diamond)) == Decimal("600")
    with pytest.raises(InvalidTierError):
        DiscountResolver(catalog).net_amount(Account(1000, diamond))


def test_tiers_expose_discount_rate_capability():
    assert all(isinstance(t, Discountable) for t in (STANDARD, SILVER, GOLD, PLATINUM))


def test_exact_beyond_default_precision(resolver):
    account = Account("123456789012345678901234567.89", PLATINUM)
    assert resolver.discount_amount(account) == Decimal("37037036703703703670370370.367")
    assert resolver.net_amount(account) == Decimal("86419752308641975230864197.523")
