from decimal import Decimal

import pytest

from tierprice.domain import (
    GOLD,
    PLATINUM,
    DuplicateTierError,
    InvalidRateError,
    InvalidTierError,
    Tier,
    TierCatalog,
)


def test_rate_is_coerced_to_decimal():
    tier = Tier("bronze", "0.05")
    assert tier.rate == Decimal("0.05")
    assert tier.discount_rate() == Decimal("0.05")


def test_float_rate_keeps_printed_value():
    assert Tier("bronze", 0.1).rate == Decimal("0.1")


@pytest.mark.parametrize("rate", ["-0.01", "1.01", "abc", "NaN", None])
def test_rate_outside_unit_interval_is_rejected(rate):
    with pytest.raises(InvalidRateError):
        Tier("broken", rate)


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_is_rejected(name):
    with pytest.raises(InvalidTierError):
        Tier(name, "0.1")


def test_tier_is_immutable():
    with pytest.raises(AttributeError):
        GOLD.rate = Decimal("0.9")


def test_equality_by_value():
    assert Tier("gold", "0.20") == GOLD
    assert Tier("gold", "0.25") != GOLD


def test_parse():
    assert Tier.parse(" diamond : 0.4 ") == Tier("diamond", Decimal("0.4"))
    with pytest.raises(ValueError):
        Tier.parse("diamond")


def test_catalog_lookup_is_case_insensitive(catalog):
    assert catalog.get("GOLD") is GOLD
    assert catalog.get(" platinum ") is PLATINUM


def test_catalog_unknown_name(catalog):
    with pytest.raises(InvalidTierError) as exc:
        catalog.get("diamond")
    assert exc.value.code == "INVALID_TIER"


def test_catalog_order_and_size(catalog):
    assert catalog.names() == ["standard", "silver", "gold", "platinum"]
    assert len(catalog) == 4
    assert [t.name for t in catalog] == catalog.names()


def test_membership_requires_equal_tier(catalog):
    assert GOLD in catalog
    assert Tier("gold", "0.5") not in catalog
    assert Tier("diamond", "0.4") not in catalog
    assert "gold" not in catalog


def test_extended_leaves_original_untouched(catalog):
    diamond = Tier("diamond", "0.4")
    bigger = catalog.extended(diamond)
    assert diamond in bigger
    assert diamond not in catalog
    assert len(catalog) == 4
    assert len(bigger) == 5


def test_duplicate_names_rejected(catalog):
    with pytest.raises(DuplicateTierError):
        catalog.extended(Tier("Gold", "0.5"))
    with pytest.raises(DuplicateTierError):
        TierCatalog([GOLD, GOLD])


def test_name_is_trimmed_so_catalog_finds_it(catalog):
    lounge = Tier("  Lounge ", "0.25")
    assert lounge.name == "Lounge"
    assert catalog.extended(lounge).get("lounge") is lounge
    assert Tier(" gold", "0.2") in catalog


def test_catalog_logs_rejected_name(catalog, caplog):
    with pytest.raises(InvalidTierError):
        catalog.get("copper")
    with pytest.raises(InvalidTierError):
        catalog.get(None)
    assert "rejected unrecognized tier 'copper'" in caplog.text
