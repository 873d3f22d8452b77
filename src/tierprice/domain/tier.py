"""
Tiers and the catalog of recognized tiers.
Each tier carries its own rate; nothing outside a Tier knows which rate belongs to which name.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator

from tierprice.domain.errors import DuplicateTierError, InvalidRateError, InvalidTierError
from tierprice.domain.value_object import ValueObject, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tier(ValueObject):
    """Named discount category. rate is a fraction in [0, 1]."""

    name: str
    rate: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidTierError(f"tier name must be a non-empty string, got {self.name!r}")
        object.__setattr__(self, "name", self.name.strip())
        try:
            rate = to_decimal(self.rate)
        except (TypeError, ValueError) as e:
            raise InvalidRateError(f"tier {self.name!r}: {e}") from e
        if rate < 0 or rate > 1:
            raise InvalidRateError(f"tier {self.name!r}: rate must be within [0, 1], got {rate}")
        object.__setattr__(self, "rate", rate)

    def discount_rate(self) -> Decimal:
        return self.rate

    @classmethod
    def parse(cls, text: str) -> Tier:
        """Build a tier from "name:rate" (e.g. "diamond:0.4")."""
        name, sep, rate = text.partition(":")
        if not sep:
            raise ValueError(f"tier entry must look like name:rate, got {text!r}")
        return cls(name.strip(), rate.strip())


STANDARD = Tier("standard", Decimal("0"))
SILVER = Tier("silver", Decimal("0.1"))
GOLD = Tier("gold", Decimal("0.2"))
PLATINUM = Tier("platinum", Decimal("0.3"))


def _key(name: str) -> str:
    return name.strip().lower()


class TierCatalog:
    """
    Immutable set of recognized tiers, keyed by lowercased name.
    New tiers come in via extended(), which returns a new catalog.
    """

    def __init__(self, tiers: Iterable[Tier] = ()) -> None:
        self._tiers: dict[str, Tier] = {}
        for tier in tiers:
            key = _key(tier.name)
            if key in self._tiers:
                raise DuplicateTierError(f"tier {tier.name!r} is already defined")
            self._tiers[key] = tier

    def get(self, name: str) -> Tier:
        tier = self._tiers.get(_key(name)) if isinstance(name, str) else None
        if tier is None:
            logger.warning("rejected unrecognized tier %r", name)
            raise InvalidTierError(f"unknown tier {name!r}")
        return tier

    def extended(self, *tiers: Tier) -> TierCatalog:
        return TierCatalog([*self._tiers.values(), *tiers])

    def names(self) -> list[str]:
        return [t.name for t in self._tiers.values()]

    def __contains__(self, tier: object) -> bool:
        if not isinstance(tier, Tier):
            return False
        return self._tiers.get(_key(tier.name)) == tier

    def __iter__(self) -> Iterator[Tier]:
        return iter(list(self._tiers.values()))

    def __len__(self) -> int:
        return len(self._tiers)

    def __repr__(self) -> str:
        return f"TierCatalog({', '.join(self.names())})"


def default_catalog() -> TierCatalog:
    """Catalog of the built-in tiers: standard, silver, gold, platinum."""
    return TierCatalog([STANDARD, SILVER, GOLD, PLATINUM])
