"""Single config object: user passes it when creating the app; available via DI."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from tierprice.domain.tier import Tier
from tierprice.domain.value_object import to_decimal

ENV_PREFIX = "TIERPRICE_"


class Config:
    """
    Application config helpers. Settings (or any user object) is passed to
    Application(config=...); then available via container.resolve(type(config)).
    """

    @classmethod
    def load_from_env(cls, prefix: str = ENV_PREFIX, **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for Settings.from_mapping(...)."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


def parse_tiers(text: str) -> list[Tier]:
    """Parse "diamond:0.4, bronze:0.05" into tiers. Empty entries are skipped."""
    return [Tier.parse(entry) for entry in text.split(",") if entry.strip()]


@dataclass
class Settings:
    extra_tiers: list[Tier] = field(default_factory=list)
    quantum: Decimal = Decimal("0.01")
    log_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Settings:
        settings = cls()
        if values.get("extra_tiers"):
            raw = values["extra_tiers"]
            settings.extra_tiers = parse_tiers(raw) if isinstance(raw, str) else list(raw)
        if values.get("quantum"):
            quantum = to_decimal(values["quantum"])
            if quantum <= 0:
                raise ValueError(f"quantum must be positive, got {quantum}")
            settings.quantum = quantum
        if values.get("log_level"):
            settings.log_level = str(values["log_level"]).upper()
        return settings

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> Settings:
        """TIERPRICE_EXTRA_TIERS, TIERPRICE_QUANTUM, TIERPRICE_LOG_LEVEL."""
        return cls.from_mapping(Config.load_from_env(prefix))
